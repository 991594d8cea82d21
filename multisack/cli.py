# -*- coding: utf-8 -*-
"""
Command line front-end.

    multisack [options] -s [count*]sack [-s [count*]sack ...] item item ...

Parses sacks and items, applies the advisory input transformations, runs the
exact solver and prints the text report. Input errors end the process with a
message and exit status 1.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, NoReturn, Optional, Sequence

from multisack import __version__
from multisack.business_objects.errors import ParseError, StateValidationError
from multisack.business_objects.knapsacks import KnapsackSpec
from multisack.planning import Policy, ProblemInstance
from multisack.planning.preprocess import prepare_instance
from multisack.planning.report import format_solution
from multisack.planning.solvers.exact import run_exact
from multisack.planning.tracker import Tracker
from multisack.utils.parse_args import parse_item, parse_sack

logger = logging.getLogger(__name__)

PROG = "multisack"

DESCRIPTION = """\
A sack is a positive integer number describing how much weight it can carry.
If a positive integer number count is specified, this is a short form for
 -s sack -s sack ... (count times).

An item has the form [N*]weight[=value].
The weight must be a positive integer, and N must be a nonnegative integer.
If value is not specified it is assumed to be the same as the weight.
A positive integer N means that the item is available N times.
N=0 is interpreted as infinity: an unbound amount of the item is available.
A sufficiently large N would give the same result, but N=0 is handled more
efficiently concerning space and time requirements.

To avoid quoting for shells, instead of the separating symbol * one can also
use a space (or tab, linefeed, newline) or x, X, or a colon (:).
Similarly, instead of = in items, one can use ~, #, or @.
"""


def die(message: str) -> NoReturn:
    sys.stderr.write(f"{message}\nType {PROG} -h for help\n")
    sys.exit(1)


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit like every other input error."""

    def error(self, message: str) -> NoReturn:
        die(message)


def build_argparser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [options] -s [count*]sack [-s [count*]sack ...] item item ...",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("items", nargs="*", metavar="item", help="[N*]weight[=value]")
    p.add_argument("-s", "--sack", dest="sacks", action="append", default=[],
                   metavar="[count*]sack", help="add a sack (repeatable)")
    p.add_argument("-f", "--float", dest="float_values", action="store_true",
                   help="values are floating point numbers")
    p.add_argument("-n", "--value-only", action="store_true",
                   help="print only the optimal value (skip placement reconstruction)")
    p.add_argument("--keep-unfit", action="store_true",
                   help="do not drop items that fit into no sack")
    p.add_argument("--keep-counts", action="store_true",
                   help="do not treat very large counts as unbounded")
    p.add_argument("--recursion-limit", type=int, default=Policy.recursion_limit,
                   help="minimum interpreter recursion limit during the solve")
    p.add_argument("-o", "--out-dir", default=None,
                   help="also write CSV artifacts into this directory")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    p.add_argument("-q", "--quiet", action="store_true", help="suppress warnings")
    p.add_argument("-V", "--version", action="version", version=f"{PROG} {__version__}")
    return p


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_instance(sacks: Sequence[str], items: Sequence[str], value_type: type) -> ProblemInstance:
    """Parse the raw command-line literals; raises ParseError/StateValidationError."""
    capacities: List[int] = []
    for text in sacks:
        capacities.extend(parse_sack(text))
    if not capacities:
        raise ParseError("no knapsack specified (with option -s)")
    if not items:
        raise ParseError("no items specified")

    knaps = [KnapsackSpec(id=f"s{k}", capacity=cap) for k, cap in enumerate(capacities)]
    parsed = [parse_item(text, i, value_type) for i, text in enumerate(items)]
    return ProblemInstance(items=tuple(parsed), knapsacks=tuple(knaps))


def main(argv: Optional[Sequence[str]] = None) -> int:
    # items may follow any -s option, as with getopt argument permutation
    args = build_argparser().parse_intermixed_args(argv)
    _configure_logging(args.verbose, args.quiet)

    policy = Policy(
        float_values=args.float_values,
        drop_unfit_items=not args.keep_unfit,
        promote_large_counts=not args.keep_counts,
        reconstruct=not args.value_only,
        recursion_limit=args.recursion_limit,
    )

    try:
        instance = build_instance(args.sacks, args.items, policy.value_type)
    except (ParseError, StateValidationError) as e:
        die(str(e))

    instance = prepare_instance(instance, policy)
    tracker = Tracker(out_dir=args.out_dir) if args.out_dir else None
    solution = run_exact(instance, policy, tracker=tracker)

    sys.stdout.write(format_solution(instance, solution))
    return 0


if __name__ == "__main__":
    sys.exit(main())
