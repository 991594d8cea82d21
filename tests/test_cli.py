# -*- coding: utf-8 -*-
import pytest

from multisack import __version__
from multisack.cli import build_instance, main


def _run(capsys, *argv):
    assert main(list(argv)) == 0
    return capsys.readouterr().out


def test_single_sack(capsys):
    out = _run(capsys, "-s", "10", "5=10", "4=7", "6=9")
    assert out == "17\n9(17)|10: 5(10) 4(7)\n"


def test_repeated_sack_and_count(capsys):
    out = _run(capsys, "-s", "2*5", "2*5")
    assert out == "10\n5|5: 5\n5|5: 5\n"


def test_items_between_sack_options(capsys):
    out = _run(capsys, "-s", "10", "5", "-s", "6", "4")
    assert out == "9\n4|10: 4\n5|6: 5\n"


def test_unbounded_item(capsys):
    out = _run(capsys, "-s", "7", "0*3=4")
    assert out == "8\n6(8)|7: 2*3=6(2*4=8)\n"


def test_nothing_fits(capsys):
    assert _run(capsys, "-q", "-s", "3", "5") == "0\n"


def test_value_only(capsys):
    assert _run(capsys, "-n", "-s", "10", "5=10", "4=7", "6=9") == "17\n"


def test_float_values(capsys):
    out = _run(capsys, "-f", "-s", "10", "5=2.5", "4=1.5")
    assert out.splitlines()[0] == "4"


def test_out_dir(capsys, tmp_path):
    _run(capsys, "-s", "10", "-o", str(tmp_path / "out"), "5=10")
    assert (tmp_path / "out" / "problem_summary.csv").is_file()


@pytest.mark.parametrize(
    "argv, message",
    [
        (["5"], "no knapsack specified"),
        (["-s", "10"], "no items specified"),
        (["-s", "abc", "5"], "not a positive integer: abc"),
        (["-s", "10", "5=x"], "not a positive integer: x"),
        (["-s", "10", "--bogus", "5"], "unrecognized arguments: --bogus"),
        (["-s", "10", "--recursion-limit", "many", "5"], "invalid int value"),
    ],
)
def test_bad_input_exits_with_status_1(capsys, argv, message):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert message in err
    assert "Type multisack -h for help" in err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-V"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == f"multisack {__version__}"


def test_build_instance_ids():
    inst = build_instance(["2*4", "6"], ["3", "0*2=5"], int)
    assert inst.capacities == [4, 4, 6]
    assert [k.id for k in inst.knapsacks] == ["s0", "s1", "s2"]
    assert inst.items[1].id == "i1" and not inst.items[1].is_bound
