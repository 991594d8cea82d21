# -*- coding: utf-8 -*-
"""
Solvers for the multi-sack planning pipeline.
"""

from .exact import solve, solve_with_placement, run_exact

__all__ = [
    "solve",
    "solve_with_placement",
    "run_exact",
]
