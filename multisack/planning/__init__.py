# -*- coding: utf-8 -*-
"""
Planning layer public API for the multi-sack pipeline.

This module exposes the core planning-time data contracts:
  - ProblemInstance (validated input)
  - CanonicalSackState (per-solve sack multiset)
  - Policy configuration
  - Solution model

Other planning modules (preprocess, report, solvers, tracker) are intentionally
not exported here to avoid cluttering the namespace. They should be imported
explicitly when needed.
"""

from .state import ProblemInstance
from .sack_state import CanonicalSackState
from .policy import Policy
from .solution import Solution

__all__ = [
    "ProblemInstance",
    "CanonicalSackState",
    "Policy",
    "Solution",
]
