# -*- coding: utf-8 -*-
"""
Exact multi-sack knapsack solver with bounded and unbounded items.
"""

__version__ = "1.0.0"
