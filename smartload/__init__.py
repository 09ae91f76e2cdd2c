"""
SmartLoad: single-truck load selection.

Exact (bitmask DP, branch-and-bound) and heuristic (greedy) solvers for picking
the payout-maximizing set of compatible orders under weight/volume limits.
"""

__version__ = "1.0.0"
