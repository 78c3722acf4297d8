"""Kubrai - a solver for kubraya word puzzles.

A kubraya is a chain of hint words joined by a separator. Each hint is
swapped for one of its learned associations, the pieces are glued together
and the result is looked up in word dictionaries.
"""

__version__ = "0.3.0"
