"""
Mixed-radix enumeration of candidate combinations.

Each candidate list is one digit of an odometer. Digit 0 turns fastest, the
last digit slowest, so for [[a, b, c], [1, 2]] the order is
a1 b1 c1 a2 b2 c2.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Sequence

logger = logging.getLogger(__name__)


def next_multi_dim_value(counter: List[int], max_counter: Sequence[int]) -> bool:
    """Advance ``counter`` in place; False once every digit has wrapped around."""
    if len(counter) != len(max_counter):
        logger.warning("Counter length is incorrect: %d != %d", len(counter), len(max_counter))

    for i, (c, top) in enumerate(zip(counter, max_counter)):
        if c != top:
            counter[i] = c + 1
            return True
        counter[i] = 0
    return False


def combinations(items: Sequence[Sequence[str]]) -> Iterator[List[str]]:
    if any(len(item) == 0 for item in items):
        return

    max_counter = [len(item) - 1 for item in items]
    counter = [0] * len(items)
    while True:
        yield [items[i][j] for i, j in enumerate(counter)]
        if not next_multi_dim_value(counter, max_counter):
            break


def count_combinations(items: Sequence[Sequence[str]]) -> int:
    total = 1
    for item in items:
        total *= len(item)
    return total
