"""
Digit-sum arithmetic shared by every SAL code.

``digit_sum`` is a single pass; ``digit_sum_reduce`` repeats it until one
digit remains; ``digit_sum_reduce_mission`` keeps the master numbers 11 and
22 when they are the value passed in.
"""

from __future__ import annotations

MASTER_NUMBERS: frozenset[int] = frozenset({11, 22})


def digit_sum(n: int) -> int:
    """Sum the decimal digits of ``n`` once (sign ignored)."""
    return sum(int(ch) for ch in str(abs(n)))


def digit_sum_reduce(n: int) -> int:
    """Repeat ``digit_sum`` while ``n`` is greater than 9."""
    while n > 9:
        n = digit_sum(n)
    return n


def digit_sum_reduce_mission(n: int) -> int:
    """Like ``digit_sum_reduce`` but returns 11 and 22 unchanged.

    Only the initial value is checked: 29 reduces to 11 and then to 2.
    """
    if n in MASTER_NUMBERS:
        return n
    return digit_sum_reduce(n)
