"""
sequence.py
===========
Cyclic walk over the twelve signs.

Chara Dasha counts signs forward from an odd reference sign and backward
from an even one. The same direction is used for major periods and for the
sub-periods inside every one of them.
"""

from typing import Iterator

from .signs import Direction, Sign, sign_at

_STEP = {
    Direction.FORWARD: 1,
    Direction.BACKWARD: 11,   # -1 mod 12
}


def sign_sequence(start: Sign, direction: Direction, count: int) -> Iterator[Sign]:
    """Yield `count` signs beginning at `start`, stepping in `direction`."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    step = _STEP[Direction(direction)]
    position = start.number
    for _ in range(count):
        yield sign_at(position)
        position = (position + step - 1) % 12 + 1
