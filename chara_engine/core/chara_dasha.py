"""
chara_dasha.py
==============
Jaimini Chara Dasha — the sign-based dasha system.

Unlike Vimshottari, where planets rule the periods, in Chara Dasha the twelve
signs rule them in turn:

  - The sequence starts at the Lagna (ascendant sign).
  - Odd Lagna  → signs are counted FORWARD  (Aries, Taurus, Gemini, ...)
  - Even Lagna → signs are counted BACKWARD (Taurus, Aries, Pisces, ...)
  - Each sign runs for 1–12 years depending on where its lord sits
    (see durations.py).
  - Each mahadasha is divided into 12 antardashas, starting from the
    mahadasha sign and moving in the same direction, in proportion to
    each sub-sign's own dasha years.

Source: Jaimini Upadesa Sutras; K.N. Rao, "Predicting through Jaimini's
Chara Dasha".
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Callable, List, Mapping, Optional, Tuple, Union

from .durations import sign_dasha_years
from .errors import MissingLordPositionError
from .partition import PeriodNode, find_active, partition, years_to_days
from .sequence import sign_sequence
from .signs import Direction, Sign, direction_for

logger = logging.getLogger(__name__)

SIGNS_PER_CYCLE = 12

LordPositions = Union[Mapping[Sign, Sign], Callable[[Sign], Optional[Sign]]]
DurationRule = Callable[[Sign, Sign], int]


@dataclass(frozen=True)
class PeriodTree:
    reference_sign: Sign
    direction: Direction
    start_date: date
    number_of_cycles: int
    levels: int
    majors: Tuple[PeriodNode, ...]

    @property
    def end_date(self) -> date:
        return self.majors[-1].end

    def to_dict(self) -> dict:
        return {
            "reference_sign": self.reference_sign.name,
            "direction": self.direction.value,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "number_of_cycles": self.number_of_cycles,
            "levels": self.levels,
            "periods": [m.to_dict() for m in self.majors],
        }


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def _lookup(lord_position_of: LordPositions) -> Callable[[Sign], Optional[Sign]]:
    if callable(lord_position_of):
        return lord_position_of
    return lord_position_of.get


def _years_for(sign: Sign, lord_position_of: Callable[[Sign], Optional[Sign]],
               duration_rule: DurationRule) -> int:
    lord_position = lord_position_of(sign)
    if lord_position is None:
        raise MissingLordPositionError(sign)
    return duration_rule(sign, lord_position)


def _subdivide(node: PeriodNode, direction: Direction, depth: int,
               lord_position_of, duration_rule) -> PeriodNode:
    """Attach `depth` further levels of sub-periods below `node`."""
    if depth == 0:
        return node

    sub_signs = list(sign_sequence(node.sign, direction, SIGNS_PER_CYCLE))
    weighted = [(s, _years_for(s, lord_position_of, duration_rule)) for s in sub_signs]
    children = partition(node.start, node.duration_days, weighted, level=node.level + 1)

    children = tuple(
        _subdivide(child, direction, depth - 1, lord_position_of, duration_rule)
        for child in children
    )
    return replace(node, children=children)


# ---------------------------------------------------------------------------
# Core Chara Dasha calculation
# ---------------------------------------------------------------------------

def build_period_tree(reference_sign: Sign, start_date: date,
                      lord_position_of: LordPositions,
                      number_of_cycles: int = 2,
                      duration_rule: DurationRule = sign_dasha_years,
                      levels: int = 2) -> PeriodTree:
    """
    Compute the Chara Dasha period tree from birth.

    Args:
        reference_sign: Lagna sign; fixes both the starting sign and the
            counting direction
        start_date: Birth date (first day of the first mahadasha)
        lord_position_of: {Sign: Sign} or callable giving the sign each
            sign's lord occupies
        number_of_cycles: Full 12-sign cycles of mahadashas to generate
        duration_rule: (sign, lord_position) → years
        levels: Tree depth; 2 = mahadasha + antardasha

    Returns:
        PeriodTree with 12 * number_of_cycles mahadashas.
    """
    if number_of_cycles < 1:
        raise ValueError(f"number_of_cycles must be at least 1, got {number_of_cycles}")
    if levels < 1:
        raise ValueError(f"levels must be at least 1, got {levels}")

    lookup = _lookup(lord_position_of)
    direction = direction_for(reference_sign)

    majors = []
    current_start = start_date
    try:
        for sign in sign_sequence(reference_sign, direction, SIGNS_PER_CYCLE * number_of_cycles):
            years = _years_for(sign, lookup, duration_rule)
            days = years_to_days(years)
            current_end = current_start + timedelta(days=days - 1)

            major = PeriodNode(sign, current_start, current_end, level=1)
            majors.append(_subdivide(major, direction, levels - 1, lookup, duration_rule))

            current_start = current_end + timedelta(days=1)
    except OverflowError as e:
        raise ValueError(f"{number_of_cycles} cycles from {start_date} run past "
                         f"{date.max.isoformat()}") from e

    logger.debug("Built %d mahadashas from %s (%s, %s) through %s",
                 len(majors), reference_sign.name, direction.value,
                 start_date, majors[-1].end)

    return PeriodTree(
        reference_sign=reference_sign,
        direction=direction,
        start_date=start_date,
        number_of_cycles=number_of_cycles,
        levels=levels,
        majors=tuple(majors),
    )


def active_path_at(tree: PeriodTree, on_date: date) -> List[PeriodNode]:
    """Active nodes for `on_date`, from mahadasha down to the deepest level."""
    path = []
    node = find_active(tree.majors, on_date)
    while node is not None:
        path.append(node)
        node = node.active_child(on_date)
    return path


def active_periods_at(tree: PeriodTree,
                      on_date: date) -> Tuple[Optional[PeriodNode], Optional[PeriodNode]]:
    """
    Return the active (mahadasha, antardasha) for a given date, or
    (None, None) when the date falls outside the generated tree.
    """
    major = find_active(tree.majors, on_date)
    if major is None:
        return None, None
    return major, major.active_child(on_date)
