"""
durations.py
============
Chara Dasha period length of a sign, and resolution of where each sign's
lord sits.

Rule (Jaimini):
  - Lord in its own sign                → 12 years
  - Odd sign:  count forward  from the sign to the lord's sign
  - Even sign: count backward from the sign to the lord's sign
  - Result is kept within 1–12 years

Scorpio (Mars/Ketu) and Aquarius (Saturn/Rahu) have two lords. The period
rule itself takes one already-chosen lord position; choosing between the two
lords happens in resolve_lord_positions().
"""

import logging
from collections import Counter
from typing import Dict, Mapping

from .signs import SIGNS, Sign, position_of, is_odd_sign

logger = logging.getLogger(__name__)

MIN_YEARS = 1
MAX_YEARS = 12

DUAL_LORD_RULES = ("primary", "co_lord", "stronger")


def sign_dasha_years(sign: Sign, lord_position: Sign) -> int:
    """Dasha years of `sign` given the sign occupied by its lord."""
    if lord_position == sign:
        return MAX_YEARS

    if is_odd_sign(sign):
        years = (position_of(lord_position) - position_of(sign) + 12) % 12
    else:
        years = (position_of(sign) - position_of(lord_position) + 12) % 12

    return max(MIN_YEARS, min(MAX_YEARS, years))


# ---------------------------------------------------------------------------
# Lord positions
# ---------------------------------------------------------------------------

def _choose_dual_lord(sign: Sign, planet_signs: Mapping[str, Sign],
                      rule: str, occupancy: Counter) -> str:
    primary, co_lord = sign.lord, sign.co_lord

    if rule == "primary":
        return primary

    # The other rules fall back to whichever lord the chart has
    if co_lord not in planet_signs:
        return primary
    if primary not in planet_signs:
        return co_lord

    if rule == "co_lord":
        return co_lord

    # "stronger": a lord sitting in the sign defers to the other one,
    # otherwise the lord with more company wins; ties go to the primary lord.
    primary_home = planet_signs[primary] == sign
    co_home = planet_signs[co_lord] == sign
    if primary_home != co_home:
        return co_lord if primary_home else primary

    if occupancy[planet_signs[co_lord]] > occupancy[planet_signs[primary]]:
        return co_lord
    return primary


def resolve_lord_positions(planet_signs: Mapping[str, Sign],
                           dual_lord_rule: str = "primary",
                           own_sign_fallback: bool = False) -> Dict[Sign, Sign]:
    """
    Map every sign to the sign its lord occupies.

    Args:
        planet_signs: {planet_name: Sign} for the planets in the chart
        dual_lord_rule: 'primary', 'co_lord' or 'stronger' (Scorpio/Aquarius)
        own_sign_fallback: treat a lord missing from the chart as sitting in
            its own sign (12 years); otherwise the sign is left unresolved

    Returns:
        dict of {Sign: Sign}
    """
    if dual_lord_rule not in DUAL_LORD_RULES:
        raise ValueError(f"Unknown dual lord rule: {dual_lord_rule}. "
                         f"Supported: {list(DUAL_LORD_RULES)}")

    occupancy = Counter(planet_signs.values())
    positions = {}

    for sign in SIGNS:
        if sign.co_lord:
            lord = _choose_dual_lord(sign, planet_signs, dual_lord_rule, occupancy)
        else:
            lord = sign.lord

        if lord in planet_signs:
            positions[sign] = planet_signs[lord]
        elif own_sign_fallback:
            logger.warning("Lord %s of %s not in chart; assuming own sign", lord, sign.name)
            positions[sign] = sign

    return positions
