"""
chara.py
========
Chara Dasha report generator.

Orchestrates sign, lord-position, period-tree and karaka modules to produce
a complete, structured Chara Dasha output from sidereal longitudes computed
elsewhere.

Usage:
    from datetime import date
    from chara_engine.tools.chara import generate_chara_dasha

    result = generate_chara_dasha(
        birth_date=date(1990, 6, 15),
        ascendant_longitude=152.4,            # sidereal, degrees
        planet_longitudes={"Sun": 60.2, "Moon": 310.8, ...},
        on_date=date.today(),
    )
"""

from datetime import date
from typing import Dict, Optional

from ..config import DEFAULT_NUMBER_OF_CYCLES, MAX_NUMBER_OF_CYCLES, MAX_LEVELS
from ..core.signs import sign_from_longitude, house_from
from ..core.durations import resolve_lord_positions, sign_dasha_years
from ..core.chara_dasha import build_period_tree, active_periods_at
from ..core.karakas import compute_chara_karakas, karakamsha
from ..core.partition import PeriodNode
from ..logging_config import get_logger

logger = get_logger(__name__, {"system": "Jaimini", "domain": "chara_dasha"})


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _antardasha_dict(sub: PeriodNode, maha: PeriodNode) -> dict:
    out = sub.to_dict()
    out["house_from_mahadasha"] = house_from(sub.sign, maha.sign)
    return out


def _mahadasha_dict(maha: PeriodNode, years: int) -> dict:
    out = maha.to_dict()
    out["duration_years"] = years
    out["children"] = [_antardasha_dict(sub, maha) for sub in maha.children]
    return out


def _current_dict(node: Optional[PeriodNode], on_date: date) -> Optional[dict]:
    if node is None:
        return None
    return {
        "sign": node.sign.name,
        "lord": node.sign.lord,
        "start": node.start.isoformat(),
        "end": node.end.isoformat(),
        "duration_days": node.duration_days,
        "progress_percent": node.progress_percent(on_date),
        "remaining_days": node.remaining_days(on_date),
    }


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------

def generate_chara_dasha(
    birth_date: date,
    ascendant_longitude: float,
    planet_longitudes: Dict[str, float],
    on_date: date,
    number_of_cycles: int = DEFAULT_NUMBER_OF_CYCLES,
    levels: int = 2,
    dual_lord_rule: str = "primary",
    own_sign_fallback: bool = False,
) -> dict:
    """
    Generate a complete Chara Dasha analysis.

    Args:
        birth_date: Date of birth, first day of the first mahadasha
        ascendant_longitude: Sidereal longitude of the Lagna (degrees)
        planet_longitudes: {planet_name: sidereal longitude} for the nine grahas
        on_date: Date used to pick the current periods
        number_of_cycles: 12-sign cycles to generate (1..MAX_NUMBER_OF_CYCLES)
        levels: 2 = mahadasha/antardasha, 3 adds pratyantardashas
        dual_lord_rule: 'primary', 'co_lord' or 'stronger' for Scorpio/Aquarius
        own_sign_fallback: treat lords missing from `planet_longitudes` as
            sitting in their own sign

    Returns:
        Chart dict with lagna, karakas, lord positions, periods and current periods
    """
    if not 1 <= number_of_cycles <= MAX_NUMBER_OF_CYCLES:
        raise ValueError(f"number_of_cycles must be between 1 and "
                         f"{MAX_NUMBER_OF_CYCLES}, got {number_of_cycles}")
    if not 1 <= levels <= MAX_LEVELS:
        raise ValueError(f"levels must be between 1 and {MAX_LEVELS}, got {levels}")

    # ---- Signs from longitudes ----
    lagna_sign = sign_from_longitude(ascendant_longitude)
    planet_signs = {name: sign_from_longitude(lon) for name, lon in planet_longitudes.items()}

    # ---- Lord positions ----
    lord_positions = resolve_lord_positions(planet_signs, dual_lord_rule, own_sign_fallback)

    # ---- Period tree ----
    tree = build_period_tree(lagna_sign, birth_date, lord_positions,
                             number_of_cycles=number_of_cycles, levels=levels)
    current_maha, current_antar = active_periods_at(tree, on_date)

    logger.info("Chara Dasha for %s Lagna: %d mahadashas, %s through %s",
                lagna_sign.name, len(tree.majors), tree.start_date, tree.end_date)

    # ---- Karakas ----
    karakas = compute_chara_karakas(planet_longitudes)
    karakamsha_sign = karakamsha(karakas)

    # ---- Assemble output ----
    return {
        "meta": {
            "input": {
                "birth_date": birth_date.isoformat(),
                "on_date": on_date.isoformat(),
                "ascendant_longitude": ascendant_longitude,
                "number_of_cycles": number_of_cycles,
                "levels": levels,
                "dual_lord_rule": dual_lord_rule,
                "own_sign_fallback": own_sign_fallback,
            },
            "end_date": tree.end_date.isoformat(),
        },
        "lagna": {
            "sign": lagna_sign.name,
            "is_odd": lagna_sign.is_odd,
            "sidereal_longitude": round(ascendant_longitude % 360.0, 4),
        },
        "direction": tree.direction.value,
        "karakas": [k.to_dict() for k in karakas],
        "karakamsha": karakamsha_sign.name if karakamsha_sign else None,
        "lord_positions": {
            sign.name: {
                "lord_sign": lord_sign.name,
                "years": sign_dasha_years(sign, lord_sign),
            }
            for sign, lord_sign in lord_positions.items()
        },
        "mahadashas": [
            _mahadasha_dict(m, sign_dasha_years(m.sign, lord_positions[m.sign]))
            for m in tree.majors
        ],
        "current": {
            "mahadasha": _current_dict(current_maha, on_date),
            "antardasha": _current_dict(current_antar, on_date),
        },
    }


def format_current_period(result: dict) -> str:
    """Plain-text summary of the current Chara Dasha periods."""
    maha = result["current"]["mahadasha"]
    if maha is None:
        return "No active Chara Dasha period"

    lines = [
        "=== CHARA DASHA - CURRENT PERIOD ===",
        "",
        f"Mahadasha: {maha['sign']} ({maha['start']} → {maha['end']})",
        f"Lord: {maha['lord']}",
        f"Progress: {maha['progress_percent']:.1f}%",
        f"Remaining: {maha['remaining_days']} days",
    ]

    antar = result["current"]["antardasha"]
    if antar:
        lines += [
            "",
            f"Antardasha: {antar['sign']} ({antar['start']} → {antar['end']})",
            f"Progress: {antar['progress_percent']:.1f}%",
        ]

    if result["karakas"]:
        lines += ["", f"Atmakaraka: {result['karakas'][0]['planet']}"]
    if result["karakamsha"]:
        lines.append(f"Karakamsha: {result['karakamsha']}")

    return "\n".join(lines)


def format_karakas(result: dict) -> str:
    """Plain-text table of the chara karakas, Atmakaraka first."""
    lines = ["=== CHARA KARAKAS (Jaimini Significators) ===", ""]
    for k in result["karakas"]:
        lines.append(f"{k['karaka']:<15}: {k['planet']:<10} "
                     f"({k['degree_in_sign']:.2f}° in {k['sign']})")
    if result["karakamsha"]:
        lines += ["", f"Karakamsha: {result['karakamsha']}"]
    return "\n".join(lines)
