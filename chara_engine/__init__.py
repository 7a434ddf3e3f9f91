"""
Chara Engine
============
Jaimini Chara Dasha (sign-based period) calculation engine.

Quick start:
    from datetime import date
    from chara_engine import generate_chara_dasha

    result = generate_chara_dasha(
        birth_date=date(1990, 6, 15),
        ascendant_longitude=152.4,
        planet_longitudes={"Sun": 60.2, "Moon": 310.8, "Mars": 5.1, ...},
        on_date=date(2024, 1, 1),
    )
"""

from .tools.chara import generate_chara_dasha, format_current_period, format_karakas

__version__ = "1.0.0"
__all__ = ["generate_chara_dasha", "format_current_period", "format_karakas"]
