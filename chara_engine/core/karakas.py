"""
karakas.py
==========
Jaimini Chara Karakas (movable significators) and the Karakamsha.

The eight karaka planets (Sun through Saturn, plus Rahu) are ranked by their
degree within the sign they occupy; the highest becomes the Atmakaraka and
the lowest the Darakaraka.

Karakamsha is the Navamsa (D9) sign of the Atmakaraka.

Source: Jaimini Upadesa Sutras 1.1.10–1.1.19; Sanjay Rath (1997)
"Jaimini Maharishi's Upadesa Sutras"
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .signs import SIGNS, Sign, SIGN_SPAN

KARAKA_PLANETS = ["Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn", "Rahu"]

KARAKA_TYPES = [
    ("Atmakaraka",    "Soul, self, king of the chart"),
    ("Amatyakaraka",  "Career, minister, profession"),
    ("Bhratrikaraka", "Siblings, courage, efforts"),
    ("Matrikaraka",   "Mother, nurturing, emotions"),
    ("Pitrikaraka",   "Father, authority, guidance"),
    ("Putrakaraka",   "Children, creativity, intelligence"),
    ("Gnatikaraka",   "Cousins, competition, conflicts"),
    ("Darakaraka",    "Spouse, partnership, marriage"),
]

# Navamsa starting signs by element (0-based sign index)
#   Fire → Aries, Earth → Capricorn, Air → Libra, Water → Cancer
NAVAMSA_START = {"Fire": 0, "Earth": 9, "Air": 6, "Water": 3}


@dataclass(frozen=True)
class Karaka:
    karaka: str
    signification: str
    planet: str
    longitude: float
    degree_in_sign: float
    sign: Sign
    navamsa_sign: Sign

    def to_dict(self) -> dict:
        return {
            "karaka": self.karaka,
            "signification": self.signification,
            "planet": self.planet,
            "longitude": round(self.longitude, 4),
            "degree_in_sign": round(self.degree_in_sign, 4),
            "sign": self.sign.name,
            "navamsa_sign": self.navamsa_sign.name,
        }


def navamsa_sign(sidereal_longitude: float) -> Sign:
    """D9 sign: each sign split into 9 × 3°20' parts, starting by element."""
    lon = sidereal_longitude % 360.0
    sign = SIGNS[int(lon / SIGN_SPAN) % 12]
    part = int((lon % SIGN_SPAN) / (SIGN_SPAN / 9))   # 0–8
    return SIGNS[(NAVAMSA_START[sign.element] + part) % 12]


def compute_chara_karakas(planet_longitudes: Dict[str, float]) -> List[Karaka]:
    """
    Rank the karaka planets by degree in sign, highest first.

    Args:
        planet_longitudes: {planet_name: sidereal longitude}; planets other
            than the eight karaka planets are ignored

    Returns:
        Karakas in order Atmakaraka → Darakaraka (shorter if planets are missing)
    """
    ranked = sorted(
        ((name, planet_longitudes[name] % 360.0) for name in KARAKA_PLANETS
         if name in planet_longitudes),
        key=lambda item: item[1] % SIGN_SPAN,
        reverse=True,
    )

    return [
        Karaka(
            karaka=karaka,
            signification=signification,
            planet=name,
            longitude=lon,
            degree_in_sign=lon % SIGN_SPAN,
            sign=SIGNS[int(lon / SIGN_SPAN) % 12],
            navamsa_sign=navamsa_sign(lon),
        )
        for (karaka, signification), (name, lon) in zip(KARAKA_TYPES, ranked)
    ]


def karakamsha(karakas: List[Karaka]) -> Optional[Sign]:
    return karakas[0].navamsa_sign if karakas else None
