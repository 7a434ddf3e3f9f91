"""
signs.py
========
The twelve sidereal signs (rashis) as a fixed cyclic domain.

Signs are plain immutable records indexed by their 1-based number. Odd signs
(Aries, Gemini, Leo, Libra, Sagittarius, Aquarius) are counted forward in
Chara Dasha; even signs are counted backward.

Scorpio and Aquarius carry a second lord (Ketu and Rahu respectively).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Direction(str, Enum):
    FORWARD = "forward"     # odd reference sign
    BACKWARD = "backward"   # even reference sign


@dataclass(frozen=True)
class Sign:
    number: int             # 1–12
    name: str
    abbreviation: str
    element: str
    quality: str
    lord: str
    co_lord: Optional[str] = None

    @property
    def is_odd(self) -> bool:
        return self.number % 2 == 1

    @property
    def lords(self) -> Tuple[str, ...]:
        return (self.lord, self.co_lord) if self.co_lord else (self.lord,)

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SIGN_SPAN = 30.0

SIGNS: Tuple[Sign, ...] = (
    Sign(1,  "Aries",       "Ar", "Fire",  "Cardinal", "Mars"),
    Sign(2,  "Taurus",      "Ta", "Earth", "Fixed",    "Venus"),
    Sign(3,  "Gemini",      "Ge", "Air",   "Mutable",  "Mercury"),
    Sign(4,  "Cancer",      "Ca", "Water", "Cardinal", "Moon"),
    Sign(5,  "Leo",         "Le", "Fire",  "Fixed",    "Sun"),
    Sign(6,  "Virgo",       "Vi", "Earth", "Mutable",  "Mercury"),
    Sign(7,  "Libra",       "Li", "Air",   "Cardinal", "Venus"),
    Sign(8,  "Scorpio",     "Sc", "Water", "Fixed",    "Mars",    "Ketu"),
    Sign(9,  "Sagittarius", "Sg", "Fire",  "Mutable",  "Jupiter"),
    Sign(10, "Capricorn",   "Cp", "Earth", "Cardinal", "Saturn"),
    Sign(11, "Aquarius",    "Aq", "Air",   "Fixed",    "Saturn",  "Rahu"),
    Sign(12, "Pisces",      "Pi", "Water", "Mutable",  "Jupiter"),
)

ARIES, TAURUS, GEMINI, CANCER, LEO, VIRGO, \
    LIBRA, SCORPIO, SAGITTARIUS, CAPRICORN, AQUARIUS, PISCES = SIGNS

SIGN_NAMES = [s.name for s in SIGNS]

_BY_NAME = {s.name.lower(): s for s in SIGNS}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def sign_at(position: int) -> Sign:
    """Sign at a 1-based position, wrapping mod 12 (13 → Aries, 0 → Pisces)."""
    return SIGNS[(position - 1) % 12]


def position_of(sign: Sign) -> int:
    return sign.number


def is_odd_sign(sign: Sign) -> bool:
    return sign.is_odd


def direction_for(sign: Sign) -> Direction:
    return Direction.FORWARD if sign.is_odd else Direction.BACKWARD


def sign_named(name: str) -> Sign:
    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown sign: {name!r}. Supported: {SIGN_NAMES}") from None


def sign_from_longitude(longitude: float) -> Sign:
    normalized = (longitude % 360.0 + 360.0) % 360.0
    return SIGNS[min(int(normalized / SIGN_SPAN), 11)]


def house_from(target: Sign, base: Sign) -> int:
    """House number of `target` counted from `base` (base itself is house 1)."""
    return (target.number - base.number) % 12 + 1
