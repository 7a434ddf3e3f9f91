"""
demo.py
=======
Demonstration of the Chara Engine.
Run: python -m chara_engine.demo

Builds the Chara Dasha for a sample chart and prints a formatted report.
"""

from datetime import date

from chara_engine import generate_chara_dasha, format_current_period, format_karakas


# Sidereal (Lahiri) positions for 1988-07-18 18:46 IST, New Delhi
SAMPLE_ASCENDANT = 264.90        # Sagittarius 24°54'
SAMPLE_PLANETS = {
    "Sun":     92.40,            # Cancer      2°24'
    "Moon":    143.47,           # Leo        23°28'
    "Mercury": 75.98,            # Gemini     15°59'
    "Venus":   53.60,            # Taurus     23°36'
    "Mars":    338.38,           # Pisces      8°23'
    "Jupiter": 35.68,            # Taurus      5°41'
    "Saturn":  243.60,           # Sagittarius 3°36'
    "Rahu":    322.88,           # Aquarius   22°53'
    "Ketu":    142.88,           # Leo        22°53'
}


def print_section(title: str):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def run_demo(on_date: date = date(2024, 1, 1)):
    print("=" * 60)
    print("   CHARA ENGINE — SAMPLE CHARA DASHA")
    print("=" * 60)

    result = generate_chara_dasha(
        birth_date=date(1988, 7, 18),
        ascendant_longitude=SAMPLE_ASCENDANT,
        planet_longitudes=SAMPLE_PLANETS,
        on_date=on_date,
        dual_lord_rule="stronger",
    )

    print(f"\n  Birth Date : 1988-07-18")
    print(f"  Lagna      : {result['lagna']['sign']}")
    print(f"  Direction  : {result['direction'].title()}")
    print(f"  As of      : {on_date.isoformat()}")

    print_section("CHARA KARAKAS")
    print(format_karakas(result))

    print_section("SIGN LORDS & PERIOD YEARS")
    for sign, info in result["lord_positions"].items():
        print(f"  {sign:<13} lord in {info['lord_sign']:<13} → {info['years']:>2} years")

    print_section("MAHADASHA SEQUENCE")
    print(f"  {'Sign':<13} {'Start':<12} {'End':<12} {'Years':<5}")
    print(f"  {'─'*13} {'─'*12} {'─'*12} {'─'*5}")
    for m in result["mahadashas"]:
        print(f"  {m['sign']:<13} {m['start']:<12} {m['end']:<12} {m['duration_years']:<5}")

    print_section("CURRENT PERIOD")
    print(format_current_period(result))
    print("\n")


if __name__ == "__main__":
    run_demo()
