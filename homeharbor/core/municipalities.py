"""Statistics Finland municipality codes for the larger Finnish cities."""

from __future__ import annotations

MUNICIPALITY_CODES = {
    "Helsinki": "091",
    "Espoo": "049",
    "Tampere": "837",
    "Vantaa": "092",
    "Oulu": "564",
    "Turku": "853",
    "Jyväskylä": "179",
    "Lahti": "398",
    "Kuopio": "297",
    "Pori": "609",
    "Kouvola": "286",
    "Joensuu": "167",
    "Vaasa": "905",
    "Lappeenranta": "405",
    "Hämeenlinna": "109",
    "Rovaniemi": "698",
    "Seinäjoki": "743",
    "Mikkeli": "491",
    "Kotka": "285",
    "Salo": "734",
}

_BY_LOWER = {name.lower(): code for name, code in MUNICIPALITY_CODES.items()}


def get_municipality_code(city: str) -> str:
    """Three-digit municipality code for ``city``, or ``""`` when unknown."""
    return _BY_LOWER.get(city.strip().lower(), "") if city else ""


def pxweb_municipality_key(code: str) -> str:
    """PxWeb category key for a municipality code (``564`` -> ``KU564``)."""
    return f"KU{code}"
