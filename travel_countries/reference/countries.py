"""Valid ISO 3166-1 alpha-2 codes and their display names.

Built from the pycountry ISO database. ISO's formal names ("Korea, Republic of",
"Viet Nam") are replaced by the names people actually type into calendars.
"""

from typing import Dict, Optional

import pycountry

NAME_OVERRIDES = {
    "US": "United States",
    "GB": "United Kingdom",
    "RU": "Russia",
    "KR": "South Korea",
    "KP": "North Korea",
    "IR": "Iran",
    "SY": "Syria",
    "VN": "Vietnam",
    "LA": "Laos",
    "TW": "Taiwan",
    "BO": "Bolivia",
    "VE": "Venezuela",
    "TZ": "Tanzania",
    "MD": "Moldova",
    "CZ": "Czech Republic",
    "CD": "Democratic Republic of the Congo",
    "CG": "Republic of the Congo",
    "FM": "Micronesia",
    "PS": "Palestine",
    "BN": "Brunei",
    "MK": "North Macedonia",
    "TR": "Turkey",
    "VA": "Vatican City",
    "MO": "Macau",
    "NL": "Netherlands",
    "SX": "Sint Maarten",
    "MF": "Saint Martin",
    "FK": "Falkland Islands",
    "BQ": "Caribbean Netherlands",
    "SH": "Saint Helena",
    "VG": "British Virgin Islands",
    "VI": "U.S. Virgin Islands",
    "HK": "Hong Kong",
    "CV": "Cape Verde",
    "SZ": "Eswatini",
}

# Codes ISO has not assigned but calendars still mention
EXTRA_COUNTRIES = {
    "XK": "Kosovo",
}

# Valid codes whose names are ordinary words in event text ("Réunion à 10h", "New Jersey")
UNMATCHABLE_NAMES = frozenset({"RE", "JE"})


def _display_name(country) -> str:
    return NAME_OVERRIDES.get(country.alpha_2) or getattr(country, "common_name", None) or country.name


def _is_plain(name: str) -> bool:
    # ISO's inverted forms ("Congo, The Democratic Republic of the") never appear in prose
    return "," not in name and "(" not in name


def _build_tables():
    names: Dict[str, str] = {}
    matchable: Dict[str, str] = {}
    for country in pycountry.countries:
        code = country.alpha_2
        display = _display_name(country)
        names[code] = display
        if code in UNMATCHABLE_NAMES:
            continue
        for alias in (display, getattr(country, "common_name", None), country.name):
            if alias and _is_plain(alias):
                matchable.setdefault(alias, code)
    for code, display in EXTRA_COUNTRIES.items():
        names[code] = display
        matchable.setdefault(display, code)
    return names, matchable


COUNTRY_NAMES, MATCHABLE_COUNTRY_NAMES = _build_tables()


def country_name(code: str) -> Optional[str]:
    return COUNTRY_NAMES.get(code)


def is_known_country(code: str) -> bool:
    return code in COUNTRY_NAMES
