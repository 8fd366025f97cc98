"""Static rules that discard misleading place-name matches.

Two kinds of false positive are handled:

* compound names: "York" inside "New York", "Guinea" inside "Papua New Guinea".
  If any compound form appears in the text, the short name's match is dropped.
  Country names nested in another country's name ("Netherlands" in "Caribbean
  Netherlands") are added to the table from the country list.
* same-named cities elsewhere: "Paris, TX", "Dublin, Ohio". If the city is
  followed by an optional comma and a region token, the city match is dropped
  along with any match for the region token itself.

Region tokens of two letters are state/province abbreviations and only count in
uppercase, so "Paris in spring" or "London or Rome" still resolve abroad.
"""

import re
from typing import Dict, Iterable, List, Optional, Pattern

from travel_countries.normalize.text import MatchText, is_short_key, strip_diacritics, whole_word
from travel_countries.reference.countries import MATCHABLE_COUNTRY_NAMES

COMPOUND_SUPPRESSIONS = {
    "york": ["new york"],
    "mexico": ["new mexico"],
    "wales": ["new south wales"],
    "england": ["new england"],
    "guinea": ["papua new guinea", "equatorial guinea", "guinea-bissau"],
    "sudan": ["south sudan"],
    "samoa": ["american samoa"],
    "salvador": ["el salvador"],
    "santiago": ["santiago de compostela"],
    "ireland": ["northern ireland"],
    "georgia": ["atlanta, georgia", "savannah, georgia", "south georgia"],
    "congo": ["democratic republic of the congo"],
}

JURISDICTION_QUALIFIERS = {
    "paris": ["texas", "TX", "tennessee", "TN", "kentucky", "KY", "illinois", "IL", "ontario", "ON"],
    "london": ["ontario", "ON", "kentucky", "KY", "ohio", "OH"],
    "dublin": ["ohio", "OH", "california", "CA", "georgia", "GA", "virginia", "VA"],
    "athens": ["georgia", "GA", "ohio", "OH", "tennessee", "TN", "texas", "TX", "alabama", "AL"],
    "rome": ["georgia", "GA", "new york", "NY"],
    "florence": ["alabama", "AL", "south carolina", "SC", "kentucky", "KY", "oregon", "OR"],
    "naples": ["florida", "FL"],
    "venice": ["florida", "FL", "california", "CA"],
    "berlin": ["new hampshire", "NH", "connecticut", "CT", "wisconsin", "WI", "maryland", "MD"],
    "vienna": ["virginia", "VA"],
    "moscow": ["idaho", "ID"],
    "cairo": ["illinois", "IL", "georgia", "GA"],
    "lima": ["ohio", "OH"],
    "york": ["pennsylvania", "PA", "maine", "ME"],
    "cambridge": ["massachusetts", "MA", "ontario"],
    "oxford": ["mississippi", "MS", "ohio", "OH"],
    "bristol": ["connecticut", "CT", "tennessee", "TN", "virginia", "VA"],
    "birmingham": ["alabama", "AL", "michigan", "MI"],
    "manchester": ["new hampshire", "NH", "connecticut", "CT", "vermont", "VT"],
    "hamburg": ["new york", "NY"],
    "geneva": ["new york", "NY", "illinois", "IL"],
    "amsterdam": ["new york", "NY"],
    "warsaw": ["indiana", "IN"],
    "odessa": ["texas", "TX"],
    "st petersburg": ["florida", "FL"],
    "saint petersburg": ["florida", "FL"],
    "lisbon": ["maine", "ME", "ohio", "OH"],
    "delhi": ["new york", "NY"],
    "valencia": ["california", "CA"],
    "perth": ["scotland", "ontario"],
    "kingston": ["ontario", "ON", "new york", "NY"],
    "panama city": ["florida", "FL"],
    "madrid": ["new mexico", "NM"],
    "bergen": ["new jersey", "NJ"],
    "melbourne": ["florida", "FL"],
    "sydney": ["nova scotia", "NS"],
    "vancouver": ["washington", "WA"],
}


def _qualifier_pattern(city: str, tokens: Iterable[str]) -> Pattern:
    alternatives = []
    for token in tokens:
        if is_short_key(token):
            alternatives.append(re.escape(token))
        else:
            alternatives.append("(?i:" + re.escape(token) + ")")
    return re.compile(
        r'(?<!\w)(?i:' + re.escape(city) + r')\s*,?\s*(?P<region>' + "|".join(alternatives) + r')(?!\w)'
    )


def _nested_country_names() -> Dict[str, List[str]]:
    """Country names that occur whole inside another country's name ("Netherlands" in "Caribbean Netherlands")."""
    folded = {strip_diacritics(name).lower(): code for name, code in MATCHABLE_COUNTRY_NAMES.items()}
    nested: Dict[str, List[str]] = {}
    for inner, inner_code in folded.items():
        pattern = whole_word(inner)
        for outer, outer_code in folded.items():
            if outer_code != inner_code and pattern.search(outer):
                nested.setdefault(inner, []).append(outer)
    return nested


def _compound_table() -> Dict[str, List[str]]:
    table = {name: list(compounds) for name, compounds in COMPOUND_SUPPRESSIONS.items()}
    for inner, outers in _nested_country_names().items():
        known = table.setdefault(inner, [])
        known.extend(outer for outer in outers if outer not in known)
    return table


_COMPOUND_PATTERNS: Dict[str, List[Pattern]] = {
    name: [whole_word(compound) for compound in compounds]
    for name, compounds in _compound_table().items()
}

_QUALIFIER_PATTERNS: Dict[str, Pattern] = {
    city: _qualifier_pattern(city, tokens)
    for city, tokens in JURISDICTION_QUALIFIERS.items()
}


def is_part_of_compound(name: str, text: MatchText) -> bool:
    """True when `name` only appears here as part of a longer place name."""
    return any(p.search(text.lowered) for p in _COMPOUND_PATTERNS.get(name, ()))


def qualifier_token(city: str, text: MatchText) -> Optional[str]:
    """The region token placing `city` outside its usual country, keyed like a place match.

    "Athens, Georgia" gives "georgia" and "Athens GA" gives "GA"; None if `city` is unqualified.
    """
    pattern = _QUALIFIER_PATTERNS.get(city)
    found = pattern.search(text.original) if pattern else None
    if found is None:
        return None
    region = found.group("region")
    return region if is_short_key(region) else region.lower()


def is_qualified_elsewhere(city: str, text: MatchText) -> bool:
    """True when `city` is followed by a region that places it outside its usual country."""
    return qualifier_token(city, text) is not None


def disambiguate(matches: Dict[str, str], text: MatchText) -> Dict[str, str]:
    """Drop matches from `matches` (normalized name -> code) that the rules above rule out.

    A qualified city takes its region token with it, so the "Georgia" of
    "Athens, Georgia" does not resolve to the country either.
    """
    dropped = set()
    for name in matches:
        token = qualifier_token(name, text)
        if token is not None:
            dropped.update((name, token))
    return {
        name: code
        for name, code in matches.items()
        if name not in dropped and not is_part_of_compound(name, text)
    }
