"""Text normalization and whole-word place matching for event text."""

import re
import unicodedata
from dataclasses import dataclass
from typing import Dict, List, Optional, Pattern, Tuple

from bs4 import BeautifulSoup

from travel_countries.models import CalendarEvent

# Keys this short are regional shorthand (LA, SF, DC) and only count in uppercase
SHORT_KEY_MAX_LEN = 2

# Only real tag names count, so "<JFK> to <LHR>" stays plain text
_HTML_TAG = re.compile(
    r"<\s*/?\s*(?:a|b|i|u|p|br|hr|div|span|font|em|strong|ul|ol|li|img|h[1-6]|"
    r"table|thead|tbody|tr|td|th|blockquote|pre|code|html-blob|html|head|body|script|style)"
    r"(?=[\s/>])[^>]*>",
    re.I,
)


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def collation_key(name: str) -> str:
    """Locale-independent sort key for display names: accents dropped, case-folded."""
    return strip_diacritics(name).casefold()


def plain_text(text: Optional[str]) -> str:
    """Flatten HTML descriptions (Google Calendar sends them) to visible text."""
    if not text:
        return ""
    if not _HTML_TAG.search(text):
        return text
    soup = BeautifulSoup(text, "html.parser")
    for s in soup(["script", "style"]):
        s.decompose()
    return soup.get_text(separator=" ", strip=True)


@dataclass(frozen=True)
class MatchText:
    """A text prepared once for matching: diacritics stripped, plus its lowercase form."""
    original: str
    lowered: str

    @classmethod
    def of(cls, text: Optional[str]) -> "MatchText":
        stripped = strip_diacritics(text or "")
        return cls(original=stripped, lowered=stripped.lower())


def event_text(event: CalendarEvent) -> str:
    return f"{event.summary or ''} {plain_text(event.description)} {event.location or ''}"


def whole_word(word: str, case_sensitive: bool = False) -> Pattern:
    flags = 0 if case_sensitive else re.I
    return re.compile(r'(?<!\w)' + re.escape(word) + r'(?!\w)', flags)


def is_short_key(name: str) -> bool:
    return len(name) <= SHORT_KEY_MAX_LEN


class PlaceMatcher:
    """Whole-word matcher over a fixed name -> country code table."""

    def __init__(self, table: Dict[str, str]):
        self._entries: List[Tuple[str, str, bool, Pattern]] = []
        for name, code in table.items():
            if is_short_key(name):
                needle = strip_diacritics(name.upper())
                self._entries.append((needle, code, True, whole_word(needle, case_sensitive=True)))
            else:
                needle = strip_diacritics(name).lower()
                self._entries.append((needle, code, False, whole_word(needle)))

    def __len__(self):
        return len(self._entries)

    def find(self, text: MatchText) -> Dict[str, str]:
        """Return matched names (normalized: lowercase, or uppercase for short keys) -> country code."""
        found: Dict[str, str] = {}
        for needle, code, case_sensitive, pattern in self._entries:
            haystack = text.original if case_sensitive else text.lowered
            # substring check first; the regex only confirms word boundaries
            if needle in haystack and pattern.search(haystack):
                found[needle] = code
        return found
