"""
Unit tests for text and date normalization.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from travel_countries.normalize.date_parser import (
    normalize_date,
    parse_datetime,
    parse_instant,
    to_iso,
)
from travel_countries.normalize.text import (
    MatchText,
    PlaceMatcher,
    collation_key,
    event_text,
    plain_text,
    strip_diacritics,
    whole_word,
)


# ==================== Text ====================

class TestText:
    def test_strip_diacritics(self):
        assert strip_diacritics("Zürich, Réunion, São Paulo") == "Zurich, Reunion, Sao Paulo"

    def test_collation_key(self):
        names = ["Japan", "Åland Islands", "austria"]
        assert sorted(names, key=collation_key) == ["Åland Islands", "austria", "Japan"]

    def test_plain_text_passes_through(self):
        assert plain_text("Flight at 3 < 4 pm") == "Flight at 3 < 4 pm"
        assert plain_text(None) == ""

    def test_plain_text_strips_markup(self):
        html = "<p>Hello <b>world</b></p><script>track()</script>"
        assert plain_text(html) == "Hello world"

    def test_plain_text_keeps_angle_bracketed_codes(self):
        assert plain_text("Flight <JFK> to <LHR>") == "Flight <JFK> to <LHR>"

    def test_plain_text_uppercase_tags(self):
        assert plain_text("<DIV>Zurich<BR>HB</DIV>") == "Zurich HB"

    def test_match_text(self):
        text = MatchText.of("Café in LA")
        assert text.original == "Cafe in LA"
        assert text.lowered == "cafe in la"

    def test_event_text_tolerates_missing_fields(self, make_event):
        event = make_event("Lunch", description=None, location=None)
        assert event_text(event).strip() == "Lunch"

    def test_whole_word(self):
        assert whole_word("tour").search("city tour today")
        assert whole_word("tour").search("tourism") is None
        assert whole_word("LA", case_sensitive=True).search("la maison") is None


class TestPlaceMatcher:
    @pytest.fixture
    def matcher(self):
        return PlaceMatcher({"LA": "US", "paris": "FR", "zürich": "CH"})

    def test_short_key_needs_uppercase(self, matcher):
        assert matcher.find(MatchText.of("à la maison")) == {}
        assert matcher.find(MatchText.of("Flight to LA")) == {"LA": "US"}

    def test_long_key_any_case(self, matcher):
        assert matcher.find(MatchText.of("PARIS")) == {"paris": "FR"}

    def test_keys_are_accent_folded(self, matcher):
        assert matcher.find(MatchText.of("Zurich HB")) == {"zurich": "CH"}

    def test_whole_words_only(self, matcher):
        assert matcher.find(MatchText.of("Parisian café")) == {}

    def test_len(self, matcher):
        assert len(matcher) == 3


# ==================== Dates ====================

class TestDates:
    def test_to_iso_from_date(self):
        assert to_iso(date(2024, 1, 15)) == "2024-01-15T00:00:00.000Z"

    def test_to_iso_converts_to_utc(self):
        value = datetime(2024, 1, 15, 10, 30, tzinfo=timezone(timedelta(hours=2)))
        assert to_iso(value) == "2024-01-15T08:30:00.000Z"

    def test_parse_instant(self):
        assert parse_instant("2024-01-15T00:00:00.000Z") == datetime(2024, 1, 15, tzinfo=timezone.utc)
        assert parse_instant("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_parse_instant_rejects_prose(self):
        with pytest.raises(ValueError):
            parse_instant("next tuesday-ish")

    @pytest.mark.parametrize("raw", [None, "", "null", "unknown"])
    def test_parse_datetime_empty(self, raw):
        assert parse_datetime(raw) is None

    def test_parse_datetime_ddmonyy(self):
        assert parse_datetime("09MAR2022") == datetime(2022, 3, 9, tzinfo=timezone.utc)

    def test_normalize_date_round_trips_canonical_form(self):
        assert normalize_date("2024-01-15T00:00:00.000Z") == "2024-01-15T00:00:00.000Z"
        assert normalize_date(None) is None
