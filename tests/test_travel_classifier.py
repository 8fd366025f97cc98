"""
Unit tests for the travel classifier.
"""

from datetime import datetime, timedelta, timezone

import pytest

from travel_countries.classify.travel_classifier import TravelClassifier, is_travel_event


@pytest.fixture(scope="module")
def classifier():
    return TravelClassifier()


class TestVocabulary:
    def test_ordinary_meeting_is_not_travel(self, classifier, make_event):
        assert classifier.is_travel(make_event("Team meeting")) is False

    @pytest.mark.parametrize("summary", [
        "Flight to Somewhere",
        "Hotel reservation",
        "Check-in at the Hilton",
        "Summer vacation",
        "Layover",
    ])
    def test_travel_words(self, classifier, make_event, summary):
        assert classifier.is_travel(make_event(summary)) is True

    def test_keywords_match_whole_words_only(self, classifier, make_event):
        # "tour" inside "tourism", "board" is not "boarding"
        assert classifier.is_travel(make_event("Tourism board dinner")) is False

    def test_keywords_ignore_case(self, classifier, make_event):
        assert classifier.is_travel(make_event("FLIGHT home")) is True

    def test_module_level_helper(self, make_event):
        assert is_travel_event(make_event("Flight to JFK")) is True
        assert is_travel_event(make_event("Team meeting")) is False


class TestVirtualOverride:
    def test_zoom_call_with_city(self, classifier, make_event):
        assert classifier.is_travel(make_event("Zoom call with Tokyo office", days=5)) is False

    def test_virtual_meeting_with_city(self, classifier, make_event):
        assert classifier.is_travel(make_event("Virtual meeting with Paris team", days=5)) is False

    def test_virtual_beats_travel_vocabulary(self, classifier, make_event):
        assert classifier.is_travel(make_event("Online check-in for flight to LHR")) is False

    def test_virtual_word_in_description(self, classifier, make_event):
        event = make_event("Hotel sales pitch", description="Join on Microsoft Teams")
        assert classifier.is_travel(event) is False


class TestCodes:
    def test_airport_code(self, classifier, make_event):
        assert classifier.is_travel(make_event("Pick up Sam at JFK")) is True

    def test_lowercase_airport_code_does_not_count(self, classifier, make_event):
        assert classifier.is_travel(make_event("jfk biography club")) is False

    def test_flight_number_known_airline(self, classifier, make_event):
        assert classifier.is_travel(make_event("BA175 to New York")) is True

    def test_flight_number_icao_airline(self, classifier, make_event):
        assert classifier.is_travel(make_event("UAL920")) is True

    def test_flight_number_unknown_airline(self, classifier, make_event):
        assert classifier.is_travel(make_event("XY456 to Paris")) is False

    def test_flight_number_only_counts_in_summary(self, classifier, make_event):
        event = make_event(
            "Local event",
            description="Reference: BA123",
            location="123 Main St, London SW1A 1AA",
        )
        assert classifier.is_travel(event) is False

    def test_has_flight_number(self, classifier):
        assert classifier.has_flight_number("LH 400") is False
        assert classifier.has_flight_number("LH400") is True
        assert classifier.has_flight_number(None) is False


class TestMultiDayPlaces:
    def test_place_over_several_days(self, classifier, make_event):
        assert classifier.is_travel(make_event("Paris with Anna", days=3)) is True

    def test_place_on_single_day(self, classifier, make_event):
        assert classifier.is_travel(make_event("Paris with Anna", days=0)) is False

    def test_place_without_end_date(self, classifier, make_event):
        assert classifier.is_travel(make_event("Paris with Anna", days=None)) is False

    def test_exactly_24_hours_is_not_multi_day(self, classifier, make_event):
        start = datetime(2024, 1, 15, 9, 0)
        event = make_event("Paris with Anna", start=start, end=start + timedelta(hours=24))
        assert classifier.is_travel(event) is False

    def test_just_over_24_hours_is_multi_day(self, classifier, make_event):
        start = datetime(2024, 1, 15, 9, 0)
        event = make_event("Paris with Anna", start=start, end=start + timedelta(hours=24, minutes=1))
        assert classifier.is_travel(event) is True

    def test_timezone_aware_span(self, classifier, make_event):
        # 00:00+02:00 is 22:00 UTC the day before, so this spans 27 hours
        start = datetime(2024, 1, 15, tzinfo=timezone(timedelta(hours=2)))
        end = datetime(2024, 1, 16, 1, 0, tzinfo=timezone.utc)
        assert classifier.is_travel(make_event("Paris with Anna", start=start, end=end)) is True

    def test_railway_station(self, classifier, make_event):
        assert classifier.is_travel(make_event("Eurostar from St Pancras", days=3)) is True

    def test_accents_and_case_are_ignored(self, classifier, make_event):
        assert classifier.is_travel(make_event("Séjour à ZÜRICH", days=3)) is True

    def test_uppercase_short_code(self, classifier, make_event):
        assert classifier.is_travel(make_event("Weekend in LA", days=2)) is True

    def test_lowercase_short_code_is_a_word(self, classifier, make_event):
        assert classifier.is_travel(make_event("Réunion à la maison", days=5)) is False

    def test_location_field_counts(self, classifier, make_event):
        assert classifier.is_travel(make_event("Conference", days=3, location="Lisbon")) is True
