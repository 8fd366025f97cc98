"""
Unit tests for country extraction and place-name disambiguation.
"""

import pytest

from travel_countries.extract.country_extractor import CountryExtractor, extract_countries
from travel_countries.extract.disambiguation import (
    is_part_of_compound,
    is_qualified_elsewhere,
    qualifier_token,
)
from travel_countries.normalize.text import MatchText


@pytest.fixture(scope="module")
def extractor():
    return CountryExtractor()


class TestAirportCodes:
    def test_adjacent_codes(self, extractor):
        assert extractor.airport_codes("JFK LHR") == ["JFK", "LHR"]

    def test_route_notation(self, extractor):
        assert extractor.airport_codes("JFK-LHR") == ["JFK", "LHR"]

    def test_unknown_and_embedded_codes(self, extractor):
        assert extractor.airport_codes("ABC XJFK JFK1 Jfk") == []

    def test_code_in_summary(self, make_event):
        assert extract_countries(make_event("Flight to JFK")) == {"US"}

    def test_code_in_description(self, make_event):
        event = make_event("Flight", description="Departing from LHR terminal 5")
        assert extract_countries(event) == {"GB"}

    def test_bracketed_codes_in_description(self, make_event):
        event = make_event("Flight", description="Booked <JFK> to <LHR>")
        assert extract_countries(event) == {"US", "GB"}


class TestPlaceNames:
    def test_country_name(self, make_event):
        assert extract_countries(make_event("Trip to Japan", days=5)) == {"JP"}

    def test_city_name(self, make_event):
        assert extract_countries(make_event("Hotel in Paris", days=3)) == {"FR"}

    def test_hotel_chain_with_city(self, make_event):
        assert extract_countries(make_event("Marriott Hotel Rome", days=3)) == {"IT"}

    def test_station_name(self, make_event):
        assert extract_countries(make_event("Arriving at Gare du Nord", days=3)) == {"FR"}

    def test_station_in_html_description(self, make_event):
        event = make_event("Train", description="<p>Meet at <a href='#'>Gare du Nord</a></p>")
        assert extract_countries(event) == {"FR"}

    def test_location_only(self, make_event):
        assert extract_countries(make_event("Hotel", location="Tokyo")) == {"JP"}

    @pytest.mark.parametrize("text,code", [
        ("Zürich", "CH"),
        ("Düsseldorf fair", "DE"),
        ("Dusseldorf fair", "DE"),
        ("PARIS", "FR"),
    ])
    def test_accents_and_case(self, extractor, text, code):
        assert extractor.countries_in_text(text) == {code}

    def test_several_countries(self, extractor):
        assert extractor.countries_in_text("Rome then Madrid") == {"IT", "ES"}


class TestShortCodes:
    def test_uppercase_la(self, make_event):
        assert extract_countries(make_event("Flight to LA")) == {"US"}

    def test_uppercase_sf(self, make_event):
        assert extract_countries(make_event("Trip to SF", days=5)) == {"US"}

    def test_lowercase_la_is_french_article(self, make_event):
        assert extract_countries(make_event("Réunion à la maison", days=5)) == set()

    def test_reunion_and_jersey_are_not_matched_by_name(self, extractor):
        assert extractor.countries_in_text("Réunion d'équipe") == set()
        assert extractor.countries_in_text("Jersey shore") == set()


class TestCompoundNames:
    def test_new_york_is_not_york(self, make_event):
        assert extract_countries(make_event("Trip to New York", days=5)) == {"US"}

    def test_york_alone(self, extractor):
        assert extractor.countries_in_text("Weekend in York") == {"GB"}

    def test_papua_new_guinea(self, extractor):
        assert extractor.countries_in_text("Papua New Guinea") == {"PG"}

    def test_new_south_wales(self, extractor):
        assert extractor.countries_in_text("Sydney, New South Wales") == {"AU"}

    def test_atlanta_georgia(self, extractor):
        assert extractor.countries_in_text("Atlanta, Georgia") == {"US"}

    def test_santiago_de_compostela(self, extractor):
        assert extractor.countries_in_text("Santiago de Compostela") == {"ES"}

    def test_northern_ireland(self, extractor):
        assert extractor.countries_in_text("Belfast, Northern Ireland") == {"GB"}

    def test_is_part_of_compound(self):
        assert is_part_of_compound("york", MatchText.of("New York")) is True
        assert is_part_of_compound("york", MatchText.of("York Minster")) is False

    def test_democratic_republic_of_the_congo(self, make_event):
        event = make_event("Trip to Democratic Republic of the Congo", days=3)
        assert extract_countries(event) == {"CD"}

    def test_republic_of_the_congo_alone(self, extractor):
        assert extractor.countries_in_text("Brazzaville, Republic of the Congo") == {"CG"}

    def test_caribbean_netherlands(self, make_event):
        assert extract_countries(make_event("Trip to Caribbean Netherlands", days=3)) == {"BQ"}

    def test_united_states_minor_outlying_islands(self, extractor):
        assert extractor.countries_in_text("United States Minor Outlying Islands") == {"UM"}

    def test_nested_country_names_are_suppressed(self):
        text = MatchText.of("Caribbean Netherlands")
        assert is_part_of_compound("netherlands", text) is True
        assert is_part_of_compound("netherlands", MatchText.of("Amsterdam, Netherlands")) is False


class TestJurisdictions:
    def test_paris_texas(self, make_event):
        assert extract_countries(make_event("Trip to Paris, Texas", days=3)) == set()

    def test_dublin_state_abbreviation(self, make_event):
        assert extract_countries(make_event("Conference in Dublin OH", days=3)) == set()

    def test_long_token_ignores_case(self, extractor):
        assert extractor.countries_in_text("Dublin, ohio") == set()

    def test_short_token_must_be_uppercase(self, extractor):
        assert extractor.countries_in_text("Florence, OR") == set()
        assert extractor.countries_in_text("Florence or Rome") == {"IT"}

    def test_unqualified_city(self, extractor):
        assert extractor.countries_in_text("Paris in spring") == {"FR"}

    def test_raw_matches_keep_the_city(self, extractor):
        assert extractor.place_names("Paris, Texas") == {"paris": "FR"}

    def test_is_qualified_elsewhere(self):
        assert is_qualified_elsewhere("athens", MatchText.of("Athens GA")) is True
        assert is_qualified_elsewhere("athens", MatchText.of("Athens, Greece")) is False
        assert is_qualified_elsewhere("tokyo", MatchText.of("Tokyo, TX")) is False

    @pytest.mark.parametrize("summary", [
        "Trip to Athens, Georgia",
        "Trip to Rome, Georgia",
        "Trip to Dublin, Georgia",
        "Trip to Cairo, Georgia",
    ])
    def test_region_token_is_not_a_country(self, make_event, summary):
        assert extract_countries(make_event(summary, days=3)) == set()

    def test_georgia_alone_is_the_country(self, extractor):
        assert extractor.countries_in_text("Hiking in Georgia") == {"GE"}

    def test_qualifier_token(self):
        assert qualifier_token("athens", MatchText.of("Athens, Georgia")) == "georgia"
        assert qualifier_token("athens", MatchText.of("Athens GA")) == "GA"
        assert qualifier_token("athens", MatchText.of("Athens, Greece")) is None
