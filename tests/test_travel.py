"""Tests for travel-time validation."""

import pytest

from schedule_planner.models import TravelCheck, TravelRules, TravelTime
from schedule_planner.travel import (
    check_travel_time,
    get_sorted_meetings,
    get_travel_times,
    is_valid_combination,
)


class TestCheckTravelTime:
    """Tests for check_travel_time function."""

    def test_no_time_is_skipped(self, rules):
        assert check_travel_time(TravelTime("BUSCH", "BUSCH", None), rules) == TravelCheck.SKIP

    def test_overlap_is_invalid(self, rules):
        assert check_travel_time(TravelTime("BUSCH", "BUSCH", -5), rules) == TravelCheck.INVALID

    @pytest.mark.parametrize("minutes,expected", [(19, TravelCheck.INVALID), (20, TravelCheck.VALID)])
    def test_same_campus(self, rules, minutes, expected):
        assert check_travel_time(TravelTime("BUSCH", "BUSCH", minutes), rules) == expected

    @pytest.mark.parametrize("minutes,expected", [(39, TravelCheck.INVALID), (40, TravelCheck.VALID)])
    def test_between_campuses(self, rules, minutes, expected):
        travel_time = TravelTime("BUSCH", "COLLEGE AVENUE", minutes)
        assert check_travel_time(travel_time, rules) == expected

    def test_exception_in_either_direction(self, rules):
        assert check_travel_time(TravelTime("BUSCH", "LIVINGSTON", 20), rules) == TravelCheck.VALID
        assert check_travel_time(TravelTime("LIVINGSTON", "BUSCH", 20), rules) == TravelCheck.VALID
        assert check_travel_time(TravelTime("LIVINGSTON", "BUSCH", 19), rules) == TravelCheck.INVALID

    def test_zero_gap_with_zero_minimum(self):
        rules = TravelRules(min_travel_time=0)
        assert check_travel_time(TravelTime("BUSCH", "BUSCH", 0), rules) == TravelCheck.VALID


class TestGetTravelTimes:
    """Tests for get_travel_times function."""

    def test_meetings_sorted_across_sections(self, make_section):
        sections = [
            make_section("1", [(620, 700, "BUSCH"), (4940, 5020, "BUSCH")]),
            make_section("2", [(720, 800, "BUSCH")]),
        ]
        assert [m.start for m in get_sorted_meetings(sections)] == [620, 720, 4940]

    def test_valid_combination(self, make_section, rules):
        sections = [
            make_section("1", [(540, 590, "BUSCH")]),
            make_section("2", [(610, 660, "BUSCH")]),
        ]
        assert get_travel_times(sections, rules) == [TravelTime("BUSCH", "BUSCH", 20)]

    def test_overlap_is_invalid(self, make_section, rules):
        sections = [
            make_section("1", [(600, 680, "BUSCH")]),
            make_section("2", [(620, 700, "BUSCH")]),
        ]
        assert get_travel_times(sections, rules) is None
        assert not is_valid_combination(sections, rules)

    def test_short_gap_between_campuses(self, make_section, rules):
        sections = [
            make_section("1", [(540, 590, "BUSCH")]),
            make_section("2", [(620, 700, "COLLEGE AVENUE")]),
        ]
        assert get_travel_times(sections, rules) is None

    def test_single_section(self, make_section, rules):
        assert get_travel_times([make_section("1", [(540, 590, "BUSCH")])], rules) == []

    def test_sections_without_meetings(self, make_section, rules):
        sections = [make_section("1"), make_section("2", [(540, 590, "BUSCH")])]
        assert get_travel_times(sections, rules) == []

    def test_asynchronous_interval_skipped(self, make_section, rules):
        sections = [
            make_section("1", [(540, 590, "BUSCH")]),
            make_section("2", [(None, None, "")]),
        ]
        assert get_travel_times(sections, rules) == []
