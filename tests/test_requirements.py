"""Tests for requirement matching."""

import pytest

from schedule_planner.exceptions import InvalidRequirementError
from schedule_planner.models import TimeRange
from schedule_planner.requirements import (
    ContainmentRequirement,
    EqualityRequirement,
    MembershipRequirement,
    RequirementSet,
    check_match,
    evaluate_section,
    make_requirement,
)


class TestMakeRequirement:
    """Tests for requirement variant selection."""

    def test_scalar_is_equality(self):
        assert isinstance(make_requirement("printed", "Y"), EqualityRequirement)
        assert isinstance(make_requirement("openStatus", True), EqualityRequirement)

    def test_list_is_membership(self):
        requirement = make_requirement("number", ["01", "02"])
        assert isinstance(requirement, MembershipRequirement)
        assert requirement.to_value() == ["01", "02"]

    def test_record_is_containment(self):
        requirement = make_requirement("instructors", {"name": "KANIA, JAY"})
        assert isinstance(requirement, ContainmentRequirement)
        assert requirement.to_value() == {"name": "KANIA, JAY"}

    def test_list_of_records_rejected(self):
        with pytest.raises(InvalidRequirementError) as exc_info:
            make_requirement("instructors", [{"name": "KANIA, JAY"}])
        assert exc_info.value.key == "instructors"

    def test_unsupported_value_rejected(self):
        with pytest.raises(InvalidRequirementError):
            make_requirement("printed", object())


class TestCheckMatch:
    """Tests for check_match function."""

    def test_equality(self):
        assert check_match("Y", EqualityRequirement("Y"))
        assert not check_match("N", EqualityRequirement("Y"))

    def test_membership(self):
        requirement = MembershipRequirement(("01", "02"))
        assert check_match("02", requirement)
        assert not check_match("03", requirement)

    def test_containment(self):
        requirement = make_requirement("instructors", {"name": "KANIA, JAY"})
        assert check_match([{"name": "SMITH, ANN"}, {"name": "KANIA, JAY"}], requirement)
        assert not check_match([{"name": "SMITH, ANN"}], requirement)

    def test_containment_needs_equal_record(self):
        requirement = make_requirement("instructors", {"name": "KANIA, JAY"})
        assert not check_match([{"name": "KANIA, JAY", "id": 7}], requirement)

    def test_containment_on_scalar_not_met(self):
        requirement = make_requirement("instructors", {"name": "KANIA, JAY"})
        assert not check_match("KANIA, JAY", requirement)

    def test_booleans_never_equal_numbers(self):
        assert not check_match(True, EqualityRequirement(1))
        assert not check_match(False, MembershipRequirement((0,)))
        assert check_match(True, EqualityRequirement(True))
        assert check_match(1, EqualityRequirement(1.0))

    def test_containment_compares_fields_strictly(self):
        requirement = make_requirement("instructors", {"name": "KANIA, JAY", "active": 1})
        assert not check_match([{"name": "KANIA, JAY", "active": True}], requirement)
        assert check_match([{"active": 1, "name": "KANIA, JAY"}], requirement)

    def test_missing_attribute_not_met(self):
        assert not check_match(None, EqualityRequirement("A"))
        assert not check_match(None, MembershipRequirement(("A",)))
        assert not check_match(None, make_requirement("instructors", {"name": "X"}))


class TestRequirementSet:
    """Tests for RequirementSet lookups."""

    @pytest.fixture
    def requirement_set(self):
        return RequirementSet.from_dict(
            {
                "ALL": {
                    "printed": "Y",
                    "openStatus": True,
                    "meetingTimesRanges": [{"startMinute": 540, "endMinute": 1020}],
                },
                "01:198:211": {
                    "printed": "N",
                    "instructors": {"name": "KANIA, JAY"},
                    "meetingTimesRanges": [{"startTime": 2000, "endTime": 2500}],
                },
            }
        )

    def test_course_value_wins(self, requirement_set):
        assert requirement_set.get("01:198:211", "printed") == EqualityRequirement("N")

    def test_all_value_is_fallback(self, requirement_set):
        assert requirement_set.get("01:640:251", "printed") == EqualityRequirement("Y")
        assert requirement_set.get("01:198:211", "openStatus") == EqualityRequirement(True)

    def test_undeclared_key(self, requirement_set):
        assert requirement_set.get("01:640:251", "instructors") is None
        assert not requirement_set.declares("01:640:251", "instructors")

    def test_keys_all_first(self, requirement_set):
        assert requirement_set.keys_for("01:198:211") == ["printed", "openStatus", "instructors"]
        assert requirement_set.keys_for("01:640:251") == ["printed", "openStatus"]

    def test_time_ranges_kept_apart(self, requirement_set):
        assert "meetingTimesRanges" not in requirement_set.requirements_for("01:640:251")
        assert requirement_set.meeting_times_ranges_for("01:640:251") == [TimeRange(540, 1020)]
        assert requirement_set.meeting_times_ranges_for("01:198:211") == [TimeRange(2000, 2500)]
        assert requirement_set.declares("01:640:251", "meetingTimesRanges")

    def test_empty_set(self):
        requirement_set = RequirementSet.from_dict(None)
        assert requirement_set.requirements_for("01:198:111") == {}
        assert requirement_set.meeting_times_ranges_for("01:198:111") is None

    def test_bad_time_ranges_raise(self):
        with pytest.raises(InvalidRequirementError):
            RequirementSet.from_dict({"ALL": {"meetingTimesRanges": [{"startMinute": 1}]}})
        with pytest.raises(InvalidRequirementError):
            RequirementSet.from_dict({"ALL": {"meetingTimesRanges": "mornings"}})

    def test_to_dict(self, requirement_set):
        data = requirement_set.to_dict()
        assert data["ALL"]["printed"] == "Y"
        assert data["01:198:211"]["instructors"] == {"name": "KANIA, JAY"}
        assert data["01:198:211"]["meetingTimesRanges"] == [{"startMinute": 2000, "endMinute": 2500}]


class TestEvaluateSection:
    """Tests for evaluate_section function."""

    def test_counts_and_records_met(self, make_section):
        section = make_section("10001", number="01", printed="Y", open_status=False)
        requirement_set = RequirementSet.from_dict(
            {"ALL": {"printed": "Y", "openStatus": True, "number": ["01", "02"]}}
        )
        evaluate_section(section, requirement_set.requirements_for("01:198:111"))

        assert section.num_requirements == 3
        assert section.requirements_met == {"printed": "Y", "number": ["01", "02"]}
        assert section.percent_requirements_met == pytest.approx(2 / 3)

    def test_unknown_attribute_counts_as_unmet(self, make_section):
        section = make_section("10001")
        evaluate_section(section, {"examCode": EqualityRequirement("A")})
        assert section.num_requirements == 1
        assert section.num_requirements_met == 0

    def test_nothing_declared(self, make_section):
        section = make_section("10001")
        evaluate_section(section, {})
        assert section.num_requirements == 0
        assert section.percent_requirements_met == 1.0
