"""Requirement matching for section attributes.

A requirement value's shape selects how it is matched, decided once when the
requirement set is built:

- a record (dict) is a containment requirement: the section attribute must be a
  list holding an equal record, e.g. {"instructors": {"name": "KANIA, JAY"}}
- a list of scalars is a membership requirement: the section attribute must be
  one of them, e.g. {"number": ["01", "02"]}
- a scalar is an equality requirement, e.g. {"printed": "Y"}

The "meetingTimesRanges" key is kept apart: it holds desired time windows that
feed scoring and is never matched.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Self

from .constants import ALL_COURSES_KEY, KNOWN_REQUIREMENT_KEYS, MEETING_TIMES_RANGES_KEY
from .exceptions import InvalidRequirementError
from .models import Section, TimeRange

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, int, float, bool, type(None))


def same_value(a: Any, b: Any) -> bool:
    """Strict equality: booleans never equal numbers (True != 1)."""
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def _same_record(item: Any, record: dict[str, Any]) -> bool:
    if not isinstance(item, dict) or item.keys() != record.keys():
        return False
    return all(same_value(item[key], value) for key, value in record.items())


class Requirement(ABC):
    """A declared preference a section attribute is checked against."""

    @abstractmethod
    def matches(self, attribute: Any) -> bool:
        """Check whether a section attribute satisfies the requirement."""
        pass

    @abstractmethod
    def to_value(self) -> Any:
        """Return the requirement in its declared (JSON) shape."""
        pass


@dataclass(frozen=True)
class EqualityRequirement(Requirement):
    value: Any

    def matches(self, attribute: Any) -> bool:
        return same_value(attribute, self.value)

    def to_value(self) -> Any:
        return self.value


@dataclass(frozen=True)
class MembershipRequirement(Requirement):
    values: tuple[Any, ...]

    def matches(self, attribute: Any) -> bool:
        return any(same_value(attribute, value) for value in self.values)

    def to_value(self) -> list[Any]:
        return list(self.values)


@dataclass(frozen=True)
class ContainmentRequirement(Requirement):
    fields: tuple[tuple[str, Any], ...]

    def matches(self, attribute: Any) -> bool:
        if not isinstance(attribute, (list, tuple)):
            return False
        record = dict(self.fields)
        return any(_same_record(item, record) for item in attribute)

    def to_value(self) -> dict[str, Any]:
        return dict(self.fields)


def make_requirement(key: str, value: Any) -> Requirement:
    """Build the requirement variant matching the shape of value.

    Raises:
        InvalidRequirementError: If value is neither a record, a list of
            scalars nor a scalar
    """
    if isinstance(value, dict):
        return ContainmentRequirement(fields=tuple(value.items()))
    if isinstance(value, (list, tuple, set)):
        if not all(isinstance(v, _SCALAR_TYPES) for v in value):
            raise InvalidRequirementError(key, value)
        return MembershipRequirement(values=tuple(value))
    if isinstance(value, _SCALAR_TYPES):
        return EqualityRequirement(value=value)
    raise InvalidRequirementError(key, value)


def check_match(attribute: Any, requirement: Requirement) -> bool:
    """Check a section attribute against a requirement.

    Mismatched shapes (e.g. a missing attribute) count as not met.
    """
    try:
        return requirement.matches(attribute)
    except TypeError:
        return False


def parse_time_ranges(key: str, value: Any) -> list[TimeRange]:
    """Parse a meetingTimesRanges value into TimeRanges."""
    if not isinstance(value, list):
        raise InvalidRequirementError(key, value)
    try:
        return [TimeRange.from_dict(entry) for entry in value]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise InvalidRequirementError(key, value) from e


class RequirementSet:
    """Requirements declared for all courses, with per-course overrides.

    Lookups check the course's own requirements first and fall back to the
    ALL requirements, so a course value wins on a key collision.
    """

    def __init__(
        self,
        defaults: dict[str, Requirement] | None = None,
        overrides: dict[str, dict[str, Requirement]] | None = None,
        default_ranges: list[TimeRange] | None = None,
        course_ranges: dict[str, list[TimeRange]] | None = None,
    ):
        self._defaults = defaults or {}
        self._overrides = overrides or {}
        self._default_ranges = default_ranges
        self._course_ranges = course_ranges or {}

    @classmethod
    def from_dict(cls, data: dict[str, dict[str, Any]] | None) -> Self:
        """Create a RequirementSet from {"ALL": {...}, "<courseID>": {...}}.

        Raises:
            InvalidRequirementError: On unsupported requirement values
        """
        defaults: dict[str, Requirement] = {}
        overrides: dict[str, dict[str, Requirement]] = {}
        default_ranges: list[TimeRange] | None = None
        course_ranges: dict[str, list[TimeRange]] = {}

        for scope, entries in (data or {}).items():
            requirements: dict[str, Requirement] = {}
            for key, value in entries.items():
                if key == MEETING_TIMES_RANGES_KEY:
                    ranges = parse_time_ranges(key, value)
                    if scope == ALL_COURSES_KEY:
                        default_ranges = ranges
                    else:
                        course_ranges[scope] = ranges
                    continue
                if key not in KNOWN_REQUIREMENT_KEYS:
                    logger.debug(f"Requirement '{key}' in {scope} is not a standard key")
                requirements[key] = make_requirement(key, value)

            if scope == ALL_COURSES_KEY:
                defaults = requirements
            else:
                overrides[scope] = requirements

        return cls(defaults, overrides, default_ranges, course_ranges)

    def get(self, course_id: str, key: str) -> Requirement | None:
        """Get the requirement for key, course-specific first."""
        course = self._overrides.get(course_id, {})
        if key in course:
            return course[key]
        return self._defaults.get(key)

    def keys_for(self, course_id: str) -> list[str]:
        """Requirement keys that apply to a course, ALL keys first."""
        keys = list(self._defaults)
        keys.extend(k for k in self._overrides.get(course_id, {}) if k not in self._defaults)
        return keys

    def requirements_for(self, course_id: str) -> dict[str, Requirement]:
        return {key: self.get(course_id, key) for key in self.keys_for(course_id)}

    def declares(self, course_id: str, key: str) -> bool:
        """Check whether a requirement (or time ranges) applies to a course."""
        if key == MEETING_TIMES_RANGES_KEY:
            return self.meeting_times_ranges_for(course_id) is not None
        return self.get(course_id, key) is not None

    def meeting_times_ranges_for(self, course_id: str) -> list[TimeRange] | None:
        """Desired time windows for a course, or None if none are declared."""
        if course_id in self._course_ranges:
            return self._course_ranges[course_id]
        return self._default_ranges

    def to_dict(self) -> dict[str, dict[str, Any]]:
        result: dict[str, dict[str, Any]] = {}
        scopes = [(ALL_COURSES_KEY, self._defaults, self._default_ranges)]
        scopes.extend(
            (course_id, self._overrides.get(course_id, {}), self._course_ranges.get(course_id))
            for course_id in dict.fromkeys([*self._overrides, *self._course_ranges])
        )
        for scope, requirements, ranges in scopes:
            entries = {key: req.to_value() for key, req in requirements.items()}
            if ranges is not None:
                entries[MEETING_TIMES_RANGES_KEY] = [r.to_dict() for r in ranges]
            if entries or scope != ALL_COURSES_KEY:
                result[scope] = entries
        return result


def evaluate_section(section: Section, requirements: dict[str, Requirement]) -> Section:
    """Record which requirements a section meets.

    Increments the section's requirement count for every requirement and stores
    the met ones in section.requirements_met (key -> declared value).
    """
    for key, requirement in requirements.items():
        if key == MEETING_TIMES_RANGES_KEY:
            continue
        if check_match(section.get_attribute(key), requirement):
            section.requirements_met[key] = requirement.to_value()
        section.num_requirements += 1
    return section
