"""Data models for the schedule planner."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Self

from .constants import (
    ASYNC_SENTINEL,
    DEFAULT_BATCH_SIZE,
    DEFAULT_BY_POINTS,
    DEFAULT_FULL_FORM,
    DEFAULT_MIN_TRAVEL_TIME,
    DEFAULT_MIN_TRAVEL_TIME_BETWEEN_CAMPUSES,
    DEFAULT_TRAVEL_EXCEPTIONS,
)


class TravelCheck(Enum):
    """Outcome of validating one gap between consecutive meetings."""

    VALID = "valid"
    INVALID = "invalid"
    SKIP = "skip"


class SortKey(str, Enum):
    """Schedule metrics usable as sort keys."""

    REQUIREMENTS = "percentRequirementsMet"
    POINTS = "points"


@dataclass(frozen=True)
class CourseQuery:
    """A requested course, parsed from UNIT:SUBJECT:COURSE.

    The unit code is discarded; only subject and course code resolve a course.
    """

    id: str
    subject_code: str
    course_code: str


@dataclass(frozen=True)
class Location:
    """Where a meeting takes place."""

    campus: str = ""
    building: str = ""
    room: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"campus": self.campus, "building": self.building, "room": self.room}


@dataclass(frozen=True)
class MeetingMode:
    """How a meeting is delivered."""

    is_asynchronous: bool = False
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"isAsynchronous": self.is_asynchronous, "description": self.description}


@dataclass(frozen=True)
class MeetingInterval:
    """A recurring weekly meeting on the Monday-origin minute scale.

    Attributes:
        start: Start minute (day*1440 + hour*60 + minute), None if asynchronous
        end: End minute, None if asynchronous
        location: Campus, building and room
        mode: Delivery mode
    """

    start: int | None
    end: int | None
    location: Location = field(default_factory=Location)
    mode: MeetingMode = field(default_factory=MeetingMode)

    @property
    def is_concrete(self) -> bool:
        """True if the meeting has both a start and an end time."""
        return self.start is not None and self.end is not None

    @property
    def duration(self) -> int:
        """Length in minutes (0 for asynchronous meetings)."""
        if not self.is_concrete:
            return 0
        return self.end - self.start

    @property
    def sort_key(self) -> int:
        return self.start if self.start is not None else ASYNC_SENTINEL

    def to_dict(self) -> dict[str, Any]:
        return {
            "startMinute": self.start,
            "endMinute": self.end,
            "location": self.location.to_dict(),
            "mode": self.mode.to_dict(),
        }


@dataclass(frozen=True)
class TimeRange:
    """A desired weekly time window used for scoring."""

    start: int
    end: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a TimeRange from {startMinute, endMinute} or {startTime, endTime}."""
        start = data.get("startMinute", data.get("startTime"))
        end = data.get("endMinute", data.get("endTime"))
        return cls(start=int(start), end=int(end))

    def to_dict(self) -> dict[str, int]:
        return {"startMinute": self.start, "endMinute": self.end}


@dataclass
class Section:
    """One offered instance of a course, annotated for planning.

    Attributes:
        index: Catalog index (registration number)
        number: Section number within the course
        course_id: ID of the course this section belongs to
        meeting_times: Concrete meeting intervals sorted by start
        instructors: Instructor records, e.g. [{"name": "KANIA, JAY"}]
        open_status: Whether seats are open (None if unknown)
        printed: Printed flag as stored in the catalog ("Y"/"N")
        attributes: Remaining raw catalog attributes
        points: Preference score accumulator
        requirements_met: Requirement key -> requirement value, for met requirements
        num_requirements: Number of requirements evaluated against the section
    """

    index: str
    number: str
    course_id: str
    meeting_times: list[MeetingInterval] = field(default_factory=list)
    instructors: list[dict[str, Any]] = field(default_factory=list)
    open_status: bool | None = None
    printed: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)
    points: float = 0.0
    requirements_met: dict[str, Any] = field(default_factory=dict)
    num_requirements: int = 0

    @property
    def earliest_meeting_time(self) -> int:
        """Start of the first meeting, or the end-of-week sentinel if none."""
        if not self.meeting_times:
            return ASYNC_SENTINEL
        return self.meeting_times[0].sort_key

    @property
    def num_requirements_met(self) -> int:
        return len(self.requirements_met)

    @property
    def percent_requirements_met(self) -> float:
        """Fraction of declared requirements met (1.0 when none are declared)."""
        if self.num_requirements == 0:
            return 1.0
        return self.num_requirements_met / self.num_requirements

    def get_attribute(self, name: str) -> Any:
        """Get a catalog attribute by its catalog name, or None if absent."""
        known = {
            "index": self.index,
            "number": self.number,
            "instructors": self.instructors,
            "openStatus": self.open_status,
            "printed": self.printed,
        }
        if name in known:
            return known[name]
        return self.attributes.get(name)

    def to_dict(self) -> dict[str, Any]:
        """Convert section to dictionary."""
        return {
            **self.attributes,
            "index": self.index,
            "number": self.number,
            "courseId": self.course_id,
            "instructors": self.instructors,
            "openStatus": self.open_status,
            "printed": self.printed,
            "meetingTimes": [m.to_dict() for m in self.meeting_times],
            "earliestMeetingTime": self.earliest_meeting_time,
            "points": self.points,
            "requirementsMet": self.requirements_met,
            "numRequirements": self.num_requirements,
        }


@dataclass(frozen=True)
class TravelRuleException:
    """Campus pair with its own minimum travel time (order-independent)."""

    campus_a: str
    campus_b: str
    min_time: int

    def matches(self, campus1: str, campus2: str) -> bool:
        return {campus1, campus2} == {self.campus_a, self.campus_b}

    def to_dict(self) -> dict[str, Any]:
        return {"campus1": self.campus_a, "campus2": self.campus_b, "minTime": self.min_time}


@dataclass(frozen=True)
class TravelRules:
    """Minimum gaps between consecutive meetings."""

    min_travel_time: int = DEFAULT_MIN_TRAVEL_TIME
    min_travel_time_between_campuses: int = DEFAULT_MIN_TRAVEL_TIME_BETWEEN_CAMPUSES
    exceptions: tuple[TravelRuleException, ...] = ()

    @classmethod
    def default(cls) -> Self:
        """WebReg travel rules."""
        return cls.from_dict({"minTravelTimeExceptions": DEFAULT_TRAVEL_EXCEPTIONS})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create TravelRules from the travel-rules.json layout."""
        exceptions = tuple(
            TravelRuleException(
                campus_a=entry["campus1"],
                campus_b=entry["campus2"],
                min_time=int(entry["minTime"]),
            )
            for entry in data.get("minTravelTimeExceptions", [])
        )
        return cls(
            min_travel_time=int(data.get("minTravelTime", DEFAULT_MIN_TRAVEL_TIME)),
            min_travel_time_between_campuses=int(
                data.get("minTravelTimeBetweenCampuses", DEFAULT_MIN_TRAVEL_TIME_BETWEEN_CAMPUSES)
            ),
            exceptions=exceptions,
        )

    def find_exception(self, campus1: str, campus2: str) -> TravelRuleException | None:
        for exception in self.exceptions:
            if exception.matches(campus1, campus2):
                return exception
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "minTravelTime": self.min_travel_time,
            "minTravelTimeBetweenCampuses": self.min_travel_time_between_campuses,
            "minTravelTimeExceptions": [e.to_dict() for e in self.exceptions],
        }


@dataclass(frozen=True)
class TravelTime:
    """Gap between two consecutive meetings of a candidate schedule."""

    from_campus: str
    to_campus: str
    minutes: int | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "fromCampusName": self.from_campus,
            "toCampusName": self.to_campus,
            "time": self.minutes,
        }


def _get_flag(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


@dataclass(frozen=True)
class PlanningOptions:
    """Options controlling generation and output.

    Attributes:
        batch_size: Cap on emitted schedules (None for no cap)
        by_points: Sort by points first instead of requirements met
        full_form: Emit full section records instead of one-line summaries
    """

    batch_size: int | None = DEFAULT_BATCH_SIZE
    by_points: bool = DEFAULT_BY_POINTS
    full_form: bool = DEFAULT_FULL_FORM

    def __post_init__(self) -> None:
        if self.batch_size is not None and self.batch_size < 1:
            raise ValueError(f"batch_size must be a positive integer, got {self.batch_size}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        batch_size = data.get("batchSize", DEFAULT_BATCH_SIZE)
        return cls(
            batch_size=int(batch_size) if batch_size is not None else None,
            by_points=_get_flag(data, "byPoints", DEFAULT_BY_POINTS),
            full_form=_get_flag(data, "fullForm", DEFAULT_FULL_FORM),
        )

    @property
    def sort_keys(self) -> tuple[SortKey, SortKey]:
        """(primary, secondary) schedule sort keys."""
        if self.by_points:
            return SortKey.POINTS, SortKey.REQUIREMENTS
        return SortKey.REQUIREMENTS, SortKey.POINTS

    def to_dict(self) -> dict[str, Any]:
        return {
            "batchSize": self.batch_size,
            "byPoints": self.by_points,
            "fullForm": self.full_form,
        }


@dataclass(frozen=True, eq=False)
class Schedule:
    """One complete, validated assignment of a section to every course.

    Courses are ordered by each chosen section's earliest meeting time.

    Attributes:
        course_ids: Course IDs in schedule order
        sections: Chosen sections, parallel to course_ids
        entries: Full section records or one-line summaries, parallel to course_ids
        points: Mean of the sections' points
        percent_requirements_met: Requirements met over requirements declared
        requirements_met: Course ID -> that section's met requirements
    """

    course_ids: tuple[str, ...]
    sections: tuple[Section, ...]
    entries: tuple[Any, ...]
    points: float
    percent_requirements_met: float
    requirements_met: dict[str, dict[str, Any]]

    @property
    def key(self) -> tuple[tuple[str, str], ...]:
        """(course ID, section index) pairs identifying the combination."""
        return tuple(zip(self.course_ids, (s.index for s in self.sections)))

    @property
    def is_full_match(self) -> bool:
        return self.percent_requirements_met == 1

    def get_metric(self, sort_key: SortKey) -> float:
        if sort_key == SortKey.POINTS:
            return self.points
        return self.percent_requirements_met

    def to_dict(self) -> dict[str, Any]:
        """Convert schedule to dictionary for JSON serialization."""
        return {
            "list": [e.to_dict() if isinstance(e, Section) else e for e in self.entries],
            "points": self.points,
            "percentRequirementsMet": self.percent_requirements_met,
            "requirementsMet": self.requirements_met,
        }


@dataclass
class GenerationResult:
    """Output of one backtracking search."""

    schedules: list[Schedule] = field(default_factory=list)
    cap_reached: bool = False
    combinations_checked: int = 0


@dataclass
class PlanResult:
    """Result of a planning request."""

    course_ids: list[str] = field(default_factory=list)
    schedules: list[Schedule] = field(default_factory=list)
    options: PlanningOptions = field(default_factory=PlanningOptions)
    cap_reached: bool = False
    courses_without_sections: list[str] = field(default_factory=list)
    generation_date: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def success(self) -> bool:
        """False when some course had no eligible sections."""
        return not self.courses_without_sections

    @property
    def total_schedules(self) -> int:
        return len(self.schedules)

    @property
    def matching_schedules(self) -> int:
        """Number of schedules meeting every declared requirement."""
        return sum(1 for s in self.schedules if s.is_full_match)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "generation_date": self.generation_date,
            "course_ids": self.course_ids,
            "options": self.options.to_dict(),
            "success": self.success,
            "cap_reached": self.cap_reached,
            "courses_without_sections": self.courses_without_sections,
            "total_schedules": self.total_schedules,
            "matching_schedules": self.matching_schedules,
            "schedules": [s.to_dict() for s in self.schedules],
        }
