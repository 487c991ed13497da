"""Section scoring and per-course ordering."""

from .models import MeetingInterval, Section, TimeRange
from .requirements import RequirementSet, evaluate_section


def get_percent_in_ranges(
    meeting_times: list[MeetingInterval], ranges: list[TimeRange]
) -> float:
    """Fraction of meeting minutes falling inside the desired time ranges.

    Overlap is summed over every (meeting, range) pair. A section without
    meetings has no time to violate and scores 1.

    Args:
        meeting_times: The section's meeting intervals
        ranges: Desired weekly windows, e.g. [TimeRange(600, 1000), TimeRange(2040, 2440)]

    Returns:
        matched minutes / total meeting minutes
    """
    concrete = [m for m in meeting_times if m.is_concrete]
    if not concrete:
        return 1.0

    total_time = 0
    match_time = 0
    for meeting in concrete:
        for time_range in ranges:
            overlap = min(meeting.end, time_range.end) - max(meeting.start, time_range.start)
            match_time += max(overlap, 0)
        total_time += meeting.duration

    if total_time == 0:
        return 1.0
    return match_time / total_time


def score_section(section: Section, ranges: list[TimeRange] | None) -> float:
    """Add the section's preference terms to its points.

    Only time-window overlap contributes for now; further preference
    dimensions add their own terms here.
    """
    if ranges is not None:
        section.points += get_percent_in_ranges(section.meeting_times, ranges)
    return section.points


def annotate_sections(
    sections: list[Section], course_id: str, requirement_set: RequirementSet
) -> list[Section]:
    """Score every section of a course and evaluate its requirements."""
    ranges = requirement_set.meeting_times_ranges_for(course_id)
    requirements = requirement_set.requirements_for(course_id)
    for section in sections:
        score_section(section, ranges)
        evaluate_section(section, requirements)
    return sections


def sort_sections(sections: list[Section]) -> list[Section]:
    """Order sections by requirements met, then points (both descending).

    Ties keep their input order.
    """
    return sorted(
        sections,
        key=lambda s: (s.percent_requirements_met, s.points),
        reverse=True,
    )
