"""Schedule assembly and ranking."""

from .constants import ASYNC_MEETING_LABEL, DAY_LABELS, MINUTES_PER_DAY, MINUTES_PER_HOUR
from .models import Schedule, Section, SortKey


def format_day_time(minute: int) -> tuple[str, str]:
    """Convert a weekly minute offset to a (day, time) pair.

    Example: 2190 -> ("TUE", "12:30 PM")
    """
    day = DAY_LABELS[(minute // MINUTES_PER_DAY) % len(DAY_LABELS)]
    minute_of_day = minute % MINUTES_PER_DAY
    h24 = minute_of_day // MINUTES_PER_HOUR
    mins = minute_of_day % MINUTES_PER_HOUR
    ampm = "AM" if h24 < 12 else "PM"
    h12 = h24 % 12
    if h12 == 0:
        h12 = 12
    return day, f"{h12}:{mins:02d} {ampm}"


def format_meetings(section: Section) -> str:
    """Meetings of a section, e.g. "MON, 10:20 AM to 11:40 AM | THU, 10:20 AM to 11:40 AM"."""
    meetings = []
    for meeting in section.meeting_times:
        if not meeting.is_concrete:
            meetings.append(ASYNC_MEETING_LABEL)
            continue
        day, start = format_day_time(meeting.start)
        _, end = format_day_time(meeting.end)
        meetings.append(f"{day}, {start} to {end}")
    if not meetings:
        meetings.append(ASYNC_MEETING_LABEL)

    return " | ".join(meetings)


def format_section_summary(course_id: str, section: Section) -> str:
    """One-line summary of a section and its meetings.

    Example:
        "section: 01:198:211:01, index: 09214 --> MON, 10:20 AM to 11:40 AM |
        THU, 10:20 AM to 11:40 AM"
    """
    return f"section: {course_id}:{section.number}, index: {section.index} --> {format_meetings(section)}"


def build_schedule(
    course_ids: list[str], sections: list[Section], full_form: bool = False
) -> Schedule:
    """Assemble a Schedule from parallel course IDs and chosen sections.

    Courses are reordered by their section's earliest meeting time; fully
    asynchronous sections go last. Points are averaged over sections, and
    requirements met are totalled over requirements declared (1.0 when none
    are declared).
    """
    order = sorted(range(len(sections)), key=lambda i: sections[i].earliest_meeting_time)
    ordered_ids = tuple(course_ids[i] for i in order)
    ordered_sections = tuple(sections[i] for i in order)

    num_met = sum(s.num_requirements_met for s in ordered_sections)
    num_total = sum(s.num_requirements for s in ordered_sections)
    total_points = sum(s.points for s in ordered_sections)

    if full_form:
        entries = ordered_sections
    else:
        entries = tuple(
            format_section_summary(course_id, section)
            for course_id, section in zip(ordered_ids, ordered_sections)
        )

    return Schedule(
        course_ids=ordered_ids,
        sections=ordered_sections,
        entries=entries,
        points=total_points / len(ordered_sections) if ordered_sections else 0.0,
        percent_requirements_met=num_met / num_total if num_total else 1.0,
        requirements_met={
            course_id: dict(section.requirements_met)
            for course_id, section in zip(ordered_ids, ordered_sections)
        },
    )


def rank_schedules(
    schedules: list[Schedule], sort_keys: tuple[SortKey, SortKey] = (SortKey.REQUIREMENTS, SortKey.POINTS)
) -> list[Schedule]:
    """Sort schedules in place by (primary, secondary) key, both descending.

    Ties on both keys keep their generation order.
    """
    primary, secondary = sort_keys
    schedules.sort(key=lambda s: (s.get_metric(primary), s.get_metric(secondary)), reverse=True)
    return schedules
