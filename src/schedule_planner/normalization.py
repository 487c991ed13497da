"""Normalization of raw catalog records into weekly minute intervals."""

import logging
from typing import Any

import pandas as pd

from .constants import DAY_OFFSETS, MINUTES_PER_DAY, MINUTES_PER_HOUR, PM_CODE_OFFSETS
from .exceptions import InvalidCourseIdError, MalformedMeetingTimeError
from .models import CourseQuery, Location, MeetingInterval, MeetingMode, Section

logger = logging.getLogger(__name__)

# Section record fields mapped onto Section attributes
_SECTION_FIELDS = {"index", "number", "instructors", "openStatus", "printed", "meetingTimes"}


def parse_course_id(course_id: str) -> CourseQuery:
    """Parse a course ID of the form UNIT:SUBJECT:COURSE.

    The unit code is irrelevant and discarded, e.g. "01:198:111" -> subject "198",
    course "111".

    Raises:
        InvalidCourseIdError: If the ID has fewer than two fields
    """
    parts = str(course_id).strip().split(":")
    if len(parts) < 2 or not parts[-2] or not parts[-1]:
        raise InvalidCourseIdError(course_id)
    return CourseQuery(id=course_id, subject_code=parts[-2], course_code=parts[-1])


def parse_course_ids(course_ids: list[str]) -> list[CourseQuery]:
    return [parse_course_id(course_id) for course_id in course_ids]


def _is_missing(value: Any) -> bool:
    return value is None or value == "" or pd.isna(value)


def get_numerical_time(time: str, pm_code: str, day: str) -> int:
    """Convert an HHMM catalog time to a minute offset within the week.

    Hours are taken modulo 12 and shifted by the AM/PM code, so "1230" with
    pm code "P" on "M" is 12:30 on Monday (750).

    Args:
        time: Time string like "0940" or "09:40"
        pm_code: "A" or "P"
        day: Day code (M, T, W, TH, F, S)

    Returns:
        day*1440 + hour*60 + minute

    Raises:
        MalformedMeetingTimeError: On unknown codes or unparsable times
    """
    if day not in DAY_OFFSETS:
        raise MalformedMeetingTimeError(f"unknown day code {day!r}")
    if pm_code not in PM_CODE_OFFSETS:
        raise MalformedMeetingTimeError(f"unknown AM/PM code {pm_code!r}")

    digits = str(time).strip().replace(":", "")
    if len(digits) != 4 or not digits.isdigit():
        raise MalformedMeetingTimeError(f"time {time!r} is not HHMM")

    hours = int(digits[:2]) % 12
    minutes = int(digits[2:])
    if minutes >= MINUTES_PER_HOUR:
        raise MalformedMeetingTimeError(f"time {time!r} has invalid minutes")

    return (
        DAY_OFFSETS[day] * MINUTES_PER_DAY
        + (PM_CODE_OFFSETS[pm_code] + hours) * MINUTES_PER_HOUR
        + minutes
    )


def normalize_meeting(raw: dict[str, Any], index: str | None = None) -> MeetingInterval | None:
    """Convert one raw meeting record into a MeetingInterval.

    A meeting without start or end time is asynchronous and yields None. When the
    end falls before the start (the class crosses noon but carries an AM code),
    the end is recomputed in the PM half.

    Raises:
        MalformedMeetingTimeError: If the record cannot be converted, or is still
            inconsistent after the AM/PM correction
    """
    start_time = raw.get("startTime")
    end_time = raw.get("endTime")
    if _is_missing(start_time) or _is_missing(end_time):
        return None

    day = raw.get("meetingDay")
    pm_code = raw.get("pmCode")
    try:
        start = get_numerical_time(start_time, pm_code, day)
        end = get_numerical_time(end_time, pm_code, day)
        if end < start:
            end = get_numerical_time(end_time, "P", day)
    except MalformedMeetingTimeError as e:
        raise MalformedMeetingTimeError(str(e), index) from e

    if end < start:
        raise MalformedMeetingTimeError(
            f"{start_time}-{end_time} ({pm_code}) ends before it starts", index
        )

    return MeetingInterval(
        start=start,
        end=end,
        location=Location(
            campus=raw.get("campusName") or "",
            building=raw.get("buildingCode") or "",
            room=raw.get("roomNumber") or "",
        ),
        mode=MeetingMode(
            is_asynchronous=False,
            description=raw.get("meetingModeDesc") or "",
        ),
    )


def normalize_meeting_times(
    raw_meetings: list[dict[str, Any]] | None, index: str | None = None
) -> list[MeetingInterval]:
    """Convert raw meeting records to intervals sorted by start.

    Asynchronous meetings are left out. Malformed meetings are logged and dropped.
    """
    intervals: list[MeetingInterval] = []
    for raw in raw_meetings or []:
        try:
            interval = normalize_meeting(raw, index)
        except MalformedMeetingTimeError as e:
            logger.warning(f"Dropping meeting: {e}")
            continue
        if interval is not None:
            intervals.append(interval)

    intervals.sort(key=lambda m: m.start)
    return intervals


def normalize_section(record: dict[str, Any], course_id: str) -> Section:
    """Build a fresh Section from a raw catalog section record."""
    index = str(record.get("index", ""))
    open_status = record.get("openStatus")
    return Section(
        index=index,
        number=str(record.get("number", "")),
        course_id=course_id,
        meeting_times=normalize_meeting_times(record.get("meetingTimes"), index),
        instructors=list(record.get("instructors") or []),
        open_status=None if open_status is None else bool(open_status),
        printed=record.get("printed"),
        attributes={k: v for k, v in record.items() if k not in _SECTION_FIELDS},
    )
