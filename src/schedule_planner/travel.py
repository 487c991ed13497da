"""Travel-time validation between consecutive meetings."""

from .models import MeetingInterval, Section, TravelCheck, TravelRules, TravelTime


def check_travel_time(travel_time: TravelTime, rules: TravelRules) -> TravelCheck:
    """Validate one gap against the travel rules.

    - no concrete time on either side: SKIP
    - negative gap (overlap): INVALID
    - same campus: gap >= min_travel_time
    - campus pair with an exception: gap >= exception.min_time
    - other campus pairs: gap >= min_travel_time_between_campuses
    """
    minutes = travel_time.minutes
    if minutes is None:
        return TravelCheck.SKIP
    if minutes < 0:
        return TravelCheck.INVALID

    a, b = travel_time.from_campus, travel_time.to_campus
    if a == b:
        required = rules.min_travel_time
    else:
        exception = rules.find_exception(a, b)
        if exception is not None:
            required = exception.min_time
        else:
            required = rules.min_travel_time_between_campuses

    return TravelCheck.VALID if minutes >= required else TravelCheck.INVALID


def get_sorted_meetings(sections: list[Section]) -> list[MeetingInterval]:
    """Flatten the sections' meetings and sort them by start."""
    meetings = [m for section in sections for m in section.meeting_times]
    meetings.sort(key=lambda m: m.sort_key)
    return meetings


def get_travel_times(sections: list[Section], rules: TravelRules) -> list[TravelTime] | None:
    """Compute and validate the travel times of a candidate combination.

    Args:
        sections: One section per course, in any order
        rules: Travel rules to validate against

    Returns:
        The relevant travel times, or None as soon as one gap is invalid
    """
    meetings = get_sorted_meetings(sections)
    travel_times: list[TravelTime] = []

    for first, second in zip(meetings, meetings[1:]):
        minutes = None
        if first.end is not None and second.start is not None:
            minutes = second.start - first.end
        travel_time = TravelTime(
            from_campus=first.location.campus,
            to_campus=second.location.campus,
            minutes=minutes,
        )

        check = check_travel_time(travel_time, rules)
        if check == TravelCheck.INVALID:
            return None
        if check == TravelCheck.SKIP:
            continue
        travel_times.append(travel_time)

    return travel_times


def is_valid_combination(sections: list[Section], rules: TravelRules) -> bool:
    return get_travel_times(sections, rules) is not None
