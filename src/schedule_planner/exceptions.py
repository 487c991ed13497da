"""Custom exceptions for the schedule planner."""


class PlannerError(Exception):
    """Base exception for planner errors."""

    pass


class InvalidCourseReferenceError(PlannerError):
    """A requested course does not resolve in the catalog."""

    def __init__(self, course_id: str, message: str | None = None):
        self.course_id = course_id
        super().__init__(message or f"{course_id} does not resolve to a known course")


class InvalidCourseIdError(InvalidCourseReferenceError):
    """Course ID is not of the form UNIT:SUBJECT:COURSE."""

    def __init__(self, course_id: str):
        super().__init__(
            course_id,
            f"Invalid course ID '{course_id}'. Expected UNIT:SUBJECT:COURSE, e.g. 01:198:111",
        )


class InvalidSubjectError(InvalidCourseReferenceError):
    """Subject code not found for the level and campus."""

    def __init__(self, course_id: str, subject_code: str, collection: str):
        self.subject_code = subject_code
        self.collection = collection
        super().__init__(
            course_id,
            f"{course_id} in {collection} has an invalid subject code ({subject_code})",
        )


class InvalidCourseError(InvalidCourseReferenceError):
    """Course code not found within a known subject."""

    def __init__(self, course_id: str, course_code: str, collection: str):
        self.course_code = course_code
        self.collection = collection
        super().__init__(
            course_id,
            f"{course_id} in {collection} is an invalid course ({course_code})",
        )


class MalformedMeetingTimeError(PlannerError):
    """Meeting time record cannot be converted to a weekly interval."""

    def __init__(self, message: str, index: str | None = None):
        self.index = index
        location = f" in section {index}" if index else ""
        super().__init__(f"Malformed meeting time{location}: {message}")


class InvalidRequirementError(PlannerError):
    """Requirement value has an unsupported shape."""

    def __init__(self, key: str, value: object):
        self.key = key
        self.value = value
        super().__init__(f"Unsupported requirement value for '{key}': {value!r}")


class ConfigError(PlannerError):
    """Configuration file is malformed."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Invalid configuration in '{path}': {message}")
