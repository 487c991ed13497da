"""Constants for schedule planning."""

# Weekly minute scale (Monday 00:00 = 0)
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
MINUTES_PER_WEEK = 7 * MINUTES_PER_DAY  # 10080

# Earliest-meeting-time of a section with no concrete meetings.
# Sorts fully online sections after every scheduled one.
ASYNC_SENTINEL = MINUTES_PER_WEEK

# Catalog day codes -> day index
DAY_OFFSETS = {
    "M": 0,
    "T": 1,
    "W": 2,
    "TH": 3,
    "F": 4,
    "S": 5,
}

# AM/PM codes -> hour offset
PM_CODE_OFFSETS = {
    "A": 0,
    "P": 12,
}

# Day index -> label used in section summaries
DAY_LABELS = {
    0: "MON",
    1: "TUE",
    2: "WED",
    3: "THU",
    4: "FRI",
    5: "SAT",
    6: "SUN",
}

# Requirement keys
MEETING_TIMES_RANGES_KEY = "meetingTimesRanges"
OPEN_STATUS_KEY = "openStatus"
ALL_COURSES_KEY = "ALL"
KNOWN_REQUIREMENT_KEYS = {"printed", "openStatus", "instructors", "number", MEETING_TIMES_RANGES_KEY}

# Default travel rules (WebReg)
DEFAULT_MIN_TRAVEL_TIME = 20
DEFAULT_MIN_TRAVEL_TIME_BETWEEN_CAMPUSES = 40
DEFAULT_TRAVEL_EXCEPTIONS = [
    {"campus1": "COLLEGE AVENUE", "campus2": "DOWNTOWN NB", "minTime": 20},
    {"campus1": "BUSCH", "campus2": "LIVINGSTON", "minTime": 20},
]

# Default planning options
DEFAULT_BATCH_SIZE = 500
DEFAULT_BY_POINTS = False
DEFAULT_FULL_FORM = False

# Catalog levels and campuses
LEVELS = {"U": "undergraduate", "G": "graduate"}
VALID_LEVELS = {"undergraduate", "graduate"}
VALID_CAMPUSES = {"nb", "nk", "cm"}

# Section summaries
ASYNC_MEETING_LABEL = "Online/Asynchronous Content"
