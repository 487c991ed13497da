"""Schedule Planner - course schedule generation from section catalogs.

This module enumerates combinations of one section per requested course,
rejects combinations whose meetings overlap or leave too little travel time
between campuses, and ranks the rest by how well they satisfy declared
preferences.

Example usage:
    from schedule_planner import JSONCatalog, RequirementSet, SchedulePlanner

    catalog = JSONCatalog.from_file("catalog.json")
    planner = SchedulePlanner(catalog, level="undergraduate", campus="nb")
    requirements = RequirementSet.from_dict({
        "ALL": {"printed": "Y", "openStatus": True},
        "01:198:211": {"instructors": {"name": "KANIA, JAY"}},
    })
    result = planner.plan(["01:640:251", "01:198:211"], requirements)

    print(f"{result.total_schedules} schedules, {result.matching_schedules} match")

    # Export to JSON
    from schedule_planner.exporters import JSONExporter
    JSONExporter().export(result, "schedules.json")
"""

from .catalog import CourseCatalog, JSONCatalog
from .config import ConfigLoader
from .exceptions import (
    ConfigError,
    InvalidCourseError,
    InvalidCourseIdError,
    InvalidCourseReferenceError,
    InvalidRequirementError,
    InvalidSubjectError,
    MalformedMeetingTimeError,
    PlannerError,
)
from .exporters import CSVExporter, ExcelExporter, JSONExporter, get_exporter
from .generator import ScheduleGenerator, generate_schedules
from .models import (
    CourseQuery,
    GenerationResult,
    Location,
    MeetingInterval,
    MeetingMode,
    PlanningOptions,
    PlanResult,
    Schedule,
    Section,
    SortKey,
    TimeRange,
    TravelCheck,
    TravelRuleException,
    TravelRules,
    TravelTime,
)
from .planner import SchedulePlanner, create_planner
from .requirements import RequirementSet

__version__ = "0.1.0"

__all__ = [
    # Main planner
    "SchedulePlanner",
    "create_planner",
    "ScheduleGenerator",
    "generate_schedules",
    # Catalog
    "CourseCatalog",
    "JSONCatalog",
    # Configuration
    "ConfigLoader",
    "RequirementSet",
    # Models
    "CourseQuery",
    "GenerationResult",
    "Location",
    "MeetingInterval",
    "MeetingMode",
    "PlanningOptions",
    "PlanResult",
    "Schedule",
    "Section",
    "SortKey",
    "TimeRange",
    "TravelCheck",
    "TravelRuleException",
    "TravelRules",
    "TravelTime",
    # Exporters
    "JSONExporter",
    "CSVExporter",
    "ExcelExporter",
    "get_exporter",
    # Exceptions
    "PlannerError",
    "InvalidCourseReferenceError",
    "InvalidCourseIdError",
    "InvalidSubjectError",
    "InvalidCourseError",
    "MalformedMeetingTimeError",
    "InvalidRequirementError",
    "ConfigError",
]
