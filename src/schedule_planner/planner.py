"""Schedule planning requests, end to end."""

import logging
from pathlib import Path

from .catalog import CourseCatalog, JSONCatalog, normalize_campus, normalize_level
from .config import ConfigLoader
from .constants import OPEN_STATUS_KEY
from .generator import ScheduleGenerator
from .models import CourseQuery, PlanningOptions, PlanResult, Section, TravelRules
from .normalization import normalize_section, parse_course_id, parse_course_ids
from .ranker import rank_schedules
from .requirements import RequirementSet
from .scoring import annotate_sections, sort_sections

logger = logging.getLogger(__name__)


class SchedulePlanner:
    """
    Plans schedules for a list of courses.

    Resolves each course in the catalog, builds and annotates fresh sections,
    pre-sorts them, runs the backtracking generator and ranks the result.
    """

    def __init__(
        self,
        catalog: CourseCatalog,
        travel_rules: TravelRules | None = None,
        level: str = "undergraduate",
        campus: str = "nb",
    ):
        """
        Initialize the planner.

        Args:
            catalog: Source of raw section records.
            travel_rules: Rules between consecutive meetings. Defaults to WebReg rules.
            level: "undergraduate"/"graduate" (or "U"/"G").
            campus: "nb", "nk" or "cm".
        """
        self.catalog = catalog
        self.travel_rules = travel_rules or TravelRules.default()
        self.level = normalize_level(level)
        self.campus = normalize_campus(campus)

    def get_sections(
        self, query: CourseQuery, requirement_set: RequirementSet | None = None
    ) -> list[Section]:
        """Build, annotate and pre-sort the sections of one course.

        Raises:
            InvalidCourseReferenceError: If the course does not resolve
        """
        requirement_set = requirement_set or RequirementSet()
        records = self.catalog.get_course_sections(self.level, self.campus, query)
        sections = [normalize_section(record, query.id) for record in records]

        if requirement_set.declares(query.id, OPEN_STATUS_KEY):
            statuses = self.catalog.get_open_statuses(self.level, self.campus, query)
            for section, status in zip(sections, statuses):
                section.open_status = None if status is None else bool(status)

        annotate_sections(sections, query.id, requirement_set)
        return sort_sections(sections)

    def get_sections_of_courses(
        self, course_ids: list[str], requirement_set: RequirementSet | None = None
    ) -> list[list[Section]]:
        """Get the pre-sorted sections of every course, in request order.

        Raises:
            InvalidCourseReferenceError: If any course does not resolve
        """
        queries = parse_course_ids(course_ids)
        sections_of_courses = [self.get_sections(query, requirement_set) for query in queries]
        logger.info(
            f"Resolved {len(queries)} courses: "
            + ", ".join(f"{q.id} ({len(s)})" for q, s in zip(queries, sections_of_courses))
        )
        return sections_of_courses

    def plan(
        self,
        course_ids: list[str],
        requirement_set: RequirementSet | None = None,
        options: PlanningOptions | None = None,
    ) -> PlanResult:
        """
        Generate and rank schedules for the given courses.

        Args:
            course_ids: Course IDs of the form UNIT:SUBJECT:COURSE.
            requirement_set: Declared preferences ({"ALL": ..., "<courseID>": ...}).
            options: Batch size, sort key and output form.

        Returns:
            PlanResult with ranked schedules. When a course has no eligible
            sections the schedule list is empty and success is False.

        Raises:
            InvalidCourseReferenceError: If any course does not resolve
        """
        options = options or PlanningOptions()
        result = PlanResult(course_ids=list(course_ids), options=options)

        sections_of_courses = self.get_sections_of_courses(course_ids, requirement_set)

        for course_id, sections in zip(course_ids, sections_of_courses):
            if not sections:
                logger.warning(f"{course_id} has no valid sections")
                result.courses_without_sections.append(course_id)
        if not result.success:
            return result

        generator = ScheduleGenerator(
            course_ids=list(course_ids),
            sections_of_courses=sections_of_courses,
            rules=self.travel_rules,
            batch_size=options.batch_size,
            full_form=options.full_form,
        )
        generation = generator.generate()

        result.schedules = rank_schedules(generation.schedules, options.sort_keys)
        result.cap_reached = generation.cap_reached
        logger.info(
            f"{result.total_schedules} schedules generated. {result.matching_schedules} match."
        )
        return result


def create_planner(
    catalog_path: Path | str,
    config_dir: Path | str | None = None,
    level: str = "undergraduate",
    campus: str = "nb",
) -> tuple[SchedulePlanner, ConfigLoader]:
    """Create a planner from a catalog JSON file and a config directory.

    Returns:
        (planner, config) so callers can reuse the loaded requirements and options
    """
    config = ConfigLoader(config_dir=Path(config_dir) if config_dir else None)
    catalog = JSONCatalog.from_file(catalog_path)
    planner = SchedulePlanner(catalog, config.travel.rules, level=level, campus=campus)
    return planner, config


def get_course_sections(
    planner: SchedulePlanner, course_id: str, requirement_set: RequirementSet | None = None
) -> list[Section]:
    """Annotated, pre-sorted sections of a single course ID."""
    return planner.get_sections(parse_course_id(course_id), requirement_set)
