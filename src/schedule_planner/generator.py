"""Backtracking schedule generator.

Walks the Cartesian product of the per-course section lists depth first, in
their pre-sorted order. Every candidate prefix is revalidated from scratch by
the travel-time validator; invalid branches are pruned, valid complete
combinations become schedules. The search stops for good once batch_size
schedules have been emitted.
"""

import logging

from .models import GenerationResult, Schedule, Section, TravelRules
from .ranker import build_schedule
from .travel import get_travel_times

logger = logging.getLogger(__name__)


class ScheduleGenerator:
    """Enumerates valid one-section-per-course combinations."""

    def __init__(
        self,
        course_ids: list[str],
        sections_of_courses: list[list[Section]],
        rules: TravelRules,
        batch_size: int | None = None,
        full_form: bool = False,
    ):
        """
        Initialize the generator.

        Args:
            course_ids: Course IDs, parallel to sections_of_courses.
            sections_of_courses: Pre-sorted section list for each course.
            rules: Travel rules every combination must satisfy.
            batch_size: Stop after this many schedules (None for no cap).
            full_form: Emit full section records instead of summaries.
        """
        if len(course_ids) != len(sections_of_courses):
            raise ValueError("course_ids and sections_of_courses must be parallel lists")
        if batch_size is not None and batch_size < 1:
            raise ValueError(f"batch_size must be a positive integer, got {batch_size}")

        self.course_ids = course_ids
        self.sections_of_courses = sections_of_courses
        self.rules = rules
        self.batch_size = batch_size
        self.full_form = full_form
        self._combinations_checked = 0

    def generate(self) -> GenerationResult:
        """Run the search.

        Returns:
            GenerationResult with schedules in emission order and whether the
            batch cap cut the search short.
        """
        schedules: list[Schedule] = []
        self._combinations_checked = 0

        if not self.course_ids or any(not s for s in self.sections_of_courses):
            return GenerationResult()

        cap_reached = self._push_schedules([], schedules)

        if cap_reached:
            logger.info(f"Batch size of {self.batch_size} reached; search stopped early")
        logger.info(
            f"Generated {len(schedules)} schedules "
            f"({self._combinations_checked} combinations checked)"
        )
        return GenerationResult(
            schedules=schedules,
            cap_reached=cap_reached,
            combinations_checked=self._combinations_checked,
        )

    def _push_schedules(self, chosen: list[Section], schedules: list[Schedule]) -> bool:
        """Try every section of the next course after the validated prefix.

        Returns:
            True once the batch cap is reached
        """
        depth = len(chosen)
        is_last = depth + 1 == len(self.course_ids)

        for pointer, section in enumerate(self.sections_of_courses[depth]):
            candidate = chosen + [section]
            self._combinations_checked += 1

            if get_travel_times(candidate, self.rules) is None:
                logger.debug(
                    f"Pruned {self.course_ids[depth]} section {section.index} "
                    f"(pointer {pointer}) at depth {depth}"
                )
            elif not is_last:
                if self._push_schedules(candidate, schedules):
                    return True
            else:
                schedules.append(build_schedule(self.course_ids, candidate, self.full_form))

            if self._is_cap_reached(schedules):
                return True

        return False

    def _is_cap_reached(self, schedules: list[Schedule]) -> bool:
        return self.batch_size is not None and len(schedules) >= self.batch_size


def generate_schedules(
    course_ids: list[str],
    sections_of_courses: list[list[Section]],
    rules: TravelRules,
    batch_size: int | None = None,
    full_form: bool = False,
) -> GenerationResult:
    """Convenience wrapper around ScheduleGenerator."""
    generator = ScheduleGenerator(course_ids, sections_of_courses, rules, batch_size, full_form)
    return generator.generate()
