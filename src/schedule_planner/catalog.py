"""Course catalog access.

The planner only needs, per course, the raw section records and (when an
openStatus requirement is declared) their current open statuses. CourseCatalog
is that seam; JSONCatalog serves it from a catalog document laid out as:

    {
      "collections": {
        "undergraduate-nb": [
          {"code": "198", "description": "COMPUTER SCIENCE",
           "course_211": {"title": "COMPUTER ARCHITECTURE", "sections": ["09214", ...]}}
        ]
      },
      "sections": [{"index": "09214", "number": "01", "meetingTimes": [...], ...}],
      "openStatuses": {"09214": true}
    }
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Self

from .constants import LEVELS, VALID_CAMPUSES, VALID_LEVELS
from .exceptions import InvalidCourseError, InvalidSubjectError
from .models import CourseQuery

logger = logging.getLogger(__name__)


def normalize_level(level: str) -> str:
    """Map "U"/"G"/"undergraduate"/"graduate" to the full level name."""
    value = LEVELS.get(level.upper(), level.lower())
    if value not in VALID_LEVELS:
        raise ValueError(f"Invalid level: {level}. Use one of: U, G, {', '.join(sorted(VALID_LEVELS))}")
    return value


def normalize_campus(campus: str) -> str:
    """Map a campus code ("NB", "nb", ...) to its lower-case form."""
    value = campus.lower()
    if value not in VALID_CAMPUSES:
        raise ValueError(f"Invalid campus: {campus}. Use one of: {', '.join(sorted(VALID_CAMPUSES))}")
    return value


def get_collection_name(level: str, campus: str) -> str:
    return f"{normalize_level(level)}-{normalize_campus(campus)}"


class CourseCatalog(ABC):
    """Source of raw section records."""

    @abstractmethod
    def get_course_sections(self, level: str, campus: str, query: CourseQuery) -> list[dict[str, Any]]:
        """Get the raw section records of a course.

        Raises:
            InvalidSubjectError: If the subject is unknown
            InvalidCourseError: If the course is unknown within its subject
        """
        pass

    def get_open_statuses(self, level: str, campus: str, query: CourseQuery) -> list[bool | None]:
        """Get current open statuses, parallel to get_course_sections().

        Defaults to the statuses stored on the section records.
        """
        return [record.get("openStatus") for record in self.get_course_sections(level, campus, query)]


class JSONCatalog(CourseCatalog):
    """Catalog backed by an in-memory catalog document."""

    def __init__(self, data: dict[str, Any]):
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        for name, subjects in data.get("collections", {}).items():
            self._collections[name] = {str(subject["code"]): subject for subject in subjects}

        self._sections: dict[str, dict[str, Any]] = {
            str(record["index"]): record for record in data.get("sections", [])
        }
        self._open_statuses: dict[str, bool] = {
            str(index): status for index, status in data.get("openStatuses", {}).items()
        }

    @classmethod
    def from_file(cls, path: Path | str) -> Self:
        """Load a catalog document from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return cls(json.load(f))

    def _get_course(self, level: str, campus: str, query: CourseQuery) -> dict[str, Any]:
        collection = get_collection_name(level, campus)
        subject = self._collections.get(collection, {}).get(query.subject_code)
        if subject is None:
            raise InvalidSubjectError(query.id, query.subject_code, collection)

        course = subject.get(f"course_{query.course_code}")
        if course is None:
            raise InvalidCourseError(query.id, query.course_code, collection)
        return course

    def get_course_sections(self, level: str, campus: str, query: CourseQuery) -> list[dict[str, Any]]:
        course = self._get_course(level, campus, query)
        records = []
        for index in course.get("sections", []):
            record = self._sections.get(str(index))
            if record is None:
                logger.warning(f"Section {index} of {query.id} not found in catalog")
                continue
            records.append(record)
        return records

    def get_open_statuses(self, level: str, campus: str, query: CourseQuery) -> list[bool | None]:
        return [
            self._open_statuses.get(str(record["index"]), record.get("openStatus"))
            for record in self.get_course_sections(level, campus, query)
        ]

    def get_subject_description(self, level: str, campus: str, subject_code: str) -> str | None:
        subject = self._collections.get(get_collection_name(level, campus), {}).get(subject_code)
        return subject.get("description") if subject else None
