"""Export functionality for planning results."""

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from .models import PlanResult
from .ranker import format_meetings


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(self, result: PlanResult, output_path: str | Path) -> None:
        """Export plan result to file.

        Args:
            result: PlanResult to export
            output_path: Path to output file
        """
        pass


def _schedule_rows(result: PlanResult) -> list[dict]:
    """One row per (schedule, course) pair, in rank order."""
    rows = []
    for rank, schedule in enumerate(result.schedules, start=1):
        for course_id, section in zip(schedule.course_ids, schedule.sections):
            rows.append(
                {
                    "rank": rank,
                    "course_id": course_id,
                    "section": section.number,
                    "index": section.index,
                    "meetings": format_meetings(section),
                    "section_points": section.points,
                    "requirements_met": "; ".join(sorted(section.requirements_met)),
                    "schedule_points": schedule.points,
                    "percent_requirements_met": schedule.percent_requirements_met,
                }
            )
    return rows


class JSONExporter(BaseExporter):
    """Export to JSON format."""

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        """Initialize exporter.

        Args:
            indent: JSON indentation level
            ensure_ascii: If False, allows non-ASCII characters
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, result: PlanResult, output_path: str | Path) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(
                result.to_dict(),
                f,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
            )


class CSVExporter(BaseExporter):
    """Export to CSV format, one row per scheduled course."""

    def export(self, result: PlanResult, output_path: str | Path) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        rows = _schedule_rows(result)
        if not rows:
            output_path.write_text("", encoding="utf-8")
            return

        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=rows[0].keys())
            writer.writeheader()
            writer.writerows(rows)


class ExcelExporter(BaseExporter):
    """Export to Excel format.

    Creates workbook with sheets:
    - Schedules: one row per scheduled course
    - Summary: request and result metrics
    """

    def export(self, result: PlanResult, output_path: str | Path) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            self._export_schedules_sheet(result, writer)
            self._export_summary_sheet(result, writer)

    def _export_schedules_sheet(self, result: PlanResult, writer: pd.ExcelWriter) -> None:
        rows = _schedule_rows(result)
        columns = [
            "rank",
            "course_id",
            "section",
            "index",
            "meetings",
            "section_points",
            "requirements_met",
            "schedule_points",
            "percent_requirements_met",
        ]
        df = pd.DataFrame(rows, columns=columns)
        df.columns = [c.replace("_", " ").title() for c in columns]
        df.to_excel(writer, sheet_name="Schedules", index=False)

    def _export_summary_sheet(self, result: PlanResult, writer: pd.ExcelWriter) -> None:
        rows = [
            {"Metric": "Generation Date", "Value": result.generation_date},
            {"Metric": "Courses", "Value": ", ".join(result.course_ids)},
            {"Metric": "Batch Size", "Value": result.options.batch_size},
            {"Metric": "Sorted By Points", "Value": result.options.by_points},
            {"Metric": "Total Schedules", "Value": result.total_schedules},
            {"Metric": "Matching Schedules", "Value": result.matching_schedules},
            {"Metric": "Cap Reached", "Value": result.cap_reached},
            {
                "Metric": "Courses Without Sections",
                "Value": ", ".join(result.courses_without_sections),
            },
        ]
        df = pd.DataFrame(rows)
        df.to_excel(writer, sheet_name="Summary", index=False)


def get_exporter(format_type: str) -> BaseExporter:
    """Get appropriate exporter for format type.

    Args:
        format_type: Export format ('json', 'csv', 'excel')

    Returns:
        Exporter instance

    Raises:
        ValueError: If format type is not supported
    """
    exporters = {
        "json": JSONExporter,
        "csv": CSVExporter,
        "excel": ExcelExporter,
    }

    if format_type not in exporters:
        raise ValueError(
            f"Unsupported format: {format_type}. Supported: {', '.join(exporters.keys())}"
        )

    return exporters[format_type]()
