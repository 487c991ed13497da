"""CLI entry point for the schedule planner."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from .config.requirements import RequirementConfig
from .exceptions import PlannerError
from .exporters import get_exporter
from .models import PlanningOptions, PlanResult
from .planner import create_planner, get_course_sections
from .ranker import format_meetings
from .requirements import RequirementSet

app = typer.Typer(
    name="schedule-planner",
    help="Generate and rank conflict-free course schedules",
    add_completion=False,
)
console = Console()


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    csv = "csv"
    excel = "excel"


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


def _load_requirements(path: Optional[Path], default: RequirementSet) -> RequirementSet:
    if path is None:
        return default
    if not path.exists():
        console.print(f"[bold red]Error:[/bold red] Requirements file not found: {path}")
        raise typer.Exit(1)
    return RequirementConfig(path).requirement_set


@app.command()
def plan(
    catalog: Annotated[
        Path,
        typer.Argument(help="Catalog JSON file", exists=True, readable=True),
    ],
    course_ids: Annotated[
        list[str],
        typer.Argument(help="Course IDs of the form UNIT:SUBJECT:COURSE, e.g. 01:198:211"),
    ],
    level: Annotated[
        str,
        typer.Option("--level", "-l", help="Level: 'U' (undergraduate) or 'G' (graduate)"),
    ] = "U",
    campus: Annotated[
        str,
        typer.Option("--campus", "-c", help="Campus: 'nb', 'nk' or 'cm'"),
    ] = "nb",
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config", help="Directory with travel-rules.json, requirements.json, options.json"),
    ] = None,
    requirements: Annotated[
        Optional[Path],
        typer.Option("--requirements", "-r", help="Requirements JSON file (overrides config)"),
    ] = None,
    batch_size: Annotated[
        Optional[int],
        typer.Option("--batch-size", "-b", min=1, help="Stop after this many schedules"),
    ] = None,
    by_points: Annotated[
        Optional[bool],
        typer.Option("--by-points/--by-requirements", help="Primary sort key"),
    ] = None,
    full_form: Annotated[
        Optional[bool],
        typer.Option("--full-form/--summary-form", help="Emit full section records"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output file path"),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.json,
    top: Annotated[
        int,
        typer.Option("--top", "-t", help="Number of schedules to show"),
    ] = 5,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Generate ranked schedules for a list of courses."""
    _setup_logging(verbose)

    try:
        planner, config = create_planner(catalog, config_dir, level=level, campus=campus)
        requirement_set = _load_requirements(requirements, config.requirements.requirement_set)
    except (PlannerError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    defaults = config.options.options
    options = PlanningOptions(
        batch_size=batch_size if batch_size is not None else defaults.batch_size,
        by_points=by_points if by_points is not None else defaults.by_points,
        full_form=full_form if full_form is not None else defaults.full_form,
    )

    try:
        with console.status("[bold green]Generating schedules..."):
            result = planner.plan(course_ids, requirement_set, options)
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _show_summary(result)
    if result.schedules:
        _show_schedules(result, top)

    if output:
        if not output.suffix:
            suffix = "xlsx" if format == OutputFormat.excel else format.value
            output = output.with_suffix(f".{suffix}")
        with console.status(f"[bold green]Exporting to {format.value}..."):
            get_exporter(format.value).export(result, output)
        console.print(f"\n[bold green]✓[/bold green] Exported to: {output}")

    if not result.success:
        raise typer.Exit(1)


@app.command()
def sections(
    catalog: Annotated[
        Path,
        typer.Argument(help="Catalog JSON file", exists=True, readable=True),
    ],
    course_id: Annotated[
        str,
        typer.Argument(help="Course ID of the form UNIT:SUBJECT:COURSE"),
    ],
    level: Annotated[
        str,
        typer.Option("--level", "-l", help="Level: 'U' (undergraduate) or 'G' (graduate)"),
    ] = "U",
    campus: Annotated[
        str,
        typer.Option("--campus", "-c", help="Campus: 'nb', 'nk' or 'cm'"),
    ] = "nb",
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config", help="Configuration directory"),
    ] = None,
    requirements: Annotated[
        Optional[Path],
        typer.Option("--requirements", "-r", help="Requirements JSON file (overrides config)"),
    ] = None,
) -> None:
    """Show the annotated sections of one course, best first."""
    try:
        planner, config = create_planner(catalog, config_dir, level=level, campus=campus)
        requirement_set = _load_requirements(requirements, config.requirements.requirement_set)
        course_sections = get_course_sections(planner, course_id, requirement_set)
    except (PlannerError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    subject_code = course_id.split(":")[-2]
    description = planner.catalog.get_subject_description(planner.level, planner.campus, subject_code)
    title = f"Sections of {course_id}" + (f" ({description})" if description else "")

    if not course_sections:
        console.print(f"[bold yellow]Warning:[/bold yellow] {course_id} has no valid sections")
        raise typer.Exit(1)

    table = Table(title=title)
    table.add_column("Section", style="cyan")
    table.add_column("Index", style="blue")
    table.add_column("Meetings", style="white")
    table.add_column("Points", style="green")
    table.add_column("Requirements", style="magenta")

    for section in course_sections:
        table.add_row(
            section.number,
            section.index,
            format_meetings(section),
            f"{section.points:.3f}",
            f"{section.num_requirements_met}/{section.num_requirements}",
        )

    console.print(table)


def _show_summary(result: PlanResult) -> None:
    console.print(f"\n[bold]Schedule Plan for:[/bold] {', '.join(result.course_ids)}")
    console.print(f"  Schedules generated: {result.total_schedules}")
    console.print(f"  Matching all requirements: {result.matching_schedules}")

    if result.cap_reached:
        console.print(
            f"  [yellow]Batch size of {result.options.batch_size} reached; "
            "results are partial[/yellow]"
        )

    if result.courses_without_sections:
        console.print(
            f"\n[bold red]Courses without valid sections "
            f"({len(result.courses_without_sections)}):[/bold red]"
        )
        for course_id in result.courses_without_sections:
            console.print(f"  [red]• {course_id}[/red]")


def _show_schedules(result: PlanResult, top: int) -> None:
    """Show the top-ranked schedules in a table."""
    table = Table(title="Top Schedules")
    table.add_column("Rank", style="cyan")
    table.add_column("Course", style="blue")
    table.add_column("Section", style="magenta")
    table.add_column("Meetings", style="white")
    table.add_column("Points", style="green")
    table.add_column("Req. Met", style="yellow")

    for rank, schedule in enumerate(result.schedules[:top], start=1):
        for i, (course_id, section) in enumerate(zip(schedule.course_ids, schedule.sections)):
            table.add_row(
                str(rank) if i == 0 else "",
                course_id,
                f"{section.number} ({section.index})",
                format_meetings(section),
                f"{schedule.points:.3f}" if i == 0 else "",
                f"{schedule.percent_requirements_met:.0%}" if i == 0 else "",
            )

    if len(result.schedules) > top:
        table.add_row("...", "...", "...", "...", "...", "...")

    console.print(table)


if __name__ == "__main__":
    app()
