"""Command-line interface for critpath."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from .config import (
    ReportFormat,
    UnifiedConfig,
    discover_config,
    get_config_path,
    set_config_path,
)
from .dot import DotGenerator
from .exceptions import CritpathError
from .graph import WeightedGraph
from .logger import setup_logger
from .parser import ProjectParser
from .report import format_report
from .schedule import CriticalPathScheduler, ScheduleResult, WorklistDiscipline

# Exit code for a well-formed project whose graph has a cycle
EXIT_INFEASIBLE = 2

app = typer.Typer(
    name="critpath",
    help="Critical path scheduling for stage/activity project graphs",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=results, 2=progress, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: critpath_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for critpath commands."""
    setup_logger(verbose)
    if config is not None and not config.exists():
        typer.echo(f"Error: Config file not found: {config}", err=True)
        raise typer.Exit(1)
    set_config_path(config)


def _load(file: Path) -> tuple[WeightedGraph, UnifiedConfig]:
    """Parse the project file and its config, exiting 1 on any input error."""
    try:
        graph = ProjectParser().parse_file(file)
        config = discover_config(file, get_config_path())
    except (CritpathError, ValueError, PydanticValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    return graph, config


def _emit(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Written to {output}")
    else:
        typer.echo(text, nl=False)


def _exit_if_infeasible(result: ScheduleResult) -> None:
    if not result.feasible:
        raise typer.Exit(EXIT_INFEASIBLE)


@app.command()
def schedule(
    file: Annotated[Path, typer.Argument(help="Project file (YAML or plain matrix)")],
    *,
    format: Annotated[  # noqa: A002 - 'format' is appropriate name for CLI option
        ReportFormat | None,
        typer.Option("--format", "-f", help="Report format (overrides config)"),
    ] = None,
    critical_only: Annotated[
        bool,
        typer.Option("--critical-only", help="Only list activities with zero slack"),
    ] = False,
    worklist: Annotated[
        WorklistDiscipline | None,
        typer.Option("--worklist", help="Tie-break discipline for the topological sort"),
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Compute stage and activity times and print a report."""
    graph, config = _load(file)

    scheduler_config = config.scheduler
    if worklist is not None:
        scheduler_config = scheduler_config.model_copy(update={"worklist": worklist})
    report_config = config.report
    if format is not None:
        report_config = report_config.model_copy(update={"format": format})
    if critical_only:
        report_config = report_config.model_copy(update={"critical_only": True})

    result = CriticalPathScheduler(graph, scheduler_config).schedule()
    _emit(format_report(result, report_config), output)
    _exit_if_infeasible(result)


@app.command()
def order(
    file: Annotated[Path, typer.Argument(help="Project file (YAML or plain matrix)")],
) -> None:
    """Print a topological order of the stages."""
    graph, config = _load(file)
    result = CriticalPathScheduler(graph, config.scheduler).schedule()

    if result.feasible:
        typer.echo(" ".join(str(stage) for stage in result.order))
        return

    assert result.cycle is not None
    typer.echo(result.cycle.message, err=True)
    raise typer.Exit(EXIT_INFEASIBLE)


@app.command()
def graph(
    file: Annotated[Path, typer.Argument(help="Project file (YAML or plain matrix)")],
    *,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Generate a DOT graph annotated with stage times and the critical path."""
    project, config = _load(file)
    result = CriticalPathScheduler(project, config.scheduler).schedule()
    _emit(DotGenerator(project, result).generate() + "\n", output)
    _exit_if_infeasible(result)


@app.command()
def check(
    file: Annotated[Path, typer.Argument(help="Project file (YAML or plain matrix)")],
) -> None:
    """Validate a project file and report whether it is feasible."""
    project, config = _load(file)
    result = CriticalPathScheduler(project, config.scheduler).schedule()

    if result.feasible:
        typer.echo("Project is feasible.")
        return
    typer.echo("Project is infeasible.")
    raise typer.Exit(EXIT_INFEASIBLE)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
