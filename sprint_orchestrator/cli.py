"""Command-line interface for the sprint planning engine."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from sprint_orchestrator import __version__
from sprint_orchestrator.api.serve import ServeConfig, ServeError, serve_api
from sprint_orchestrator.config_validation import parse_iso_date
from sprint_orchestrator.logging_utils import configure_logging, get_logger, log_stage
from sprint_orchestrator.planning.io import (
    PlanningInputError,
    build_configuration,
    load_planning_input,
    plan_to_payload,
    read_plan,
    write_plan,
)
from sprint_orchestrator.planning.models import PlanningStage
from sprint_orchestrator.planning.sprint_generator import generate_sprint_plan, summarize_plan

app = typer.Typer(add_completion=False, no_args_is_help=True)
sprint_app = typer.Typer(no_args_is_help=True)
api_app = typer.Typer(no_args_is_help=True)
console = Console()

app.add_typer(sprint_app, name="sprint")
app.add_typer(api_app, name="api")


def _version_callback(value: bool) -> None:
    """Print package version and exit when requested."""
    if value:
        console.print(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            is_eager=True,
            callback=_version_callback,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose debug logging."),
    ] = False,
    log_file: Annotated[
        Path,
        typer.Option("--log-file", help="Log file path (default: ./sprint_orchestrator.log)."),
    ] = Path("sprint_orchestrator.log"),
) -> None:
    """Sprint generation and task allocation CLI."""
    configure_logging(log_file=log_file, verbose=verbose)


@sprint_app.command("generate")
def sprint_generate(
    input_path: Annotated[
        Path,
        typer.Option("--input", help="JSON or YAML file with features, team_members and config."),
    ],
    output_path: Annotated[
        Path | None,
        typer.Option("--output", help="Write the generated plan as JSON to this path."),
    ] = None,
    start_date: Annotated[
        str | None,
        typer.Option(help="Start date of sprint 1 (YYYY-MM-DD). Defaults to today."),
    ] = None,
    sprint_length_weeks: Annotated[
        int | None,
        typer.Option(help="Sprint length in weeks."),
    ] = None,
    velocity: Annotated[
        int | None,
        typer.Option(help="Effort-point capacity per sprint."),
    ] = None,
    assignment_mode: Annotated[
        str | None,
        typer.Option(help="Assignee selection: balanced or first_eligible."),
    ] = None,
) -> None:
    """Generate sprints and task assignments from a backlog and roster."""
    logger = get_logger()
    if not input_path.exists():
        raise typer.BadParameter(f"Input file not found: {input_path}")
    try:
        planning_input = load_planning_input(input_path)
        config = build_configuration(
            planning_input.config_overrides,
            default_start_date=date.today(),
            start_date=parse_iso_date(start_date, "start_date") if start_date else None,
            sprint_length_weeks=sprint_length_weeks,
            velocity_per_sprint=velocity,
            assignment_mode=assignment_mode,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    def _report(stage: PlanningStage) -> None:
        log_stage(logger, stage)

    sprints = generate_sprint_plan(
        planning_input.features,
        planning_input.team_members,
        config,
        on_stage=_report,
    )
    summary = summarize_plan(sprints, planning_input.team_members)
    payload = plan_to_payload(
        sprints,
        summary,
        config=config,
        roster=planning_input.team_members,
    )
    if not sprints:
        console.print("No approved features to plan.")
    else:
        _render_plan(payload)
    if output_path is not None:
        write_plan(payload, output_path)
        console.print(f"Sprint plan written to {output_path}")


@sprint_app.command("show")
def sprint_show(
    plan_path: Annotated[
        Path,
        typer.Option("--plan", help="Path to a plan JSON written by 'sprint generate'."),
    ],
) -> None:
    """Render a saved sprint plan."""
    if not plan_path.exists():
        raise typer.BadParameter(f"Plan file not found: {plan_path}")
    try:
        payload = read_plan(plan_path)
    except PlanningInputError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not payload["sprints"]:
        console.print("Plan contains no sprints.")
        return
    _render_plan(payload)


@api_app.command("serve")
def api_serve(
    host: Annotated[str, typer.Option(help="Host interface to bind.")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port to listen on.")] = 8080,
    reload: Annotated[bool, typer.Option(help="Enable uvicorn auto-reload.")] = False,
) -> None:
    """Serve the sprint generation API with uvicorn."""
    try:
        config = ServeConfig(host=host, port=port, reload=reload)
        exit_code = serve_api(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ServeError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    if exit_code != 0:
        raise typer.Exit(code=exit_code)


def _render_plan(payload: Mapping[str, Any]) -> None:
    """Print sprint overview and per-sprint assignments."""
    names = {
        member["user_email"]: member.get("full_name") or member["user_email"]
        for member in payload.get("team_members", [])
    }
    summary = payload.get("summary", {})
    overview = Table(title="Sprint Plan")
    overview.add_column("Sprint")
    overview.add_column("Window")
    overview.add_column("Velocity", justify="right")
    overview.add_column("Features", justify="right")
    overview.add_column("Goal")
    for sprint in payload["sprints"]:
        overview.add_row(
            sprint["name"],
            f"{sprint['start_date']} - {sprint['end_date']}",
            str(sprint["velocity"]),
            str(len(sprint["features"])),
            sprint["goal"],
        )
    console.print(overview)
    if summary:
        console.print(
            f"Generated {summary['sprint_count']} sprints with {summary['task_count']} tasks "
            f"({summary['unassigned_task_count']} unassigned)."
        )
    for sprint in payload["sprints"]:
        tasks = Table(title=f"{sprint['name']} assignments")
        tasks.add_column("Task")
        tasks.add_column("Priority")
        tasks.add_column("Points", justify="right")
        tasks.add_column("Hours", justify="right")
        tasks.add_column("Assignee")
        for task in sprint["tasks"]:
            assignee = task.get("assignee_id")
            tasks.add_row(
                task["title"],
                task["priority"],
                str(task["story_points"]),
                str(task["estimated_hours"]),
                names.get(assignee, assignee) if assignee else "Unassigned",
            )
        console.print(tasks)


if __name__ == "__main__":
    app()
