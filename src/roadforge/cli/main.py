"""Command-line interface for roadforge."""

import asyncio
import json
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown

from roadforge.agents import write_prose
from roadforge.exceptions import InvalidInputError, StageFailure
from roadforge.models.project import ProjectInput
from roadforge.pipeline import artifacts
from roadforge.pipeline.orchestrator import run_analysis_async
from roadforge.pipeline.synthesis import render_analysis
from roadforge.settings import get_settings
from roadforge.workflows.plan import Analyze, planner_graph
from roadforge.workflows.state import PlannerState, Severity, Stage


EXIT_STAGE_FAILURE = 1
EXIT_INVALID_INPUT = 2


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)


def _configure_logfire() -> None:
    """Configure logfire if available and token is present."""
    settings = get_settings()
    if not settings.logfire_token:
        return

    try:
        import logfire

        logfire.configure(
            service_name="roadforge",
            send_to_logfire="if-token-present",
        )
        logfire.instrument_pydantic_ai()
    except ImportError:
        pass


app = typer.Typer(
    name="roadforge",
    help="Rule-based project analysis, recipe and roadmap generator.",
)


class StopAfter(StrEnum):
    """Stages the plan command can stop after."""

    ANALYSIS = "analysis"
    RECIPE = "recipe"
    ROADMAP = "roadmap"


def _load_project(path: Path) -> ProjectInput:
    """Load a ProjectInput from a JSON file.

    Raises:
        InvalidInputError: If the file is not valid JSON or misses fields.
    """
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidInputError([f"cannot read {path.name}: {e}"]) from e
    try:
        return ProjectInput.model_validate(data)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidInputError(problems) from e


def _report_invalid(console: Console, error: InvalidInputError) -> None:
    console.print("[red bold]Invalid project input:[/red bold]")
    for problem in error.problems:
        console.print(f"  [red]✗[/red] {problem}")


def _report_failure(console: Console, error: StageFailure) -> None:
    cause = f": {error.__cause__}" if error.__cause__ else ""
    console.print(f"[red bold]✗ {error}[/red bold]{cause}")


def _make_progress_callback(console: Console):
    """Create a Rich-based progress callback."""
    severity_styles = {
        Severity.INFO: ("blue", ""),
        Severity.SUCCESS: ("green", "✓"),
        Severity.WARNING: ("yellow", "!"),
        Severity.ERROR: ("red", "✗"),
    }

    def callback(severity: Severity, message: str) -> None:
        color, icon = severity_styles[severity]
        if icon:
            console.print(f"  [{color}]{icon}[/{color}] {message}")
        else:
            console.print(f"  [{color}]•[/{color}] {message}")

    return callback


async def _write_artifacts(base_dir: Path, state: PlannerState) -> list[Path]:
    """Persist every cached stage output."""
    name = state.project.name
    paths = []
    if state.analysis is not None:
        paths.append(await artifacts.write_analysis(base_dir, name, state.analysis))
    if state.recipe is not None:
        paths.append(await artifacts.write_recipe(base_dir, state.recipe))
    if state.roadmap is not None:
        paths.extend(await artifacts.write_roadmap(base_dir, state.roadmap))
    return paths


InputArg = Annotated[
    Path,
    typer.Argument(
        help="JSON file with name, description, goals, constraints, timeline, experience.",
        exists=True,
        dir_okay=False,
    ),
]
VerboseOpt = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging."),
]


@app.command()
def analyze(
    input_file: InputArg,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the analysis as JSON instead of markdown."),
    ] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Analyze a project description and print the result."""
    _setup_logging(verbose)
    _configure_logfire()
    console = Console()

    try:
        project = _load_project(input_file)
        analysis = asyncio.run(run_analysis_async(project))
    except InvalidInputError as e:
        _report_invalid(console, e)
        raise typer.Exit(EXIT_INVALID_INPUT) from e
    except StageFailure as e:
        _report_failure(console, e)
        raise typer.Exit(EXIT_STAGE_FAILURE) from e

    if as_json:
        console.print_json(analysis.model_dump_json())
    else:
        console.print(Markdown(render_analysis(analysis, project.name)))


@app.command()
def plan(
    input_file: InputArg,
    stop_after: Annotated[
        StopAfter,
        typer.Option("--stop-after", help="Last stage to produce."),
    ] = StopAfter.ROADMAP,
    prose: Annotated[
        bool | None,
        typer.Option(
            "--prose/--no-prose",
            help="Refine recipe text and task prompts with an LLM. Defaults to PROSE_ENABLED.",
        ),
    ] = None,
    prompts: Annotated[
        bool,
        typer.Option("--prompts/--no-prompts", help="Attach task prompts to roadmap steps."),
    ] = True,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", help="Directory that holds the artifact cache."),
    ] = Path("."),
    verbose: VerboseOpt = False,
) -> None:
    """Run analysis, recipe and roadmap stages and write artifacts."""
    _setup_logging(verbose)
    _configure_logfire()
    console = Console()

    try:
        project = _load_project(input_file)
    except InvalidInputError as e:
        _report_invalid(console, e)
        raise typer.Exit(EXIT_INVALID_INPUT) from e

    use_prose = get_settings().prose_enabled if prose is None else prose
    console.print(f"\n[bold]roadforge[/bold] - planning {project.name}")
    if use_prose:
        console.print("[dim]  (prose refinement on)[/dim]")
    console.print()

    state = PlannerState(
        project=project,
        stop_after=Stage(stop_after.value),
        writer=write_prose if use_prose else None,
        include_prompts=prompts,
        on_progress=_make_progress_callback(console),
    )

    exit_code = 0
    try:
        asyncio.run(planner_graph.run(Analyze(), state=state))
    except InvalidInputError as e:
        _report_invalid(console, e)
        raise typer.Exit(EXIT_INVALID_INPUT) from e
    except StageFailure as e:
        console.print()
        _report_failure(console, e)
        exit_code = EXIT_STAGE_FAILURE
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        sys.exit(130)

    paths = asyncio.run(_write_artifacts(output_dir, state))
    for path in paths:
        console.print(f"  [dim]wrote {path}[/dim]")

    if exit_code:
        raise typer.Exit(exit_code)
    console.print(f"\n[green bold]✓ Planned through {state.current}[/green bold]\n")


if __name__ == "__main__":
    app()
