"""Command-line entry point: bring a target state and its dependencies up.

Usage:
    envstate <target> [--config envstate.yml] [-v | -q] [--insecure]
    envstate --list [--config envstate.yml]

Example:
    envstate nodeReady --config claude.yml
"""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from envstate.application.resolver import create_resolver
from envstate.domain.exceptions import ConfigurationError, UnknownStateError
from envstate.domain.interfaces import ExecutionObserverInterface
from envstate.domain.models import ResolutionRun, StateGraph, StateStatus
from envstate.infrastructure.config import DEFAULT_CONFIG_FILE, load_state_graph
from envstate.infrastructure.execution import (
    SubprocessActionExecutor,
    SubprocessCommandRunner,
)
from envstate.infrastructure.http import HttpProbeConfig, RequestsHttpProbe
from envstate.infrastructure.observers import (
    CompositeObserver,
    ConsoleObserver,
    LoggingObserver,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130

console = Console()
error_console = Console(stderr=True)


def configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def require_state(graph: StateGraph, target: str) -> None:
    """Raise UnknownStateError unless `target` is defined in `graph`."""
    if target not in graph:
        raise UnknownStateError(target)


def print_states(graph: StateGraph) -> None:
    """Print configured states as a table."""
    table = Table(title="States")
    table.add_column("State", style="bold")
    table.add_column("Needs")
    table.add_column("Actions", justify="right")
    table.add_column("Readiness")

    for name, state in graph.items():
        probes = []
        if state.readiness is not None:
            readiness = state.readiness
            for label, value in (
                ("check", readiness.check_command or readiness.check_endpoint),
                ("wait", readiness.wait_command or readiness.wait_endpoint),
            ):
                if value:
                    probes.append(f"{label}: {value}")
        table.add_row(
            name,
            ", ".join(state.dependencies) or "-",
            str(len(state.actions)),
            "\n".join(probes) or "-",
        )
    console.print(table)


def print_summary(run: ResolutionRun) -> None:
    """Print the per-state results of a finished run."""
    table = Table(title=f"Run {run.run_id[:8]} ({run.target})")
    table.add_column("State", style="bold")
    table.add_column("Status")
    table.add_column("Actions", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("Error")

    styles = {
        StateStatus.COMPLETED: "green",
        StateStatus.FAILED: "red",
        StateStatus.PROCESSING: "yellow",
    }
    for name, result in run.results.items():
        style = styles[result.status]
        table.add_row(
            name,
            f"[{style}]{result.status.value}[/{style}]",
            str(len(result.actions_executed)),
            f"{result.duration:.1f}s",
            result.error_message or "",
        )
    console.print(table)


@click.command()
@click.argument("target", required=False)
@click.option(
    "-c",
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    help="State graph file",
)
@click.option(
    "--list", "list_states", is_flag=True, help="List the configured states and exit"
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.option("-q", "--quiet", is_flag=True, help="Only show errors")
@click.option(
    "--insecure", is_flag=True, help="Skip TLS verification for endpoint probes"
)
@click.option(
    "--http-timeout",
    type=float,
    default=HttpProbeConfig.timeout,
    show_default=True,
    help="Seconds per endpoint probe request",
)
def main(
    target: str | None,
    config: Path,
    list_states: bool,
    verbose: bool,
    quiet: bool,
    insecure: bool,
    http_timeout: float,
) -> None:
    """Resolve and bring up a development environment state."""
    if verbose and quiet:
        raise click.UsageError("--verbose and --quiet are mutually exclusive")
    configure_logging(verbose, quiet)

    try:
        graph = load_state_graph(config)
    except ConfigurationError as e:
        error_console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise SystemExit(EXIT_CONFIG) from None

    if list_states:
        print_states(graph)
        return

    if not target:
        raise click.UsageError("a target state is required unless --list is given")
    try:
        require_state(graph, target)
    except UnknownStateError as e:
        available = ", ".join(graph) or "(none)"
        error_console.print(
            f"[bold red]Configuration error:[/bold red] {e}. "
            f"Available states: {available}"
        )
        raise SystemExit(EXIT_CONFIG) from None

    observers: list[ExecutionObserverInterface] = [LoggingObserver()]
    if not quiet:
        observers.insert(0, ConsoleObserver(console))

    http_probe = RequestsHttpProbe(
        HttpProbeConfig(timeout=http_timeout, verify_tls=not insecure)
    )
    resolver = create_resolver(
        command_runner=SubprocessCommandRunner(),
        http_probe=http_probe,
        action_executor=SubprocessActionExecutor(),
        observer=CompositeObserver(*observers),
    )

    try:
        success = resolver.resolve(target, graph)
    except KeyboardInterrupt:
        error_console.print("[yellow]Interrupted[/yellow]")
        raise SystemExit(EXIT_INTERRUPTED) from None
    finally:
        http_probe.close()

    if resolver.last_run is not None and not quiet:
        print_summary(resolver.last_run)

    if not success:
        raise SystemExit(EXIT_FAILED)
    logger.debug("Target %s is ready", target)


if __name__ == "__main__":
    main()
