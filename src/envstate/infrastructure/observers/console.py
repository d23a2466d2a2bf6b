"""
Rich console observer.

Prints one line per lifecycle event. A state is only started once its
dependencies have finished, so output is flat: state lines start at the
margin and the checks and actions they run are indented beneath them.
"""

from rich.console import Console

from envstate.domain.interfaces import ExecutionObserverInterface
from envstate.domain.models import ProbeKind

DETAIL = "  "


class ConsoleObserver(ExecutionObserverInterface):
    """Human-readable progress output for interactive runs."""

    def __init__(self, console: Console | None = None, show_checks: bool = True):
        """
        Args:
            console: Target console (stdout if None)
            show_checks: Print pre-check lines
        """
        self.console = console or Console()
        self.show_checks = show_checks

    def on_state_start(self, name: str, dependencies: tuple[str, ...]) -> None:
        line = f"[bold blue]>[/bold blue] [bold]{name}[/bold]"
        if dependencies:
            line += f" [dim](needs {', '.join(dependencies)})[/dim]"
        self.console.print(line)

    def on_check_performed(self, kind: ProbeKind, details: str) -> None:
        if self.show_checks:
            self.console.print(f"{DETAIL}[dim]checking {kind.value}: {details}[/dim]")

    def on_check_result(self, ready: bool, kind: ProbeKind, info: str) -> None:
        if not self.show_checks:
            return
        if ready:
            self.console.print(f"{DETAIL}[green]ready[/green] [dim]{info}[/dim]")
        else:
            self.console.print(
                f"{DETAIL}[yellow]not ready[/yellow] [dim]{info}[/dim]"
            )

    def on_actions_start(self, name: str) -> None:
        return None

    def on_action_start(self, state_name: str, description: str) -> None:
        self.console.print(f"{DETAIL}[cyan]-[/cyan] {description}")

    def on_action_complete(
        self,
        state_name: str,
        description: str,
        success: bool,
        duration: float,
        error: str | None = None,
    ) -> None:
        if success:
            self.console.print(
                f"{DETAIL}  [green]ok[/green] [dim]({duration:.1f}s)[/dim]"
            )
        else:
            self.console.print(
                f"{DETAIL}  [bold red]failed[/bold red] "
                f"[dim]({duration:.1f}s)[/dim] {error or ''}"
            )

    def on_state_complete(
        self, name: str, success: bool, error: str | None, duration: float
    ) -> None:
        if success:
            self.console.print(
                f"[bold green]+[/bold green] {name} [dim]({duration:.1f}s)[/dim]"
            )
        else:
            self.console.print(f"[bold red]x[/bold red] {name}: {error or 'failed'}")
