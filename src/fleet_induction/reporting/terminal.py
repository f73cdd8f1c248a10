"""Rich terminal report renderer.

Composes Rich tables, panels, and gauges into the console report for a
nightly induction run.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from fleet_induction.data.models import InductionResult
from fleet_induction.reporting.ascii_charts import mini_gauge, score_color, score_gauge


class TerminalRenderer:
    """Renders induction results to the terminal using Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(
        self, result: InductionResult, show_details: bool = True, top: int | None = None
    ) -> None:
        """Render the full induction report to the terminal."""
        self._render_header(result)
        self._render_fitness_gate(result)
        self._render_fleet_stats(result)
        if show_details:
            self._render_sub_scores(result)
        self._render_induction_list(result, top=top)
        if result.issues:
            self._render_issues(result)

    def render_weights(self, weights: dict[str, float], knobs: dict[str, object]) -> None:
        """Render the active scoring policy."""
        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Dimension", style="bold", min_width=12)
        table.add_column("Weight", justify="right", min_width=8)
        for name, weight in weights.items():
            table.add_row(name.replace("_", " ").title(), f"{weight:.0%}")
        self.console.print()
        self.console.print(Rule("[bold]SCORING POLICY[/bold]"))
        self.console.print(table)
        for name, value in knobs.items():
            self.console.print(f"  [bold]{name}[/bold]: {value}")

    # ------------------------------------------------------------------
    # Private rendering methods
    # ------------------------------------------------------------------

    def _render_header(self, result: InductionResult) -> None:
        stats = result.stats
        header_text = Text()
        header_text.append("INDUCTION PLAN", style="bold cyan")
        header_text.append(" | ", style="dim")
        header_text.append(f"{stats.fleet_size} trainsets", style="bold")
        header_text.append(f" | {stats.eligible_count} eligible", style="")
        header_text.append(f" | {len(result.ranking)} ranked", style="")
        header_text.append(
            f" | {result.timestamp:%Y-%m-%d %H:%M} UTC", style="dim"
        )

        self.console.print()
        self.console.print(Panel(header_text, title="Nightly Fleet Induction"))

    def _render_fitness_gate(self, result: InductionResult) -> None:
        self.console.print()
        self.console.print(Rule("[bold]FITNESS CERTIFICATE CHECK[/bold]"))
        for verdict in result.verdicts:
            if verdict.eligible:
                self.console.print(
                    f"  [green]\u2714[/green] {verdict.trainset_id} passed fitness check"
                )
            else:
                self.console.print(
                    f"  [red]\u2718[/red] {verdict.trainset_id} denied induction: "
                    f"{verdict.reason.lower()}"
                )

    def _render_fleet_stats(self, result: InductionResult) -> None:
        stats = result.stats
        self.console.print()
        self.console.print(
            f"  [bold]Average fleet mileage:[/bold] {stats.average_mileage:,.1f} km"
        )
        self.console.print(
            f"  [bold]Max mileage in fleet:[/bold]  {stats.max_mileage:,.1f} km"
        )

    def _render_sub_scores(self, result: InductionResult) -> None:
        """Sub-score breakdown for every scored unit, in id order."""
        if not result.sub_scores:
            return
        self.console.print()
        self.console.print(Rule("[bold]SUB-SCORES[/bold]"))

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("Trainset", style="bold")
        for name in ("Fitness", "Job Cards", "Branding", "Mileage", "Cleaning"):
            table.add_column(name, justify="center", min_width=15)

        for trainset_id in sorted(result.sub_scores):
            s = result.sub_scores[trainset_id]
            table.add_row(
                trainset_id,
                mini_gauge(s.fitness),
                mini_gauge(s.job_card),
                mini_gauge(s.branding),
                mini_gauge(s.mileage),
                mini_gauge(s.cleaning),
            )
        self.console.print(table)

    def _render_induction_list(self, result: InductionResult, top: int | None) -> None:
        self.console.print()
        self.console.print(Rule("[bold]FINAL INDUCTION LIST[/bold]"))
        if not result.ranking:
            self.console.print("  [yellow]No trainsets eligible for induction.[/yellow]")
            return

        table = Table(show_header=True, header_style="bold", padding=(0, 1))
        table.add_column("#", justify="right", style="bold", width=3)
        table.add_column("Trainset", style="bold")
        table.add_column("Total Score", min_width=28)

        entries = result.ranking[:top] if top is not None else result.ranking
        for entry in entries:
            table.add_row(str(entry.rank), entry.trainset_id, score_gauge(entry.total_score))
        self.console.print(table)

        best = result.ranking[0]
        color = score_color(best.total_score)
        self.console.print(
            f"\n  [bold]First choice:[/bold] [{color}]{best.trainset_id}[/{color}] "
            f"({best.total_score:.4f})"
        )

    def _render_issues(self, result: InductionResult) -> None:
        self.console.print()
        self.console.print(Rule("[bold red]RECORD ISSUES[/bold red]", style="red"))
        for issue in result.issues:
            self.console.print(
                f"    [dim]\u2022[/dim] [red]{issue.kind.value}[/red] {issue.message}"
            )
