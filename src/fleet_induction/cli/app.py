# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Main CLI application for fleet-induction."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from fleet_induction.data.generator import FleetGenerator
from fleet_induction.data.loader import dump_fleet, load_fleet
from fleet_induction.data.models import InductionResult
from fleet_induction.data.sample import build_sample_fleet
from fleet_induction.errors import InductionError
from fleet_induction.reporting.terminal import TerminalRenderer
from fleet_induction.scoring.engine import FleetScorer
from fleet_induction.scoring.policy import ScoringPolicy, load_policy


def _load_policy(path: str | None, console: Console) -> ScoringPolicy:
    if not path:
        return ScoringPolicy()
    try:
        return load_policy(path)
    except (InductionError, FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Invalid policy: {exc}[/]")
        raise SystemExit(1)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Log each pipeline stage")
@click.pass_context
def cli(ctx: click.Context, no_color: bool, verbose: bool) -> None:
    """fleet-induction: nightly trainset induction ranking

    Ranks eligible trainsets for next-day service by a weighted score over
    fitness, open job cards, branding, mileage, and cleaning.
    """
    ctx.ensure_object(dict)
    console = Console(no_color=no_color)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@cli.command()
@click.option(
    "--fleet", "-f", type=click.Path(), default=None,
    help="Fleet snapshot file (.json/.yaml); defaults to the sample fleet",
)
@click.option(
    "--generate", "-g", type=click.IntRange(min=0), default=None,
    help="Score a simulated fleet of this many trainsets instead",
)
@click.option("--seed", "-s", type=int, default=None, help="Random seed for --generate")
@click.option("--policy", "-p", type=click.Path(), default=None, help="Scoring policy YAML file")
@click.option(
    "--top", "-n", type=click.IntRange(min=1), default=None,
    help="Only list the top N trainsets",
)
@click.option(
    "--export-json", type=click.Path(), default=None,
    help="Export the structured result as JSON at this path",
)
@click.option("--show-details/--no-details", default=True, help="Show sub-score breakdown")
@click.pass_context
def rank(
    ctx: click.Context,
    fleet: str | None,
    generate: int | None,
    seed: int | None,
    policy: str | None,
    top: int | None,
    export_json: str | None,
    show_details: bool,
) -> None:
    """Score the fleet and print the ranked induction list."""
    console: Console = ctx.obj["console"]
    scoring_policy = _load_policy(policy, console)

    if fleet and generate is not None:
        console.print("[red]--fleet and --generate are mutually exclusive[/]")
        raise SystemExit(1)

    load_issues = []
    try:
        if fleet:
            snapshot = load_fleet(fleet, scoring_policy)
            trainsets = snapshot.trainsets
            load_issues = snapshot.issues
        elif generate is not None:
            trainsets = FleetGenerator(size=generate, seed=seed).generate()
        else:
            trainsets = build_sample_fleet()

        with console.status("[bold cyan]Scoring fleet..."):
            result = FleetScorer(scoring_policy).run(trainsets)
    except (InductionError, FileNotFoundError) as exc:
        console.print(f"[red]{exc}[/]")
        raise SystemExit(1)

    if load_issues:
        result = result.model_copy(update={"issues": tuple(load_issues) + result.issues})

    renderer = TerminalRenderer(console)
    renderer.render(result, show_details=show_details, top=top)

    if export_json:
        _export_json(result, export_json, console)


@cli.command()
@click.option("--policy", "-p", type=click.Path(), default=None, help="Scoring policy YAML file")
@click.pass_context
def policy(ctx: click.Context, policy: str | None) -> None:
    """Show the active scoring weights and normalization bounds."""
    console: Console = ctx.obj["console"]
    scoring_policy = _load_policy(policy, console)
    renderer = TerminalRenderer(console)
    renderer.render_weights(
        scoring_policy.weights.model_dump(),
        {
            "Severity penalties": dict(scoring_policy.severity_penalties),
            "Job-card ceiling": scoring_policy.max_job_cards,
            "Branding amount ceiling": f"{scoring_policy.branding_amount_ceiling:,.0f}",
            "Branding slots": scoring_policy.max_branding_slots,
        },
    )


@cli.command()
@click.option(
    "--output", "-o", type=click.Path(), required=True,
    help="Where to write the fleet snapshot (.json or .yaml)",
)
@click.option(
    "--generate", "-g", type=click.IntRange(min=0), default=None,
    help="Write a simulated fleet instead",
)
@click.option("--seed", "-s", type=int, default=None, help="Random seed for --generate")
@click.pass_context
def sample(ctx: click.Context, output: str, generate: int | None, seed: int | None) -> None:
    """Write a fleet snapshot file to use with ``rank --fleet``."""
    console: Console = ctx.obj["console"]
    if generate is not None:
        trainsets = FleetGenerator(size=generate, seed=seed).generate()
    else:
        trainsets = build_sample_fleet()
    out = dump_fleet(trainsets, output)
    console.print(f"[green]Fleet snapshot written to {out}[/]")


def _export_json(result: InductionResult, path: str, console: Console) -> None:
    """Export the structured result as JSON."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    data = result.model_dump(mode="json")
    out.write_text(json.dumps(data, indent=2))
    console.print(f"\n[green]JSON exported to {path}[/]")

