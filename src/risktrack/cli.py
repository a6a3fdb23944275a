"""CLI entry point using Typer."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from risktrack import __version__
from risktrack.config import REPORT_FORMATS, ReportConfig, load_config
from risktrack.models import PortfolioReport, Risk
from risktrack.sources import RegisterError

app = typer.Typer(
    name="risktrack",
    help="Project risk register scoring: residual ratings, portfolio scores, reports.",
    no_args_is_help=True,
)
console = Console()
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"risktrack {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-V", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """risktrack: project risk register scoring."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def report(
    register: Annotated[
        Path | None, typer.Argument(help="Risk register file (.json or .csv)")
    ] = None,
    url: Annotated[
        str | None, typer.Option("--url", "-u", help="Register API base URL")
    ] = None,
    project_id: Annotated[
        int | None, typer.Option("--project", "-p", help="Project ID to fetch")
    ] = None,
    format: Annotated[
        str | None, typer.Option("--format", "-f", help="terminal, json, markdown or csv")
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Output file path")
    ] = None,
    name: Annotated[
        str | None, typer.Option("--name", "-n", help="Project name for the report")
    ] = None,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Config file path")
    ] = None,
) -> None:
    """Score a risk register and render the portfolio report."""
    cfg = load_config(config)

    if url:
        cfg.api_url = url
    if project_id is not None:
        cfg.project_id = project_id
    if format:
        cfg.format = format
    if output:
        cfg.output = output
    if name:
        cfg.project_name = name

    if cfg.format not in REPORT_FORMATS:
        console.print(f"[red]Unknown format '{cfg.format}'.[/red]")
        raise typer.Exit(1)

    try:
        risks, source = _load_risks(register, cfg)
    except RegisterError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    from risktrack.analysis.dashboard import build_report

    result = build_report(
        risks,
        project_name=cfg.project_name,
        source=source,
        levels=cfg.risk_levels,
    )
    logger.debug(
        "Scored %d risk(s): unmitigated=%s mitigated=%s",
        len(risks), result.unmitigated_score, result.mitigated_score,
    )
    _output_report(result, cfg)


def _load_risks(register: Path | None, cfg: ReportConfig) -> tuple[list[Risk], str]:
    if register is not None:
        from risktrack.sources.files import load_register

        return load_register(register), str(register)

    if cfg.api_url:
        from risktrack.sources.api import fetch_risks

        risks = asyncio.run(fetch_risks(cfg.api_url, cfg.project_id, cfg.timeout))
        return risks, cfg.api_url

    raise RegisterError("Give a register file or --url for the register API.")


def _output_report(result: PortfolioReport, cfg: ReportConfig) -> None:
    if cfg.format == "json":
        from risktrack.reporters.json_report import render_json

        text = render_json(result)
    elif cfg.format == "markdown":
        from risktrack.reporters.markdown import render_markdown

        text = render_markdown(result)
    elif cfg.format == "csv":
        from risktrack.reporters.csv_export import render_csv

        text = render_csv(result)
    else:
        from risktrack.reporters.terminal import render_terminal

        render_terminal(result, console)
        return

    if cfg.output:
        path = Path(cfg.output)
        if path.is_dir() and cfg.format == "csv":
            from risktrack.reporters.csv_export import export_filename

            path = path / export_filename(result.project_name or "Project")
        path.write_text(text)
        console.print(f"\n[green]Report saved to {path}[/green]")
    else:
        typer.echo(text)


@app.command()
def rate(
    probability: Annotated[float, typer.Option("--probability", "-p", help="Probability")],
    impact: Annotated[float, typer.Option("--impact", "-i", help="Impact")],
    response: Annotated[
        str | None, typer.Option("--response", "-r", help="Response type")
    ] = None,
    status: Annotated[str | None, typer.Option("--status", "-s", help="Risk status")] = None,
) -> None:
    """Score a single risk."""
    from risktrack.analysis.categories import classify_board_approved, display_category
    from risktrack.analysis.scorer import calculate_risk_rating, compute_adjusted_rating

    rating = compute_adjusted_rating(probability, impact, response, status)
    category = display_category(rating.adjusted_score)

    console.print(f"Risk rating:    {calculate_risk_rating(probability, impact):g}")
    console.print(f"Adjusted score: {rating.adjusted_score:g}")
    console.print(f"Priority rank:  {rating.priority_rank}")
    console.print(f"Category:       [{category.color}]{category}[/] ({category.color})")
    console.print(f"Board-approved: {classify_board_approved(rating.adjusted_score)}")


@app.command()
def estimate(
    optimistic: Annotated[float, typer.Option("--optimistic", "-o", help="Optimistic cost")],
    most_likely: Annotated[float, typer.Option("--most-likely", "-m", help="Most likely cost")],
    pessimistic: Annotated[float, typer.Option("--pessimistic", "-p", help="Pessimistic cost")],
    probability: Annotated[
        float, typer.Option("--probability", help="Probability (0-1) for EMV")
    ] = 0.0,
    model: Annotated[
        str | None, typer.Option("--model", help="internal, fixedCap or shared")
    ] = None,
    cap: Annotated[float | None, typer.Option("--cap", help="Contract cap")] = None,
) -> None:
    """PERT cost estimate for a single risk."""
    from risktrack.analysis.estimates import estimate_cost

    risk = Risk(
        probability=probability,
        optimistic_cost=optimistic,
        most_likely_cost=most_likely,
        pessimistic_cost=pessimistic,
        cost_allocation_model=model,
        contract_cap=cap,
    )
    result = estimate_cost(risk)
    console.print_json(json.dumps(result.model_dump() if result else {}))


@app.command()
def levels(
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Config file path")
    ] = None,
) -> None:
    """Show the risk-rating level table."""
    cfg = load_config(config)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Level")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("Color")
    for level in cfg.risk_levels:
        table.add_row(
            f"[{level.color}]{level.name}[/]",
            f"{level.min_rating:g}",
            f"{level.max_rating:g}",
            level.color,
        )
    console.print(table)


@app.command(name="config")
def config_show(
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Config file path")
    ] = None,
) -> None:
    """Show current configuration."""
    cfg = load_config(config)
    console.print_json(json.dumps(cfg.model_dump(), default=str))
