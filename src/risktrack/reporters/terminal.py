"""Rich terminal dashboard."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from risktrack.models import LevelCounts, PortfolioReport


def _counts_line(c: LevelCounts) -> str:
    return (
        f"[#DC3545]Extreme: {c.extreme}[/]  "
        f"[#FD7E14]High: {c.high}[/]  "
        f"[#FFC107]Moderate: {c.moderate}[/]  "
        f"[#28A745]Low: {c.low}[/]  "
        f"| Total: {c.total}"
    )


def render_terminal(report: PortfolioReport, console: Console) -> None:
    """Render a portfolio report to the terminal using Rich."""
    console.print()

    summary_text = (
        f"Unmitigated: [bold {report.unmitigated_category.color}]"
        f"{report.unmitigated_score:g} ({report.unmitigated_category})[/]   "
        f"Mitigated: [bold {report.mitigated_category.color}]"
        f"{report.mitigated_score:g} ({report.mitigated_category})[/]\n"
        f"Before: {_counts_line(report.level_counts)}\n"
        f"After:  {_counts_line(report.mitigated_level_counts)}"
    )
    if report.total_expected_cost:
        summary_text += (
            f"\nExpected cost: {report.total_expected_cost:,.2f}  "
            f"EMV: {report.total_emv:,.2f}"
        )
    title = escape(f"Risk Summary {report.project_name}".rstrip())
    console.print(Panel(
        summary_text,
        title=f"[bold]{title}[/]",
        subtitle=f"{escape(report.source)} | {report.timestamp:%Y-%m-%d %H:%M UTC}",
    ))

    if not report.risks:
        console.print("\n[green]No risks.[/green]")
        return

    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("Rank", justify="right", no_wrap=True)
    table.add_column("ID", no_wrap=True)
    table.add_column("Event", ratio=3)
    table.add_column("Rating", justify="right", no_wrap=True)
    table.add_column("Residual", justify="right", no_wrap=True)
    table.add_column("Category", no_wrap=True)
    table.add_column("Response", ratio=1)
    table.add_column("Status", ratio=1)

    for s in report.sorted_risks():
        r = s.risk
        table.add_row(
            str(s.priority_rank),
            escape(r.risk_id),
            escape(r.risk_event[:80]),
            f"{r.risk_rating:g}",
            f"[{s.color}]{s.residual_rating:g}[/]",
            f"[{s.color}]{s.category}[/]",
            escape(r.response_type or ""),
            escape(r.risk_status or ""),
        )

    console.print(table)
