"""Markdown report generator."""

from __future__ import annotations

from risktrack.models import PortfolioReport


def render_markdown(report: PortfolioReport) -> str:
    """Render a portfolio report as Markdown."""
    lines: list[str] = []
    before = report.level_counts
    after = report.mitigated_level_counts

    lines.append(f"# Risk Register Report {report.project_name}".rstrip())
    lines.append("")
    lines.append(f"- **Source**: {report.source}")
    lines.append(f"- **Date**: {report.timestamp:%Y-%m-%d %H:%M UTC}")
    lines.append(
        f"- **Unmitigated score**: {report.unmitigated_score:g} "
        f"({report.unmitigated_category})"
    )
    lines.append(
        f"- **Mitigated score**: {report.mitigated_score:g} ({report.mitigated_category})"
    )
    if report.total_expected_cost:
        lines.append(f"- **Expected cost**: {report.total_expected_cost:,.2f}")
        lines.append(f"- **EMV**: {report.total_emv:,.2f}")
    lines.append("")
    lines.append("## Summary")
    lines.append("")
    lines.append("| | Extreme | High | Moderate | Low | Total |")
    lines.append("|---|--------:|-----:|---------:|----:|------:|")
    lines.append(
        f"| Unmitigated | {before.extreme} | {before.high} | {before.moderate} "
        f"| {before.low} | {before.total} |"
    )
    lines.append(
        f"| Mitigated | {after.extreme} | {after.high} | {after.moderate} "
        f"| {after.low} | {after.total} |"
    )
    lines.append("")

    if not report.risks:
        lines.append("No risks.")
        return "\n".join(lines)

    lines.append("## Risks")
    lines.append("")
    lines.append("| Rank | ID | Event | Rating | Residual | Category | Response | Status |")
    lines.append("|-----:|----|-------|-------:|---------:|----------|----------|--------|")

    for s in report.sorted_risks():
        r = s.risk
        event = r.risk_event.replace("|", "\\|")[:60]
        lines.append(
            f"| {s.priority_rank} | {r.risk_id} | {event} | {r.risk_rating:g} | "
            f"{s.residual_rating:g} | {s.category.value.upper()} | "
            f"{r.response_type or ''} | {r.risk_status or ''} |"
        )

    lines.append("")
    return "\n".join(lines)
