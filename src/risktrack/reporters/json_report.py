"""JSON report exporter."""

from __future__ import annotations

import json

from risktrack.models import PortfolioReport


def render_json(report: PortfolioReport) -> str:
    """Render a portfolio report as JSON string."""
    data = report.model_dump(mode="json")
    data["risks"] = [s.model_dump(mode="json") for s in report.sorted_risks()]
    return json.dumps(data, indent=2, ensure_ascii=False)
