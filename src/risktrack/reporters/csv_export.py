"""CSV export of a scored risk register."""

from __future__ import annotations

import csv
import io
import re

from risktrack.models import PortfolioReport
from risktrack.sources.files import CSV_COLUMNS

EXTRA_COLUMNS = ["Residual Rating", "Category"]


def render_csv(report: PortfolioReport) -> str:
    """Render register rows with export headers plus residual figures."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow([*CSV_COLUMNS, *EXTRA_COLUMNS])

    for s in report.sorted_risks():
        row = s.risk.model_dump()
        writer.writerow([
            *("" if row[field] is None else row[field] for field in CSV_COLUMNS.values()),
            s.residual_rating,
            s.category.value,
        ])

    return buf.getvalue()


def export_filename(project_name: str) -> str:
    safe = re.sub(r"[^a-z0-9]", "_", project_name, flags=re.IGNORECASE)
    return f"{safe}_Risk_Register.csv"
