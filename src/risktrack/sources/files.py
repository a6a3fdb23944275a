"""Load risk registers from JSON or CSV files."""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from risktrack.models import Risk
from risktrack.sources import RegisterError

logger = logging.getLogger(__name__)

# Register export column -> Risk field
CSV_COLUMNS = {
    "Priority / Rank": "priority_rank",
    "Risk ID": "risk_id",
    "Owned By": "owned_by",
    "Risk Event (There is a risk that)": "risk_event",
    "Risk Category": "risk_category",
    "Probability": "probability",
    "Impact": "impact",
    "Risk Rating": "risk_rating",
    "Risk Status": "risk_status",
    "Recommended Response Type": "response_type",
}


def load_register(path: Path) -> list[Risk]:
    """Load risks from ``path``, choosing the parser by file suffix."""
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise RegisterError(f"Cannot read register {path}: {exc}") from exc

    if path.suffix.lower() == ".csv":
        risks = parse_csv(raw)
    else:
        risks = parse_json(raw)
    logger.info("Loaded %d risk(s) from %s", len(risks), path)
    return risks


def parse_json(raw: str) -> list[Risk]:
    """Parse a JSON list of risks, or an object holding one under ``risks``."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise RegisterError(f"Invalid JSON register: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("risks")
    if not isinstance(data, list):
        raise RegisterError("JSON register must be a list of risks or contain a 'risks' list")

    return [to_risk(item, index) for index, item in enumerate(data, start=1)]


def parse_csv(raw: str) -> list[Risk]:
    """Parse a CSV register using export headers or plain field names."""
    reader = csv.DictReader(io.StringIO(raw))
    if not reader.fieldnames:
        return []

    risks: list[Risk] = []
    for index, row in enumerate(reader, start=1):
        record = {
            CSV_COLUMNS.get(key.strip(), key.strip()): value.strip()
            for key, value in row.items()
            if key and value is not None and value.strip()
        }
        risks.append(to_risk(record, index))
    return risks


def to_risk(item: Any, index: int) -> Risk:
    if not isinstance(item, dict):
        raise RegisterError(f"Risk #{index} is not an object")
    try:
        return Risk.model_validate(item)
    except ValidationError as exc:
        raise RegisterError(f"Risk #{index} is invalid: {exc}") from exc
