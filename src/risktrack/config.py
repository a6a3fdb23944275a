"""TOML configuration loader."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from risktrack.models import DEFAULT_RISK_LEVELS, RiskLevel

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS = [
    Path("risktrack.toml"),
    Path.home() / ".config" / "risktrack" / "config.toml",
    Path("/etc/risktrack/config.toml"),
]

REPORT_FORMATS = ("terminal", "json", "markdown", "csv")


class ReportConfig(BaseModel):
    """Configuration for a report run."""

    format: str = Field(default="terminal", description="Output format")
    output: str | None = Field(default=None, description="Output file path")
    project_name: str = Field(default="", description="Project shown in report headers")

    # Register API settings
    api_url: str | None = Field(default=None, description="Base URL of the register API")
    project_id: int | None = Field(default=None, description="Project to fetch risks for")
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    risk_levels: list[RiskLevel] = Field(
        default_factory=lambda: list(DEFAULT_RISK_LEVELS),
        description="Rating ranges used for level counts",
    )


def load_config(config_path: Path | None = None) -> ReportConfig:
    """Load config from TOML file, falling back to defaults."""
    if config_path and config_path.exists():
        return _parse_toml(config_path)

    for path in DEFAULT_CONFIG_PATHS:
        if path.exists():
            return _parse_toml(path)

    logger.debug("No config file found, using defaults")
    return ReportConfig()


def _parse_toml(path: Path) -> ReportConfig:
    logger.debug("Loading config from %s", path)
    data = tomllib.loads(path.read_text())
    report_data = data.get("report", {})
    return ReportConfig(**report_data)
