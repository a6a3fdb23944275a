"""Response-type and status adjustment multipliers."""

from __future__ import annotations

from types import MappingProxyType

DEFAULT_RESPONSE_MULTIPLIER = 1.0  # Accept
DEFAULT_STATUS_MULTIPLIER = 1.0  # Active

RESPONSE_MULTIPLIERS = MappingProxyType({
    "avoid": 0.0,
    "transfer": 0.35,  # midpoint of 30-40%
    "mitigate": 0.6,  # midpoint of 50-70%
    "share": 0.6,
    "exploit": -0.3,  # negative on purpose, never clamp
    "accept": DEFAULT_RESPONSE_MULTIPLIER,
})

STATUS_MULTIPLIERS = MappingProxyType({
    "active": DEFAULT_STATUS_MULTIPLIER,
    "open": DEFAULT_STATUS_MULTIPLIER,
    "monitoring": 0.8,
    "in progress": 0.6,
    "closed": 0.0,
    "eventuated": 0.0,
})


def _key(value: str | None) -> str:
    return (value or "").strip().lower()


def resolve_response_multiplier(response_type: str | None) -> float:
    """Multiplier for a response type; unknown or empty values count as Accept."""
    return RESPONSE_MULTIPLIERS.get(_key(response_type), DEFAULT_RESPONSE_MULTIPLIER)


def resolve_status_multiplier(status: str | None) -> float:
    """Multiplier for a risk status; unknown or empty values count as Active."""
    return STATUS_MULTIPLIERS.get(_key(status), DEFAULT_STATUS_MULTIPLIER)


def combined_multiplier(response_type: str | None, status: str | None) -> float:
    return resolve_response_multiplier(response_type) * resolve_status_multiplier(status)
