"""Risk register sources: local files and the register REST API."""

from __future__ import annotations


class RegisterError(ValueError):
    """A risk register could not be read or fetched."""
