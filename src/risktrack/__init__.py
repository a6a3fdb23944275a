"""risktrack: project risk register scoring and reporting."""

__version__ = "0.1.0"
