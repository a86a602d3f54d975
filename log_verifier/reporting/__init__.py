"""Verification result reporting: JSON and YAML report generation."""

from log_verifier.reporting.reporter import SUMMARY_STATUSES, Reporter

__all__ = [
    "Reporter",
    "SUMMARY_STATUSES",
]
