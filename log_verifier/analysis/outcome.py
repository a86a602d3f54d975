"""Analysis outcome records and their formatting.

One ``AnalysisOutcome`` is produced per (test name, log source) pair that
was evaluated, or one ``SystemCheck`` error per log source whose content
was missing.  Statuses are plain strings so they serialize unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Outcome statuses
NOT_FOUND = "NotFound"
PASSED = "Passed"
FAILED = "Failed"
ERROR = "Error"

VALID_STATUSES = frozenset({NOT_FOUND, PASSED, FAILED, ERROR})

# Log source identifiers, in routing order
BASE_LOG = "base_log"
BEFORE_LOG = "before_log"
AFTER_LOG = "after_log"
POST_AGENT_PATCH_LOG = "post_agent_patch_log"

LOG_SOURCES = (BASE_LOG, BEFORE_LOG, AFTER_LOG, POST_AGENT_PATCH_LOG)

# Test name and log source used for infrastructure errors
SYSTEM_CHECK = "SystemCheck"
NO_LOG_SOURCE = "N/A"

# status -> (message, OK/NOT OK) for per-test outcomes
_STANDARD_FORMS: dict[str, tuple[str, str]] = {
    NOT_FOUND: ("Not Found", "NOT OK"),
    PASSED: ("Passed", "OK"),
    FAILED: ("Failed", "NOT OK"),
}


@dataclass(frozen=True)
class AnalysisOutcome:
    """Result of checking one test name against one log source."""

    test_case_name: str
    log_source: str
    status: str  # NotFound, Passed, Failed, Error
    message: str
    summary: str

    @property
    def is_error(self) -> bool:
        """True for SystemCheck infrastructure errors."""
        return self.status == ERROR

    def to_dict(self) -> dict[str, Any]:
        """Render the outcome in its wire shape."""
        return {
            "testCaseName": self.test_case_name,
            "logSource": self.log_source,
            "result": self.status,
            "message": self.message,
            "summary": self.summary,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisOutcome:
        """Parse an outcome from its wire shape.

        Raises:
            ValueError: If a field is missing or the status is unknown.
        """
        try:
            status = data["result"]
            outcome = cls(
                test_case_name=data["testCaseName"],
                log_source=data["logSource"],
                status=status,
                message=data["message"],
                summary=data["summary"],
            )
        except KeyError as e:
            raise ValueError(f"Outcome is missing field {e}") from e
        if status not in VALID_STATUSES:
            raise ValueError(f"Unknown outcome status: {status!r}")
        return outcome


def make_outcome(test_case_name: str, status: str, log_source: str) -> AnalysisOutcome:
    """Build a per-test outcome with its message and summary line.

    Summary format: ``<name> [<log source>]: <OK|NOT OK> (<message>)``.

    Raises:
        ValueError: If *status* is not NotFound, Passed or Failed.
    """
    if status not in _STANDARD_FORMS:
        raise ValueError(f"Not a per-test status: {status!r}")
    message, verdict = _STANDARD_FORMS[status]
    return AnalysisOutcome(
        test_case_name=test_case_name,
        log_source=log_source,
        status=status,
        message=message,
        summary=f"{test_case_name} [{log_source}]: {verdict} ({message})",
    )


def make_system_error(log_source: str, message: str) -> AnalysisOutcome:
    """Build a SystemCheck error outcome scoped to *log_source*."""
    return AnalysisOutcome(
        test_case_name=SYSTEM_CHECK,
        log_source=log_source,
        status=ERROR,
        message=message,
        summary=f"{SYSTEM_CHECK} [{log_source}]: ERROR ({message})",
    )
