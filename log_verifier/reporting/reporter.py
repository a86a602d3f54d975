"""Report generation for log verification outcomes.

Generates JSON or YAML reports from analysis outcomes.  The report keeps
the outcomes in the order the engine produced them and adds a summary
with per-status counts, overall and per log source.
"""

from __future__ import annotations

import datetime
import json
from pathlib import Path
from typing import Any

import yaml

from log_verifier.analysis.outcome import (
    ERROR,
    FAILED,
    NOT_FOUND,
    PASSED,
    AnalysisOutcome,
)

# Status order used in summaries
SUMMARY_STATUSES = (PASSED, FAILED, NOT_FOUND, ERROR)


class Reporter:
    """Collects analysis outcomes and generates reports."""

    def __init__(self) -> None:
        self.outcomes: list[AnalysisOutcome] = []
        self.request_info: dict[str, Any] | None = None

    def set_request_info(self, info: dict[str, Any]) -> None:
        """Attach a description of the inputs (e.g. log file paths).

        Args:
            info: Dict copied verbatim into the report's ``request`` key.
        """
        self.request_info = info

    def add_outcomes(self, outcomes: list[AnalysisOutcome]) -> None:
        """Add multiple outcomes to the report, keeping their order."""
        self.outcomes.extend(outcomes)

    def generate_report(self) -> dict[str, Any]:
        """Generate the report data structure.

        Returns:
            Dictionary representing the full report, suitable for JSON
            or YAML serialization.
        """
        now = datetime.datetime.now(tz=datetime.timezone.utc).isoformat()
        report: dict[str, Any] = {
            "generated_at": now,
            "summary": self._compute_summary(),
        }
        if self.request_info is not None:
            report["request"] = self.request_info
        report["outcomes"] = [o.to_dict() for o in self.outcomes]
        return report

    def format_summary_lines(self) -> list[str]:
        """One summary line per outcome, in report order."""
        return [o.summary for o in self.outcomes]

    def write_report(self, path: Path) -> None:
        """Write the report as a JSON file.

        Args:
            path: File path to write the JSON report to.
        """
        report = self.generate_report()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(report, f, indent=2)
            f.write("\n")

    def write_yaml(self, path: Path) -> None:
        """Write the report as a YAML file.

        Args:
            path: File path to write the YAML report to.
        """
        report = self.generate_report()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(
                report,
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

    def _compute_summary(self) -> dict[str, Any]:
        """Compute status counts overall and per log source.

        Log sources appear in the order they were first seen.
        """
        summary: dict[str, Any] = {"total": len(self.outcomes)}
        summary.update(_count_statuses(self.outcomes))

        by_source: dict[str, list[AnalysisOutcome]] = {}
        for outcome in self.outcomes:
            by_source.setdefault(outcome.log_source, []).append(outcome)
        summary["by_log_source"] = {
            source: {"total": len(items), **_count_statuses(items)}
            for source, items in by_source.items()
        }
        return summary


def _count_statuses(outcomes: list[AnalysisOutcome]) -> dict[str, int]:
    counts = {status: 0 for status in SUMMARY_STATUSES}
    for outcome in outcomes:
        counts[outcome.status] += 1
    return counts
