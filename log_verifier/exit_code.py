"""Exit code computation for a verification run.

Each outcome status either blocks (exit code 1) or not, according to the
configured set of blocking statuses.  By default ``Failed`` and ``Error``
block while ``Passed`` and ``NotFound`` do not; non-blocking
``NotFound`` outcomes are reported as warnings so a test that never ran
is still visible.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from log_verifier.analysis.outcome import NOT_FOUND, AnalysisOutcome


@dataclass
class ExitCodeSummary:
    """Summary of blocking / non-blocking outcomes."""

    exit_code: int
    blocking: list[str]
    non_blocking: list[str]
    warnings: list[str]


def is_blocking(status: str, blocking_statuses: Iterable[str]) -> bool:
    """Determine whether a single outcome status should cause exit code 1."""
    return status in set(blocking_statuses)


def compute_exit_code(
    outcomes: list[AnalysisOutcome],
    blocking_statuses: Iterable[str],
) -> ExitCodeSummary:
    """Compute the exit code from analysis outcomes.

    Args:
        outcomes: Outcomes returned by the engine.
        blocking_statuses: Statuses that make the run fail.

    Returns:
        ``ExitCodeSummary`` with exit code, blocking/non-blocking
        summary lines, and warnings.
    """
    statuses = frozenset(blocking_statuses)
    blocking: list[str] = []
    non_blocking: list[str] = []
    warnings: list[str] = []

    for outcome in outcomes:
        if is_blocking(outcome.status, statuses):
            blocking.append(outcome.summary)
        else:
            non_blocking.append(outcome.summary)
            if outcome.status == NOT_FOUND:
                warnings.append(
                    f"{outcome.test_case_name}: no execution line in "
                    f"{outcome.log_source}"
                )

    return ExitCodeSummary(
        exit_code=1 if blocking else 0,
        blocking=blocking,
        non_blocking=non_blocking,
        warnings=warnings,
    )
