"""Run a test set against a single log source."""

from __future__ import annotations

from typing import Sequence

from log_verifier.analysis.matcher import match_execution
from log_verifier.analysis.normalizer import parse_test_names
from log_verifier.analysis.outcome import AnalysisOutcome, make_outcome, make_system_error

MISSING_LOG_MESSAGE = "Log content is missing for log source."


def run_test_set(
    test_names: str | Sequence[str] | None,
    log_text: str | None,
    log_source: str,
) -> list[AnalysisOutcome]:
    """Classify every test name against one log source.

    A missing or blank log yields a single SystemCheck error for
    *log_source*, whatever the test names are.  Otherwise the names are
    normalized and one outcome is produced per name, in order; an empty
    name list yields no outcomes.

    Args:
        test_names: Raw delimited test-name string or a sequence of names.
        log_text: Raw log content, or ``None``.
        log_source: Log source identifier reported on every outcome.

    Returns:
        List of outcomes for this (test set, log source) pair.
    """
    if log_text is None or not log_text.strip():
        return [make_system_error(log_source, MISSING_LOG_MESSAGE)]

    if test_names is None or isinstance(test_names, str):
        names = parse_test_names(test_names)
    else:
        names = [n for raw in test_names for n in parse_test_names(raw)]

    return [
        make_outcome(name, match_execution(name, log_text), log_source)
        for name in names
    ]
