"""Log verification engine: test-name parsing, execution matching, and routing."""

from log_verifier.analysis.engine import TEST_SET_ROUTING, AnalysisRequest, analyze
from log_verifier.analysis.matcher import (
    build_execution_pattern,
    find_execution_line,
    has_failure_marker,
    match_execution,
)
from log_verifier.analysis.normalizer import has_test_names, parse_test_names
from log_verifier.analysis.outcome import (
    VALID_STATUSES,
    AnalysisOutcome,
    make_outcome,
    make_system_error,
)
from log_verifier.analysis.runner import run_test_set

__all__ = [
    "AnalysisOutcome",
    "AnalysisRequest",
    "TEST_SET_ROUTING",
    "VALID_STATUSES",
    "analyze",
    "build_execution_pattern",
    "find_execution_line",
    "has_failure_marker",
    "has_test_names",
    "make_outcome",
    "make_system_error",
    "match_execution",
    "parse_test_names",
    "run_test_set",
]
