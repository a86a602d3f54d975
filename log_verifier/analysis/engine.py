"""Log verification engine: routes test sets to log sources.

Two test sets are checked against the four pipeline log sources:

* ``main`` -- base, before and after logs.
* ``report`` -- the post-agent-patch log only.

Pairs outside this table are never evaluated.  Each call to
:func:`analyze` is a pure function of its request.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from log_verifier.analysis.normalizer import has_test_names, parse_test_names
from log_verifier.analysis.outcome import (
    AFTER_LOG,
    BASE_LOG,
    BEFORE_LOG,
    LOG_SOURCES,
    NO_LOG_SOURCE,
    POST_AGENT_PATCH_LOG,
    AnalysisOutcome,
    make_system_error,
)
from log_verifier.analysis.runner import run_test_set

INVALID_REQUEST_MESSAGE = "Invalid analysis request received."

MAIN_TEST_SET = "main"
REPORT_TEST_SET = "report"

# Test set -> log sources it is checked against, in evaluation order
TEST_SET_ROUTING: dict[str, tuple[str, ...]] = {
    MAIN_TEST_SET: (BASE_LOG, BEFORE_LOG, AFTER_LOG),
    REPORT_TEST_SET: (POST_AGENT_PATCH_LOG,),
}

# Wire (camelCase) key -> AnalysisRequest attribute
_WIRE_KEYS = {
    "baseLog": "base_log",
    "beforeLog": "before_log",
    "afterLog": "after_log",
    "postAgentPatchLog": "post_agent_patch_log",
    "mainJsonTests": "main_json_tests",
    "reportJsonTests": "report_json_tests",
}


@dataclass(frozen=True)
class AnalysisRequest:
    """Inputs for one verification run: four logs and two test sets."""

    base_log: str | None = None
    before_log: str | None = None
    after_log: str | None = None
    post_agent_patch_log: str | None = None
    main_json_tests: str | None = None
    report_json_tests: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisRequest:
        """Build a request from a wire payload.

        Accepts the camelCase wire keys as well as the attribute names.
        Unknown keys are ignored.

        Raises:
            ValueError: If a known field holds something other than a
                string or null.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, str | None] = {}
        for key, value in data.items():
            attr = _WIRE_KEYS.get(key, key)
            if attr not in known:
                continue
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"Field '{key}' must be a string or null, "
                    f"got {type(value).__name__}"
                )
            values[attr] = value
        return cls(**values)

    def to_dict(self) -> dict[str, str | None]:
        """Render the request with camelCase wire keys."""
        return {wire: getattr(self, attr) for wire, attr in _WIRE_KEYS.items()}

    def raw_test_set(self, name: str) -> str | None:
        """Raw delimited test-name string for a test set."""
        if name == MAIN_TEST_SET:
            return self.main_json_tests
        if name == REPORT_TEST_SET:
            return self.report_json_tests
        raise KeyError(name)

    def log_content(self, log_source: str) -> str | None:
        """Raw log text for a log source identifier."""
        if log_source not in LOG_SOURCES:
            raise KeyError(log_source)
        return getattr(self, log_source)


def analyze(request: AnalysisRequest | None) -> list[AnalysisOutcome]:
    """Verify both test sets against their routed log sources.

    A missing request yields a single SystemCheck error.  A test set
    whose string is absent or blank is skipped.  Otherwise the outcomes
    of every (test set, log source) pair are concatenated in routing
    order: main against base, before, after, then report against
    post-agent-patch.

    Args:
        request: The analysis request, or ``None``.

    Returns:
        Ordered list of outcomes.
    """
    if request is None:
        return [make_system_error(NO_LOG_SOURCE, INVALID_REQUEST_MESSAGE)]

    outcomes: list[AnalysisOutcome] = []
    for test_set, log_sources in TEST_SET_ROUTING.items():
        raw = request.raw_test_set(test_set)
        if not has_test_names(raw):
            continue
        names = parse_test_names(raw)
        for log_source in log_sources:
            outcomes.extend(
                run_test_set(names, request.log_content(log_source), log_source)
            )
    return outcomes
