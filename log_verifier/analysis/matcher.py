"""Execution-line detection for test names in raw runner logs.

A test counts as executed when the log holds an *execution line*: a line
carrying a bracketed log level, then the test name, then a
``Time elapsed: <n> s`` marker, as Maven Surefire and similar runners
print them::

    [INFO] testAddItem(com.acme.CartTest)  Time elapsed: 0.042 s
    [ERROR] testCheckout(com.acme.CartTest)  Time elapsed: 0.011 s  <<< FAILURE!

Detection is two independent checks.  The execution pattern finds the
line; the failure-marker pattern then inspects only the matched span for
a ``<<< FAILURE!`` / ``<<< ERROR!`` suffix.
"""

from __future__ import annotations

import re

from log_verifier.analysis.outcome import FAILED, NOT_FOUND, PASSED

# Log level tokens accepted in front of an execution line
LOG_LEVELS = ("INFO", "ERROR", "WARN", "DEBUG", "TRACE")

# Any character except a line terminator (\n, \r, NEL, LS, PS)
_LINE_CHAR = r"[^\r\n\u0085\u2028\u2029]"

# Optional prefix, [LEVEL], gap, test name, gap, Time elapsed: <number> s, rest of line.
# The test name is substituted already escaped.  Gaps stop at line terminators,
# so they cannot reach a "Time elapsed:" or failure marker on another line.
EXECUTION_PATTERN_TEMPLATE = (
    _LINE_CHAR + r"*?\[(?:" + "|".join(LOG_LEVELS) + r")\]\s" + _LINE_CHAR + r"*?{name}"
    + _LINE_CHAR + r"*?Time elapsed:\s*(?:\d*\.?\d+|\.\d+)\s*s" + _LINE_CHAR + "*"
)

# One to three '<', one whitespace character, FAILURE or ERROR, '!'
FAILURE_MARKER_PATTERN = re.compile(r"(<{1,3})\s(FAILURE|ERROR)!", re.IGNORECASE)


def build_execution_pattern(test_name: str) -> re.Pattern[str]:
    """Compile the execution-line pattern for one test name.

    The name is matched literally, so characters such as ``.``, ``[`` or
    ``(`` in parameterized test names carry no regex meaning.
    """
    return re.compile(
        EXECUTION_PATTERN_TEMPLATE.format(name=re.escape(test_name)),
        re.IGNORECASE,
    )


def has_failure_marker(text: str) -> bool:
    """True if *text* contains a ``<``/``<<``/``<<<`` FAILURE! or ERROR! marker."""
    return FAILURE_MARKER_PATTERN.search(text) is not None


def find_execution_line(test_name: str, log_text: str) -> str | None:
    """Return the first execution-line span for *test_name*, or None."""
    match = build_execution_pattern(test_name).search(log_text)
    if match is None:
        return None
    return match.group(0)


def match_execution(test_name: str, log_text: str) -> str:
    """Classify one test name against one log text.

    Returns:
        ``NotFound`` if no execution line exists, ``Failed`` if the
        execution line carries a failure marker, ``Passed`` otherwise.
    """
    line = find_execution_line(test_name, log_text)
    if line is None:
        return NOT_FOUND
    if has_failure_marker(line):
        return FAILED
    return PASSED
