"""Test-name list normalization.

Test sets arrive as a single delimited string (one name per line in the
common case, but commas and semicolons are accepted too).  The helpers
here turn that string into an ordered list of names without ever raising.
"""

from __future__ import annotations

import re

# Characters that separate test names in a raw test-set string
_DELIMITERS = re.compile(r"[\n\r;,]")


def has_test_names(raw: str | None) -> bool:
    """True if *raw* is present and contains something other than whitespace."""
    return raw is not None and raw.strip() != ""


def parse_test_names(raw: str | None) -> list[str]:
    """Split a delimited test-name string into a list of names.

    Every delimiter in ``\\n``, ``\\r``, ``;`` and ``,`` separates two
    tokens.  Tokens are stripped and empty tokens are dropped.  Order is
    preserved and duplicates are kept; case is left untouched.

    Args:
        raw: The delimited test-name string, or ``None``.

    Returns:
        List of test names (empty for ``None`` or blank input).
    """
    if not has_test_names(raw):
        return []
    assert raw is not None
    names: list[str] = []
    for token in _DELIMITERS.split(raw):
        token = token.strip()
        if token:
            names.append(token)
    return names
