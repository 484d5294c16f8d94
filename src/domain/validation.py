"""
Request parameter validation.

Identifiers follow 32-bit signed integer semantics: an optional sign
followed by ASCII digits, within [-2**31, 2**31 - 1].
"""

import re

from .exceptions import EmptyParameter, InvalidIdentifier

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_IDENTIFIER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_identifier(raw: str | None) -> int:
    """
    Parse an entity identifier from a path segment.

    Raises:
        InvalidIdentifier: If the text is missing, not an integer,
            or outside the 32-bit range
    """
    if raw is None or not _IDENTIFIER_PATTERN.fullmatch(raw):
        raise InvalidIdentifier(raw)

    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidIdentifier(raw)
    return value


def require_text(raw: str | None, name: str) -> str:
    """
    Return raw unchanged if it is present and non-empty.

    Whitespace is ordinary text and is matched like any other value.

    Raises:
        EmptyParameter: If raw is None or empty
    """
    if not raw:
        raise EmptyParameter(name)
    return raw


def same_text(left: str, right: str) -> bool:
    """Case-insensitive equality via locale-independent case folding."""
    return left.casefold() == right.casefold()
