"""Extract mention and acknowledgement references from free-form text."""

from __future__ import annotations

import re
from typing import Final

_MENTION_PATTERN: Final[re.Pattern[str]] = re.compile(r"@([-\w/]+)")
_ACKNOWLEDGE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"acknowledge\s+(https?://\S+)"
)


def extract_mentions(text: str) -> dict[str, None]:
    """Return the distinct mention tokens found in ``text``.

    The result is an insertion-ordered set: keys appear in the order they were
    first seen, duplicates collapse, and case is preserved. The leading ``@``
    is stripped.
    """

    return dict.fromkeys(match.group(1) for match in _MENTION_PATTERN.finditer(text))


def extract_acknowledgements(text: str) -> list[str]:
    """Return every URL that follows an ``acknowledge`` marker, in order."""

    return [match.group(1) for match in _ACKNOWLEDGE_PATTERN.finditer(text)]


def is_team_reference(token: str) -> bool:
    return "/" in token


def split_team_reference(token: str) -> tuple[str, str]:
    """Split ``<namespace>/<team>`` into its two segments.

    Extra segments after the team are ignored.
    """

    namespace, _, rest = token.partition("/")
    team, _, _ = rest.partition("/")
    return namespace, team


__all__ = [
    "extract_acknowledgements",
    "extract_mentions",
    "is_team_reference",
    "split_team_reference",
]
