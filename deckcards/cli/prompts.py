"""Lenient parsing of answers typed at the console."""

from __future__ import annotations

_YES = {"y", "yes"}


def parse_count(text: str | None) -> int:
    """Return the positive integer in ``text`` or 0 when there is none."""

    if text is None:
        return 0
    try:
        value = int(text.strip())
    except ValueError:
        return 0
    return value if value > 0 else 0


def parse_yes(text: str | None) -> bool:
    if text is None:
        return False
    return text.strip().lower() in _YES
