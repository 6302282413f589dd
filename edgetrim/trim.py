"""Removal of a set of characters from both ends of a string."""

from __future__ import annotations

__all__ = ["trim"]


def trim(src: str | None, trim_chars: str | None = None) -> str | None:
    """Return ``src`` without any characters of ``trim_chars`` at either end.

    Characters are removed from the start and from the end until one not in
    ``trim_chars`` is met; characters in the middle are kept. If
    ``trim_chars`` is ``None`` an unchanged copy of ``src`` is returned, and
    an empty ``trim_chars`` removes nothing. If ``src`` is ``None`` the
    result is ``None``.
    """
    if src is None:
        return None
    if trim_chars is None:
        return src
    wanted = set(trim_chars)

    start = 0
    end = len(src)
    while start < end and src[start] in wanted:
        start += 1
    while end > start and src[end - 1] in wanted:
        end -= 1
    return src[start:end]