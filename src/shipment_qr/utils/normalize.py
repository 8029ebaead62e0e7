"""Normalization helpers for QR payload fields."""

from __future__ import annotations


_STRIP_CHARS = str.maketrans({"\r": None, "\n": None, "\x07": None})


def normalize_text(value: str | None) -> str:
    """Drop CR, LF and bell characters, then trim surrounding whitespace.

    Field separators (``|`` and ``^``) are left untouched: the payload format
    has no escaping and older payloads were produced the same way.
    """
    if not value:
        return ""
    return value.translate(_STRIP_CHARS).strip()
