"""Class-name and display-name utilities for icon files."""

from __future__ import annotations

import re
from typing import Dict, Set

UNNAMED_CLASS = "unnamed"
UNNAMED_LABEL = "Unnamed Icon"

CSS_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][\w-]*$", re.ASCII)

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_INVALID_CLASS_CHARS_RE = re.compile(r"[^A-Za-z0-9_-]")
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")


def strip_extension(file_name: str) -> str:
    """Drop the final extension; names without one are returned unchanged."""
    return _EXTENSION_RE.sub("", file_name or "")


def is_css_identifier(value: str) -> bool:
    """Return True when value is usable as a bare CSS class selector."""
    return bool(CSS_IDENTIFIER_RE.fullmatch(str(value or "")))


def sanitize_class_name(file_name: str) -> str:
    """Convert a file name into a CSS-legal base name, before collision handling."""
    stem = strip_extension(file_name)
    if not stem.strip():
        return UNNAMED_CLASS

    normalized = _INVALID_CLASS_CHARS_RE.sub("-", stem)
    normalized = re.sub(r"^-+", "", normalized)
    normalized = re.sub(r"-+", "-", normalized)
    normalized = re.sub(r"-+$", "", normalized)
    normalized = normalized.lower()

    if normalized in ("", "-", "_"):
        return UNNAMED_CLASS
    if normalized[0].isdigit():
        normalized = f"i{normalized}"
    return normalized


class ClassNameGenerator:
    """Hand out unique class names for one build.

    Names that sanitize to the same base get numeric suffixes in call order:
    the first use is bare, the n-th use is ``base-(n-1)``. A suffixed name
    that another file already owns (``home-1.svg``) is skipped, so every
    name handed out in one build is distinct.
    """

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}
        self._taken: Set[str] = set()

    @property
    def counts(self) -> Dict[str, int]:
        return dict(self._counts)

    def name_for(self, file_name: str) -> str:
        base = sanitize_class_name(file_name)
        count = self._counts.get(base, 0)
        while True:
            candidate = base if count == 0 else f"{base}-{count}"
            count += 1
            if candidate not in self._taken:
                break
        self._counts[base] = count
        self._taken.add(candidate)
        return candidate


class DisplayNameGenerator:
    """Turn file names into human readable labels."""

    def label_for(self, file_name: str) -> str:
        stem = strip_extension(file_name)
        spaced = re.sub(r"\s+", " ", _NON_ALNUM_RE.sub(" ", stem)).strip()
        if not spaced:
            return UNNAMED_LABEL
        words = [word[:1].upper() + word[1:].lower() for word in spaced.split(" ")]
        return " ".join(words)
