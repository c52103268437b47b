"""Compact ``data:`` URI encoding for SVG markup."""

from __future__ import annotations

import re
from typing import Protocol
from urllib.parse import quote

DATA_URI_PREFIX = "data:image/svg+xml,"

# Characters encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"
_HEX_PAIR_RE = re.compile(r"%[0-9A-F]{2}")
_READABLE_ESCAPES = {
    "%20": " ",
    "%3D": "=",
    "%3A": ":",
    "%2F": "/",
}


class DataUriEncoder(Protocol):
    """Turns optimized SVG text into a CSS-embeddable URI."""

    def encode(self, svg_text: str) -> str:
        ...


def _special_hex_encode(match: "re.Match[str]") -> str:
    escape = match.group(0)
    return _READABLE_ESCAPES.get(escape, escape.lower())


class MiniDataUriEncoder:
    """Percent-encode SVG as little as a ``url("...")`` value allows.

    Whitespace is collapsed and double quotes become single quotes so the
    payload can sit inside a double-quoted CSS ``url()``.
    """

    def encode(self, svg_text: str) -> str:
        if not isinstance(svg_text, str):
            raise TypeError(f"Expected a string, but received {type(svg_text).__name__}")
        body = svg_text[1:] if svg_text.startswith("\ufeff") else svg_text
        body = re.sub(r"\s+", " ", body.strip()).replace('"', "'")
        payload = _HEX_PAIR_RE.sub(_special_hex_encode, quote(body, safe=_URI_COMPONENT_SAFE))
        return f"{DATA_URI_PREFIX}{payload}"
