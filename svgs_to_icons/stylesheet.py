"""CSS assembly for the embedded and referenced icon stylesheets."""

from __future__ import annotations

from typing import List

from .records import Accepted

FALLBACK_ICON_SELECTOR = '[class*="icon"]'

BASE_DECLARATIONS = (
    ("mask-size", "100% 100%"),
    ("background-color", "currentColor"),
    ("mask-repeat", "no-repeat"),
    ("mask-position", "center"),
    ("height", "1em"),
    ("width", "1em"),
    ("display", "inline-block"),
)


def build_icon_selector(prefix: str, postfix: str) -> str:
    """Attribute selector matching every generated class."""
    selector = ""
    if prefix:
        selector += f'[class*="{prefix}"]'
    if postfix:
        selector += f'[class*="{postfix}"]'
    return selector or FALLBACK_ICON_SELECTOR


def build_base_rule(selector: str) -> str:
    body = "\n".join(f"\t{name}: {value};" for name, value in BASE_DECLARATIONS)
    return f"{selector} {{\n{body}\n}}"


def embedded_rule(class_name: str, data_uri: str) -> str:
    return f'.{class_name} {{ mask-image: url("{data_uri}"); }}'


def referenced_rule(class_name: str, relative_path: str) -> str:
    quoted = relative_path.replace("\\", "\\\\").replace('"', '\\"')
    return f'.{class_name} {{ mask-image: url("{quoted}"); }}'


class StylesheetAssembler:
    """Accumulate per-icon rules for both output modes in arrival order."""

    def __init__(self, prefix: str = "", postfix: str = "") -> None:
        self.selector = build_icon_selector(prefix, postfix)
        self.base_rule = build_base_rule(self.selector)
        self._embedded: List[str] = []
        self._referenced: List[str] = []

    def __len__(self) -> int:
        return len(self._embedded)

    def add(self, accepted: Accepted) -> None:
        class_name = accepted.record.class_name
        self._embedded.append(embedded_rule(class_name, accepted.data_uri))
        self._referenced.append(referenced_rule(class_name, accepted.relative_path))

    @property
    def embedded_rules(self) -> str:
        return "".join(f"{rule}\n" for rule in self._embedded)

    @property
    def referenced_rules(self) -> str:
        return "".join(f"{rule}\n" for rule in self._referenced)

    def embedded_css(self) -> str:
        return f"{self.base_rule}\n{self.embedded_rules}"

    def referenced_css(self) -> str:
        return f"{self.base_rule}\n{self.referenced_rules}"
