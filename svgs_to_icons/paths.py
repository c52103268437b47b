"""Output layout and filesystem safety helpers for icon builds."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

EMBEDDED_DIR_NAME = "embedded-icons"
REFERENCED_DIR_NAME = "referenced-icons"
ICONS_SUBDIR_NAME = "icons"
STYLESHEET_NAME = "icons.css"
DEMO_NAME = "index.html"
SVG_SUFFIX = ".svg"


class UnsafePathError(ValueError):
    """Raised when a target path escapes the managed output directory."""


@dataclass(frozen=True)
class OutputLayout:
    """Resolved output directories for one build."""

    root: Path
    embedded_icons: Path
    referenced_icons: Path
    svg_destination: Path

    @classmethod
    def for_root(cls, root: Path) -> "OutputLayout":
        referenced = root / REFERENCED_DIR_NAME
        return cls(
            root=root,
            embedded_icons=root / EMBEDDED_DIR_NAME,
            referenced_icons=referenced,
            svg_destination=referenced / ICONS_SUBDIR_NAME,
        )

    def directories(self) -> Tuple[Path, Path, Path]:
        return (self.embedded_icons, self.referenced_icons, self.svg_destination)

    def stylesheet(self, embedded: bool) -> Path:
        base = self.embedded_icons if embedded else self.referenced_icons
        return base / STYLESHEET_NAME

    def demo(self, embedded: bool) -> Path:
        base = self.embedded_icons if embedded else self.referenced_icons
        return base / DEMO_NAME

    def to_dict(self) -> Dict[str, str]:
        return {
            "embeddedIcons": str(self.embedded_icons),
            "referencedIcons": str(self.referenced_icons),
            "svgDestination": str(self.svg_destination),
        }


def is_svg_file(path: Path) -> bool:
    return path.suffix.lower() == SVG_SUFFIX and path.is_file()


def list_input_directory(input_dir: Path) -> Tuple[List[Path], List[Path]]:
    """Return every entry of input_dir and the SVG files among them, sorted by name."""
    entries = sorted(Path(input_dir).iterdir(), key=lambda entry: entry.name)
    return entries, [entry for entry in entries if is_svg_file(entry)]


def safe_icon_target(base_dir: Path, file_name: str) -> Path:
    """Build a target path for an icon copy that stays inside base_dir."""
    if not file_name or Path(file_name).name != file_name or file_name in (".", ".."):
        raise UnsafePathError(f"Invalid icon file name: {file_name!r}")
    base = base_dir.resolve()
    target = (base / file_name).resolve()
    if target.parent != base:
        raise UnsafePathError(f"Refusing to write outside {base}")
    return target
