"""Per-file validation and icon metadata assembly."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from .data_uri import DATA_URI_PREFIX, DataUriEncoder
from .naming import ClassNameGenerator, DisplayNameGenerator, is_css_identifier
from .optimizer import Optimizer

logger = logging.getLogger(__name__)

SVG_ROOT_MARKER = "<svg"
REFERENCED_ICONS_SUBDIR = "icons"


@dataclass(frozen=True)
class IconRecord:
    """Metadata for one generated icon class."""

    class_name: str
    display_name: str
    file_name: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "className": self.class_name,
            "displayName": self.display_name,
            "fileName": self.file_name,
        }


@dataclass(frozen=True)
class Accepted:
    """A file that passed every gate, with everything needed to emit it."""

    record: IconRecord
    svg_text: str
    data_uri: str

    @property
    def relative_path(self) -> str:
        return f"./{REFERENCED_ICONS_SUBDIR}/{self.record.file_name}"


@dataclass(frozen=True)
class Rejected:
    """A file skipped for a recoverable content problem."""

    file_name: str
    reason: str


FileOutcome = Union[Accepted, Rejected]


class IconRecordBuilder:
    """Run one SVG file through the optimization and encoding gates.

    Only reading the file can raise (``OSError``); every content problem is
    reported as a :class:`Rejected` outcome so the build can move on.
    """

    def __init__(
        self,
        *,
        optimizer: Optimizer,
        encoder: DataUriEncoder,
        prefix: str = "",
        postfix: str = "",
        class_names: Optional[ClassNameGenerator] = None,
        display_names: Optional[DisplayNameGenerator] = None,
    ) -> None:
        self.optimizer = optimizer
        self.encoder = encoder
        self.prefix = prefix
        self.postfix = postfix
        self.class_names = class_names or ClassNameGenerator()
        self.display_names = display_names or DisplayNameGenerator()

    def build(self, file_path: Path) -> FileOutcome:
        file_path = Path(file_path)
        file_name = file_path.name
        raw = file_path.read_text(encoding="utf-8", errors="replace")

        try:
            optimized = self.optimizer.optimize(raw)
        except Exception as exc:  # any optimizer failure only skips this file
            logger.debug(f"Optimizer failed on {file_name}", exc_info=True)
            return Rejected(file_name, f"Skipping {file_name}. SVG optimization failed: {exc}")

        if not optimized or SVG_ROOT_MARKER not in optimized:
            return Rejected(file_name, f"Skipping {file_name}: malformed or empty SVG.")

        data_uri = self.encoder.encode(optimized)
        if not isinstance(data_uri, str) or not data_uri.startswith(DATA_URI_PREFIX):
            return Rejected(file_name, f"Invalid SVG data URI for {file_name}")

        class_name = f"{self.prefix}{self.class_names.name_for(file_name)}{self.postfix}"
        if not is_css_identifier(class_name):
            return Rejected(file_name, f"Skipping {file_name}: invalid CSS class name '{class_name}'.")

        record = IconRecord(
            class_name=class_name,
            display_name=self.display_names.label_for(file_name),
            file_name=file_name,
        )
        logger.debug(f"Accepted {file_name} as .{class_name}")
        return Accepted(record=record, svg_text=optimized, data_uri=data_uri)
