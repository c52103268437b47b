"""Core deterministic build pipeline for SVG icon stylesheets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .config import BuildConfig
from .data_uri import DataUriEncoder, MiniDataUriEncoder
from .naming import ClassNameGenerator, DisplayNameGenerator
from .optimizer import Optimizer, SvgOptimizer
from .paths import OutputLayout, UnsafePathError, list_input_directory, safe_icon_target
from .records import Accepted, FileOutcome, IconRecord, IconRecordBuilder
from .storage import write_text
from .stylesheet import StylesheetAssembler
from .template import render_demo

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "No SVG files found in the input directory."
EMBEDDED_DEMO_TITLE = "Embedded Icons"
REFERENCED_DEMO_TITLE = "Referenced Icons"

ProgressCallback = Callable[[int, int, str], None]


class BuildPipelineError(RuntimeError):
    """Raised for fatal icon build errors."""


@dataclass
class BuildResult:
    """Outcome of one build; filled in phase by phase."""

    success: bool = False
    warnings: List[str] = field(default_factory=list)
    records: List[IconRecord] = field(default_factory=list)
    embedded_css: str = ""
    referenced_css: str = ""
    error: Optional[str] = None
    svg_files: List[Path] = field(default_factory=list)
    layout: Optional[OutputLayout] = None
    icon_selector: str = ""
    demo_paths: Dict[str, Path] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            "success": self.success,
            "error": self.error,
            "warnings": list(self.warnings),
            "processedIcons": [record.to_dict() for record in self.records],
            "svgFiles": [str(path) for path in self.svg_files],
            "directories": self.layout.to_dict() if self.layout else None,
            "iconSelector": self.icon_selector,
            "demoPaths": {mode: str(path) for mode, path in self.demo_paths.items()},
        }


class BuildPipeline:
    """Turn a directory of SVG files into icon stylesheets and demo pages.

    Phases run in order and each gates the next: directory setup, discovery,
    per-file processing, then (optionally) demo generation. A fatal error in
    any phase ends the build with ``success=False``; anything already written
    stays on disk.
    """

    def __init__(
        self,
        config: BuildConfig,
        *,
        optimizer: Optional[Optimizer] = None,
        encoder: Optional[DataUriEncoder] = None,
    ) -> None:
        self.config = config
        self.optimizer = optimizer or SvgOptimizer()
        self.encoder = encoder or MiniDataUriEncoder()
        self.layout = OutputLayout.for_root(Path(config.output))

    def process(self, progress_callback: Optional[ProgressCallback] = None) -> BuildResult:
        result = BuildResult(layout=self.layout)
        try:
            self._create_output_directories()
            result.svg_files = self._discover_svg_files()
            self._process_files(result, progress_callback)
            if self.config.demo:
                self._generate_demos(result)
        except (BuildPipelineError, UnsafePathError, OSError) as exc:
            logger.error(f"Icon build failed: {exc}")
            result.error = str(exc)
            return result
        result.success = True
        logger.info(
            f"Built {len(result.records)} icons from {len(result.svg_files)} SVG files "
            f"with {len(result.warnings)} warnings"
        )
        return result

    def _create_output_directories(self) -> None:
        logger.info(f"Preparing output directories under {self.layout.root}")
        for directory in self.layout.directories():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise BuildPipelineError(f"Error creating directory {directory}: {exc}") from exc

    def _discover_svg_files(self) -> List[Path]:
        entries, svg_files = list_input_directory(Path(self.config.input))
        if not entries:
            raise BuildPipelineError(EMPTY_INPUT_MESSAGE)
        logger.info(f"Found {len(svg_files)} SVG files in {self.config.input}")
        return svg_files

    def _new_builder(self) -> IconRecordBuilder:
        return IconRecordBuilder(
            optimizer=self.optimizer,
            encoder=self.encoder,
            prefix=self.config.prefix,
            postfix=self.config.postfix,
            class_names=ClassNameGenerator(),
            display_names=DisplayNameGenerator(),
        )

    def _process_files(self, result: BuildResult, progress_callback: Optional[ProgressCallback]) -> None:
        builder = self._new_builder()
        assembler = StylesheetAssembler(self.config.prefix, self.config.postfix)
        result.icon_selector = assembler.selector
        total = len(result.svg_files)

        for index, file_path in enumerate(result.svg_files, start=1):
            outcome = builder.build(file_path)
            self._fold_outcome(outcome, result, assembler)
            if progress_callback is not None:
                progress_callback(index, total, file_path.name)

        result.embedded_css = assembler.embedded_css()
        result.referenced_css = assembler.referenced_css()
        if self.config.embedded:
            write_text(self.layout.stylesheet(embedded=True), result.embedded_css)
        if self.config.referenced:
            write_text(self.layout.stylesheet(embedded=False), result.referenced_css)

    def _fold_outcome(self, outcome: FileOutcome, result: BuildResult, assembler: StylesheetAssembler) -> None:
        if not isinstance(outcome, Accepted):
            logger.warning(outcome.reason)
            result.warnings.append(outcome.reason)
            return
        result.records.append(outcome.record)
        assembler.add(outcome)
        if self.config.referenced:
            target = safe_icon_target(self.layout.svg_destination, outcome.record.file_name)
            write_text(target, outcome.svg_text)

    def _generate_demos(self, result: BuildResult) -> None:
        modes = []
        if self.config.embedded:
            modes.append(("embedded", True, EMBEDDED_DEMO_TITLE, result.embedded_css))
        if self.config.referenced:
            modes.append(("referenced", False, REFERENCED_DEMO_TITLE, result.referenced_css))
        for mode, embedded, title, stylesheet in modes:
            page = render_demo(
                title=title,
                embedded=embedded,
                records=result.records,
                stylesheet=stylesheet,
                icon_selector=result.icon_selector,
                source_directory=Path(self.config.input),
                output_directory=self.layout.embedded_icons if embedded else self.layout.referenced_icons,
                embedded_demo_available=self.config.embedded,
            )
            result.demo_paths[mode] = write_text(self.layout.demo(embedded=embedded), page)
        logger.info(f"Wrote {len(result.demo_paths)} demo pages")


def build_icons(
    config: BuildConfig,
    *,
    optimizer: Optional[Optimizer] = None,
    encoder: Optional[DataUriEncoder] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> BuildResult:
    """Run one build; optimizer and encoder default to the bundled ones."""
    pipeline = BuildPipeline(config, optimizer=optimizer, encoder=encoder)
    return pipeline.process(progress_callback)
