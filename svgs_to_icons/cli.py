"""CLI for the SVG icon build."""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from . import __version__
from .config import ConfigurationError, load_config_file, merge_config, validate_config
from .pipeline import BuildPipeline, BuildResult

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
MAX_LOG_SIZE = 5_242_880  # 5MB
LOG_BACKUP_COUNT = 3

EPILOG = """Examples:
  svgs-to-icons ./icons
  svgs-to-icons ./icons --output ./dist --prefix ui-
  svgs-to-icons ./icons --no-demo
  svgs-to-icons ./icons --prefix btn- --postfix -icon
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svgs-to-icons",
        description="Convert SVG files to CSS classes with mask properties",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", nargs="?", help="Input directory containing SVG files")
    parser.add_argument("--output", metavar="DIR", help="Output parent directory")
    parser.add_argument("--prefix", help="Prefix for CSS class names")
    parser.add_argument("--postfix", help="Postfix for CSS class names")
    parser.add_argument(
        "--embedded",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate embedded version (data URIs)",
    )
    parser.add_argument(
        "--referenced",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate referenced version (file paths)",
    )
    parser.add_argument(
        "--demo",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate interactive demo HTML files",
    )
    parser.add_argument("--config", metavar="FILE", help="Path to a JSON configuration file")
    parser.add_argument("--log-file", metavar="FILE", help="Also write logs to a rotating file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging(debug: bool, log_file: Optional[str]) -> None:
    logger = logging.getLogger("svgs_to_icons")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)


def _cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "input": args.input,
        "output": args.output,
        "prefix": args.prefix,
        "postfix": args.postfix,
        "embedded": args.embedded,
        "referenced": args.referenced,
        "demo": args.demo,
    }


class _ProgressBar:
    """Adapt pipeline progress callbacks to a tqdm bar created on first use."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled
        self._bar: Optional[tqdm] = None

    def __call__(self, done: int, total: int, file_name: str) -> None:
        if not self.enabled:
            return
        if self._bar is None:
            self._bar = tqdm(total=total, desc="Building icons", unit="file", leave=False)
        self._bar.set_postfix_str(file_name, refresh=False)
        self._bar.update(1)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


def _report(result: BuildResult, output: Path) -> None:
    print("Successfully processed SVG icons!")
    print(f"Output directory: {output}")
    print(f"Processed {len(result.records)} SVG files")

    if result.warnings:
        print("\nWarnings:")
        for warning in result.warnings:
            print(f"   - {warning}")

    lines: List[str] = []
    embedded_demo = result.demo_paths.get("embedded")
    if embedded_demo:
        lines.append(f"   Embedded Demo: {embedded_demo.resolve().as_uri()}")
    referenced_demo = result.demo_paths.get("referenced")
    if referenced_demo:
        lines.append(f"   Referenced Demo: {referenced_demo.resolve()}")
        lines.append("      Referenced icons only render when the demo is served over HTTP.")
    if lines:
        print("\nDemo files:")
        print("\n".join(lines))


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.debug, args.log_file)

    try:
        file_config = load_config_file(Path(args.config) if args.config else None)
        config = validate_config(merge_config(file_config, _cli_overrides(args)))
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    progress = _ProgressBar(enabled=not args.no_progress and sys.stderr.isatty())
    try:
        result = BuildPipeline(config).process(progress_callback=progress)
    finally:
        progress.close()

    if not result.success:
        print(f"ERROR: Processing failed: {result.error}", file=sys.stderr)
        return 1

    _report(result, config.output)
    return 0


def run() -> None:
    sys.exit(main())
