"""Build configuration: defaults, config file overlay and validation."""

from __future__ import annotations

import json
import logging
import os
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .naming import is_css_identifier

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "svgs-to-icons.config.json"
DEFAULT_OUTPUT_PARENT = "dist"

DEFAULT_CONFIG: Dict[str, Any] = {
    "input": None,
    "output": None,
    "prefix": "",
    "postfix": "-icon",
    "embedded": True,
    "referenced": True,
    "demo": True,
}

_BOOL_KEYS = ("embedded", "referenced", "demo")
_TRUE_WORDS = {"true", "yes", "1", "on"}
_FALSE_WORDS = {"false", "no", "0", "off"}


class ConfigurationError(ValueError):
    """Raised when the merged configuration is unusable."""


@dataclass(frozen=True)
class BuildConfig:
    """Final, validated settings for one build."""

    input: Path
    output: Path
    prefix: str = ""
    postfix: str = ""
    embedded: bool = True
    referenced: bool = True
    demo: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": str(self.input),
            "output": str(self.output),
            "prefix": self.prefix,
            "postfix": self.postfix,
            "embedded": self.embedded,
            "referenced": self.referenced,
            "demo": self.demo,
        }


def load_config_file(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load a JSON config file.

    Without an explicit path the default file in the working directory is
    tried; a missing or broken default file is only logged. An explicit path
    that cannot be loaded raises :class:`ConfigurationError`.
    """
    explicit = config_path is not None
    path = Path(config_path) if explicit else Path.cwd() / CONFIG_FILE_NAME
    if not path.exists():
        if explicit:
            raise ConfigurationError(f"Config file not found: {path}")
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8-sig"))
        if not isinstance(payload, dict):
            raise ValueError("top-level value must be an object")
    except (OSError, ValueError) as exc:
        if explicit:
            raise ConfigurationError(f"Could not load config file {path}: {exc}") from exc
        logger.warning(f"Could not load config file {path}: {exc}")
        return {}

    known = {key: value for key, value in payload.items() if key in DEFAULT_CONFIG}
    for key in sorted(set(payload) - set(known)):
        logger.warning(f"Ignoring unknown config key {key!r} in {path}")
    logger.info(f"Loaded configuration from {path}")
    return known


def merge_config(
    file_config: Optional[Mapping[str, Any]] = None,
    cli_config: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Overlay defaults with file values, then with CLI values that were given."""
    config = deepcopy(DEFAULT_CONFIG)
    for key, value in dict(file_config or {}).items():
        config[key] = value
    for key, value in dict(cli_config or {}).items():
        if value is not None:
            config[key] = value
    return config


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
    raise ConfigurationError(f"Option {key!r} must be true or false, got {value!r}")


def _resolve_input(raw: Any) -> Path:
    if not raw:
        raise ConfigurationError("Input directory is required")
    path = Path(str(raw)).expanduser()
    if not path.exists():
        raise ConfigurationError(f"Input directory does not exist: {raw}")
    if not path.is_dir():
        raise ConfigurationError(f"Input path is not a directory: {raw}")
    return path.resolve()


def _resolve_output(raw: Any, input_dir: Path) -> Path:
    parent = Path(str(raw)).expanduser() if raw else Path(DEFAULT_OUTPUT_PARENT)
    output = (parent / input_dir.name).resolve()
    if output.exists():
        if not os.access(output, os.W_OK):
            raise ConfigurationError(f"Output directory is not writable: {output}")
        return output
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigurationError(f"Cannot create output directory: {output} ({exc})") from exc
    if not os.access(output.parent, os.W_OK):
        raise ConfigurationError(f"Cannot create output directory: {output} (parent is not writable)")
    return output


def _normalize_affixes(prefix: Any, postfix: Any) -> Tuple[str, str]:
    prefix = str(prefix or "")
    postfix = str(postfix or "")
    if prefix and not is_css_identifier(prefix):
        raise ConfigurationError("prefix must be a valid CSS identifier")
    if postfix and not is_css_identifier(postfix[1:] if postfix.startswith("-") else postfix):
        raise ConfigurationError("postfix must be a valid CSS identifier")
    if prefix and not prefix.endswith("-"):
        prefix += "-"
    if postfix and not postfix.startswith("-"):
        postfix = "-" + postfix
    return prefix, postfix


def validate_config(merged: Mapping[str, Any]) -> BuildConfig:
    """Check a merged configuration and turn it into a :class:`BuildConfig`."""
    input_dir = _resolve_input(merged.get("input"))
    output_dir = _resolve_output(merged.get("output"), input_dir)
    flags = {key: _as_bool(key, merged.get(key, DEFAULT_CONFIG[key])) for key in _BOOL_KEYS}
    if not flags["embedded"] and not flags["referenced"]:
        raise ConfigurationError("At least one output type must be enabled (embedded or referenced)")
    prefix, postfix = _normalize_affixes(merged.get("prefix"), merged.get("postfix"))
    return BuildConfig(
        input=input_dir,
        output=output_dir,
        prefix=prefix,
        postfix=postfix,
        **flags,
    )
