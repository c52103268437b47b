"""Locked, atomic writes for build artifacts."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path

import portalocker

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
TEMP_SUFFIX = ".tmp"


class ArtifactWriteError(OSError):
    """Raised when an output artifact cannot be written."""


@contextmanager
def _locked_temp_file(path: Path):
    """Yield a locked temp sibling of path, then move it into place."""
    temp_path = path.with_name(f"{path.name}{TEMP_SUFFIX}")
    file_obj = None
    try:
        file_obj = open(temp_path, "w", encoding=ENCODING, newline="")
        portalocker.lock(file_obj, portalocker.LOCK_EX)
        yield file_obj
        file_obj.flush()
        os.fsync(file_obj.fileno())
        portalocker.unlock(file_obj)
        file_obj.close()
        file_obj = None
        os.replace(temp_path, path)
    except OSError as exc:
        raise ArtifactWriteError(f"Error writing {path}: {exc}") from exc
    finally:
        if file_obj:
            try:
                portalocker.unlock(file_obj)
                file_obj.close()
            except OSError as exc:
                logger.debug(f"Error closing {temp_path}: {exc}")
        if temp_path.exists():
            temp_path.unlink()


def write_text(path: Path, payload: str) -> Path:
    """Write payload to path atomically; the parent directory must exist."""
    path = Path(path)
    with _locked_temp_file(path) as handle:
        handle.write(payload)
    logger.debug(f"Wrote {path} ({len(payload)} chars)")
    return path
