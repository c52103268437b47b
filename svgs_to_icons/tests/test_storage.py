from pathlib import Path

import pytest

from svgs_to_icons.storage import ArtifactWriteError, write_text


def test_write_text_replaces_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "icons.css"
    target.write_text("old", encoding="utf-8")

    returned = write_text(target, "a {}\n")

    assert returned == target
    assert target.read_text(encoding="utf-8") == "a {}\n"
    assert sorted(item.name for item in tmp_path.iterdir()) == ["icons.css"]


def test_write_text_keeps_newlines_verbatim(tmp_path: Path) -> None:
    target = tmp_path / "icons.css"

    write_text(target, "one\ntwo\n")

    assert target.read_bytes() == b"one\ntwo\n"


def test_missing_parent_raises_write_error(tmp_path: Path) -> None:
    with pytest.raises(ArtifactWriteError):
        write_text(tmp_path / "missing" / "icons.css", "x")
