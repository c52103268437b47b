from pathlib import Path

import pytest

from svgs_to_icons.config import BuildConfig
from svgs_to_icons.optimizer import SvgOptimizationError

HOUSE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<path d="M10 20v-6h4v6h5v-8h3L12 3 2 12h3v8z"/>'
    "</svg>"
)


class FakeOptimizer:
    """Passes markup through, with marker strings that trigger each failure."""

    def __init__(self) -> None:
        self.calls = []

    def optimize(self, svg_text: str) -> str:
        self.calls.append(svg_text)
        if "FAIL" in svg_text:
            raise SvgOptimizationError("unexpected end of data")
        if "NOSVG" in svg_text:
            return "<g/>"
        return svg_text.strip()


class FakeEncoder:
    def encode(self, svg_text: str) -> str:
        if "BADURI" in svg_text:
            return "data:text/plain,broken"
        return "data:image/svg+xml," + svg_text.replace('"', "'")


def write_svg(directory: Path, name: str, content: str = HOUSE_SVG) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def fake_optimizer() -> FakeOptimizer:
    return FakeOptimizer()


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    path = tmp_path / "icons"
    path.mkdir()
    return path


@pytest.fixture
def make_config(tmp_path: Path, icons_dir: Path):
    def _make(**overrides) -> BuildConfig:
        values = {
            "input": icons_dir,
            "output": tmp_path / "dist" / icons_dir.name,
            "prefix": "",
            "postfix": "-icon",
            "embedded": True,
            "referenced": True,
            "demo": True,
        }
        values.update(overrides)
        return BuildConfig(**values)

    return _make
