import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import svg_tiler
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# GUI tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from svg_tiler.loading import parse_document  # noqa: E402


SQUARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">'
    '<rect id="square" x="10" y="10" width="80" height="80" fill="#ff0000"/>'
    "</svg>"
)

VIEWBOX_ONLY_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 40 20">'
    '<circle cx="20" cy="10" r="8" fill="#0000ff"/>'
    "</svg>"
)

BARE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg">'
    '<circle cx="50" cy="50" r="40"/>'
    "</svg>"
)


# Common test fixtures
@pytest.fixture
def square_svg() -> str:
    """100x100 SVG with explicit width/height and viewBox."""
    return SQUARE_SVG


@pytest.fixture
def square_document():
    """Parsed 100x100 document."""
    return parse_document(SQUARE_SVG, name="square.svg")


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    """SVG file on disk."""
    path = tmp_path / "square.svg"
    path.write_text(SQUARE_SVG, encoding="utf-8")
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A real PNG, which must be rejected as an upload."""
    from PIL import Image

    path = tmp_path / "picture.png"
    Image.new("RGBA", (10, 10), (0, 255, 0, 255)).save(path)
    return path
