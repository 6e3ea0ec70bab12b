"""Pytest configuration and shared fixtures."""

import io
from pathlib import Path

import pytest
from PIL import Image

from goldens.comparator.local_file import LocalFileComparator
from goldens.registry import reset_golden_context

pytest_plugins = ["goldens.pytest_plugin"]


# ============================================================================
# Image Helpers
# ============================================================================


def make_png(
    width: int = 10,
    height: int = 10,
    color: tuple[int, int, int, int] = (255, 255, 255, 255),
    pixels: dict[tuple[int, int], tuple[int, int, int, int]] | None = None,
) -> bytes:
    """Encode a solid RGBA image as PNG, optionally overriding some pixels."""
    image = Image.new("RGBA", (width, height), color)
    for (x, y), value in (pixels or {}).items():
        image.putpixel((x, y), value)
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_factory():
    """Fixture that provides the make_png function."""
    return make_png


@pytest.fixture
def white_png() -> bytes:
    """A 10x10 opaque white PNG."""
    return make_png()


@pytest.fixture
def white_png_copy() -> bytes:
    """A second, separately encoded 10x10 opaque white PNG."""
    return make_png()


@pytest.fixture
def one_pixel_off_png() -> bytes:
    """A 10x10 white PNG with a single black pixel at (3, 4)."""
    return make_png(pixels={(3, 4): (0, 0, 0, 255)})


# ============================================================================
# Comparator Fixtures
# ============================================================================


@pytest.fixture
def temp_golden_dir(tmp_path: Path) -> Path:
    """Create a temporary golden directory."""
    golden_dir = tmp_path / "goldens"
    golden_dir.mkdir()
    return golden_dir


@pytest.fixture
def local_comparator(temp_golden_dir: Path) -> LocalFileComparator:
    """A local file comparator rooted at the temporary golden directory."""
    return LocalFileComparator(temp_golden_dir)


@pytest.fixture(autouse=True)
def _reset_default_golden_context():
    yield
    reset_golden_context()
