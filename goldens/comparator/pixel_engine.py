"""Pixel comparison engine — decodes two PNGs and diffs them pixel by pixel."""

from __future__ import annotations

import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from goldens.errors import ImageDecodeError
from goldens.models.comparison import (
    ISOLATED_DIFF,
    MASKED_DIFF,
    MASTER_IMAGE,
    TEST_IMAGE,
    ComparisonResult,
)

logger = logging.getLogger(__name__)

NULL_IMAGE_ERROR = "Pixel test failed, null image provided."

Pixel = tuple[int, int, int, int]


def decode_png(data: bytes) -> Image.Image:
    """Decode encoded image bytes into an RGBA image."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ImageDecodeError(f"Unable to decode image ({len(data)} bytes): {e}") from e
    return image.convert("RGBA")


def invert_pixel(pixel: Pixel) -> Pixel:
    r, g, b, a = pixel
    return (255 - r, 255 - g, 255 - b, a)


def pixel_difference(test_pixel: Pixel, master_pixel: Pixel) -> int:
    """Sum of absolute per-channel deltas, 0..1020."""
    return sum(abs(t - m) for t, m in zip(test_pixel, master_pixel))


def highlight_pixel(test_pixel: Pixel, master_pixel: Pixel) -> Pixel:
    """Channel-wise maximum of both pixels with their colours inverted."""
    inverted_test = invert_pixel(test_pixel)
    inverted_master = invert_pixel(master_pixel)
    return tuple(max(t, m) for t, m in zip(inverted_test, inverted_master))


def compare_lists(test: Optional[bytes], master: Optional[bytes]) -> ComparisonResult:
    """Compare the decoded pixels of ``test`` against ``master``.

    Mismatches are reported through the returned result. Only undecodable
    input raises (``ImageDecodeError``).
    """
    if test is master and test:
        return ComparisonResult(passed=True)

    if not test or not master:
        return ComparisonResult(passed=False, error=NULL_IMAGE_ERROR)

    test_image = decode_png(test)
    master_image = decode_png(master)

    width, height = test_image.size
    if test_image.size != master_image.size:
        logger.debug("Size mismatch: test %s vs master %s", test_image.size, master_image.size)
        return ComparisonResult(
            passed=False,
            error=(
                "Pixel test failed, image sizes do not match.\n"
                f"Master Image: {master_image.width} X {master_image.height}\n"
                f"Test Image: {width} X {height}"
            ),
        )

    masked_diff = test_image.copy()
    isolated_diff = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    test_pixels = test_image.load()
    master_pixels = master_image.load()
    masked_pixels = masked_diff.load()
    isolated_pixels = isolated_diff.load()

    pixel_diff_count = 0
    total_pixels = width * height
    for x in range(width):
        for y in range(height):
            test_pixel = test_pixels[x, y]
            master_pixel = master_pixels[x, y]
            if pixel_difference(test_pixel, master_pixel) != 0:
                mask_pixel = highlight_pixel(test_pixel, master_pixel)
                masked_pixels[x, y] = mask_pixel
                isolated_pixels[x, y] = mask_pixel
                pixel_diff_count += 1

    if pixel_diff_count == 0:
        return ComparisonResult(passed=True)

    percentage = pixel_diff_count / total_pixels * 100
    logger.debug("%d of %d pixels differ", pixel_diff_count, total_pixels)
    return ComparisonResult(
        passed=False,
        error=f"Pixel test failed, {percentage:.2f}% diff detected.",
        diffs={
            MASTER_IMAGE: master_image,
            TEST_IMAGE: test_image,
            MASKED_DIFF: masked_diff,
            ISOLATED_DIFF: isolated_diff,
        },
    )
