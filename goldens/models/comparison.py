"""Result model for a pixel comparison."""

from __future__ import annotations

from typing import Optional

from PIL import Image
from pydantic import BaseModel, ConfigDict, model_validator

MASTER_IMAGE = "masterImage"
TEST_IMAGE = "testImage"
MASKED_DIFF = "maskedDiff"
ISOLATED_DIFF = "isolatedDiff"

DIFF_NAMES = (MASTER_IMAGE, TEST_IMAGE, MASKED_DIFF, ISOLATED_DIFF)


class ComparisonResult(BaseModel):
    """Outcome of comparing a test image against its golden.

    ``passed`` is always set. ``error`` describes why a comparison failed and
    ``diffs`` holds the differential images, keyed by the names in
    ``DIFF_NAMES``, when the failure was a pixel mismatch.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    passed: bool
    error: Optional[str] = None
    diffs: Optional[dict[str, Image.Image]] = None

    @model_validator(mode="after")
    def check_diffs(self) -> "ComparisonResult":
        if not self.passed and not self.error:
            raise ValueError("a failed comparison must describe its error")
        if self.diffs is not None:
            if self.passed:
                raise ValueError("diffs are only allowed on a failed comparison")
            unknown = set(self.diffs) - set(DIFF_NAMES)
            if unknown:
                raise ValueError(f"Unknown diff names: {sorted(unknown)}")
        return self

    def __bool__(self) -> bool:
        return self.passed
