"""Writes diff images from a failed comparison to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from goldens.models.comparison import ComparisonResult

logger = logging.getLogger(__name__)


def write_failure_artifacts(result: ComparisonResult, output_dir: Path, prefix: str) -> dict[str, Path]:
    """Save each diff image as ``<prefix>_<name>.png`` and return the paths."""
    if result.passed or not result.diffs:
        return {}

    output_dir.mkdir(parents=True, exist_ok=True)
    written: dict[str, Path] = {}
    for name, image in result.diffs.items():
        path = output_dir / f"{prefix}_{name}.png"
        image.save(path, format="PNG")
        written[name] = path

    logger.info("Wrote %d failure artifacts for %s to %s", len(written), prefix, output_dir)
    return written
