"""Local file comparator — stores goldens as PNG files under a base directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

from goldens.comparator.base import GoldenFileComparator
from goldens.comparator.pixel_engine import compare_lists
from goldens.errors import GoldenFileNotFoundError
from goldens.models.comparison import ComparisonResult
from goldens.reporter.failure_artifacts import write_failure_artifacts

logger = logging.getLogger(__name__)


class LocalFileComparator(GoldenFileComparator):
    """Resolves golden keys relative to ``base_dir`` and compares them on disk.

    Diff images of failed comparisons are written to ``failures_dir``
    (``<base_dir>/failures`` unless given), mirroring the golden's folder.
    """

    def __init__(self, base_dir: Path, failures_dir: Path | None = None):
        self.base_dir = Path(base_dir)
        self.failures_dir = Path(failures_dir) if failures_dir else self.base_dir / "failures"

    def resolve(self, golden: str) -> Path:
        """Return the on-disk path of a golden locator."""
        golden = str(golden)
        if golden.startswith("file://"):
            return Path(unquote(urlparse(golden).path))
        path = Path(golden)
        if path.is_absolute():
            return path
        return self.base_dir / path

    def failure_dir_for(self, path: Path) -> Path:
        """Folder for the diff images of the golden at ``path``."""
        try:
            return self.failures_dir / path.parent.relative_to(self.base_dir)
        except ValueError:
            return self.failures_dir

    async def compare(self, image_bytes: bytes, golden: str) -> ComparisonResult:
        path = self.resolve(golden)
        master_bytes = await asyncio.to_thread(_read_golden, golden, path)
        result = compare_lists(image_bytes, master_bytes)

        if not result.passed:
            logger.warning("Golden comparison failed for %s: %s", golden, result.error)
            if result.diffs:
                await asyncio.to_thread(
                    write_failure_artifacts, result, self.failure_dir_for(path), path.stem
                )
        else:
            logger.debug("Golden comparison passed for %s", golden)
        return result

    async def update(self, golden: str, image_bytes: bytes) -> None:
        path = self.resolve(golden)
        await asyncio.to_thread(_write_golden, path, image_bytes)
        logger.info("Updated golden %s (%d bytes)", path, len(image_bytes))

    def __repr__(self) -> str:
        return f"LocalFileComparator(base_dir={str(self.base_dir)!r})"


def _read_golden(golden: str, path: Path) -> bytes:
    if not path.exists():
        raise GoldenFileNotFoundError(
            f"Could not find golden file '{golden}' at {path}. "
            "Run with --update-goldens to create it."
        )
    return path.read_bytes()


def _write_golden(path: Path, image_bytes: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(image_bytes)
