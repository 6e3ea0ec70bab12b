"""Golden file comparator contract shared by every backend."""

from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from typing import Optional

from goldens.models.comparison import ComparisonResult


def get_test_uri(key: str, version: Optional[int] = None) -> str:
    """Incorporate ``version`` into ``key`` as ``<stem>.<version><ext>``.

    Only the trailing extension of the last path segment is split off, so a
    stem that happens to contain the extension text is left intact.
    """
    if version is None:
        return key
    if isinstance(version, bool) or not isinstance(version, int):
        raise TypeError(f"Golden version must be an int, got {version!r}")
    if version < 0:
        raise ValueError(f"Golden version must be non-negative, got {version}")
    key = str(key)
    head, tail = posixpath.split(key)
    stem, extension = posixpath.splitext(tail)
    return posixpath.join(head, f"{stem}.{version}{extension}")


class GoldenFileComparator(ABC):
    """Compares image bytes against golden files.

    Subclasses decide how a golden is located and loaded: from local disk,
    over the network, or not at all. Pixel comparison itself goes through
    ``compare_lists`` so every backend shares the same semantics.
    """

    @abstractmethod
    async def compare(self, image_bytes: bytes, golden: str) -> ComparisonResult:
        """Compare ``image_bytes`` with the golden identified by ``golden``.

        The result is truthy only when the pixels match. A mismatch is
        returned, not raised.
        """

    @abstractmethod
    async def update(self, golden: str, image_bytes: bytes) -> None:
        """Replace the golden identified by ``golden`` with ``image_bytes``.

        Called in place of ``compare`` when golden auto-update is enabled.
        """

    def get_test_uri(self, key: str, version: Optional[int] = None) -> str:
        """Return the locator for ``key`` at ``version`` (``None`` keeps ``key``)."""
        return get_test_uri(key, version)
