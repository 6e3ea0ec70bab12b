"""Golden assertions for tests — routes to compare or update and raises on mismatch."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from goldens.errors import GoldenMismatchError
from goldens.models.comparison import ComparisonResult
from goldens.registry import GoldenContext, default_context

logger = logging.getLogger(__name__)


async def matches_golden_file(
    image_bytes: bytes,
    key: str,
    version: Optional[int] = None,
    context: GoldenContext | None = None,
) -> ComparisonResult:
    """Assert that ``image_bytes`` matches the golden at ``key``.

    In auto-update mode the bytes become the new golden and the assertion
    passes. Otherwise a failed comparison raises ``GoldenMismatchError``.
    """
    context = context or default_context
    comparator = context.comparator
    golden = comparator.get_test_uri(key, version)

    if context.auto_update:
        await comparator.update(golden, image_bytes)
        logger.info("Golden %s updated", golden)
        return ComparisonResult(passed=True)

    result = await comparator.compare(image_bytes, golden)
    if not result.passed:
        raise GoldenMismatchError(golden, result)
    return result


def expect_golden(
    image_bytes: bytes,
    key: str,
    version: Optional[int] = None,
    context: GoldenContext | None = None,
) -> ComparisonResult:
    """Synchronous form of ``matches_golden_file`` for non-async tests."""
    return asyncio.run(matches_golden_file(image_bytes, key, version=version, context=context))
