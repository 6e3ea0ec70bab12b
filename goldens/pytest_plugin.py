"""pytest plugin — ``--update-goldens`` flag and golden comparison fixtures."""

from __future__ import annotations

import logging

import pytest

from goldens.comparator.local_file import LocalFileComparator
from goldens.registry import GoldenContext, default_context

logger = logging.getLogger(__name__)


def pytest_addoption(parser):
    group = parser.getgroup("goldens")
    group.addoption(
        "--update-goldens",
        action="store_true",
        default=False,
        help="Overwrite golden files with the images produced by the tests.",
    )


@pytest.fixture
def golden_context(request) -> GoldenContext:
    """The process-wide golden context, reset to defaults before and after the test."""
    default_context.reset()
    default_context.auto_update = request.config.getoption("--update-goldens")
    yield default_context
    default_context.reset()


@pytest.fixture
def local_golden_comparator(request, golden_context: GoldenContext) -> LocalFileComparator:
    """Install a comparator reading goldens from ``goldens/`` beside the test module."""
    comparator = LocalFileComparator(request.path.parent / "goldens")
    golden_context.comparator = comparator
    return comparator
