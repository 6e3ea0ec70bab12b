"""Golden context — the active comparator and the auto-update switch."""

from __future__ import annotations

import logging

from goldens.comparator.base import GoldenFileComparator
from goldens.comparator.trivial import TrivialComparator

logger = logging.getLogger(__name__)


class GoldenContext:
    """Holds the comparator used for golden assertions and the update mode.

    Harness setup code configures a context once (per process or per test
    group); every golden assertion reads from it. ``reset()`` restores the
    trivial comparator and compare mode.
    """

    def __init__(self, comparator: GoldenFileComparator | None = None, auto_update: bool = False):
        self._comparator: GoldenFileComparator = comparator or TrivialComparator()
        self.auto_update = auto_update

    @property
    def comparator(self) -> GoldenFileComparator:
        return self._comparator

    @comparator.setter
    def comparator(self, value: GoldenFileComparator) -> None:
        if value is None:
            raise ValueError("Golden file comparator cannot be None")
        logger.debug("Installing golden comparator %r", value)
        self._comparator = value

    def reset(self) -> None:
        self._comparator = TrivialComparator()
        self.auto_update = False


# Process-wide context used when callers do not pass their own.
default_context = GoldenContext()


def get_comparator() -> GoldenFileComparator:
    return default_context.comparator


def set_comparator(comparator: GoldenFileComparator) -> None:
    default_context.comparator = comparator


def get_auto_update() -> bool:
    return default_context.auto_update


def set_auto_update(enabled: bool) -> None:
    default_context.auto_update = bool(enabled)


def reset_golden_context() -> None:
    default_context.reset()
