"""Configuration model for golden comparisons."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, field_validator

from goldens.comparator.local_file import LocalFileComparator
from goldens.registry import GoldenContext

_TRUTHY = {"1", "true", "yes", "on"}


class GoldenConfig(BaseModel):
    golden_dir: str = "goldens"
    failures_dir: str = "failures"  # relative to golden_dir unless absolute
    update_goldens: bool = False

    @field_validator("update_goldens", mode="before")
    @classmethod
    def resolve_env_update(cls, v):
        if isinstance(v, str) and v.startswith("env:"):
            return os.environ.get(v[4:], "").strip().lower() in _TRUTHY
        return v

    def failures_path(self) -> Path:
        return Path(self.golden_dir) / self.failures_dir

    def build_context(self) -> GoldenContext:
        """Create a context backed by a local file comparator."""
        comparator = LocalFileComparator(Path(self.golden_dir), self.failures_path())
        return GoldenContext(comparator=comparator, auto_update=self.update_goldens)

    @classmethod
    def load(cls, path: str | Path) -> "GoldenConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
