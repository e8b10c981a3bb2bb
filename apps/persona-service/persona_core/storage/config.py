"""Environment-driven settings for training content storage."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _default_base_dir() -> Path:
    return Path.cwd() / "training-data" / "personas"


@dataclass(frozen=True)
class StorageConfig:
    base_dir: Path
    default_scheme: str = "local"

    @classmethod
    def from_env(cls) -> "StorageConfig":
        raw = (os.getenv("TRAINING_DATA_DIR") or "").strip()
        base_dir = Path(raw) if raw else _default_base_dir()
        return cls(base_dir=base_dir.expanduser().resolve())
