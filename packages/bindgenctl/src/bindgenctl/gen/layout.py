from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..config import DriverConfig


@dataclass(frozen=True)
class BindingLayout:
    self_dir: Path
    source_dir: Path
    dest_dir: Path


def _join(base: Path, rel: str) -> Path:
    # lexical: symlinks below the self dir are kept as named
    return Path(os.path.normpath(base / rel))


def resolve_layout(self_dir: Path, config: DriverConfig | None = None) -> BindingLayout:
    cfg = config or DriverConfig.defaults()
    base = self_dir.resolve()
    return BindingLayout(
        self_dir=base,
        source_dir=_join(base, cfg.source),
        dest_dir=_join(base, cfg.destination),
    )
