from __future__ import annotations

from pathlib import Path


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def expand_inputs(source_dir: Path, pattern: str = "*/*.json") -> list[Path]:
    """Expand ``pattern`` under ``source_dir`` like a shell with nullglob.

    A missing directory or zero matches yields an empty list. Entries whose
    name starts with a dot are skipped, as ``*`` does in a shell.
    """
    if not source_dir.is_dir():
        return []
    return sorted(p for p in source_dir.glob(pattern) if not _is_hidden(p, source_dir))
