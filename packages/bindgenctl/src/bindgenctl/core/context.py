from __future__ import annotations

import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from .errors import ScriptError
from .exit_codes import ERR_CONTEXT

OutputFormat = Literal["text", "json"]


def resolve_self_dir(self_path: str | Path | None = None) -> Path:
    """Return the canonical directory holding the invoking script.

    Falls back to ``sys.argv[0]`` when no explicit path is given. The working
    directory is never consulted for anything but making that path absolute.
    """
    raw = self_path if self_path is not None else (sys.argv[0] if sys.argv and sys.argv[0] else None)
    if raw is None or str(raw) in {"", "-c", "-"}:
        raise ScriptError("unable to determine the invoking script location", ERR_CONTEXT, kind="self_location")
    path = Path(raw).resolve()
    return path if path.is_dir() else path.parent


def make_run_id(prefix: str = "bindgen") -> str:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{ts}"


@dataclass(frozen=True)
class RunContext:
    run_id: str
    self_dir: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        self_path: str | Path | None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
        run_id: str | None = None,
    ) -> "RunContext":
        return cls(
            run_id=run_id or make_run_id(),
            self_dir=resolve_self_dir(self_path),
            output_format=output_format,
            verbose=verbose and not quiet,
            quiet=quiet,
            log_json=log_json,
        )
