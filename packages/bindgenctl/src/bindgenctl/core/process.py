from __future__ import annotations

import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import ScriptError
from .exit_codes import ERR_NOT_EXECUTABLE, ERR_PREREQ, SIGNAL_BASE
from .logging import log_event

if TYPE_CHECKING:
    from .context import RunContext


STDERR_FD = 2


@dataclass(frozen=True)
class CommandResult:
    code: int
    duration_ms: int


def normalize_returncode(code: int) -> int:
    # subprocess reports death by signal N as -N; a shell reports 128 + N
    if code < 0:
        return SIGNAL_BASE - code
    return code


def run_passthrough(
    cmd: list[str],
    cwd: Path | None = None,
    ctx: RunContext | None = None,
    stdout: int | None = None,
) -> CommandResult:
    """Run ``cmd`` to completion with inherited stdio and return its status.

    Output streams are not captured so the child's stdout and stderr reach the
    caller unmodified. ``stdout`` may name another file descriptor for the
    child's standard output, e.g. ``STDERR_FD`` when stdout carries a report.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    started = time.monotonic()
    try:
        proc = subprocess.run(cmd, cwd=cwd, check=False, stdout=stdout)
    except FileNotFoundError as exc:
        raise ScriptError(f"{cmd[0]}: command not found", ERR_PREREQ, kind="command_not_found") from exc
    except PermissionError as exc:
        raise ScriptError(f"{cmd[0]}: permission denied", ERR_NOT_EXECUTABLE, kind="command_not_executable") from exc
    result = CommandResult(
        code=normalize_returncode(proc.returncode),
        duration_ms=int((time.monotonic() - started) * 1000),
    )
    if ctx is not None:
        log_event(
            ctx,
            "info",
            "process",
            "run-command",
            command=" ".join(cmd),
            code=result.code,
            duration_ms=result.duration_ms,
        )
    return result
