from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..config import load_config
from ..core.context import RunContext
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INTERNAL, ERR_INTERRUPTED
from ..core.logging import log_event
from ..gen.command import configure_gen_parser, run_gen_command
from .output import render_error

DEFAULT_COMMAND = "generate"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bindgenctl",
        description="Generate ethers contract bindings from compiled contract descriptors.",
    )
    p.add_argument("--version", action="version", version=f"bindgenctl {__version__}")
    p.add_argument("--json", action="store_true", help="emit a JSON report on stdout")
    p.add_argument("--config", help="TOML file overriding the [bindgen] settings")
    p.add_argument("--log-json", action="store_true", help="emit verbose log events as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable structured log events on stderr")
    vg.add_argument("--quiet", action="store_true", help="only emit errors and the generator's own output")
    sub = p.add_subparsers(dest="cmd")
    configure_gen_parser(sub)
    return p


def main(argv: list[str] | None = None, self_path: str | Path | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    cmd = ns.cmd or DEFAULT_COMMAND
    as_json = bool(ns.json)
    try:
        ctx = RunContext.from_args(
            self_path,
            "json" if as_json else "text",
            verbose=ns.verbose,
            quiet=ns.quiet,
            log_json=ns.log_json,
        )
        log_event(ctx, "info", "cli", "start", cmd=cmd, fmt=ctx.output_format)
        config = load_config(ns.config)
        return run_gen_command(ctx, cmd, config)
    except ScriptError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except KeyboardInterrupt:
        return ERR_INTERRUPTED
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=as_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
