from __future__ import annotations

import argparse
import shutil

from ..cli.output import build_base_payload, emit
from ..config import DriverConfig
from ..contracts import validate
from ..core.context import RunContext
from ..core.exit_codes import ERR_PREREQ, OK
from ..core.logging import log_event
from ..core.process import STDERR_FD, run_passthrough
from .invocation import GeneratorInvocation, plan_invocation


def _plan(ctx: RunContext, config: DriverConfig) -> GeneratorInvocation:
    invocation = plan_invocation(ctx.self_dir, config)
    log_event(
        ctx,
        "info",
        "layout",
        "resolved",
        self_dir=str(invocation.layout.self_dir),
        source_dir=str(invocation.layout.source_dir),
        dest_dir=str(invocation.layout.dest_dir),
    )
    log_event(
        ctx,
        "warn" if not invocation.inputs else "info",
        "inputs",
        "expanded",
        pattern=config.input_glob,
        count=len(invocation.inputs),
    )
    return invocation


def _invocation_payload(ctx: RunContext, invocation: GeneratorInvocation, status: str) -> dict[str, object]:
    return {
        **build_base_payload(ctx, status),
        "command": list(invocation.argv),
        "source_dir": str(invocation.layout.source_dir),
        "dest_dir": str(invocation.layout.dest_dir),
        "inputs": [str(p) for p in invocation.inputs],
    }


def run_generate(ctx: RunContext, config: DriverConfig) -> int:
    invocation = _plan(ctx, config)
    # keep stdout reserved for the report when one is requested
    result = run_passthrough(list(invocation.argv), ctx=ctx, stdout=STDERR_FD if ctx.as_json else None)
    if ctx.as_json:
        payload = _invocation_payload(ctx, invocation, "ok" if result.code == 0 else "fail")
        payload["exit_code"] = result.code
        payload["duration_ms"] = result.duration_ms
        validate("bindgenctl.report.v1", payload)
        emit(payload, as_json=True)
    return result.code


def run_plan(ctx: RunContext, config: DriverConfig) -> int:
    invocation = _plan(ctx, config)
    if ctx.as_json:
        payload = _invocation_payload(ctx, invocation, "planned")
        validate("bindgenctl.report.v1", payload)
        emit(payload, as_json=True)
    else:
        print(" ".join(invocation.argv))
    return OK


def run_doctor(ctx: RunContext, config: DriverConfig) -> int:
    invocation = _plan(ctx, config)
    layout = invocation.layout
    generator_path = shutil.which(config.generator)
    checks: dict[str, object] = {
        "generator": config.generator,
        "generator_path": generator_path,
        "source_dir": str(layout.source_dir),
        "source_exists": layout.source_dir.is_dir(),
        "input_count": len(invocation.inputs),
        "dest_parent_exists": layout.dest_dir.parent.is_dir(),
    }
    ok = generator_path is not None and bool(checks["source_exists"])
    payload = {**build_base_payload(ctx, "ok" if ok else "fail"), "checks": checks}
    validate("bindgenctl.doctor.v1", payload)
    if ctx.as_json:
        emit(payload, as_json=True)
    elif not ctx.quiet:
        for key, value in sorted(checks.items()):
            print(f"{key}: {value}")
    return OK if ok else ERR_PREREQ


def configure_gen_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    sub.add_parser("generate", help="run the binding generator over compiled contract descriptors (default)")
    sub.add_parser("plan", help="print the generator command without running it")
    sub.add_parser("doctor", help="report generator availability and input discovery")


def run_gen_command(ctx: RunContext, cmd: str, config: DriverConfig) -> int:
    if cmd == "plan":
        return run_plan(ctx, config)
    if cmd == "doctor":
        return run_doctor(ctx, config)
    return run_generate(ctx, config)
