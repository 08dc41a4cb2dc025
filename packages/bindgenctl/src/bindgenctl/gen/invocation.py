from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import DriverConfig
from .inputs import expand_inputs
from .layout import BindingLayout, resolve_layout


@dataclass(frozen=True)
class GeneratorInvocation:
    layout: BindingLayout
    inputs: tuple[Path, ...]
    argv: tuple[str, ...]


def build_generator_command(config: DriverConfig, dest_dir: Path, inputs: list[Path] | tuple[Path, ...]) -> list[str]:
    return [
        config.generator,
        f"--target={config.target}",
        *config.module_flags,
        f"--out-dir={dest_dir}",
        *(str(p) for p in inputs),
    ]


def plan_invocation(self_dir: Path, config: DriverConfig | None = None) -> GeneratorInvocation:
    cfg = config or DriverConfig.defaults()
    layout = resolve_layout(self_dir, cfg)
    inputs = tuple(expand_inputs(layout.source_dir, cfg.input_glob))
    return GeneratorInvocation(
        layout=layout,
        inputs=inputs,
        argv=tuple(build_generator_command(cfg, layout.dest_dir, inputs)),
    )
