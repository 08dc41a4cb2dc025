from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from ..contracts import validate
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_CONFIG

CONFIG_TABLE = "bindgen"


@dataclass(frozen=True)
class DriverConfig:
    generator: str = "typechain"
    target: str = "ethers-v5"
    module_flags: tuple[str, ...] = field(default=("--node16-modules",))
    source: str = "../out"
    destination: str = "../ts/src/ethers-contracts"
    input_glob: str = "*/*.json"

    @classmethod
    def defaults(cls) -> "DriverConfig":
        return cls()

    def as_dict(self) -> dict[str, object]:
        return {
            "generator": self.generator,
            "target": self.target,
            "module_flags": list(self.module_flags),
            "source": self.source,
            "destination": self.destination,
            "input_glob": self.input_glob,
        }


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ScriptError(f"config file not found: {path}", ERR_CONFIG, kind="config_missing") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ScriptError(f"invalid TOML in {path}: {exc}", ERR_CONFIG, kind="config_syntax") from exc


def load_config(path: str | Path | None = None) -> DriverConfig:
    """Load driver settings, overlaying the ``[bindgen]`` table of ``path``.

    Without a path the built-in defaults are returned untouched.
    """
    base = DriverConfig.defaults()
    if path is None:
        return base
    raw = _read_toml(Path(path))
    table = raw.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ScriptError(f"{path}: `{CONFIG_TABLE}` must be a table", ERR_CONFIG, kind="config_shape")
    validate("bindgenctl.config.v1", table, code=ERR_CONFIG)
    overrides: dict[str, Any] = dict(table)
    if "module_flags" in overrides:
        overrides["module_flags"] = tuple(overrides["module_flags"])
    return replace(base, **overrides)
