from __future__ import annotations

from pathlib import Path

import pytest
from bindgenctl.config import DriverConfig, load_config
from bindgenctl.core.errors import ScriptError
from bindgenctl.core.exit_codes import ERR_CONFIG


def test_defaults_reproduce_fixed_invocation() -> None:
    cfg = load_config()
    assert cfg == DriverConfig(
        generator="typechain",
        target="ethers-v5",
        module_flags=("--node16-modules",),
        source="../out",
        destination="../ts/src/ethers-contracts",
        input_glob="*/*.json",
    )


def test_config_table_overrides_defaults(tmp_path: Path) -> None:
    path = tmp_path / "bindgen.toml"
    path.write_text(
        '[bindgen]\ngenerator = "npx"\ntarget = "ethers-v6"\nmodule_flags = []\n',
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.generator == "npx"
    assert cfg.target == "ethers-v6"
    assert cfg.module_flags == ()
    assert cfg.source == "../out"


def test_config_without_table_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "bindgen.toml"
    path.write_text('[other]\nkey = 1\n', encoding="utf-8")
    assert load_config(path) == DriverConfig.defaults()


def test_config_rejects_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "bindgen.toml"
    path.write_text('[bindgen]\nwatch = true\n', encoding="utf-8")
    with pytest.raises(ScriptError) as err:
        load_config(path)
    assert err.value.code == ERR_CONFIG
    assert "bindgenctl.config.v1" in str(err.value)


def test_config_rejects_module_flags_without_dashes(tmp_path: Path) -> None:
    path = tmp_path / "bindgen.toml"
    path.write_text('[bindgen]\nmodule_flags = ["node16-modules"]\n', encoding="utf-8")
    with pytest.raises(ScriptError) as err:
        load_config(path)
    assert err.value.code == ERR_CONFIG
    assert "module_flags/0" in str(err.value)


def test_config_rejects_non_table(tmp_path: Path) -> None:
    path = tmp_path / "bindgen.toml"
    path.write_text('bindgen = "typechain"\n', encoding="utf-8")
    with pytest.raises(ScriptError) as err:
        load_config(path)
    assert err.value.kind == "config_shape"


def test_config_reports_syntax_errors(tmp_path: Path) -> None:
    path = tmp_path / "bindgen.toml"
    path.write_text("[bindgen\n", encoding="utf-8")
    with pytest.raises(ScriptError) as err:
        load_config(path)
    assert err.value.code == ERR_CONFIG
    assert err.value.kind == "config_syntax"


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ScriptError) as err:
        load_config(tmp_path / "absent.toml")
    assert err.value.kind == "config_missing"


@pytest.mark.parametrize("pattern", ["/abs/*.json", "../*/*.json", "*/../*.json", ".hidden/*.json"])
def test_config_rejects_escaping_or_hidden_input_globs(tmp_path: Path, pattern: str) -> None:
    path = tmp_path / "bindgen.toml"
    path.write_text(f'[bindgen]\ninput_glob = "{pattern}"\n', encoding="utf-8")
    with pytest.raises(ScriptError) as err:
        load_config(path)
    assert err.value.code == ERR_CONFIG
    assert "input_glob" in str(err.value)


def test_config_accepts_nested_input_glob(tmp_path: Path) -> None:
    path = tmp_path / "bindgen.toml"
    path.write_text('[bindgen]\ninput_glob = "*/artifacts/*.json"\n', encoding="utf-8")
    assert load_config(path).input_glob == "*/artifacts/*.json"
