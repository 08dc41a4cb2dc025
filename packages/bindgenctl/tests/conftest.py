from __future__ import annotations

import json
import socket
import stat
import sys
from pathlib import Path

import pytest

_ALLOWED_MARKERS = {"unit", "integration", "slow"}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)


@pytest.fixture
def evm_root(tmp_path: Path) -> Path:
    root = (tmp_path / "evm").resolve()
    (root / "scripts").mkdir(parents=True)
    (root / "out/a").mkdir(parents=True)
    (root / "out/b").mkdir(parents=True)
    (root / "out/a/p.json").write_text(json.dumps({"abi": []}), encoding="utf-8")
    (root / "out/b/q.json").write_text(json.dumps({"abi": []}), encoding="utf-8")
    (root / "scripts/make_ethers_types.py").write_text("", encoding="utf-8")
    return root


@pytest.fixture
def self_path(evm_root: Path) -> Path:
    return evm_root / "scripts/make_ethers_types.py"


_FAKE_GENERATOR = """#!{python}
import json
import sys
from pathlib import Path

Path({record!r}).write_text(json.dumps(sys.argv[1:]), encoding="utf-8")
if {message!r}:
    print({message!r})
raise SystemExit({code})
"""


@pytest.fixture
def fake_generator(tmp_path: Path):
    """Build an executable that records its argv to a JSON file and exits with ``code``.

    A non-empty ``message`` is printed to stdout first, the way typechain reports
    how many typings it generated.
    """

    def _make(code: int = 0, message: str = "") -> tuple[Path, Path]:
        tools = tmp_path / "tools"
        tools.mkdir(exist_ok=True)
        record = tools / f"argv-{code}.json"
        exe = tools / f"typechain-{code}"
        exe.write_text(_FAKE_GENERATOR.format(python=sys.executable, record=str(record), code=code, message=message), encoding="utf-8")
        exe.chmod(exe.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return exe, record

    return _make
