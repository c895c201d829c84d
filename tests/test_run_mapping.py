"""Tests for the run_mapping script's exit codes and output."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

SCRIPT_PATH: Path = Path(__file__).resolve().parents[1] / "scripts" / "run_mapping.py"


def _load_script() -> ModuleType:
    """Import scripts/run_mapping.py as a module without running main()."""
    spec = importlib.util.spec_from_file_location("run_mapping", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module: ModuleType = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Run main() with the given CLI arguments."""
    module: ModuleType = _load_script()
    monkeypatch.setattr("sys.argv", ["run_mapping.py", *argv])
    return module.main()


def test_maps_values_and_writes_json(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Valid values are mapped and saved with the summary."""
    output: Path = tmp_path / "out" / "mapped.json"

    assert _run(monkeypatch, "500", "5000", "--output", str(output)) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert [v["display_text"] for v in payload["values"]] == ["500", "5.0k"]
    assert payload["summary"]["total_values"] == 2


def test_invalid_value_exits_with_status_2(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A negative value is reported rather than mapped."""
    assert _run(monkeypatch, "-5") == 2
    assert "Invalid value '-5'" in capsys.readouterr().err


@pytest.mark.parametrize(
    "toml_text",
    [
        "[gauge_a\n",  # Not valid TOML.
        "[default]\nmax_value = 0.0\n",  # Valid TOML, invalid config.
        "[default]\nmax_valu = 10.0\n",  # Unknown key.
    ],
)
def test_bad_config_exits_with_status_2(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    tmp_path: Path,
    toml_text: str,
) -> None:
    """Config errors are printed and exit 2 instead of raising."""
    config_path: Path = tmp_path / "gauges.toml"
    config_path.write_text(toml_text, encoding="utf-8")

    assert _run(monkeypatch, "500", "--config", str(config_path)) == 2
    assert "Cannot load gauge config" in capsys.readouterr().err


def test_missing_config_file_exits_with_status_2(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """A config path that does not exist is reported the same way."""
    assert _run(monkeypatch, "--config", str(tmp_path / "missing.toml")) == 2
