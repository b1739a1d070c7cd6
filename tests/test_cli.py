"""Tests for the envset command line entry point."""

import os
import runpy
import sys
from pathlib import Path

import pytest

from envset.cli import main


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Remove step inputs leaking in from the surrounding environment."""
    for name in list(os.environ):
        if name.startswith("INPUT_") or name.startswith("ENVSET_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("GITHUB_OUTPUT", str(tmp_path / "github_output"))


def test_set_key_from_arguments(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1\nB=2")

    assert main(["--file", str(env_file), "--key", "B", "--value", "3"]) == 0
    assert env_file.read_text() == "A=1\nB=3"
    assert "result<<" in (tmp_path / "github_output").read_text()


def test_inputs_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1\nB=2")
    monkeypatch.setenv("INPUT_FILE", str(env_file))
    monkeypatch.setenv("INPUT_REPLACE-ALL", "B=9\nC=5")
    monkeypatch.setenv("INPUT_UPSERT", "true")
    monkeypatch.setenv("INPUT_KEEP-ONLY-REPLACED", "true")

    assert main([]) == 0
    assert env_file.read_text() == "B=9\nC=5"


def test_arguments_override_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1")
    monkeypatch.setenv("INPUT_FILE", str(env_file))
    monkeypatch.setenv("INPUT_KEY", "A")
    monkeypatch.setenv("INPUT_VALUE", "env")

    assert main(["--value", "cli"]) == 0
    assert env_file.read_text() == "A=cli"


def test_replace_all_file_and_flags(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1\nB=2")
    replacements = tmp_path / "replacements.env"
    replacements.write_text("B=9\nC=5\n")

    argv = ["--file", str(env_file), "--replace-all-file", str(replacements), "--upsert"]

    assert main(argv) == 0
    assert env_file.read_text() == "B=9\nC=5\nA=1"


def test_defaults_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1")
    defaults = tmp_path / "inputs.env"
    defaults.write_text(f"INPUT_FILE={env_file}\nINPUT_KEY=NEW\nINPUT_VALUE=yes\n")

    assert main(["--defaults", str(defaults)]) == 0
    assert env_file.read_text() == "A=1\nNEW=yes"


def test_missing_input_fails(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    assert main(["--key", "A"]) == 1
    assert "::error::Missing required input" in capsys.readouterr().out


def test_invalid_boolean_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1")
    monkeypatch.setenv("INPUT_UPSERT", "yes")

    assert main(["--file", str(env_file), "--replace-all", "A=2"]) == 1
    assert "::error::Input does not meet YAML 1.2" in capsys.readouterr().out
    assert env_file.read_text() == "A=1"


def test_missing_target_file_fails(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "absent.env"

    assert main(["--file", str(missing), "--key", "A", "--value", "1"]) == 1
    assert "::error::" in capsys.readouterr().out
    assert not missing.exists()


def test_defaults_file_values_not_interpolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1")
    monkeypatch.delenv("ss", raising=False)
    defaults = tmp_path / "inputs.env"
    defaults.write_text(f"INPUT_FILE={env_file}\nINPUT_KEY=PASSWORD\nINPUT_VALUE='p${{ss}}word'\n")

    assert main(["--defaults", str(defaults)]) == 0
    assert env_file.read_text() == "A=1\nPASSWORD=p${ss}word"


def test_undecodable_replace_all_file_fails(tmp_path: Path, capsys) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("A=1")
    replacements = tmp_path / "replacements.env"
    replacements.write_bytes(b"A=caf\xe9\n")

    assert main(["--file", str(env_file), "--replace-all-file", str(replacements)]) == 1
    assert "::error::" in capsys.readouterr().out
    assert env_file.read_text() == "A=1"


def test_module_entry_point_exits_with_status(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    missing = tmp_path / "absent.env"
    monkeypatch.setattr(sys, "argv", ["envset", "--file", str(missing), "--key", "A", "--value", "1"])

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("envset.cli", run_name="__main__")

    assert exc_info.value.code == 1
