"""Tests for linkhooks CLI entrypoints."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from rich.console import Console

import linkhooks.main as main
from linkhooks.cli import arch as arch_module
from linkhooks.cli import configure as configure_module
from linkhooks.cli import fetch as fetch_module
from linkhooks.errors import PackageManagerError


@pytest.fixture(autouse=True)
def _no_rich_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)


def _write_manifest(tmp_path: Path, steps: list[dict]) -> Path:
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps({"steps": steps}), encoding="utf-8")
    return path


def test_main_requires_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Missing subcommands print help and fail."""
    exit_code = main.main([])

    assert exit_code == 1
    assert "Linkhooks" in capsys.readouterr().out


def test_main_dispatches_configure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, Any] = {}

    def fake_configure(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "configure_command", fake_configure)

    exit_code = main.main(["configure", str(tmp_path / "m.toml"), "-o", str(tmp_path / "g.json")])

    assert exit_code == 0
    assert captured["args"].manifest == str(tmp_path / "m.toml")
    assert captured["args"].output == str(tmp_path / "g.json")


def test_main_parses_npm_arguments(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, Any] = {}

    def fake_npm(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "npm_cli_command", fake_npm)

    main.main(
        ["npm", "install", "--cwd", str(tmp_path), "--module", "ui", "--npm-arg=--no-audit"]
    )

    args = captured["args"]
    assert (args.operation, args.cwd, args.module, args.options) == (
        "install",
        str(tmp_path),
        "ui",
        ["--no-audit"],
    )


def test_configure_command_renders_and_exports(tmp_path: Path) -> None:
    manifest = _write_manifest(
        tmp_path,
        [
            {"action": "declare", "name": "Core"},
            {"action": "declare", "name": "App", "type": "executable"},
            {"action": "link", "consumer": "App", "args": ["Core", "PRIVATE", "m"]},
            {"action": "detect_arch", "compiler": "C:/VC/bin/x64/cl.exe"},
        ],
    )
    output = tmp_path / "graph.json"
    console = Console(record=True, width=200)

    exit_code = configure_module.configure_command(
        SimpleNamespace(manifest=str(manifest), output=str(output)), console=console
    )

    assert exit_code == 0
    text = console.export_text()
    assert "Core (PUBLIC)" in text
    assert "m (PRIVATE)" in text
    assert "CPU_ARCH=x64" in text
    assert "PLATFORM_ARCH=win" in text
    data = json.loads(output.read_text(encoding="utf-8"))
    assert {node["id"] for node in data["nodes"]} == {"Core", "App", "m"}


def test_configure_command_fails_on_configuration_error(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    manifest = _write_manifest(tmp_path, [{"action": "link", "consumer": "Ghost", "args": ["m"]}])

    with caplog.at_level(logging.ERROR, logger="linkhooks.cli.configure"):
        exit_code = configure_module.configure_command(
            SimpleNamespace(manifest=str(manifest), output=None)
        )

    assert exit_code == 1
    assert "Unknown target: Ghost" in caplog.text


def test_arch_command_prints_variables() -> None:
    console = Console(record=True)

    exit_code = arch_module.arch_command(
        SimpleNamespace(compiler="/ndk/prebuilt/linux-x86_64/bin/clang++"), console=console
    )

    assert exit_code == 0
    assert console.export_text().split() == ["CPU_ARCH=x64", "PLATFORM_ARCH=linux"]


def test_arch_command_unknown_compiler() -> None:
    assert arch_module.arch_command(SimpleNamespace(compiler="/usr/bin/c++")) == 1


def test_nuget_command_prints_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(fetch_module, "download_nuget", lambda src, bin_dir, url: Path(bin_dir) / "NuGet")
    console = Console(record=True, width=200)

    exit_code = fetch_module.nuget_command(
        SimpleNamespace(source_dir=".", binary_dir=str(tmp_path), url="u"), console=console
    )

    assert exit_code == 0
    assert f"NUGET_PATH={tmp_path / 'NuGet'}" in console.export_text()


def test_npm_cli_command_failure_returns_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail(*args: Any, **kwargs: Any) -> None:
        raise PackageManagerError("npm command failed: 1", returncode=1)

    monkeypatch.setattr(fetch_module, "npm", _fail)

    exit_code = fetch_module.npm_cli_command(
        SimpleNamespace(operation="install", cwd=".", module="ui", options=[])
    )

    assert exit_code == 1
