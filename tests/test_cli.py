from __future__ import annotations

import json
from pathlib import Path

import pytest

from seed_renamer import __version__
from seed_renamer.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args(["my-app"])
    assert args.name == "my-app"
    assert args.seed_name is None
    assert args.dotnet is False
    assert args.skip_install is False
    assert args.exclude == []


def test_cli_renames_project(node_seed: Path):
    exit_code = main(["--skip-install", "-C", str(node_seed), "my-new-service"])

    assert exit_code == 0
    manifest = json.loads((node_seed.parent / "my-new-service" / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "my-new-service"


def test_cli_respects_keep_directory_and_exclude(node_seed: Path):
    exit_code = main(
        [
            "--skip-install",
            "--keep-directory",
            "--exclude",
            "README.md",
            "--directory",
            str(node_seed),
            "my-new-service",
        ]
    )

    assert exit_code == 0
    assert node_seed.is_dir()
    assert "seed-nodejs-npm-lib" in (node_seed / "README.md").read_text(encoding="utf-8")


def test_cli_dotnet_with_explicit_seed(dotnet_seed: Path):
    exit_code = main(
        ["--dotnet", "--from", "Seed-Dotnet-RestApi", "--skip-install", "-C", str(dotnet_seed), "MyNewApi"]
    )

    assert exit_code == 0
    assert (dotnet_seed.parent / "mynewapi" / "MyNewApi.sln").is_file()


def test_cli_requires_name(tmp_path: Path, caplog):
    assert main(["-C", str(tmp_path)]) == 1
    assert "required" in caplog.text


def test_cli_rejects_invalid_name(tmp_path: Path):
    assert main(["-C", str(tmp_path), "bad_name"]) == 1


def test_cli_fails_when_seed_cannot_be_detected(tmp_path: Path, caplog):
    assert main(["--skip-install", "-C", str(tmp_path), "my-app"]) == 1
    assert "--from" in caplog.text


def test_cli_reports_unexpected_errors(node_seed: Path, monkeypatch, caplog):
    def explode(options):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr("seed_renamer.cli.rename_project", explode)

    assert main(["-C", str(node_seed), "my-app"]) == 1
    assert "disk on fire" in caplog.text


@pytest.mark.parametrize("flag", ["--help", "--version"])
def test_cli_help_and_version_exit_zero(flag, capsys):
    assert main([flag]) == 0
    if flag == "--version":
        assert __version__ in capsys.readouterr().out


def test_cli_unknown_option_exits_one():
    assert main(["--bogus", "my-app"]) == 1
