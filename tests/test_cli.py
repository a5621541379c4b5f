import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from genfiler import GENERATED_DIR_OPTION, __version__, cli
from genfiler.output import GENERATION_COMMENT


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_resolve_reports_configured_directory(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["resolve", "-A", f"{GENERATED_DIR_OPTION}=build/gen"])

    assert result.exit_code == 0, result.stdout
    assert "configured" in result.stdout
    assert "build/gen" in result.stdout


def test_resolve_uses_options_file(runner: CliRunner, options_file: dict) -> None:
    result = runner.invoke(cli.app, ["resolve", "--options-file", str(options_file["path"])])

    assert result.exit_code == 0, result.stdout
    assert "configured" in result.stdout
    assert not options_file["generated_dir"].exists()


def test_resolve_without_option_warns_then_fails(
    runner: CliRunner,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("GENFILER_MESSAGE_PREFIX", raising=False)

    result = runner.invoke(cli.app, ["resolve"])

    assert result.exit_code == 1
    assert "Can't generate files." in result.stdout
    warnings = [record.getMessage() for record in caplog.records if record.levelno == logging.WARNING]
    assert warnings == ["[genfiler]:\nCan't find the target directory for generated files."]


def test_resolve_flags_unrecognized_options(runner: CliRunner) -> None:
    result = runner.invoke(
        cli.app,
        ["resolve", "-A", f"{GENERATED_DIR_OPTION}=gen", "-A", "processor.verbose=true"],
    )

    assert result.exit_code == 0, result.stdout
    assert "processor.verbose" in result.stdout


def test_malformed_pair_is_a_configuration_error(runner: CliRunner) -> None:
    result = runner.invoke(cli.app, ["resolve", "-A", "target.generated.dir"])

    assert result.exit_code == 1
    assert "Configuration error" in result.stdout


def test_write_places_file_under_package(runner: CliRunner, tmp_path: Path) -> None:
    source = tmp_path / "body.py"
    source.write_text("VALUE = 1\n", encoding="utf-8")
    root = tmp_path / "gen"

    result = runner.invoke(
        cli.app,
        [
            "write",
            "-A",
            f"{GENERATED_DIR_OPTION}={root}",
            "--package",
            "app.models",
            "--name",
            "values.py",
            "--source",
            str(source),
        ],
    )

    assert result.exit_code == 0, result.stdout
    target = root / "app" / "models" / "values.py"
    assert target.read_text(encoding="utf-8") == f"# {GENERATION_COMMENT}\nVALUE = 1\n"


def test_write_without_directory_fails(runner: CliRunner, tmp_path: Path) -> None:
    source = tmp_path / "body.py"
    source.write_text("VALUE = 1\n", encoding="utf-8")

    result = runner.invoke(cli.app, ["write", "--name", "values.py", "--source", str(source)])

    assert result.exit_code == 1
    assert "Can't generate files." in result.stdout


def test_write_rejects_bad_package(runner: CliRunner, tmp_path: Path) -> None:
    source = tmp_path / "body.py"
    source.write_text("VALUE = 1\n", encoding="utf-8")

    result = runner.invoke(
        cli.app,
        ["write", "-A", f"{GENERATED_DIR_OPTION}={tmp_path}", "--package", "bad-name", "--name", "v.py", "--source", str(source)],
    )

    assert result.exit_code == 2
    assert not (tmp_path / "bad-name").exists()


def test_write_reports_filesystem_errors(runner: CliRunner, tmp_path: Path) -> None:
    source = tmp_path / "body.py"
    source.write_text("VALUE = 1\n", encoding="utf-8")
    root = tmp_path / "gen"
    (root / "app" / "values.py").mkdir(parents=True)

    result = runner.invoke(
        cli.app,
        ["write", "-A", f"{GENERATED_DIR_OPTION}={root}", "--package", "app", "--name", "values.py", "--source", str(source)],
    )

    assert result.exit_code == 1
    assert "Unable to write generated file" in result.stdout


def test_log_level_comes_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("GENFILER_LOG_LEVEL", "debug")

    cli._configure_logging("error")

    assert calls[-1]["level"] == logging.DEBUG
