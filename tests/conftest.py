from pathlib import Path
import textwrap

import pytest
from typer.testing import CliRunner

from genfiler.config import get_settings
from genfiler.diagnostics import clear_diagnostics


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_process_state():
    clear_diagnostics()
    get_settings.cache_clear()
    yield
    clear_diagnostics()
    get_settings.cache_clear()


@pytest.fixture
def options_file(tmp_path: Path) -> dict:
    """
    Write a small TOML options file for tests and return metadata.
    """
    generated_dir = tmp_path / "build" / "gen"
    options_text = textwrap.dedent(
        f"""
        target.generated.dir = "{generated_dir.as_posix()}"
        """
    ).strip()
    path = tmp_path / "options.toml"
    path.write_text(options_text + "\n", encoding="utf-8")
    return {"path": path, "generated_dir": generated_dir}
