"""
Command line interface for resolving and writing into the generated-files directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import (
    GENERATED_DIR_OPTION,
    ConfigError,
    ProcessingEnvironment,
    build_environment,
    get_settings,
    unrecognized_options,
)
from .diagnostics import diagnostics_session
from .filer import GeneratedDirectoryResolver
from .output import GENERATION_COMMENT, GeneratedFile, write_generated_file

console = Console()
app = typer.Typer(help="Resolve the target directory for generated files and write into it.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]

OPTION_PAIRS_HELP = "Host option as key=value (repeatable), e.g. -A target.generated.dir=build/gen."


def _configure_logging(level_name: str) -> None:
    level_str = (get_settings().log_level or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _build_environment_or_exit(pairs: List[str], options_file: Optional[Path]) -> ProcessingEnvironment:
    try:
        return build_environment(pairs, options_file, prefix=get_settings().message_prefix)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _warn_unrecognized(env: ProcessingEnvironment) -> None:
    unknown = unrecognized_options(env)
    if unknown:
        console.print(f"[yellow]Options not recognized by genfiler:[/] {', '.join(unknown)}")


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show genfiler version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]genfiler[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]genfiler[/] is ready. Run [cyan]genfiler resolve -A "
            f"{GENERATED_DIR_OPTION}=path/to/dir[/] to check the target directory.",
        )


@app.command()
def resolve(
    option: List[str] = typer.Option(
        [],
        "--option",
        "-A",
        help=OPTION_PAIRS_HELP,
    ),
    options_file: Optional[Path] = typer.Option(
        None,
        "--options-file",
        "-o",
        help="TOML file with host options.",
    ),
) -> None:
    """
    Show the resolved target directory for generated files.
    """
    env = _build_environment_or_exit(option, options_file)
    _warn_unrecognized(env)

    with diagnostics_session(env.prefix):
        resolver = GeneratedDirectoryResolver.from_environment(env)
        try:
            directory = resolver.directory_handle()
        except ConfigError as exc:
            console.print(f"[bold red]{exc}[/]")
            raise typer.Exit(code=1) from exc

    table = Table(title="Generated Files Directory")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    table.add_row("Option", GENERATED_DIR_OPTION)
    table.add_row("State", "configured")
    table.add_row("Directory", str(directory))
    table.add_row("Exists", "yes" if directory.is_dir() else "no")
    console.print(table)


@app.command()
def write(
    package: str = typer.Option(
        "",
        "--package",
        "-p",
        help="Dotted package the file belongs to (empty for the root).",
    ),
    name: str = typer.Option(
        ...,
        "--name",
        "-n",
        help="File name to write inside the package directory.",
    ),
    source: Path = typer.Option(
        ...,
        "--source",
        "-s",
        help="File whose contents become the generated file body.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    no_header: bool = typer.Option(
        False,
        "--no-header",
        help="Skip the generated-code header comment.",
    ),
    option: List[str] = typer.Option(
        [],
        "--option",
        "-A",
        help=OPTION_PAIRS_HELP,
    ),
    options_file: Optional[Path] = typer.Option(
        None,
        "--options-file",
        "-o",
        help="TOML file with host options.",
    ),
) -> None:
    """
    Write a source file into the generated-files directory.
    """
    env = _build_environment_or_exit(option, options_file)
    _warn_unrecognized(env)

    content = source.read_text(encoding="utf-8")
    header = "" if no_header else GENERATION_COMMENT
    generated = GeneratedFile(package=package, name=name, content=content, header=header)

    with diagnostics_session(env.prefix):
        resolver = GeneratedDirectoryResolver.from_environment(env)
        try:
            written = write_generated_file(resolver, generated)
        except ConfigError as exc:
            console.print(f"[bold red]{exc}[/]")
            raise typer.Exit(code=1) from exc
        except ValueError as exc:
            console.print(f"[bold yellow]{exc}[/]")
            raise typer.Exit(code=2) from exc
        except OSError as exc:
            console.print(f"[bold red]Unable to write generated file:[/] {exc}")
            raise typer.Exit(code=1) from exc

    console.print(f"[bold green]Wrote[/] {written}")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
