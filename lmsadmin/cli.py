"""Command-line entry point for LMS Admin, implemented with Typer."""

from __future__ import annotations

from pathlib import Path

import typer

from lmsadmin import __version__
from lmsadmin.constants.enums import ThemeMode
from lmsadmin.constants.values import CONFIG_ENV_VAR

cli = typer.Typer(
    add_completion=False,
    help="Terminal admin console for library borrowing policies",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lmsadmin {__version__}")
        raise typer.Exit()


@cli.command()
def run(
    policy_file: Path | None = typer.Option(
        None,
        "--policy-file",
        "-p",
        dir_okay=False,
        help="Policy YAML file to edit (defaults to the config directory)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        envvar=CONFIG_ENV_VAR,
        help="Settings file to load and save",
    ),
    theme: ThemeMode | None = typer.Option(
        None,
        "--theme",
        case_sensitive=False,
        help="Colour theme",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Open the borrowing settings screen."""
    from lmsadmin.app import LibraryAdminApp

    app = LibraryAdminApp(
        policy_path=policy_file,
        config_path=config,
        theme=theme.value if theme is not None else None,
        log_level=log_level.upper() if log_level else None,
    )
    app.run()


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
