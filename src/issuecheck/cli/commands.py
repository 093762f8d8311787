from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from issuecheck.checker import check_issue
from issuecheck.constants import EXIT_INTERNAL_ERROR, EXIT_MISMATCH, EXIT_SUCCESS, VERBOSE_ENV_VAR
from issuecheck.errors import IssueMismatchError
from issuecheck.fixtures import load_issue
from issuecheck.paths import FilePath


def _version_callback(value: bool) -> None:
    if value:
        from issuecheck import __version__

        typer.echo(f"issuecheck {__version__}")
        raise typer.Exit()


app = typer.Typer(add_completion=False, help="Assert that reported issues match expected values")


@app.callback(invoke_without_command=True)
def _main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", envvar=VERBOSE_ENV_VAR, help="Log debug output to stderr."
    ),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def check(
    actual: Path = typer.Argument(..., help="Issue document produced by the provider"),
    expected: Path = typer.Argument(..., help="Issue document with the expected values"),
    json_output: bool = typer.Option(False, "--json", help="Print the mismatch as JSON on stdout."),
) -> None:
    """Compare an actual issue document against an expected one."""
    try:
        actual_issue = load_issue(actual)
        expected_issue = load_issue(expected)
    except (OSError, ValueError) as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(EXIT_INTERNAL_ERROR) from exc

    try:
        check_issue(actual_issue, expected_issue)
    except IssueMismatchError as exc:
        if json_output:
            typer.echo(json.dumps(exc.to_dict(), sort_keys=True))
        else:
            typer.echo(exc.message, err=True)
        raise typer.Exit(EXIT_MISMATCH) from exc

    typer.echo("OK: issue matches expected")
    raise typer.Exit(EXIT_SUCCESS)


@app.command()
def path(raw: str = typer.Argument(..., help="Path text as reported by a provider")) -> None:
    """Print the canonical form of a path and whether it is relative."""
    file_path = FilePath(raw)
    kind = "relative" if file_path.is_relative else "absolute"
    typer.echo(f"{file_path.full_path}\t{kind}")
