"""
Main CLI entry point for url-parts.

Usage:
    url-parts [--json] URL
    echo 'https://example.com/?a=1' | url-parts [--json]
    url-parts --version
"""

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from url_parts import __version__
from url_parts.components import extract
from url_parts.errors import InputError, OutputError, UrlPartsError
from url_parts.logs import setup_logging
from url_parts.parser import parse_url
from url_parts.render import render
from url_parts.types import OutputFormat

PROG_NAME = "url-parts"

app = typer.Typer(
    name=PROG_NAME,
    help="Print the components of a URL as text or JSON",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
# Diagnostics only; stdout is reserved for rendered output
err_console = Console(stderr=True, soft_wrap=True)
logger = logging.getLogger(__name__)


# =============================================================================
# EFFECTFUL FUNCTIONS (I/O at the edges)
# =============================================================================

def stdin_is_interactive() -> bool:
    """Effect: Check whether stdin is a terminal rather than a pipe."""
    return sys.stdin.isatty()


def read_stdin() -> str:
    """Effect: Drain stdin."""
    try:
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"failed to read URL from stdin: {exc}") from exc


def write_stdout(content: str) -> None:
    """Effect: Write rendered output to stdout and flush it."""
    try:
        typer.echo(content, nl=False)
    except OSError as exc:
        raise OutputError(f"failed to write output: {exc}") from exc


def resolve_url(url: str | None) -> str:
    """Return the URL argument, or the URL piped on stdin when it is omitted or '-'."""
    if url is not None and url != "-":
        logger.debug("Reading URL from argument")
        return url

    if stdin_is_interactive():
        raise InputError(
            f"no URL given. Usage: {PROG_NAME} [OPTIONS] [URL] "
            "(or pipe a URL on stdin, see --help)"
        )

    text = read_stdin().strip()
    logger.debug("Read %d characters from stdin", len(text))
    if not text:
        raise InputError("URL cannot be empty")
    return text


# =============================================================================
# MAIN (Imperative shell)
# =============================================================================

def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def main(
    url: str | None = typer.Argument(
        None,
        help="URL to inspect. Omit it or pass '-' to read from stdin.",
        show_default=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        envvar="URL_PARTS_JSON",
        help="Print the components as a single-line JSON object.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Parse a URL and print its scheme, authority, path, query and fragment."""
    setup_logging(verbose=verbose)
    output_format = OutputFormat.JSON if json_output else OutputFormat.TEXT
    logger.debug("Output format: %s", output_format.value)

    try:
        components = extract(parse_url(resolve_url(url)))
        write_stdout(render(components, output_format))
    except UrlPartsError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
