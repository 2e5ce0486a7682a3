"""
Main CLI application for oajournal.

This module contains the typer app, its global options and the
``lookup`` command.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated
from typing import List
from typing import Optional

import typer
from rich.console import Console

from oajournal.api import get_journals_info
from oajournal.cli.formatters import SummaryTableFormatter
from oajournal.exceptions import APIError
from oajournal.exceptions import CLIError
from oajournal.exceptions import ConfigurationError
from oajournal.exceptions import NetworkError
from oajournal.exceptions import OAJournalException
from oajournal.exceptions import RateLimitError
from oajournal.exceptions import ValidationError
from oajournal.logger import get_logger
from oajournal.logger import setup_cli_logging

app = typer.Typer(
    name="oajournal",
    help="Resolve journal names to OpenAlex sources",
    no_args_is_help=True,
)

# Global state set by the callback
_email: str | None = None
_debug_mode: bool = False


class OutputFormat(str, Enum):
    table = "table"
    json = "json"
    jsonl = "jsonl"
    csv = "csv"


@app.callback()
def main(
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Enable debug output including API URLs and match decisions",
        ),
    ] = False,
    email: Annotated[
        Optional[str],
        typer.Option(
            "--email",
            "-e",
            envvar="OPENALEX_EMAIL",
            help="Contact email sent to OpenAlex (polite pool)",
        ),
    ] = None,
):
    """
    oajournal CLI - Look up OpenAlex metadata for journal names.

    A contact email is required by the OpenAlex polite pool.
    """
    global _email, _debug_mode
    _email = email
    _debug_mode = debug

    if debug:
        logger = setup_cli_logging(debug=True)
        logger.debug(f"Email: {email}")
        logger.debug("Debug mode enabled - API URLs and match decisions will be displayed")


def _collect_names(journals, input_file):
    """Gather journal names from arguments and an input file."""
    names = list(journals or [])

    if input_file is not None:
        try:
            text = Path(input_file).read_text(encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Cannot read input file: {input_file}", command="lookup") from e
        names.extend(line.strip() for line in text.splitlines() if line.strip())

    if not names:
        raise CLIError(
            "Provide one or more journal names or --input FILE", command="lookup"
        )
    return names


def _render(results, output_format):
    if output_format == OutputFormat.json:
        return json.dumps(results.to_records(), ensure_ascii=False, indent=2)
    if output_format == OutputFormat.jsonl:
        return "\n".join(
            json.dumps(record, ensure_ascii=False) for record in results.to_records()
        )
    if output_format == OutputFormat.csv:
        return results.to_dataframe().to_csv(index=False).rstrip("\n")
    return None


def _output_results(results, output_format, output_path=None):
    """Output results as a table, JSON, JSON lines or CSV."""
    text = _render(results, output_format)

    if text is None:
        table = SummaryTableFormatter().format_table(results.to_records())
        if output_path:
            with open(output_path, "w", encoding="utf-8") as f:
                Console(file=f, width=200).print(table)
            typer.echo(f"Results saved to {output_path}", err=True)
        else:
            Console().print(table)
        return

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        typer.echo(f"Results saved to {output_path}", err=True)
    else:
        typer.echo(text)


def _handle_cli_exception(e: Exception) -> None:
    """
    Print a readable message for a package exception.

    Args:
        e: Exception to handle
    """
    if _debug_mode:
        get_logger().debug("Full traceback:", exc_info=True)

    if isinstance(e, RateLimitError):
        typer.echo(f"❌ Rate Limit Error: {e.message}", err=True)
    elif isinstance(e, NetworkError):
        typer.echo(f"❌ Network Error: {e.message}", err=True)
        if e.url:
            typer.echo(f"   URL: {e.url}", err=True)
        typer.echo("   Please check your internet connection and try again.", err=True)
    elif isinstance(e, APIError):
        typer.echo(f"❌ API Error: {e.message}", err=True)
        if e.status_code:
            typer.echo(f"   Status Code: {e.status_code}", err=True)
    elif isinstance(e, ValidationError):
        typer.echo(f"❌ Validation Error: {e.message}", err=True)
        if e.field:
            typer.echo(f"   Field: {e.field}", err=True)
    elif isinstance(e, ConfigurationError):
        typer.echo(f"❌ Configuration Error: {e.message}", err=True)
        typer.echo("   Tip: Pass --email or set OPENALEX_EMAIL in .env.", err=True)
    elif isinstance(e, CLIError):
        typer.echo(f"❌ CLI Error: {e.message}", err=True)
    else:
        typer.echo(f"❌ Error: {e.message}", err=True)
        if e.details:
            typer.echo(f"   {e.details}", err=True)


@app.command()
def lookup(
    journals: Annotated[
        Optional[List[str]],
        typer.Argument(help="Journal names to look up"),
    ] = None,
    input_file: Annotated[
        Optional[Path],
        typer.Option("--input", "-i", help="Text file with one journal name per line"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.table,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write results to this file"),
    ] = None,
):
    """
    Find the OpenAlex source that best matches each journal name.
    """
    try:
        names = _collect_names(journals, input_file)
        results = get_journals_info(names, email=_email)
        _output_results(results, output_format, output)
    except OAJournalException as e:
        _handle_cli_exception(e)
        raise typer.Exit(1) from e
