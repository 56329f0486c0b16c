"""CLI interface for recjson using Typer framework."""

import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from jsonschema.exceptions import SchemaError
from rich.console import Console
from rich.table import Table

from recjson import __description__, __version__
from recjson.config import LoggingConfig, LogLevel
from recjson.exceptions import RecjsonError
from recjson.schemas import check_schema, load_schema
from recjson.validation import Record

app = typer.Typer(
    name="recjson",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"recjson version {__version__}")
        raise typer.Exit()


def _setup_logging(config: LoggingConfig) -> None:
    logging.basicConfig(
        level=config.level.to_logging(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """recjson - JSON Schema validation for record attributes."""


def _build_document_type(schema) -> type[Record]:
    """Throwaway record type with a single JSON-validated ``value`` attribute."""
    document_type = type("Document", (Record,), {})
    document_type.validates("value", json={"schema": schema})
    return document_type


@app.command()
def check(
    schema_path: Annotated[
        Path,
        typer.Argument(help="Path to JSON schema file")
    ],
    value: Annotated[
        Optional[str],
        typer.Argument(help="JSON text to check (default: read stdin)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    log_level: Annotated[
        LogLevel,
        typer.Option("--log-level", "-l", help="Logging level")
    ] = LogLevel.WARN,
) -> None:
    """Check JSON text against a JSON schema the way a record attribute would."""
    valid_formats = ["table", "json"]
    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    _setup_logging(LoggingConfig(level=log_level))

    try:
        schema = load_schema(schema_path)
        check_schema(schema)
    except RecjsonError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except SchemaError as e:
        console.print(f"[red]Error:[/red] Invalid schema in {schema_path}: {e.message}")
        raise typer.Exit(1)

    if value is None or value == "-":
        value = sys.stdin.read()

    document = _build_document_type(schema)(value=value)
    valid = document.validate()
    invalid_json = document.value_invalid_json

    if format == "json":
        output = {
            "valid": valid,
            "invalidJson": invalid_json is not None,
            **document.errors.to_dict(),
        }
        print(jsonlib.dumps(output, indent=2))
    else:
        if invalid_json is not None:
            console.print("[yellow]Warning:[/yellow] Input is not valid JSON, checked as {}")

        if valid:
            console.print("[green]OK[/green] Value matches schema")
        else:
            table = Table(title=f"Schema errors ({len(document.errors)})")
            table.add_column("Attribute", style="cyan")
            table.add_column("Message")
            table.add_column("Detail", style="dim")
            for error in document.errors:
                table.add_row(error.attribute, error.message, str(error.context.get("error", "")))
            console.print(table)

    if not valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
