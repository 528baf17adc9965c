"""Click CLI with Rich output."""

from __future__ import annotations

import json as json_lib

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import DEFAULT_FIELDS, LOG_LEVELS, load_settings
from .engine import LookupClient, lookup_addresses
from .errors import ConfigError, RdapLookupError, ValidationError
from .inputs import collect_candidates
from .log import setup_logging
from .models import FIELD_NAMES
from .validation import validate_addresses

console = Console()
err_console = Console(stderr=True)


def _parse_fields(ctx, param, value: str | None) -> tuple[str, ...]:
    if value is None:
        return DEFAULT_FIELDS
    by_lower = {name.lower(): name for name in FIELD_NAMES}
    fields = []
    for raw in value.split(","):
        raw = raw.strip()
        if not raw:
            continue
        if raw.lower() not in by_lower:
            raise click.BadParameter(
                f"unknown field {raw!r} (choose from {', '.join(FIELD_NAMES)})"
            )
        fields.append(by_lower[raw.lower()])
    if not fields:
        raise click.BadParameter("no fields given")
    return tuple(fields)


def _cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "\n".join(str(v) for v in value)
    return str(value)


@click.command()
@click.argument("addresses", nargs=-1)
@click.option(
    "-i",
    "--input",
    "inputs",
    type=click.File("r"),
    multiple=True,
    help="Read addresses from FILE, one per line ('-' for stdin).",
)
@click.option(
    "--refang",
    is_flag=True,
    help="Accept defanged addresses like 192[.]168[.]1[.]1.",
)
@click.option("--base-url", help="RDAP service base URL.")
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), help="HTTP timeout in seconds.")
@click.option(
    "--fields",
    callback=_parse_fields,
    help=f"Comma-separated table columns (default: {','.join(DEFAULT_FIELDS)}).",
)
@click.option("--json", "as_json", is_flag=True, help="Output all fields as JSON.")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Diagnostic verbosity.",
)
@click.version_option(version=__version__)
def main(addresses, inputs, refang, base_url, timeout, fields, as_json, log_level):
    """rdaplookup — RDAP registration and reverse DNS for IPv4 addresses."""
    try:
        settings = load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e))

    setup_logging(log_level or settings.log_level, console=err_console)

    candidates = collect_candidates(addresses, inputs, refang_input=refang)
    try:
        valid = validate_addresses(candidates)
    except ValidationError as e:
        raise click.UsageError(str(e))

    def on_error(error: RdapLookupError):
        err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)

    client = LookupClient(
        base_url=base_url or settings.base_url,
        timeout=timeout or settings.timeout,
        on_error=on_error,
    )

    records = [r.to_dict() for r in lookup_addresses(valid, client)]

    if as_json:
        click.echo(json_lib.dumps(records, indent=2))
        return

    if not records:
        err_console.print("[yellow]No RDAP results.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    for name in fields:
        table.add_column(name)

    for record in records:
        table.add_row(*(Text(_cell(record[name])) for name in fields))

    console.print(table)
