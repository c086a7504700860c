"""CLI entrypoint.

Commands:
- credmask scrub ...
- credmask fields

CONTRACT
- Inputs: Command line arguments (parsed by Typer)
- Outputs (required):
  - Exit code 0 on success, non-zero on failure
  - Redacted text (or a JSON ScrubReport) on stdout
- Invariants:
  - Original unredacted text is never printed
  - --config fields are added on top of the built-in fields, never replace them
- Failure:
  - Invalid arguments raise Typer exit/error
  - Unreadable input files or configs exit with code 1
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import RedactionConfig, load_config
from .http_log import HttpLogObfuscator, login_http_log_obfuscator
from .obfuscators import Redactor, email_password_obfuscator
from .schemas import LineReport, ScrubReport
from .util.text import iter_lines

app = typer.Typer(add_completion=False, help="Mask credentials in JSON-shaped log lines.")

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool):
    if value:
        console.print(f"credmask version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version."
    )
):
    pass


_TEXT_OPTION = typer.Option(
    None,
    "--text",
    help="Single line to scrub.",
)
_FILE_OPTION = typer.Option(
    None,
    "--file",
    help="File to scrub line by line.",
)
_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="YAML file with extra fields to mask.",
)
_HTTP_OPTION = typer.Option(
    False,
    "--http",
    help="Treat lines as HTTP request logs; pick fields by login provider in the URL.",
)
_JSON_OPTION = typer.Option(
    False,
    "--json",
    help="Print a JSON report instead of plain text.",
)


def _load_config_or_exit(config: Path | None) -> RedactionConfig:
    if config is None:
        return RedactionConfig()
    try:
        return load_config(config)
    except (OSError, ValueError) as e:
        err_console.print(f"[red]Error loading config:[/red] {e}")
        raise typer.Exit(code=1)


def _build_scrubber(cfg: RedactionConfig, http: bool) -> Redactor | HttpLogObfuscator:
    if http:
        return login_http_log_obfuscator().extended(*cfg.all_fields())
    return cfg.build_redactor()


@app.command()
def scrub(
    text: str | None = _TEXT_OPTION,
    file: Path | None = _FILE_OPTION,
    config: Path | None = _CONFIG_OPTION,
    http: bool = _HTTP_OPTION,
    as_json: bool = _JSON_OPTION,
) -> None:
    """Redact credential values and print the result."""
    if text is None and file is None:
        raise typer.BadParameter("Provide --text or --file.")
    if text is not None and file is not None:
        raise typer.BadParameter("Use only one of --text or --file.")

    cfg = _load_config_or_exit(config)
    scrubber = _build_scrubber(cfg, http)

    if file is not None:
        if not file.exists():
            err_console.print(f"[red]File not found:[/red] {file}")
            raise typer.Exit(code=1)
        try:
            lines = list(iter_lines(file))
        except (OSError, UnicodeDecodeError) as e:
            err_console.print(f"[red]Error reading file:[/red] {e}")
            raise typer.Exit(code=1)
        source = str(file)
    else:
        lines = [text]
        source = "--text"

    results = [scrubber.obfuscate_counted(line) for line in lines]

    if as_json:
        fields = (
            sorted({k for r in scrubber.obfuscators.values() for k in r.fields})
            if isinstance(scrubber, HttpLogObfuscator)
            else list(scrubber.fields)
        )
        report = ScrubReport(
            source=source,
            mode="http" if http else "fields",
            fields=fields,
            lines=[LineReport(output=out, redacted=counts) for out, counts in results],
        )
        typer.echo(report.model_dump_json(indent=2))
        return

    for out, _ in results:
        # Plain print: rich markup would eat `[...]` in log lines.
        typer.echo(out)


@app.command()
def fields(
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """List the fields masked for each login provider and config set."""
    cfg = _load_config_or_exit(config)
    table = Table(title="credmask fields")
    table.add_column("Source")
    table.add_column("Fields")
    table.add_row("default", ", ".join(email_password_obfuscator().fields))
    for provider, redactor in login_http_log_obfuscator().obfuscators.items():
        table.add_row(f"provider:{provider}", ", ".join(redactor.fields))
    for fs in cfg.field_sets:
        table.add_row(f"config:{fs.name}", ", ".join(fs.fields))
    console.print(table)
