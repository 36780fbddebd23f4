"""
CLI commands for gasreport.

Provides the command-line interface using Click.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from gasreport import __version__
from gasreport.core.config import ReportSettings
from gasreport.models.finding import AnalysisResult
from gasreport.reporting import ReporterRegistry, ReportError, create_report
from gasreport.utils.logging import get_logger, setup_logging

# The report itself may go to stdout
console = Console(stderr=True)
logger = get_logger("cli")

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2
EXIT_REPORT_ERROR = 3


@click.group()
@click.version_option(version=__version__, prog_name="gasreport")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output (DEBUG level)")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output (ERROR level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    help="Write logs to file",
)
@click.option("--json-logs", is_flag=True, help="Output logs in JSON format")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    log_file: Optional[Path],
    json_logs: bool,
) -> None:
    """gasreport - render Go AST Scanner results.

    Turns a saved analysis result into JSON, CSV, text, HTML or
    checkstyle XML.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["log_file"] = log_file
    ctx.obj["json_logs"] = json_logs


@cli.command()
@click.argument("results", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-f",
    "--format",
    "output_format",
    help="Report format: json, csv, text, html or checkstyle. Unknown values render as text.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option("--checkstyle-version", help="Version attribute of the checkstyle root element")
@click.pass_context
def render(
    ctx: click.Context,
    results: Path,
    output_format: Optional[str],
    output: Optional[Path],
    config: Optional[Path],
    checkstyle_version: Optional[str],
) -> None:
    """Render a saved analysis result.

    RESULTS is a JSON file with the scanner's "issues" and "metrics".

    Examples:

        gasreport render results.json -f checkstyle -o gas.xml

        gasreport render results.json -f csv > issues.csv
    """
    cli_args = {
        "verbose": ctx.obj.get("verbose"),
        "quiet": ctx.obj.get("quiet"),
        "log_file": ctx.obj.get("log_file"),
        "json_logs": ctx.obj.get("json_logs"),
        "output": output,
        "checkstyle_version": checkstyle_version,
    }

    try:
        settings = ReportSettings.load(cli_args=cli_args, config_file=config)
    except (ValidationError, ValueError, OSError) as e:
        console.print(f"[red]Configuration error:[/] {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    setup_logging(
        level=settings.logging.level,
        log_file=settings.logging.file,
        json_format=settings.logging.json_format,
    )

    try:
        result = AnalysisResult.from_json(results)
    except (OSError, ValueError, KeyError, TypeError) as e:
        console.print(f"[red]Cannot load results from {results}:[/] {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    fmt = output_format if output_format is not None else settings.reporting.default_format
    output_path = settings.reporting.output_path
    logger.info("Rendering report", format=fmt, issues=len(result.issues), output=output_path or "stdout")

    try:
        if output_path is not None:
            with open(output_path, "w", encoding="utf-8", newline="") as sink:
                create_report(sink, fmt, result, config=settings.reporting)
            if not ctx.obj.get("quiet"):
                console.print(f"[green]Report written to:[/] {output_path}")
        else:
            create_report(sys.stdout, fmt, result, config=settings.reporting)
    except ReportError as e:
        logger.error("Report generation failed", exc=e, format=fmt)
        console.print(f"[red]Failed to write report:[/] {e}")
        sys.exit(EXIT_REPORT_ERROR)
    except OSError as e:
        console.print(f"[red]Cannot open output file:[/] {e}")
        sys.exit(EXIT_REPORT_ERROR)

    sys.exit(EXIT_SUCCESS)


@cli.command()
def formats() -> None:
    """List available report formats."""
    table = Table(title="Report formats")
    table.add_column("Format", style="cyan")
    table.add_column("Extension")
    table.add_column("Reporter")

    for name in ReporterRegistry.list_formats():
        reporter = ReporterRegistry.create(name)
        default = " (default)" if name == ReporterRegistry.default_format else ""
        table.add_row(f"{name}{default}", reporter.file_extension, type(reporter).__name__)

    Console().print(table)


@cli.command("config")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
def show_config(config: Optional[Path]) -> None:
    """Print the effective configuration as JSON."""
    try:
        settings = ReportSettings.load(config_file=config)
    except (ValidationError, ValueError, OSError) as e:
        console.print(f"[red]Configuration error:[/] {e}")
        sys.exit(EXIT_CONFIG_ERROR)
    click.echo(json.dumps(settings.model_dump(mode="json"), indent=2))


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
