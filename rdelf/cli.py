"""
rdelf CLI -- ELF64 Header Reader
=================================

Click-based command-line interface.  Views are selected with flags; with
no view flag the ELF header is shown.

Usage::

    # ELF header
    rdelf /bin/ls --hed

    # Program headers and section headers
    rdelf /bin/ls -l -S

    # Everything, as Rich tables
    rdelf /bin/ls --all --table

    # JSON on stdout, or to a file
    rdelf /bin/ls --all --json
    rdelf /bin/ls --all --output report.json

References:
    - Click documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys

import click

from shared.config import RdelfConfig
from shared.console import RdelfConsole
from shared.logger import RdelfLogger
from shared.models import RunResult

from rdelf import __version__
from rdelf.core.engine import ReadelfEngine
from rdelf.core.errors import ElfError
from rdelf.output.console import ReadelfConsoleOutput
from rdelf.output.report import ReadelfReportGenerator


def _make_logger(tool_name: str, config: RdelfConfig, verbose: bool) -> RdelfLogger:
    settings = config.global_settings
    return RdelfLogger(
        tool_name,
        log_level="DEBUG" if verbose or settings.debug else settings.log_level,
        log_file=settings.log_file or None,
        json_logs=settings.log_json,
    )


@click.command("rdelf")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--hed", is_flag=True, default=False, help="Display the ELF header.")
@click.option(
    "--progh", "-l",
    is_flag=True,
    default=False,
    help="Display program headers.",
)
@click.option(
    "--segh", "-S",
    is_flag=True,
    default=False,
    help="Display section headers.",
)
@click.option(
    "--all", "-a", "show_all",
    is_flag=True,
    default=False,
    help="Display the ELF header, program headers and section headers.",
)
@click.option(
    "--table/--lines",
    default=None,
    help="Render Rich tables instead of labeled lines.",
)
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Print the decoded structures as JSON to stdout.",
)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a JSON report to this path.",
)
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="TOML configuration file.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.version_option(__version__, prog_name="rdelf")
def rdelf_cli(
    path: str,
    hed: bool,
    progh: bool,
    segh: bool,
    show_all: bool,
    table: bool | None,
    json_output: bool,
    output_path: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """rdelf -- parse and display ELF64 header structures.

    PATH is the ELF file to read.

    Examples:

    \b
        rdelf /usr/bin/ls --hed
        rdelf /usr/bin/ls -l -S
        rdelf /usr/bin/ls --all --table
    """
    console = RdelfConsole()

    try:
        config = RdelfConfig.load(config_path)
    except (OSError, ValueError) as exc:
        console.error(f"Cannot load configuration: {exc}")
        sys.exit(1)

    logger = _make_logger("cli", config, verbose)

    if show_all:
        hed = progh = segh = True
    elif not (hed or progh or segh):
        hed = True

    engine = ReadelfEngine(
        config=config,
        logger=_make_logger("engine", config, verbose),
    )
    run = RunResult(tool_name="rdelf", target=path)
    generator = ReadelfReportGenerator()

    try:
        report = engine.analyze(
            path,
            program_headers=progh,
            section_headers=segh,
        )
    except KeyboardInterrupt:
        console.warning("Interrupted by user.")
        sys.exit(130)
    except (ElfError, OSError) as exc:
        logger.debug("Failed to decode %s", path, exc_info=True)
        console.error(f"{path}: {exc}")
        run.finalize(error=str(exc))
        if output_path:
            _save_report(generator, run, output_path, console, announce=False)
        sys.exit(1)

    generator.build_run(report, run).finalize(
        summary=(
            f"{report.header.ident.class_name} {report.header.machine}, "
            f"{len(report.program_headers or [])} program headers, "
            f"{len(report.section_headers or [])} section headers"
        )
    )
    logger.info(run.summary)

    if output_path:
        _save_report(generator, run, output_path, console, announce=not json_output)

    if json_output:
        click.echo(generator.to_json(run))
        return

    use_table = config.readelf.table_output if table is None else table
    ReadelfConsoleOutput(console=console, table=use_table).display(
        report, show_header=hed
    )


def _save_report(
    generator: ReadelfReportGenerator,
    run: RunResult,
    output_path: str,
    console: RdelfConsole,
    *,
    announce: bool,
) -> None:
    """Write the JSON report for *run*; exit with status 1 if it cannot be written."""
    try:
        report_path = generator.generate_json(run, output_path)
    except OSError as exc:
        console.error(f"Cannot write report: {exc}")
        sys.exit(1)
    if announce:
        console.success(f"JSON report saved: {report_path}")


def main() -> None:
    """Entry point for the ``rdelf`` console script."""
    rdelf_cli()


if __name__ == "__main__":
    main()
