"""CLI entry point: PNG строки дисплея для списка asset id."""

import json
import logging
import os
from pathlib import Path
from typing import Tuple

import click

from src.batch.pipeline import BatchConfig, run_batch
from src.core.contracts import validate_batch_report


logger = logging.getLogger(__name__)

USAGE = """\
Creates display pngs for specified list of asset ids.

Usage:
  asset-id                          displays this usage message.
  asset-id INPUT_FILE OUTPUT_DIR    where:
    INPUT_FILE is a text file containing 4 digit asset ids, one per line.
    OUTPUT_DIR is a directory that will hold the generated png files.

If a png file cannot be created for a given input row then the id is
reported as a failure.

Caveats:
  INPUT_FILE must exist and be a regular file.
  Each line of INPUT_FILE must be exactly 4 digits with no other characters.
  OUTPUT_DIR must exist and be writeable; existing files may be overwritten.
  Bytes that are not valid UTF-8 are reported as \\xNN escapes.
"""


@click.command(help=USAGE, context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--report",
    "report_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Write a JSON batch report to this path",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def main(
    paths: Tuple[Path, ...],
    report_path: Path | None,
    log_level: str,
) -> None:
    """Generate display pngs for a list of asset ids."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not paths:
        click.echo(USAGE)
        return

    if len(paths) != 2:
        click.echo(f"Unsupported number of arguments: {len(paths)}")
        click.echo(USAGE)
        raise SystemExit(1)

    input_file, output_dir = paths

    if not input_file.is_file() or not os.access(input_file, os.R_OK):
        click.echo(f"ERROR: Input path {input_file} is inaccessible.")
        raise SystemExit(1)

    if not output_dir.is_dir() or not os.access(output_dir, os.W_OK):
        click.echo(f"ERROR: Output path {output_dir} is inaccessible.")
        raise SystemExit(1)

    # Недекодируемые байты сохраняются и выводятся в отчёте как \xNN
    with open(input_file, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        report = run_batch(f, output_dir, BatchConfig())

    if report_path is not None:
        contract = report.to_contract()
        validate_batch_report(contract)
        report_path.write_text(json.dumps(contract, indent=2), encoding="utf-8")
        logger.info("Wrote batch report to %s", report_path)

    if not report.ok:
        click.echo("ERROR: failures occurred:")
        for identifier in report.failed_identifiers():
            click.echo(f"\t{identifier}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
