"""CLI commands using Typer."""

import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from chkr.cli.config import Config, load_config, validate_config
from chkr.cli.output import RichOutput
from chkr.models.checksum import ChecksumError
from chkr.utils.hashing import verify_checksum
from chkr.utils.logging import ResultLogger, setup_logging
from chkr.verify.manifest import verify_manifest
from chkr.verify.status import Status, VerificationSummary, outcome_status

app = typer.Typer(
    name="chkr",
    help=(
        "Verify files against MD5 checksums. Exits 0 when everything matches, "
        "1 on a mismatch, and 2 on any error."
    ),
    add_completion=False,
)
console = Console()
output = RichOutput(console)


def get_config(
    config_path: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
) -> Config:
    """Load configuration and set up logging.

    Args:
        config_path: Optional path to config file.
        verbose: Enable debug output on the console.
        log_file: Log file overriding the configured one.

    Returns:
        Loaded Config object.
    """
    config = load_config(config_path)
    issues = validate_config(config)

    if issues:
        for issue in issues:
            output.print_warning(issue)

    setup_logging(
        level=config.logging.level,
        log_file=log_file or config.logging.file,
        verbose=verbose,
    )
    return config


@app.command("file")
def verify_file(
    file_path: Path = typer.Argument(..., help="File to verify"),
    expected_checksum: str = typer.Argument(..., help="Expected lowercase MD5 hex digest"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write a debug log to this file",
    ),
) -> None:
    """Verify a single file against an expected checksum."""
    get_config(config_path, verbose, log_file)

    try:
        outcome = verify_checksum(file_path.resolve(), expected_checksum)
    except ChecksumError as e:
        output.print_error(f"Error verifying checksum for {file_path}", str(e))
        raise typer.Exit(int(Status.ERROR))

    output.print_file_result(file_path, outcome)
    raise typer.Exit(int(outcome_status(outcome)))


@app.command("manifest")
def verify_manifest_file(
    checksum_path: Path = typer.Argument(..., help="Checksum manifest in md5sum format"),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print files that did not match",
    ),
    no_summary: bool = typer.Option(
        False,
        "--no-summary",
        help="Don't print the summary panel",
    ),
    results_log: Optional[Path] = typer.Option(
        None,
        "--results-log",
        help="Append per-file results to this JSONL file",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write a debug log to this file",
    ),
) -> None:
    """Verify every file listed in a checksum manifest.

    File names are resolved relative to the manifest's directory.
    """
    config = get_config(config_path, verbose, log_file)
    quiet = quiet or config.output.quiet
    show_summary = config.output.summary and not no_summary

    try:
        results = verify_manifest(checksum_path)
    except ChecksumError as e:
        output.print_error("Error verifying checksums", str(e))
        raise typer.Exit(int(Status.ERROR))

    results_log = results_log or config.logging.results_log
    summary = VerificationSummary()
    start_time = time.monotonic()

    try:
        result_logger = ResultLogger(results_log)
        result_logger.log_run_start(results.manifest_path, results.total)

        for current, item in enumerate(results, start=1):
            item_status = summary.add(item)
            result_logger.log_result(item)

            if quiet and item_status == Status.OK:
                continue
            output.print_progress(current, results.total, item)

        result_logger.log_run_complete(summary, time.monotonic() - start_time)
    except OSError as e:
        output.print_error(f"Cannot write results log {results_log}", str(e))
        raise typer.Exit(int(Status.ERROR))

    if show_summary:
        output.print_summary(summary)

    raise typer.Exit(int(summary.status))


if __name__ == "__main__":
    app()
