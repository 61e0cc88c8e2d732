#!/usr/bin/env python3


import logging
import sys
from pathlib import Path

import click

from . import __version__
from .rename_music_files import rename_music_files
from .types import CliOptions


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("-d", "--dry-run", is_flag=True, help="Perform a dry run without renaming files")
@click.option("-v", "--verbose", is_flag=True, help="Print verbose output")
@click.option(
    "--sanitize",
    is_flag=True,
    help="Replace characters that are not allowed in filenames",
)
@click.option(
    "--no-clobber",
    is_flag=True,
    help="Do not overwrite a file that already has the new name",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any file could not be renamed",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set the logging level (default: WARNING)",
)
@click.version_option(__version__, prog_name="fmmd")
def main(
    files: tuple[Path, ...],
    dry_run: bool,
    verbose: bool,
    sanitize: bool,
    no_clobber: bool,
    strict: bool,
    log_level: str,
) -> None:
    """Fix music metadata: rename music files based on their track number and title."""
    level = getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    # When not in debug mode, only show our own debug messages
    if level != logging.DEBUG:
        for logger_name in logging.root.manager.loggerDict:
            if not logger_name.startswith("fmmd"):
                logging.getLogger(logger_name).setLevel(logging.WARNING)

    options = CliOptions(
        dry_run=dry_run,
        verbose=verbose,
        sanitize=sanitize,
        no_clobber=no_clobber,
    )
    summary = rename_music_files(files, options=options)
    action = "Would rename" if dry_run else "Renamed"
    logging.info(f"{action} {summary.renamed} files, {summary.failed} failed, {summary.skipped} not found")

    if strict and summary.failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
