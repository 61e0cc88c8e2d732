import logging
from collections.abc import Iterable
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .errors import (
    FileRenameError,
    FmmdError,
    MissingPathComponentError,
    NotEnoughMetadataError,
)
from .tags import read_tag
from .types import CliOptions, RenameSummary, Tag
from .utils import sanitize_filename


def derive_filename(tag: Tag, path: Path, *, sanitize: bool = False) -> Path:
    """Build the new path for a file from its tag.

    The new name is ``{track:02d}-{title}{ext}`` in the same directory as the
    original. The title is used verbatim unless ``sanitize`` is set.

    Raises:
        NotEnoughMetadataError: if the tag has neither a title nor a track number
        MissingPathComponentError: if the path has no file name or extension
    """
    if not tag.title and tag.track == 0:
        raise NotEnoughMetadataError()
    if not path.name or not path.suffix:
        raise MissingPathComponentError()

    title = sanitize_filename(tag.title) if sanitize else tag.title
    return path.parent / f"{tag.track:02d}-{title}{path.suffix}"


def rename_file(path: Path, options: CliOptions) -> Path:
    """Rename a single file from its tag, or only report it in a dry run.

    Returns the new path.
    """
    tag = read_tag(path)
    new_path = derive_filename(tag, path, sanitize=options.sanitize)

    if options.dry_run or options.verbose:
        click.echo(f"{path} -> {new_path}")

    if options.dry_run:
        return new_path

    if options.no_clobber and new_path != path and new_path.exists():
        logging.debug(f"Not overwriting existing file {new_path}")
        raise FileRenameError()

    try:
        path.rename(new_path)
    except OSError as e:
        logging.debug(f"Rename of {path} to {new_path} failed: {e}")
        raise FileRenameError() from e
    logging.debug(f"Renamed {path} to {new_path}")
    return new_path


def report_error(error: FmmdError, path: Path) -> None:
    Console(stderr=True, highlight=False, emoji=False).print(
        f'[red]{escape(str(error))}[/red]: "[red]{escape(str(path))}[/red]"',
        soft_wrap=True,
    )


def rename_music_files(
    files: Iterable[Path],
    *,
    options: CliOptions,
) -> RenameSummary:
    """Rename music files using their track number and title.

    Files are handled one at a time in the order given. Files that do not
    exist are skipped silently; any other failure is reported on stderr and
    processing continues with the next file.

    Args:
        files: Files to process
        options: Command-line options
    """
    summary = RenameSummary()
    for path in files:
        if not path.exists():
            logging.debug(f"Skipping missing file {path}")
            summary.skipped += 1
            continue
        try:
            rename_file(path, options)
        except FmmdError as e:
            report_error(e, path)
            summary.failed += 1
        else:
            summary.renamed += 1
    return summary
