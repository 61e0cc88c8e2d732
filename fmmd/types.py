from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    """The fields of an audio file's metadata used to build its new name."""

    title: str = ""
    track: int = 0  # 0 means the file has no track number


@dataclass(frozen=True)
class CliOptions:
    dry_run: bool = False
    verbose: bool = False
    sanitize: bool = False  # clean filesystem-illegal characters from titles
    no_clobber: bool = False  # refuse to overwrite an existing file


@dataclass
class RenameSummary:
    """Counts of what happened to the files passed on the command line."""

    renamed: int = 0
    failed: int = 0
    skipped: int = 0
