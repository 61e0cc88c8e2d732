"""Errors raised while renaming a single file.

Every error is scoped to one file; the driver reports it and moves on.
"""


class FmmdError(Exception):
    """Base class for errors that stop one file from being renamed."""

    message = "Could not rename the file"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class FileParseError(FmmdError):
    """The file's tag could not be read or is malformed."""

    message = "Could not parse the file"


class FileRenameError(FmmdError):
    """The filesystem refused the rename."""

    message = "Could not rename the file"


class NotEnoughMetadataError(FmmdError):
    """The tag has neither a title nor a track number."""

    message = "Could not find enough information in the file to rename it"


class MissingPathComponentError(FmmdError):
    """The original path lacks an extension or a name to build on."""

    message = "Could not determine the new file name from the path"
