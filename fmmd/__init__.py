"""A command-line tool that renames music files from their track number and title tags."""

from .rename_music_files import derive_filename, rename_file, rename_music_files
from .tags import read_tag

__version__ = "0.1.0"

__all__ = ["derive_filename", "read_tag", "rename_file", "rename_music_files"]
