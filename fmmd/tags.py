import logging
from pathlib import Path

from mutagen import MutagenError
from mutagen.id3 import ID3

from .errors import FileParseError
from .types import Tag
from .utils import parse_track_number


def _first_text(tags: ID3, frame_id: str) -> str | None:
    frame = tags.get(frame_id)
    if frame is None or not frame.text:
        return None
    return str(frame.text[0])


def read_tag(path: Path) -> Tag:
    """Read the title and track number from a file's ID3 tag.

    Raises:
        FileParseError: if the file has no ID3 tag or it cannot be parsed
    """
    logging.debug(f"Reading ID3 tag from {path}")
    try:
        tags = ID3(str(path))
    except (MutagenError, OSError) as e:
        logging.debug(f"Could not read ID3 tag from {path}: {e}")
        raise FileParseError() from e

    tag = Tag(
        title=_first_text(tags, "TIT2") or "",
        track=parse_track_number(_first_text(tags, "TRCK")),
    )
    logging.debug(f"Found tag for {path}: {tag}")
    return tag
