"""Utility functions for fmmd."""

import re
import unicodedata
from typing import Final

# Characters that are rejected by at least one common filesystem
ILLEGAL_CHARS: Final = re.compile(r'[/\\:*?"<>|\x00-\x1f\x7f]')


def sanitize_filename(text: str) -> str:
    """Convert a tag title into a safe filename component.

    Illegal characters become hyphens, runs of hyphens are collapsed, and
    leading/trailing whitespace and hyphens are removed. Case, accents and
    spaces are preserved.

    Args:
        text: The title to convert

    Returns:
        A title that can be used as part of a filename
    """
    # Use NFC for composed form (é instead of e + ́)
    text = unicodedata.normalize("NFC", text)
    text = ILLEGAL_CHARS.sub("-", text)

    # Collapse multiple hyphens (if any were created)
    text = re.sub(r"-+", "-", text)
    text = text.strip().strip("-").strip()

    return text


def parse_track_number(value: str | None) -> int:
    """Parse an ID3 track number such as ``"5"`` or ``"05/12"``.

    Returns 0 when the value is missing or not a non-negative number.
    """
    if not value:
        return 0
    number = value.split("/", 1)[0].strip()
    if not number.isdigit():
        return 0
    return int(number)
