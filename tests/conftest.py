from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen.id3 import ID3, TIT2, TPE1, TRCK

MakeMp3 = Callable[..., Path]


def write_mp3(path: Path, *, title: str | None = None, track: str | None = None) -> Path:
    """Write a small file carrying an ID3 tag with the given frames."""
    path.write_bytes(b"\xff\xfb\x90\x00" + b"\x00" * 413)
    tags = ID3()
    tags.add(TPE1(encoding=3, text="Kendrick Lamar"))
    if title is not None:
        tags.add(TIT2(encoding=3, text=title))
    if track is not None:
        tags.add(TRCK(encoding=3, text=track))
    tags.save(str(path))
    return path


@pytest.fixture
def make_mp3() -> MakeMp3:
    return write_mp3


@pytest.fixture
def music_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A temporary working directory, so that printed paths are relative."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
