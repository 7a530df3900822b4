"""Fixture files read from disk.

Files are read once, eagerly, when a loader is built. A missing or
unreadable file stops the whole construction before any network call.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from esfixtures.engines.index_names import index_name_for
from esfixtures.exceptions import FileReadError

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class FixtureFile:
    """Raw content of one fixture file plus the names derived from it."""

    path: str
    file_name: str
    content: bytes

    @property
    def index_name(self) -> str:
        return index_name_for(self.file_name)


def read_fixture_file(path: PathLike) -> FixtureFile:
    path_str = os.fspath(path)
    try:
        content = Path(path_str).read_bytes()
    except OSError as exc:
        raise FileReadError(path_str, exc) from exc
    return FixtureFile(
        path=path_str,
        file_name=os.path.basename(path_str),
        content=content,
    )


def read_fixture_files(*paths: PathLike) -> Tuple[FixtureFile, ...]:
    """Read every path in order; the first unreadable one raises ``FileReadError``."""
    return tuple(read_fixture_file(path) for path in paths)
