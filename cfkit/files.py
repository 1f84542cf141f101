"""File and directory helpers."""

from __future__ import annotations

import enum
import os
import shutil
import stat as _stat
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class FileType(enum.Enum):
    """Kind of a file system entry."""

    UNKNOWN = "unknown"
    SOCK = "sock"
    LINK = "link"
    REGULAR = "regular"
    BLOCK = "block"
    DIR = "dir"
    CHAR = "char"
    PIPE = "pipe"
    NOT_DEF = "not_def"


_MODE_TYPES = (
    (_stat.S_ISSOCK, FileType.SOCK),
    (_stat.S_ISLNK, FileType.LINK),
    (_stat.S_ISREG, FileType.REGULAR),
    (_stat.S_ISBLK, FileType.BLOCK),
    (_stat.S_ISDIR, FileType.DIR),
    (_stat.S_ISCHR, FileType.CHAR),
    (_stat.S_ISFIFO, FileType.PIPE),
)


def file_type(path: PathLike) -> FileType:
    """Return the kind of ``path``, following links; UNKNOWN if it cannot be read."""
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return FileType.UNKNOWN
    for test, kind in _MODE_TYPES:
        if test(mode):
            return kind
    return FileType.NOT_DEF


def exists(path: PathLike) -> bool:
    """Whether ``path`` exists."""
    return os.access(path, os.F_OK)


def isfile(path: PathLike) -> bool:
    """Whether ``path`` is a regular file."""
    return file_type(path) is FileType.REGULAR


def isdir(path: PathLike) -> bool:
    """Whether ``path`` is a directory."""
    return file_type(path) is FileType.DIR


def copy(src: PathLike, dst: PathLike) -> None:
    """Copy the contents of ``src`` to ``dst``, overwriting it."""
    shutil.copyfile(src, dst)


def rename(src: PathLike, dst: PathLike) -> None:
    """Rename ``src`` to ``dst``."""
    os.rename(src, dst)


def mkdir(path: PathLike) -> None:
    """Create a directory with mode 0755."""
    os.mkdir(path, 0o755)


def remove(path: PathLike) -> None:
    """Remove a file or an empty directory."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def rmdir(path: PathLike) -> None:
    """Remove an empty directory."""
    os.rmdir(path)


def chdir(path: PathLike) -> None:
    """Change the working directory."""
    os.chdir(path)


def getcwd() -> str:
    """Return the working directory."""
    return os.getcwd()


def link(src: PathLike, dst: PathLike) -> None:
    """Create a hard link ``dst`` to ``src``."""
    os.link(src, dst)


def unlink(path: PathLike) -> None:
    """Remove a file name."""
    os.unlink(path)


def listdir(path: PathLike) -> list[str]:
    """Return the names of the entries of a directory."""
    with os.scandir(path) as entries:
        return [entry.name for entry in entries]