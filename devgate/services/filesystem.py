"""
Filesystem Service - Local file access for the calling agent.

Provides four single-shot operations over the host filesystem:
- list_directory: immediate children of a directory
- read_file: whole-file text read
- write_file: write (creating missing parent directories)
- search_files: recursive, case-insensitive regex match on entry names
"""

import logging
import os
import re
from datetime import datetime, timezone
from typing import List, Optional, Set, Tuple

from devgate.core.exceptions import (
    ExternalFailureError,
    InvalidInputError,
    PathNotFoundError,
)
from devgate.models.schemas import EntryType, FileEntry


logger = logging.getLogger(__name__)


def _stat_entry(path: str) -> os.stat_result:
    """Stat a path, falling back to the link itself for dangling symlinks."""
    try:
        return os.stat(path)
    except FileNotFoundError:
        return os.lstat(path)


def _created_at(st: os.stat_result) -> datetime:
    """UTC creation time where the platform records it, else inode change time."""
    birthtime = getattr(st, "st_birthtime", None)
    return datetime.fromtimestamp(
        birthtime if birthtime is not None else st.st_ctime, tz=timezone.utc
    )


def _make_entry(name: str, full_path: str) -> Tuple[FileEntry, os.stat_result]:
    st = _stat_entry(full_path)
    is_dir = os.path.isdir(full_path)
    entry = FileEntry(
        name=name,
        path=full_path,
        type=EntryType.DIRECTORY if is_dir else EntryType.FILE,
        size=st.st_size,
        created=_created_at(st),
        modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
    )
    return entry, st


def _require_directory(path: str) -> str:
    path = os.path.abspath(path)
    if not os.path.exists(path):
        raise PathNotFoundError(f"Directory not found: {path}", path)
    if not os.path.isdir(path):
        raise InvalidInputError(f"Not a directory: {path}")
    return path


def list_directory(path: str) -> List[FileEntry]:
    """
    List the immediate children of a directory.

    Args:
        path: Absolute or relative directory path.

    Returns:
        One FileEntry per child, sorted by name.

    Raises:
        PathNotFoundError: If the path does not exist.
        InvalidInputError: If the path is not a directory.
        ExternalFailureError: If the directory cannot be read.
    """
    path = _require_directory(path)

    try:
        entries = []
        for name in sorted(os.listdir(path)):
            entry, _ = _make_entry(name, os.path.join(path, name))
            entries.append(entry)
    except OSError as e:
        raise ExternalFailureError(f"Error listing files: {e}")

    logger.debug("Listed %d entries in %s", len(entries), path)
    return entries


def read_file(path: str) -> str:
    """
    Read a whole file as UTF-8 text.

    Undecodable bytes are replaced rather than failing the read.
    """
    path = os.path.abspath(path)

    if not os.path.exists(path):
        raise PathNotFoundError(f"File not found: {path}", path)
    if not os.path.isfile(path):
        raise InvalidInputError(f"Not a file: {path}")

    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            return f.read()
    except OSError as e:
        raise ExternalFailureError(f"Error reading file: {e}")


def write_file(path: str, content: str) -> str:
    """
    Write text to a file, creating any missing parent directories.

    Existing files are overwritten.

    Returns:
        The absolute path that was written.
    """
    path = os.path.abspath(path)

    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise ExternalFailureError(f"Error writing file: {e}")

    logger.info("Wrote %d characters to %s", len(content), path)
    return path


def search_files(path: str, pattern: str) -> List[FileEntry]:
    """
    Recursively find entries whose name matches a regex.

    The walk is depth-first in name order. Names (not paths) are matched
    case-insensitively with ``re.search``; matching directories are both
    reported and descended into. A directory already visited on this walk
    (a symlink loop) is not entered twice.

    Args:
        path: Root directory of the walk.
        pattern: Regular expression matched against each entry name.

    Returns:
        Matching entries in visit order.
    """
    root = _require_directory(path)

    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidInputError(f"Invalid search pattern: {e}")

    results: List[FileEntry] = []
    visited: Set[Tuple[int, int]] = set()

    def _walk(directory: str, dir_stat: Optional[os.stat_result]) -> None:
        st = dir_stat or os.stat(directory)
        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug("Skipping already visited directory %s", directory)
            return
        visited.add(key)

        for name in sorted(os.listdir(directory)):
            full_path = os.path.join(directory, name)
            entry, entry_stat = _make_entry(name, full_path)

            if regex.search(name):
                results.append(entry)

            if entry.type == EntryType.DIRECTORY:
                _walk(full_path, entry_stat)

    try:
        _walk(root, None)
    except OSError as e:
        raise ExternalFailureError(f"Error searching for files: {e}")

    logger.debug("Search for %r under %s matched %d entries", pattern, root, len(results))
    return results
