from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Directory helpers used by the rotating file sink: recursive creation of
the target directory and the flat directory listing consumed by the
retention sweep.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import List

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileInfo:
    """
    Metadata snapshot of a regular file inside a directory.

    Attributes:
        name: Base name of the entry.
        path: Full path of the entry.
        mod_time: Last modification time (local, naive).
        size: Size in bytes.
    """
    name: str
    path: str
    mod_time: datetime
    size: int

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS API
# -----------------------------------------------------------------------------

def ensure_dir(path: str) -> None:
    """
    Create a directory and every missing parent.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    os.makedirs(path, exist_ok=True)


def list_dir_files(path: str) -> List[FileInfo]:
    """
    List the regular (non-directory) entries of a directory.

    Entries that disappear or cannot be inspected while listing are skipped.

    Args:
        path: Directory to enumerate.

    Returns:
        List[FileInfo]: One snapshot per file, in listing order.

    Raises:
        OSError: If the directory itself cannot be read.
    """
    files: List[FileInfo] = []
    with os.scandir(path) as entries:
        for entry in entries:
            try:
                if entry.is_dir():
                    continue
                stat = entry.stat()
            except OSError:
                continue
            files.append(
                FileInfo(
                    name=entry.name,
                    path=entry.path,
                    mod_time=datetime.fromtimestamp(stat.st_mtime),
                    size=stat.st_size,
                )
            )
    return files
