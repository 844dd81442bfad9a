from __future__ import annotations

"""
File Sink Configuration Model.

Provides the immutable option set embedded in the rotating file sink and
the normalization step that fills defaults and repairs invalid values.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from logx.domain.constants import DEFAULT_LOG_DIR, DEFAULT_MAX_DAYS, StorageType

_SEPARATORS = ("/", os.sep)


@dataclass(frozen=True)
class FileOptions:
    """
    Immutable configuration for a rotating file sink.

    Attributes:
        storage_type: Bucket granularity driving rotation and file naming.
        max_days: Retention window in days for the background sweep.
        dir: Target directory; always ends with a path separator once prepared.
        prefix: Leading component of every file name.
    """
    storage_type: StorageType = StorageType.MINUTE
    max_days: int = DEFAULT_MAX_DAYS
    dir: str = DEFAULT_LOG_DIR
    prefix: str = ""


def prepare_file_options(options: Optional[FileOptions] = None) -> FileOptions:
    """
    Return a normalized copy of the given options.

    Empty directories fall back to the working directory, non-positive
    retention falls back to the default window, and the directory is
    suffixed with a separator.

    Args:
        options: Caller-provided options, or None for all defaults.

    Returns:
        FileOptions: Options safe to embed in a sink.
    """
    opt = options or FileOptions()

    directory = opt.dir or DEFAULT_LOG_DIR
    if not directory.endswith(_SEPARATORS):
        directory = directory + os.sep

    max_days = opt.max_days if opt.max_days > 0 else DEFAULT_MAX_DAYS

    return replace(opt, dir=directory, max_days=max_days)
