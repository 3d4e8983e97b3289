"""
This file contains various utility functions like timestamp formatting and file writing.
"""

import json
import os
import pathlib
import tempfile
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Union

LAUNCHER_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class TimeUtils:
    """
    Utilities for launcher timestamps
    """

    @staticmethod
    def current_timestamp(clock: Optional[Callable[[], datetime]] = None) -> str:
        """
        Format the current local time the way launcher manifests expect it,
        e.g. ``2024-01-01T00:00:00+0000``.
        """
        now = clock() if clock is not None else datetime.now()
        if now.tzinfo is None:
            now = now.astimezone()
        return now.strftime(LAUNCHER_TIMESTAMP_FORMAT)


class PathUtils:
    """
    Utilities for comparing filesystem paths reported by the build
    """

    @staticmethod
    def normalize(path: Union[str, os.PathLike]) -> str:
        return os.path.normcase(os.path.normpath(os.fspath(path)))


class FileUtils:
    """
    Utility functions for file operations
    """

    @staticmethod
    def write_json(path: Union[str, os.PathLike], payload: Dict[str, Any]) -> pathlib.Path:
        """
        Write ``payload`` as pretty-printed JSON, creating parent directories and
        replacing any existing file.

        The JSON goes to a temporary file next to ``path`` first, so a failed
        write leaves the previous file (or nothing) in place, never a partial one.
        """
        dest = pathlib.Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=f".{dest.name}.", suffix=".tmp", dir=dest.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_path, dest)
        except BaseException:
            os.unlink(tmp_path)
            raise
        return dest
