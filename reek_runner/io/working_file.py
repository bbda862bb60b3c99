"""reek_runner.io.working_file

Materialize an in-memory document to disk so an external process can read it.

The handle returned by :func:`materialize_working_file` owns the file: one
invocation creates it, the same invocation releases it. Releasing never raises;
a failed delete is logged so it cannot mask the pipeline's own result.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "reek-runner-"


class WorkingFile:
    """Handle to a materialized temporary file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def size(self) -> int:
        return self.path.stat().st_size

    def release(self) -> None:
        """Delete the file. Subsequent calls are no-ops."""
        if self._released:
            logger.debug("Working file already released: %s", self.path)
            return
        self._released = True
        try:
            self.path.unlink()
        except OSError as e:
            logger.warning(
                "Failed to delete working file %s: %s",
                self.path,
                e,
                extra={"file_path": str(self.path)},
            )

    def __enter__(self) -> "WorkingFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"WorkingFile({str(self.path)!r}, released={self._released})"


def materialize_working_file(
    content: str,
    extension: str = ".rb",
    *,
    directory: Optional[Path] = None,
) -> WorkingFile:
    """Write ``content`` verbatim to a new, uniquely named temporary file.

    The file uses the platform default text encoding and is fully written and
    closed before the handle is returned.
    """
    suffix = extension if extension.startswith(".") else f".{extension}"
    fd, name = tempfile.mkstemp(
        prefix=DEFAULT_PREFIX,
        suffix=suffix,
        dir=str(directory) if directory else None,
    )
    path = Path(name)
    try:
        # newline="" keeps the buffer's line endings byte-for-byte.
        with os.fdopen(fd, "w", newline="") as f:
            f.write(content)
    except BaseException:
        # Partially written files never reach the caller.
        path.unlink(missing_ok=True)
        raise

    logger.debug("Materialized working file %s", path)
    return WorkingFile(path)
