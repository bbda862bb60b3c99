"""reek_runner.io

Filesystem helpers.

- :mod:`reek_runner.io.working_file` owns the temporary copy of the document
  handed to the analyzer.
- :mod:`reek_runner.io.fs` owns atomic writes of report artifacts.
"""

from __future__ import annotations

from .fs import write_json_atomic
from .working_file import WorkingFile, materialize_working_file

__all__ = [
    "WorkingFile",
    "materialize_working_file",
    "write_json_atomic",
]
