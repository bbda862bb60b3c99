"""reek_runner.domain.models

Data contracts for one analysis run.

These are intentionally small, frozen dataclasses:

- what is configured for the run (RunConfiguration)
- what command will be launched (CommandContext)
- what the analyzer reported (WarningRecord)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _none_if_empty_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v)
    if not s.strip():
        return None
    return s


@dataclass(frozen=True)
class RunConfiguration:
    """User-supplied settings for one invocation.

    Empty strings and ``None`` both mean "not configured".
    """

    explicit_executable_path: Optional[str] = None
    explicit_config_file_path: Optional[str] = None

    @property
    def executable(self) -> Optional[str]:
        return _none_if_empty_str(self.explicit_executable_path)

    @property
    def config_file(self) -> Optional[str]:
        return _none_if_empty_str(self.explicit_config_file_path)


@dataclass(frozen=True)
class CommandContext:
    """A resolved, ready-to-run analyzer command.

    ``interpreter_home`` is the interpreter binary used to launch
    ``executable`` when it is a script. It is ``None`` for user overrides.
    """

    executable: str
    interpreter_home: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.executable:
            raise ValueError("CommandContext.executable must not be empty")


@dataclass(frozen=True)
class WarningRecord:
    """One code smell reported by the analyzer."""

    file_path: str
    line: int
    message: str
    smell_type: str

    # ---- Optional Reek extras (kept when present) ----
    context: Optional[str] = None
    documentation_link: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.line, bool) or not isinstance(self.line, int) or self.line < 1:
            raise ValueError(f"WarningRecord.line must be an integer >= 1, got {self.line!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "line": self.line,
            "message": self.message,
            "smell_type": self.smell_type,
            "context": self.context,
            "documentation_link": self.documentation_link,
        }

    def describe(self) -> str:
        return f"{self.file_path}:{self.line}: [{self.smell_type}] {self.message}"
