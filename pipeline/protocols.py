"""pipeline.protocols

Capability interfaces the orchestrator is composed from.

A new analyzer integration is a new set of implementations of these
protocols, not a subclass of the orchestrator. Real implementations for Reek
live in ``tools/reek``; tests pass small fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from reek_runner.domain import CommandContext, RunConfiguration, WarningRecord
from reek_runner.io import WorkingFile


class EnvironmentDescriptor(Protocol):
    """An installed language runtime the analyzer can be located through.

    Read-only from the pipeline's point of view.
    """

    @property
    def name(self) -> str:
        """Human-readable name, used for diagnostics."""
        ...

    def script_path(self, tool: str, module: Optional[str] = None) -> Optional[str]:
        """Path of ``tool``'s launcher script, or ``None`` when not installed."""
        ...

    def home_path(self) -> Optional[str]:
        """Interpreter home path, or ``None`` when undefined."""
        ...


class CommandResolver(Protocol):
    def resolve(
        self,
        config: RunConfiguration,
        environment: Optional[EnvironmentDescriptor],
    ) -> CommandContext: ...


class ProcessExecutor(Protocol):
    def build_args(self, config: RunConfiguration) -> List[str]: ...

    def run(
        self,
        command: CommandContext,
        args: Sequence[str],
        target_path: Path,
        working_directory: Optional[Path],
    ) -> str: ...


class OutputParser(Protocol):
    def parse(self, raw_output: str, file_path: str = "") -> List[WarningRecord]: ...


class Materializer(Protocol):
    def __call__(self, content: str, extension: str = ".rb") -> WorkingFile: ...
