"""pipeline.orchestrator

Run one analysis: the only entrypoint callers need.

    Materialize -> ResolveCommand -> BuildArgs -> Execute -> Parse -> Cleanup

The working file is acquired once and released exactly once, on every exit
path. Each call is independent: no caches, no shared state, no retries, so
callers may run several pipelines on separate threads.

Error tiers
-----------
:meth:`AnalysisPipeline.run` lets the specific error kinds through.
:meth:`AnalysisPipeline.execute_analysis` is the caller contract: resolution
and process failures become a terse :class:`ExecutionFailed` while the full
context goes to the log.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Union

from reek_runner.domain import (
    EnvironmentUnavailable,
    ExecutionFailed,
    InterpreterHomeUndefined,
    ProcessLaunchFailure,
    RunConfiguration,
    ToolNotFound,
    WarningRecord,
)
from reek_runner.io import materialize_working_file

from pipeline.protocols import (
    CommandResolver,
    EnvironmentDescriptor,
    Materializer,
    OutputParser,
    ProcessExecutor,
)

logger = logging.getLogger(__name__)

RUBY_EXTENSION = ".rb"

# Kinds the caller contract hides behind ExecutionFailed.
TRANSLATED_ERRORS = (
    EnvironmentUnavailable,
    ToolNotFound,
    InterpreterHomeUndefined,
    ProcessLaunchFailure,
)

PathLike = Union[str, Path]


class AnalysisPipeline:
    """Compose resolver, executor and parser into one analysis run."""

    def __init__(
        self,
        *,
        resolver: CommandResolver,
        executor: ProcessExecutor,
        parser: OutputParser,
        materializer: Materializer = materialize_working_file,
        extension: str = RUBY_EXTENSION,
    ) -> None:
        self.resolver = resolver
        self.executor = executor
        self.parser = parser
        self.materializer = materializer
        self.extension = extension

    def run(
        self,
        document_content: str,
        config: RunConfiguration,
        environment: Optional[EnvironmentDescriptor],
        working_directory: Optional[PathLike] = None,
        *,
        display_path: Optional[str] = None,
    ) -> List[WarningRecord]:
        """Analyze ``document_content``; specific error kinds propagate."""
        working_file = self.materializer(document_content, self.extension)
        try:
            command = self.resolver.resolve(config, environment)
            args = self.executor.build_args(config)
            raw_output = self.executor.run(
                command,
                args,
                working_file.path,
                Path(working_directory) if working_directory else None,
            )
            warnings = self.parser.parse(raw_output, display_path or str(working_file.path))
        finally:
            working_file.release()

        if display_path:
            temp_path = str(working_file.path)
            warnings = [replace(w, file_path=display_path) if w.file_path == temp_path else w for w in warnings]
        return warnings

    def execute_analysis(
        self,
        document_content: str,
        config: RunConfiguration,
        environment: Optional[EnvironmentDescriptor],
        working_directory: Optional[PathLike] = None,
        *,
        display_path: Optional[str] = None,
    ) -> List[WarningRecord]:
        """Caller contract: like :meth:`run`, with user-facing failures."""
        try:
            return self.run(
                document_content,
                config,
                environment,
                working_directory,
                display_path=display_path,
            )
        except TRANSLATED_ERRORS as e:
            logger.error(
                "Reek analysis failed (%s): %s",
                type(e).__name__,
                e,
                exc_info=True,
                extra={"error_kind": type(e).__name__, "display_path": display_path},
            )
            raise ExecutionFailed("Execution failed.", kind=e) from e


def execute_analysis(
    document_content: str,
    config: RunConfiguration,
    environment: Optional[EnvironmentDescriptor],
    working_directory: Optional[PathLike] = None,
    *,
    display_path: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
) -> List[WarningRecord]:
    """Run Reek over ``document_content`` with the default implementations."""
    from pipeline.wiring import build_pipeline

    pipeline = build_pipeline(timeout_seconds=timeout_seconds)
    return pipeline.execute_analysis(
        document_content,
        config,
        environment,
        working_directory,
        display_path=display_path,
    )
