"""reek_runner.domain.errors

Error kinds raised along the analysis pipeline.

Two tiers:

* specific kinds (``ToolNotFound``, ``ProcessLaunchFailure``, ...) carry the
  operator-facing detail and are what the pipeline steps raise;
* :class:`ExecutionFailed` is the terse, user-facing failure the caller
  contract translates resolution and process errors into. The specific kind
  stays available as ``.kind`` and ``__cause__``.
"""

from __future__ import annotations

from typing import Optional


class ReekRunnerError(Exception):
    """Base class for all pipeline errors."""


class EnvironmentUnavailable(ReekRunnerError):
    """No environment descriptor is attached to the current context."""


class ToolNotFound(ReekRunnerError):
    """The analyzer executable path could not be derived."""


class InterpreterHomeUndefined(ReekRunnerError):
    """The environment does not define an interpreter home path."""


class ProcessLaunchFailure(ReekRunnerError):
    """The analyzer process could not be started or its output opened."""


class AnalyzerTimeout(ProcessLaunchFailure):
    """The analyzer did not finish within the configured bound."""

    def __init__(self, message: str, *, timeout_seconds: float) -> None:
        super().__init__(message)
        self.timeout_seconds = timeout_seconds


class MalformedAnalyzerOutput(ReekRunnerError):
    """The captured output is not valid structured analyzer output."""

    def __init__(self, message: str, *, raw_output: str) -> None:
        super().__init__(message)
        self.raw_output = raw_output


class ExecutionFailed(ReekRunnerError):
    """User-facing failure; see ``kind`` for the underlying error."""

    def __init__(self, message: str = "Execution failed.", *, kind: Optional[ReekRunnerError] = None) -> None:
        super().__init__(message)
        self.kind = kind
