"""reek_runner.domain

Domain objects that form the *contract* between pipeline steps.

Key idea
--------
Reek produces JSON in its own shape. The pipeline converts it into a small,
tool-agnostic warning record so callers (editors, CLI, CI) never need to know
Reek's output quirks.
"""

from __future__ import annotations

from .errors import (
    AnalyzerTimeout,
    EnvironmentUnavailable,
    ExecutionFailed,
    InterpreterHomeUndefined,
    MalformedAnalyzerOutput,
    ProcessLaunchFailure,
    ReekRunnerError,
    ToolNotFound,
)
from .models import CommandContext, RunConfiguration, WarningRecord

__all__ = [
    "AnalyzerTimeout",
    "CommandContext",
    "EnvironmentUnavailable",
    "ExecutionFailed",
    "InterpreterHomeUndefined",
    "MalformedAnalyzerOutput",
    "ProcessLaunchFailure",
    "ReekRunnerError",
    "RunConfiguration",
    "ToolNotFound",
    "WarningRecord",
]
