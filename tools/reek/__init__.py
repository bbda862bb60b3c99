"""tools/reek

Reek analyzer package.

This package contains the Reek-specific implementation: command resolution,
runner and normalizer. The orchestration that ties them together lives in
:mod:`pipeline.orchestrator`.
"""

from __future__ import annotations

from .environment import RubyGemEnvironment
from .normalize import ReekOutputParser, parse_reek_output
from .resolve import ReekCommandResolver, resolve_command
from .runner import (
    BASE_ARGS,
    DEFAULT_TIMEOUT_SECONDS,
    ReekProcessExecutor,
    build_args,
    build_command,
    reek_version,
    run_reek,
)

__all__ = [
    "BASE_ARGS",
    "DEFAULT_TIMEOUT_SECONDS",
    "ReekCommandResolver",
    "ReekOutputParser",
    "ReekProcessExecutor",
    "RubyGemEnvironment",
    "build_args",
    "build_command",
    "parse_reek_output",
    "reek_version",
    "resolve_command",
    "run_reek",
]
