"""tools/reek/runner.py

Tool-specific execution plumbing for Reek.
Keeps Reek CLI flags and invocation shape close to the tool.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from reek_runner.domain import (
    AnalyzerTimeout,
    CommandContext,
    ProcessLaunchFailure,
    RunConfiguration,
)
from tools.core_cmd import CmdTimeout, capture_stdout, run_cmd

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30

# Single-line diagnostics, no progress, no empty headings, JSON on stdout.
BASE_ARGS = (
    "--single-line",
    "--no-progress",
    "--no-empty-headings",
    "--format",
    "json",
)


def build_args(config: RunConfiguration) -> List[str]:
    args = list(BASE_ARGS)
    if config.config_file:
        args += ["--config", config.config_file]
    return args


def build_command(command: CommandContext, args: Sequence[str], target_path: Path) -> List[str]:
    """Full argv: ``[interpreter?] executable *args target``."""
    cmd: List[str] = []
    if command.interpreter_home:
        cmd.append(command.interpreter_home)
    cmd.append(command.executable)
    cmd += list(args)
    cmd.append(str(target_path))
    return cmd


def reek_version(command: CommandContext) -> str:
    cmd = [command.interpreter_home] if command.interpreter_home else []
    cmd += [command.executable, "--version"]
    try:
        res = run_cmd(cmd, timeout_seconds=DEFAULT_TIMEOUT_SECONDS)
    except OSError:
        return "unknown"
    return (res.stdout or res.stderr).strip() or "unknown"


def run_reek(
    *,
    command: CommandContext,
    args: Sequence[str],
    target_path: Path,
    working_directory: Optional[Path] = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    """Run Reek on ``target_path`` and return its stdout as one string.

    Lines of output are concatenated without separators. The exit status is
    not interpreted: Reek exits non-zero when it finds smells.
    """
    target_path = Path(target_path)
    arguments = " ".join(args)
    try:
        file_size = target_path.stat().st_size
    except OSError as e:
        logger.error("Failed to retrieve file details for %s: %s", target_path, e)
        raise ProcessLaunchFailure("Failed to retrieve file details.") from e

    diag = {"file_path": str(target_path), "file_size": file_size, "arguments": list(args)}
    logger.info("File path: %s", target_path, extra=diag)
    logger.info("File size: %s bytes", file_size, extra=diag)
    logger.info("Reek parameters: %s", arguments, extra=diag)

    cmd = build_command(command, args, target_path)
    try:
        res = capture_stdout(cmd, cwd=working_directory, timeout_seconds=timeout_seconds)
    except CmdTimeout as e:
        logger.error("Reek timed out after %ss for file: %s", timeout_seconds, target_path, extra=diag)
        raise AnalyzerTimeout(str(e), timeout_seconds=timeout_seconds) from e
    except OSError as e:
        logger.error("Failed to start Reek process: %s", e, extra=diag)
        raise ProcessLaunchFailure(f"Failed to start analyzer: {cmd[0]}") from e

    if res.stdout == "":
        logger.error("Empty output for file: %s", target_path, extra=diag)
        logger.error("File size: %s bytes", file_size, extra=diag)
        logger.error("Reek parameters: %s", arguments, extra=diag)
        if res.stderr:
            logger.error("Reek stderr (exit code %s): %s", res.exit_code, res.stderr.strip()[:2000], extra=diag)

    return res.stdout


class ReekProcessExecutor:
    """:class:`pipeline.protocols.ProcessExecutor` for Reek."""

    def __init__(self, *, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.timeout_seconds = timeout_seconds

    def build_args(self, config: RunConfiguration) -> List[str]:
        return build_args(config)

    def run(
        self,
        command: CommandContext,
        args: Sequence[str],
        target_path: Path,
        working_directory: Optional[Path],
    ) -> str:
        return run_reek(
            command=command,
            args=args,
            target_path=target_path,
            working_directory=working_directory,
            timeout_seconds=self.timeout_seconds,
        )
