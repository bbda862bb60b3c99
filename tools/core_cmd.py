"""tools/core_cmd.py

Command-execution helpers shared across analyzer adapters.

This module deliberately avoids tool-specific knowledge. It provides:

* :func:`run_cmd` - run short helper subprocesses (no shell=True) and capture output.
* :func:`capture_stdout` - run the analyzer itself with a bounded wait and
  return its stdout with line boundaries removed.
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
import signal
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

# Same line terminators as a buffered line reader: \n, \r and \r\n.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_POSIX = os.name == "posix"

# Upper bound for draining pipes after a kill.
REAP_TIMEOUT_SECONDS = 2


@dataclass(frozen=True)
class CmdResult:
    exit_code: int
    elapsed_seconds: float
    command_str: str
    stdout: str
    stderr: str


class CmdTimeout(Exception):
    """Raised by :func:`capture_stdout` after the process was killed."""

    def __init__(self, command_str: str, timeout_seconds: float) -> None:
        super().__init__(f"Command timed out after {timeout_seconds}s: {command_str}")
        self.command_str = command_str
        self.timeout_seconds = timeout_seconds


def join_lines(text: str) -> str:
    """Concatenate the lines of ``text`` without any separator."""
    return "".join(_LINE_BREAK_RE.split(text))


def run_cmd(
    cmd: List[str],
    *,
    cwd: Optional[Path] = None,
    timeout_seconds: int = 0,
) -> CmdResult:
    """Run a subprocess and capture stdout/stderr (no ``shell=True``).

    Never raises on non-zero exit codes; only raises on execution errors
    (e.g. binary not found). A timeout is reported as exit code 124.
    """
    t0 = time.time()
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            stdin=subprocess.DEVNULL,
            text=True,
            capture_output=True,
            timeout=timeout_seconds if timeout_seconds and timeout_seconds > 0 else None,
        )
    except subprocess.TimeoutExpired as e:
        return CmdResult(
            exit_code=124,
            elapsed_seconds=time.time() - t0,
            command_str=" ".join(cmd),
            stdout=_as_text(e.stdout),
            stderr=_as_text(e.stderr),
        )

    return CmdResult(
        exit_code=proc.returncode,
        elapsed_seconds=time.time() - t0,
        command_str=" ".join(cmd),
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )


def capture_stdout(
    cmd: List[str],
    *,
    cwd: Optional[Path] = None,
    timeout_seconds: float = 0,
) -> CmdResult:
    """Run ``cmd`` to completion and return its stdout with lines concatenated.

    - stdin is closed (no interactive input)
    - the exit status is reported, never interpreted
    - on POSIX the process leads its own session, so a timeout kills the
      whole process group (a wrapper script and anything it spawned) before
      :class:`CmdTimeout` is raised

    ``OSError`` from process creation propagates to the caller.
    """
    t0 = time.time()
    command_str = " ".join(cmd)
    proc = subprocess.Popen(
        cmd,
        cwd=str(cwd) if cwd else None,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        start_new_session=_POSIX,
    )
    try:
        stdout, stderr = proc.communicate(
            timeout=timeout_seconds if timeout_seconds and timeout_seconds > 0 else None
        )
    except subprocess.TimeoutExpired:
        _kill_and_reap(proc)
        raise CmdTimeout(command_str, timeout_seconds)
    except BaseException:
        # KeyboardInterrupt and friends: do not leave an orphaned analyzer.
        _kill_and_reap(proc)
        raise

    elapsed = time.time() - t0
    logger.debug("Command exited with %s after %.2fs: %s", proc.returncode, elapsed, command_str)

    return CmdResult(
        exit_code=proc.returncode,
        elapsed_seconds=elapsed,
        command_str=command_str,
        stdout=join_lines(stdout or ""),
        stderr=stderr or "",
    )


def _kill_and_reap(proc: subprocess.Popen) -> None:
    if _POSIX:
        with contextlib.suppress(ProcessLookupError):
            os.killpg(proc.pid, signal.SIGKILL)
    else:
        proc.kill()
    try:
        proc.communicate(timeout=REAP_TIMEOUT_SECONDS)
    except subprocess.TimeoutExpired:
        # A descendant outside the group still holds the pipes open.
        for stream in (proc.stdout, proc.stderr):
            if stream is not None:
                stream.close()
        proc.wait()


def _as_text(v) -> str:
    if v is None:
        return ""
    if isinstance(v, bytes):
        return v.decode("utf-8", errors="replace")
    return str(v)
