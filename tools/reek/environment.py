"""tools/reek/environment.py

A Ruby runtime as an environment descriptor.

The descriptor answers three questions for the resolver:

* what is this runtime called (for logs)
* where is a gem's launcher script (``Gem.bin_path``)
* which interpreter binary runs that script
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from tools.core_cmd import run_cmd

logger = logging.getLogger(__name__)

LOOKUP_TIMEOUT_SECONDS = 15

_BIN_PATH_SCRIPT = "print Gem.bin_path(ARGV[0], ARGV[0])"


class RubyGemEnvironment:
    """Environment descriptor backed by a Ruby interpreter and RubyGems."""

    def __init__(self, ruby_bin: str, *, name: Optional[str] = None) -> None:
        self.ruby_bin = ruby_bin
        self._name = name

    @classmethod
    def from_path(cls, ruby_bin: Optional[str] = None) -> Optional["RubyGemEnvironment"]:
        """Locate ``ruby`` (or ``ruby_bin``); ``None`` when there is no runtime."""
        found = shutil.which(ruby_bin or "ruby")
        if not found:
            logger.debug("No Ruby interpreter found for %r", ruby_bin or "ruby")
            return None
        return cls(found)

    @property
    def name(self) -> str:
        if self._name is None:
            try:
                res = run_cmd([self.ruby_bin, "--version"], timeout_seconds=LOOKUP_TIMEOUT_SECONDS)
                self._name = res.stdout.strip() or self.ruby_bin
            except OSError:
                self._name = self.ruby_bin
        return self._name

    def script_path(self, tool: str, module: Optional[str] = None) -> Optional[str]:
        """Ask RubyGems for ``tool``'s executable, from ``module`` when given.

        ``module`` is a project directory; running the lookup there lets a
        project's Bundler / version-manager setup apply.
        """
        cwd = Path(module) if module else None
        try:
            res = run_cmd(
                [self.ruby_bin, "-e", _BIN_PATH_SCRIPT, tool],
                cwd=cwd,
                timeout_seconds=LOOKUP_TIMEOUT_SECONDS,
            )
        except OSError as e:
            logger.warning("Failed to query RubyGems via %s: %s", self.ruby_bin, e)
            return None

        if res.exit_code != 0:
            logger.debug("Gem.bin_path(%r) failed: %s", tool, res.stderr.strip())
            return None

        path = res.stdout.strip()
        return path or None

    def home_path(self) -> Optional[str]:
        if self.ruby_bin and os.path.exists(self.ruby_bin):
            return self.ruby_bin
        return None

    def __repr__(self) -> str:
        return f"RubyGemEnvironment({self.ruby_bin!r})"
