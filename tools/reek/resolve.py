"""tools/reek/resolve.py

Decide which command launches Reek.

Two tiers, checked in this order:

1. an explicit executable configured by the user always wins;
2. otherwise the executable is inferred from the environment descriptor
   (the installed Ruby runtime), together with the interpreter that runs it.
"""

from __future__ import annotations

import logging
from typing import Optional

from reek_runner.domain import (
    CommandContext,
    EnvironmentUnavailable,
    InterpreterHomeUndefined,
    RunConfiguration,
    ToolNotFound,
)

logger = logging.getLogger(__name__)

TOOL_NAME = "reek"


def resolve_command(
    config: RunConfiguration,
    environment,
    *,
    module: Optional[str] = None,
    tool: str = TOOL_NAME,
) -> CommandContext:
    """Return the command used to run the analyzer.

    ``environment`` is an :class:`pipeline.protocols.EnvironmentDescriptor`
    or ``None`` when no runtime is attached to the current context.
    """
    if config.executable:
        logger.debug("Using explicit analyzer executable: %s", config.executable)
        return CommandContext(executable=config.executable, interpreter_home=None)

    if environment is None:
        raise EnvironmentUnavailable("SDK is not available in current context")

    executable = environment.script_path(tool, module)
    if not executable:
        logger.error(
            "Failed to obtain the %s executable path using SDK: %s",
            tool,
            environment.name,
            extra={"environment": environment.name},
        )
        raise ToolNotFound(f"Failed to find the {tool} executable.")

    interpreter = environment.home_path()
    if not interpreter:
        logger.error(
            "Home path for the SDK is not defined: %s",
            environment.name,
            extra={"environment": environment.name},
        )
        raise InterpreterHomeUndefined("Interpreter home path is undefined.")

    return CommandContext(executable=str(executable), interpreter_home=str(interpreter))


class ReekCommandResolver:
    """:class:`pipeline.protocols.CommandResolver` for Reek."""

    def __init__(self, *, module: Optional[str] = None) -> None:
        self.module = module

    def resolve(self, config: RunConfiguration, environment) -> CommandContext:
        return resolve_command(config, environment, module=self.module)
