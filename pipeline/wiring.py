"""pipeline.wiring

Default Reek wiring for entrypoints: logging setup and an
:class:`AnalysisPipeline` built from the real resolver, executor and parser.
Settings are loaded by :mod:`pipeline.settings`; nothing here touches the
process environment.
"""

from __future__ import annotations

import logging
from typing import Optional

from pipeline.orchestrator import AnalysisPipeline
from tools.reek import (
    DEFAULT_TIMEOUT_SECONDS,
    ReekCommandResolver,
    ReekOutputParser,
    ReekProcessExecutor,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def build_pipeline(
    *,
    timeout_seconds: Optional[float] = None,
    module: Optional[str] = None,
) -> AnalysisPipeline:
    """Build an :class:`AnalysisPipeline` wired with the Reek implementations."""

    return AnalysisPipeline(
        resolver=ReekCommandResolver(module=module),
        executor=ReekProcessExecutor(
            timeout_seconds=DEFAULT_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds
        ),
        parser=ReekOutputParser(),
    )
