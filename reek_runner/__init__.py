"""reek_runner

Core package for running the Reek code-smell detector against one source
buffer.

The package owns:

* domain types (the data contracts between pipeline steps)
* IO helpers (temporary working files, atomic writers)

Tool execution lives under ``tools/`` and orchestration under ``pipeline/``,
so entrypoints stay thin composition roots.
"""

from __future__ import annotations
