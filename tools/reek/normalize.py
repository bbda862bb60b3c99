"""tools/reek/normalize.py

Parse Reek's JSON report into :class:`~reek_runner.domain.WarningRecord` objects.

Reek's ``--format json`` prints one array of smell objects:

    [{"context": "Foo#bar", "lines": [3, 7], "message": "has unused parameter 'x'",
      "smell_type": "UnusedParameters", "source": "foo.rb",
      "documentation_link": "https://..."}]

A smell spanning several lines yields one record per line, in order.
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional

from reek_runner.domain import MalformedAnalyzerOutput, WarningRecord


def _safe_line(v: Any) -> Optional[int]:
    # bool is a subclass of int; treat as invalid.
    if isinstance(v, bool) or not isinstance(v, int):
        return None
    return v if v >= 1 else None


def _lines_of(smell: Mapping[str, Any]) -> List[Optional[int]]:
    if "lines" in smell:
        lines = smell.get("lines")
        if not isinstance(lines, list) or not lines:
            return [None]
        return [_safe_line(x) for x in lines]
    return [_safe_line(smell.get("line"))]


def _optional_str(v: Any) -> Optional[str]:
    return str(v) if isinstance(v, str) and v.strip() else None


def _records_for(smell: Any, index: int, file_path: str, raw_output: str) -> List[WarningRecord]:
    if not isinstance(smell, dict):
        raise MalformedAnalyzerOutput(f"Reek issue #{index} is not an object", raw_output=raw_output)

    message = smell.get("message")
    smell_type = smell.get("smell_type") or smell.get("category")
    if not isinstance(message, str) or not isinstance(smell_type, str) or not smell_type:
        raise MalformedAnalyzerOutput(
            f"Reek issue #{index} lacks a message or smell type", raw_output=raw_output
        )

    source = _optional_str(smell.get("source")) or file_path
    records: List[WarningRecord] = []
    for line in _lines_of(smell):
        if line is None:
            raise MalformedAnalyzerOutput(f"Reek issue #{index} has no valid line", raw_output=raw_output)
        records.append(
            WarningRecord(
                file_path=source,
                line=line,
                message=message,
                smell_type=smell_type,
                context=_optional_str(smell.get("context")),
                documentation_link=_optional_str(smell.get("documentation_link") or smell.get("wiki_link")),
            )
        )
    return records


def parse_reek_output(raw_output: str, file_path: str = "") -> List[WarningRecord]:
    """Return the warnings in ``raw_output`` in the order Reek emitted them.

    Empty output means a clean file. Anything that does not parse as a JSON
    array of smell objects raises :class:`MalformedAnalyzerOutput`; there is
    no partial recovery.
    """
    if raw_output is None or not raw_output.strip():
        return []

    try:
        data = json.loads(raw_output)
    except json.JSONDecodeError as e:
        raise MalformedAnalyzerOutput(f"Reek output is not valid JSON: {e}", raw_output=raw_output) from e

    if not isinstance(data, list):
        raise MalformedAnalyzerOutput("Reek output is not a JSON array", raw_output=raw_output)

    warnings: List[WarningRecord] = []
    for i, smell in enumerate(data):
        warnings += _records_for(smell, i, file_path, raw_output)
    return warnings


class ReekOutputParser:
    """:class:`pipeline.protocols.OutputParser` for Reek."""

    def parse(self, raw_output: str, file_path: str = "") -> List[WarningRecord]:
        return parse_reek_output(raw_output, file_path)
