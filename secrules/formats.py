"""Rendering of rule alerts as text or JSON."""

from __future__ import annotations

import json
import time
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Protocol

from .common import EngineError

_NS_PER_SECOND = 1_000_000_000


class OutputFormat(Enum):
    """How a formatter renders an event."""

    NORMAL = "normal"
    JSON = "json"


class Formatter(Protocol):
    """Renders events for one output string."""

    output_format: OutputFormat

    def to_string(self, event: Any, output_format: OutputFormat | None = None) -> str:
        """Render the event, in the given format or the formatter's own."""

    def field_values(self, event: Any) -> Mapping[str, str] | None:
        """Field names and values of the output string; None if not all could be extracted."""


class FormatterSource(Protocol):
    """Anything that creates formatters by event source and output string."""

    def create_formatter(self, source: str, output: str) -> Formatter:
        """Return a formatter for an output string of an event source."""


def _iso8601(ts: int) -> str:
    seconds, nanos = divmod(ts, _NS_PER_SECOND)
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(seconds)) + f".{nanos:09d}Z"


class Formats:
    """Formats alerts for matched events; events expose their time as ``ts`` in ns."""

    def __init__(
        self,
        engine: FormatterSource,
        json_include_output_property: bool,
        json_include_tags_property: bool,
    ) -> None:
        self._engine = engine
        self._include_output = json_include_output_property
        self._include_tags = json_include_tags_property

    def format_event(
        self,
        event: Any,
        rule: str,
        source: str,
        level: str,
        format: str,
        tags: Iterable[str],
    ) -> str:
        """Render the alert line for an event that matched a rule."""
        formatter = self._engine.create_formatter(source, format)
        line = formatter.to_string(event, OutputFormat.NORMAL)
        if formatter.output_format is not OutputFormat.JSON:
            return line

        json_line = formatter.to_string(event)
        if json_line.startswith("\n"):
            json_line = json_line[1:]

        record: dict[str, Any] = {
            "time": _iso8601(event.ts),
            "rule": rule,
            "priority": level,
            "source": source,
        }
        if self._include_output:
            record["output"] = line
        if self._include_tags:
            record["tags"] = sorted(set(tags))

        full_line = json.dumps(
            record, sort_keys=True, separators=(",", ":"), ensure_ascii=False
        )
        # graft the formatter's own fields object into the record
        return full_line[:-1] + ', "output_fields": ' + json_line + "}"

    def get_field_values(self, event: Any, source: str, format: str) -> dict[str, str]:
        """Field names and values of an output string resolved on an event."""
        formatter = self._engine.create_formatter(source, format)
        values = formatter.field_values(event)
        if values is None:
            raise EngineError("Could not extract all field values from event")
        return dict(values)