"""Shared types: the engine error, rule priorities and compiled rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

SYSCALL_SOURCE = "syscall"


class EngineError(Exception):
    """Raised by the rules engine for any rule, source or configuration problem."""


class Priority(IntEnum):
    """Rule severity; lower values are more severe."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7


_PRIORITY_NAMES = {
    Priority.EMERGENCY: "Emergency",
    Priority.ALERT: "Alert",
    Priority.CRITICAL: "Critical",
    Priority.ERROR: "Error",
    Priority.WARNING: "Warning",
    Priority.NOTICE: "Notice",
    Priority.INFORMATIONAL: "Informational",
    Priority.DEBUG: "Debug",
}


@dataclass
class Rule:
    """A compiled rule as held by the engine."""

    name: str = ""
    source: str = ""
    description: str = ""
    output: str = ""
    priority: Priority = Priority.DEBUG
    tags: set[str] = field(default_factory=set)
    exception_fields: set[str] = field(default_factory=set)
    id: int = 0


def parse_priority(value: str) -> Priority:
    """Parse a priority name, ignoring case; "info" is accepted for Informational."""
    lowered = value.lower()
    for priority, name in _PRIORITY_NAMES.items():
        if lowered == name.lower() or (
            priority is Priority.INFORMATIONAL and lowered == "info"
        ):
            return priority
    raise EngineError(f"Unknown priority value: {value}")


def format_priority(priority: int, short: bool = False) -> str:
    """Return the display name of a priority; the short form writes Informational as Info."""
    try:
        prio = Priority(priority)
    except ValueError:
        raise EngineError(f"Unknown priority enum value: {int(priority)}") from None
    if prio is Priority.INFORMATIONAL and short:
        return "Info"
    return _PRIORITY_NAMES[prio]