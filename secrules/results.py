"""Results of matching an event against the loaded rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common import Priority, Rule


@dataclass
class RuleResult:
    """Details of the rule that matched an event."""

    event: Any
    rule: str
    source: str
    priority: Priority
    format: str
    exception_fields: set[str] = field(default_factory=set)
    tags: set[str] = field(default_factory=set)

    @classmethod
    def from_rule(cls, rule: Rule, event: Any) -> RuleResult:
        """Build a result for an event that matched the given rule."""
        return cls(
            event=event,
            rule=rule.name,
            source=rule.source,
            priority=rule.priority,
            format=rule.output,
            exception_fields=set(rule.exception_fields),
            tags=set(rule.tags),
        )


@dataclass(frozen=True)
class PluginRequirement:
    """A plugin name with the version that is loaded or required."""

    name: str
    version: str