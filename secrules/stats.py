"""Counters of rule matches by rule and by priority."""

from __future__ import annotations

from collections.abc import Sequence

from .common import Priority, Rule, format_priority


class StatsManager:
    """Tracks how many events matched each rule and each priority."""

    def __init__(self) -> None:
        self.total = 0
        self._by_priority: list[int] = []
        self._by_rule_id: list[int] = []

    def clear(self) -> None:
        """Reset every counter."""
        self.total = 0
        self._by_priority.clear()
        self._by_rule_id.clear()

    def on_event(self, rule: Rule) -> None:
        """Record that an event matched the given rule."""
        if len(self._by_rule_id) <= rule.id:
            self._by_rule_id.extend([0] * (rule.id + 1 - len(self._by_rule_id)))
        prio = int(rule.priority)
        if len(self._by_priority) <= prio:
            self._by_priority.extend([0] * (prio + 1 - len(self._by_priority)))
        self.total += 1
        self._by_rule_id[rule.id] += 1
        self._by_priority[prio] += 1

    def format(self, rules: Sequence[Rule]) -> str:
        """Render the counters; rules are looked up by their id as position."""
        lines = [
            f"Events detected: {self.total}",
            "Rule counts by severity:",
        ]
        for prio, count in enumerate(self._by_priority):
            if count > 0:
                name = format_priority(Priority(prio), True).upper()
                lines.append(f"   {name}: {count}")
        lines.append("Triggered rules by rule name:")
        for rule_id, count in enumerate(self._by_rule_id):
            if count > 0:
                lines.append(f"   {rules[rule_id].name}: {count}")
        return "\n".join(lines) + "\n"