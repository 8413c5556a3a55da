"""Rulesets that index enabled rules by event type."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .common import SYSCALL_SOURCE, EngineError, Rule
from .evttypes import EvttypeResolver
from .filter_ast import Expr

# Type code under which every event of a non-syscall source is indexed.
PLUGIN_EVENT_TYPE = 322

Filter = Callable[[Any], bool]
Compiler = Callable[[Expr], Filter]


@dataclass(eq=False)
class _FilterWrapper:
    rule: Rule
    evttypes: frozenset[int]
    filter: Filter


class _RulesetFilters:
    """The filters enabled in one ruleset, bucketed by event type."""

    def __init__(self) -> None:
        self._by_type: dict[int, list[_FilterWrapper]] = {}
        self._all_types: list[_FilterWrapper] = []
        # Insertion-ordered set of every enabled filter.
        self._filters: dict[_FilterWrapper, None] = {}

    def _buckets(self, wrap: _FilterWrapper, create: bool) -> list[list[_FilterWrapper]]:
        if not wrap.evttypes:
            return [self._all_types]
        if create:
            return [self._by_type.setdefault(etype, []) for etype in wrap.evttypes]
        return [self._by_type[etype] for etype in wrap.evttypes if etype in self._by_type]

    def add_filter(self, wrap: _FilterWrapper) -> None:
        for bucket in self._buckets(wrap, create=True):
            if wrap not in bucket:
                bucket.append(wrap)
        self._filters[wrap] = None

    def remove_filter(self, wrap: _FilterWrapper) -> None:
        for bucket in self._buckets(wrap, create=False):
            if wrap in bucket:
                bucket.remove(wrap)
        self._filters.pop(wrap, None)

    def __len__(self) -> int:
        return len(self._filters)

    def run(self, event: Any) -> Rule | None:
        for wrap in self._by_type.get(event.type, ()):
            if wrap.filter(event):
                return wrap.rule
        # Finally, try filters that are not specific to an event type.
        for wrap in self._all_types:
            if wrap.filter(event):
                return wrap.rule
        return None

    def evttypes(self) -> set[int]:
        types: set[int] = set()
        for wrap in self._filters:
            types |= wrap.evttypes
        return types


class EvttypeIndexRuleset:
    """Holds compiled rules and, per ruleset id, which of them are enabled.

    Enabled rules are indexed by event type and searched linearly within each
    event type bucket. Events are expected to expose their type code as
    ``event.type``; a compiled filter is a callable taking an event and
    returning whether it matches.
    """

    def __init__(self, compiler: Compiler, resolver: EvttypeResolver | None) -> None:
        self._compiler = compiler
        self._resolver = resolver
        self._rulesets: list[_RulesetFilters] = []
        self._filters: dict[_FilterWrapper, None] = {}

    def add(self, rule: Rule, condition: Expr) -> None:
        """Compile a rule's condition and add it, not yet enabled in any ruleset."""
        try:
            compiled = self._compiler(condition)
        except EngineError:
            raise
        except Exception as exc:
            raise EngineError(str(exc)) from exc
        if rule.source == SYSCALL_SOURCE:
            evttypes = (
                frozenset(self._resolver.evttypes(condition))
                if self._resolver is not None
                else frozenset()
            )
        else:
            evttypes = frozenset({PLUGIN_EVENT_TYPE})
        self._filters[_FilterWrapper(rule, evttypes, compiled)] = None

    def on_loading_complete(self) -> None:
        """Hook called once all rules are loaded; nothing needs doing here."""

    def clear(self) -> None:
        """Drop every rule and empty every ruleset."""
        self._rulesets = [_RulesetFilters() for _ in self._rulesets]
        self._filters.clear()

    def enable(self, substring: str, match_exact: bool, ruleset_id: int) -> None:
        """Enable rules whose name contains (or, if exact, equals) substring."""
        self._enable_disable(substring, match_exact, True, ruleset_id)

    def disable(self, substring: str, match_exact: bool, ruleset_id: int) -> None:
        """Disable rules whose name contains (or, if exact, equals) substring."""
        self._enable_disable(substring, match_exact, False, ruleset_id)

    def enable_tags(self, tags: Iterable[str], ruleset_id: int) -> None:
        """Enable rules carrying any of the given tags."""
        self._enable_disable_tags(tags, True, ruleset_id)

    def disable_tags(self, tags: Iterable[str], ruleset_id: int) -> None:
        """Disable rules carrying any of the given tags."""
        self._enable_disable_tags(tags, False, ruleset_id)

    def enabled_count(self, ruleset_id: int) -> int:
        """Number of rules enabled in a ruleset."""
        return len(self._ruleset(ruleset_id))

    def run(self, event: Any, ruleset_id: int) -> Rule | None:
        """Return the first enabled rule matching the event, or None."""
        if ruleset_id >= len(self._rulesets):
            return None
        return self._rulesets[ruleset_id].run(event)

    def enabled_evttypes(self, ruleset_id: int) -> set[int]:
        """Event type codes of the rules enabled in a ruleset."""
        if ruleset_id >= len(self._rulesets):
            return set()
        return self._rulesets[ruleset_id].evttypes()

    def _ruleset(self, ruleset_id: int) -> _RulesetFilters:
        while len(self._rulesets) <= ruleset_id:
            self._rulesets.append(_RulesetFilters())
        return self._rulesets[ruleset_id]

    def _apply(self, ruleset: _RulesetFilters, wrap: _FilterWrapper, enabled: bool) -> None:
        if enabled:
            ruleset.add_filter(wrap)
        else:
            ruleset.remove_filter(wrap)

    def _enable_disable(
        self, substring: str, match_exact: bool, enabled: bool, ruleset_id: int
    ) -> None:
        ruleset = self._ruleset(ruleset_id)
        for wrap in self._filters:
            name = wrap.rule.name
            if match_exact:
                matches = substring == "" or name == substring
            else:
                matches = substring == "" or substring in name
            if matches:
                self._apply(ruleset, wrap, enabled)

    def _enable_disable_tags(
        self, tags: Iterable[str], enabled: bool, ruleset_id: int
    ) -> None:
        ruleset = self._ruleset(ruleset_id)
        wanted = set(tags)
        for wrap in self._filters:
            if wanted & set(wrap.rule.tags):
                self._apply(ruleset, wrap, enabled)


class EvttypeIndexRulesetFactory:
    """Creates fresh event-type-indexed rulesets sharing a compiler and resolver."""

    def __init__(self, compiler: Compiler, resolver: EvttypeResolver | None) -> None:
        self._compiler = compiler
        self._resolver = resolver

    def new_ruleset(self) -> EvttypeIndexRuleset:
        """Return a new, empty ruleset."""
        return EvttypeIndexRuleset(self._compiler, self._resolver)