"""Finding the event types for which a filter condition can be true."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .filter_ast import (
    AndExpr,
    BinaryCheckExpr,
    Expr,
    ListExpr,
    NotExpr,
    OrExpr,
    UnaryCheckExpr,
    ValueExpr,
)

# Codes 0 and 1 are the generic enter/exit events and are never reported.
_FIRST_EVTTYPE = 2
_EVTTYPE_FIELD = "evt.type"
_EVTTYPE_OPERATORS = frozenset({"==", "=", "!=", "in"})


@dataclass(frozen=True)
class EventInfo:
    """An entry of the event table; its position in the table is its type code."""

    name: str
    old_version: bool = False
    unused: bool = False


class EvttypeResolver:
    """Computes the event types a filter can match, given an event table."""

    def __init__(self, event_table: Sequence[EventInfo]) -> None:
        self._table = tuple(event_table)
        self._all = frozenset(self.evttypes_for_name(""))

    def evttypes_for_name(self, name: str) -> set[int]:
        """Type codes of current events with this name; all of them if name is empty."""
        return {
            code
            for code, info in enumerate(self._table[_FIRST_EVTTYPE:], start=_FIRST_EVTTYPE)
            if not (info.old_version or info.unused) and (not name or info.name == name)
        }

    def evttypes(self, filter: Expr) -> set[int]:
        """Type codes of the events for which the filter can evaluate to true."""
        return set(self._visit(filter, expect_value=False))

    def _invert(self, types: set[int]) -> set[int]:
        # The "all types" set is never inverted.
        if types == self._all:
            return set(self._all)
        return set(self._all - types)

    def _visit(self, node: Expr, expect_value: bool) -> set[int]:
        match node:
            case AndExpr(children=children):
                types = set(self._all)
                for child in children:
                    types &= self._visit(child, False)
                return types
            case OrExpr(children=children):
                types: set[int] = set()
                for child in children:
                    types |= self._visit(child, False)
                return types
            case NotExpr(child=child):
                return self._invert(self._visit(child, False))
            case BinaryCheckExpr(field=field, op=op, value=value):
                if field == _EVTTYPE_FIELD and op in _EVTTYPE_OPERATORS:
                    types = self._visit(value, True)
                    return self._invert(types) if op == "!=" else types
                return set(self._all)
            case UnaryCheckExpr():
                return set(self._all)
            case ValueExpr(value=value):
                return self.evttypes_for_name(value) if expect_value else set(self._all)
            case ListExpr(values=values):
                if not expect_value:
                    return set(self._all)
                types = set()
                for name in values:
                    types |= self.evttypes_for_name(name)
                return types
            case _:
                raise TypeError(f"unsupported filter node: {type(node).__name__}")