"""Syntax tree of parsed filter conditions."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field


class Expr:
    """Base class of every filter expression node."""


@dataclass
class AndExpr(Expr):
    """Conjunction of child expressions."""

    children: list[Expr] = field(default_factory=list)


@dataclass
class OrExpr(Expr):
    """Disjunction of child expressions."""

    children: list[Expr] = field(default_factory=list)


@dataclass
class NotExpr(Expr):
    """Negation of a child expression."""

    child: Expr


@dataclass
class ValueExpr(Expr):
    """A bare value: an identifier such as a macro name, or a check operand."""

    value: str


@dataclass
class ListExpr(Expr):
    """A parenthesised list of values used as a check operand."""

    values: list[str] = field(default_factory=list)


@dataclass
class UnaryCheckExpr(Expr):
    """A check with an operator and no operand, such as ``field exists``."""

    field: str
    op: str


@dataclass
class BinaryCheckExpr(Expr):
    """A check comparing a field with an operand through an operator."""

    field: str
    op: str
    value: Expr


def clone(expr: Expr) -> Expr:
    """Return a deep copy of an expression tree."""
    return copy.deepcopy(expr)