"""Substitution of macro references in filter conditions."""

from __future__ import annotations

from .filter_ast import AndExpr, Expr, NotExpr, OrExpr, ValueExpr, clone


class MacroResolver:
    """Replaces macro identifiers in a filter with copies of their definitions."""

    def __init__(self) -> None:
        self._macros: dict[str, Expr | None] = {}
        self._resolved: set[str] = set()
        self._unknown: set[str] = set()

    def set_macro(self, name: str, macro: Expr | None) -> None:
        """Define or redefine a macro; a None definition leaves it undefined."""
        self._macros[name] = macro

    def run(self, filter: Expr) -> Expr:
        """Substitute every known macro reference and return the resulting tree.

        The tree is changed in place where possible; the returned root differs
        from the given one when the root itself was a macro reference.
        """
        self._resolved = set()
        self._unknown = set()
        return self._visit(filter)

    @property
    def resolved_macros(self) -> frozenset[str]:
        """Names of the macros substituted by the last run."""
        return frozenset(self._resolved)

    @property
    def unknown_macros(self) -> frozenset[str]:
        """Names referenced in the last run that have no definition."""
        return frozenset(self._unknown)

    def _visit(self, node: Expr) -> Expr:
        match node:
            case AndExpr(children=children) | OrExpr(children=children):
                children[:] = [self._visit(child) for child in children]
                return node
            case NotExpr():
                node.child = self._visit(node.child)
                return node
            case ValueExpr(value=value):
                # Only identifiers that stand alone under and/or/not reach here;
                # check operands are never explored.
                macro = self._macros.get(value)
                if macro is not None:
                    replacement = self._visit(clone(macro))
                    self._resolved.add(value)
                    return replacement
                self._unknown.add(value)
                return node
            case _:
                return node