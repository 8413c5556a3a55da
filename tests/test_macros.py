from secrules.filter_ast import (
    AndExpr,
    BinaryCheckExpr,
    ListExpr,
    NotExpr,
    OrExpr,
    UnaryCheckExpr,
    ValueExpr,
)
from secrules.macros import MacroResolver


def _check(name):
    return BinaryCheckExpr("proc.name", "=", ValueExpr(name))


def test_resolves_root_macro():
    macro = _check("bash")
    resolver = MacroResolver()
    resolver.set_macro("is_bash", macro)
    result = resolver.run(ValueExpr("is_bash"))
    assert result == macro
    assert result is not macro
    assert resolver.resolved_macros == {"is_bash"}
    assert resolver.unknown_macros == set()


def test_resolves_inside_and_or_not():
    resolver = MacroResolver()
    resolver.set_macro("m1", _check("a"))
    resolver.set_macro("m2", _check("b"))
    tree = AndExpr([ValueExpr("m1"), NotExpr(OrExpr([ValueExpr("m2"), _check("c")]))])
    result = resolver.run(tree)
    assert result is tree
    assert result == AndExpr([_check("a"), NotExpr(OrExpr([_check("b"), _check("c")]))])
    assert resolver.resolved_macros == {"m1", "m2"}


def test_unknown_macro_is_reported_and_kept():
    resolver = MacroResolver()
    tree = AndExpr([ValueExpr("missing"), _check("a")])
    result = resolver.run(tree)
    assert result == AndExpr([ValueExpr("missing"), _check("a")])
    assert resolver.unknown_macros == {"missing"}
    assert resolver.resolved_macros == set()


def test_none_definition_undefines_macro():
    resolver = MacroResolver()
    resolver.set_macro("m", _check("a"))
    resolver.set_macro("m", None)
    result = resolver.run(ValueExpr("m"))
    assert result == ValueExpr("m")
    assert resolver.unknown_macros == {"m"}


def test_nested_macros_are_resolved():
    resolver = MacroResolver()
    resolver.set_macro("inner", _check("a"))
    resolver.set_macro("outer", OrExpr([ValueExpr("inner"), _check("b")]))
    result = resolver.run(NotExpr(ValueExpr("outer")))
    assert result == NotExpr(OrExpr([_check("a"), _check("b")]))
    assert resolver.resolved_macros == {"inner", "outer"}


def test_macro_definition_is_not_modified():
    definition = OrExpr([ValueExpr("inner"), _check("b")])
    resolver = MacroResolver()
    resolver.set_macro("inner", _check("a"))
    resolver.set_macro("outer", definition)
    resolver.run(ValueExpr("outer"))
    assert definition == OrExpr([ValueExpr("inner"), _check("b")])


def test_check_operands_are_not_treated_as_macros():
    resolver = MacroResolver()
    resolver.set_macro("bash", _check("x"))
    tree = AndExpr(
        [
            _check("bash"),
            BinaryCheckExpr("proc.name", "in", ListExpr(["bash"])),
            UnaryCheckExpr("bash", "exists"),
        ]
    )
    expected = AndExpr(
        [
            _check("bash"),
            BinaryCheckExpr("proc.name", "in", ListExpr(["bash"])),
            UnaryCheckExpr("bash", "exists"),
        ]
    )
    assert resolver.run(tree) == expected
    assert resolver.resolved_macros == set()
    assert resolver.unknown_macros == set()


def test_run_resets_previous_results():
    resolver = MacroResolver()
    resolver.set_macro("m", _check("a"))
    resolver.run(AndExpr([ValueExpr("m"), ValueExpr("nope")]))
    resolver.run(_check("z"))
    assert resolver.resolved_macros == set()
    assert resolver.unknown_macros == set()


def test_redefinition_overrides():
    resolver = MacroResolver()
    resolver.set_macro("m", _check("a"))
    resolver.set_macro("m", _check("b"))
    assert resolver.run(ValueExpr("m")) == _check("b")