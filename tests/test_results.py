from secrules.common import Priority, Rule
from secrules.results import PluginRequirement, RuleResult


def _rule():
    return Rule(
        name="Write below etc",
        source="syscall",
        description="desc",
        output="file opened (%fd.name)",
        priority=Priority.WARNING,
        tags={"filesystem"},
        exception_fields={"proc.name"},
        id=3,
    )


def test_from_rule_copies_fields():
    rule = _rule()
    event = object()
    result = RuleResult.from_rule(rule, event)
    assert result.event is event
    assert result.rule == rule.name
    assert result.source == rule.source
    assert result.priority is Priority.WARNING
    assert result.format == rule.output
    assert result.tags == rule.tags
    assert result.exception_fields == rule.exception_fields


def test_from_rule_sets_are_independent():
    rule = _rule()
    result = RuleResult.from_rule(rule, None)
    result.tags.add("extra")
    result.exception_fields.clear()
    assert "extra" not in rule.tags
    assert rule.exception_fields == {"proc.name"}


def test_plugin_requirement_equality_and_hashing():
    first = PluginRequirement("cloudtrail", "0.2.3")
    same = PluginRequirement(name="cloudtrail", version="0.2.3")
    other = PluginRequirement("cloudtrail", "0.3.0")
    assert first == same
    assert len({first, same, other}) == 2