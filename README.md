# secrules

Building blocks of a rule engine for security event detection. Conditions
are held as small syntax trees. Macro references in them can be replaced
by their definitions, and the event types a condition can match can be
worked out. Compiled rules are indexed by event type in rulesets that
can switch rules on and off by name or by tag. There are also helpers
for priorities, match statistics and alert formatting.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `secrules.common`
  - `Priority`: an `IntEnum`, from `EMERGENCY` (0) to `DEBUG` (7).
  - `parse_priority(value)`: matches without regard to case and also
    accepts `"info"`.
  - `format_priority(priority, short=False)`: with `short` the name comes
    back as `Info` rather than `Informational`.
  - `Rule`: the dataclass of a compiled rule.
  - `EngineError`: raised for invalid priorities and similar problems.
  - `SYSCALL_SOURCE`: the name of the system-call event source.
- `secrules.filter_ast`
  - The node classes `AndExpr`, `OrExpr`, `NotExpr`, `ValueExpr`,
    `ListExpr`, `UnaryCheckExpr` and `BinaryCheckExpr`.
  - `clone(expr)`: returns a deep copy of a tree.
- `secrules.macros.MacroResolver`
  - `set_macro(name, macro)` defines a macro.
  - `run(filter)` replaces every bare identifier under `and`/`or`/`not`
    with a copy of its definition, and returns the new root.
  - `resolved_macros` and `unknown_macros` report what the last run found.
- `secrules.evttypes`
  - `EventInfo` describes one entry of an event table. An entry's position
    in the table is its type code.
  - `EvttypeResolver(event_table)` offers `evttypes(filter)`, the type
    codes for which a condition can be true, and `evttypes_for_name(name)`.
    Codes 0 and 1, and entries marked old or unused, are never reported.
- `secrules.ruleset`
  - `EvttypeIndexRuleset(compiler, resolver)` holds rules together with
    their compiled filters. It can `enable`/`disable` them by name
    substring or exact name, and `enable_tags`/`disable_tags` them by tag,
    each within a numbered ruleset.
  - `run(event, ruleset_id)` returns the first enabled `Rule` that
    matches, or `None`.
  - `enabled_count` and `enabled_evttypes` report on a ruleset.
  - Rules of sources other than `syscall` are indexed under
    `PLUGIN_EVENT_TYPE`.
  - `EvttypeIndexRulesetFactory` creates such rulesets.
- `secrules.loader_info`: dataclasses for definitions read from rules text.
  - `Context`, `Source`, `Configuration`, `EngineVersionInfo`,
    `PluginVersionInfo`, `ListInfo`, `MacroInfo`, `ExceptionEntry`,
    `RuleExceptionInfo` and `RuleInfo`.
- `secrules.results`
  - `RuleResult.from_rule(rule, event)`: the details of a match.
  - `PluginRequirement`: a plugin name with a version.
- `secrules.stats.StatsManager`
  - Counts matches by rule and by priority through `on_event(rule)`.
  - `format(rules)` renders the counts; `clear()` resets them.
- `secrules.formats`
  - `Formats(engine, json_include_output_property, json_include_tags_property)`
    renders alert lines through any object with a
    `create_formatter(source, output)` method.
  - When the formatter's `output_format` is `OutputFormat.JSON`, the line
    is a JSON record with `time`, `rule`, `priority`, `source`, optional
    `output` and `tags`, and the formatter's `output_fields`.
  - `get_field_values` returns the resolved fields of an output string.
- `secrules.utils`
  - `wrap_text(text, indent, line_len)`
  - `read_file(filename)`, which returns `""` if the file cannot be opened.
  - `hardware_concurrency()`
  - `is_unix_scheme(url)`

## Example

```python
from secrules.common import Rule, Priority
from secrules.evttypes import EventInfo, EvttypeResolver
from secrules.filter_ast import AndExpr, BinaryCheckExpr, ValueExpr
from secrules.macros import MacroResolver
from secrules.ruleset import EvttypeIndexRuleset

table = [EventInfo("generic_e"), EventInfo("generic_x"),
         EventInfo("open"), EventInfo("execve")]
resolver = EvttypeResolver(table)

macros = MacroResolver()
macros.set_macro("spawned_process",
                 BinaryCheckExpr("evt.type", "=", ValueExpr("execve")))
condition = macros.run(AndExpr([ValueExpr("spawned_process")]))
print(resolver.evttypes(condition))  # {3}

ruleset = EvttypeIndexRuleset(lambda cond: (lambda event: True), resolver)
ruleset.add(Rule(name="Shell spawned", source="syscall",
                 priority=Priority.WARNING), condition)
ruleset.enable("", False, 0)
```

After `enable`, calling `ruleset.run(event, 0)` with an event whose
`type` is 3 returns the rule.

## What this package does not do

The package does not parse condition strings. It has no reader for YAML
rules files. It does not compile loaded definitions into rules, and it
has no single engine object that ties sources, rulesets and statistics
together. It also offers no command-line program. Callers build condition
trees themselves and supply a `compiler` that turns a tree into a callable
taking an event. Callers also supply the formatters that `Formats` uses.