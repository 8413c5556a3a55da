"""Definitions read from rules files, before they are compiled."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .common import Priority
from .filter_ast import Expr


@dataclass
class Context:
    """The section of rules text an item was decoded from."""

    content: str = ""

    def error(self, err: str) -> str:
        """Wrap an error message with the text section it refers to."""
        return f"{err}\n---\n{self.content.strip()}\n---"

    def append(self, other: Context) -> None:
        """Add another text section after this one."""
        self.content += "\n\n" + other.content


@dataclass
class Source:
    """An event source: how its rules are held, formatted and checked."""

    name: str
    ruleset_factory: Any
    formatter_factory: Any = None
    field_checker: Callable[[str], bool] | None = None
    ruleset: Any = None

    def __post_init__(self) -> None:
        if self.ruleset is None and self.ruleset_factory is not None:
            self.ruleset = self.ruleset_factory.new_ruleset()

    def is_field_defined(self, name: str) -> bool:
        """Whether a filter field name is known to this source."""
        return self.field_checker is not None and bool(self.field_checker(name))


@dataclass
class Configuration:
    """Everything needed to load rule definitions, plus collected messages."""

    content: str
    sources: Mapping[str, Source]
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    output_extra: str = ""
    default_ruleset_id: int = 0
    replace_output_container_info: bool = False
    min_priority: Priority = Priority.DEBUG


@dataclass
class EngineVersionInfo:
    """A required engine version."""

    version: int = 0


@dataclass
class PluginVersionInfo:
    """A required plugin version."""

    name: str = ""
    version: str = ""


@dataclass
class ListInfo:
    """A named list of values."""

    name: str = ""
    items: list[str] = field(default_factory=list)
    ctx: Context = field(default_factory=Context)
    used: bool = False
    index: int = 0
    visibility: int = 0


@dataclass
class MacroInfo:
    """A named condition fragment."""

    name: str = ""
    cond: str = ""
    ctx: Context = field(default_factory=Context)
    used: bool = False
    index: int = 0
    visibility: int = 0
    cond_ast: Expr | None = None


@dataclass
class ExceptionEntry:
    """A value of an exception that may be either a single string or a list."""

    is_list: bool = False
    item: str = ""
    items: list[ExceptionEntry] = field(default_factory=list)

    def is_valid(self) -> bool:
        """A list must have items; a single value must be non-empty."""
        return bool(self.items) if self.is_list else bool(self.item)


@dataclass
class RuleExceptionInfo:
    """A named exception attached to a rule."""

    name: str = ""
    fields: ExceptionEntry = field(default_factory=ExceptionEntry)
    comps: ExceptionEntry = field(default_factory=ExceptionEntry)
    values: list[ExceptionEntry] = field(default_factory=list)


@dataclass
class RuleInfo:
    """A rule definition as read from a rules file."""

    name: str = ""
    cond: str = ""
    source: str = ""
    desc: str = ""
    output: str = ""
    tags: set[str] = field(default_factory=set)
    exceptions: list[RuleExceptionInfo] = field(default_factory=list)
    priority: Priority = Priority.DEBUG
    enabled: bool = True
    warn_evttypes: bool = True
    skip_if_unknown_filter: bool = False
    ctx: Context = field(default_factory=Context)
    index: int = 0
    visibility: int = 0