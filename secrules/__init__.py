"""Security event rule engine parts: condition trees, macros, event-type indexed rulesets and alert formatting."""

__version__ = "0.1.0"