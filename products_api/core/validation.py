"""Field Validation - declarative rule chains evaluated against request input.

Invariants:
    - All functions are PURE: no IO, no async, no framework imports
    - Every check of every rule runs; a failing check never suppresses the next one
    - Violations come back in declaration order (rule order, then check order)
    - Checks judge a value through its textual form, so "10" and 10 behave alike
"""

import math
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Mapping


class _Missing:
    """Marker for a field absent from the request."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Location(str, Enum):
    """Where a validated field is read from."""
    PARAMS = "params"
    BODY = "body"


@dataclass(frozen=True)
class Violation:
    """A single failed constraint."""
    msg: str
    path: str
    location: Location
    value: Any = MISSING

    def to_dict(self) -> dict:
        entry: dict[str, Any] = {"type": "field"}
        if self.value is not MISSING:
            entry["value"] = self.value
        entry["msg"] = self.msg
        entry["path"] = self.path
        entry["location"] = self.location.value
        return entry


@dataclass(frozen=True)
class Check:
    predicate: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldRule:
    """Ordered checks bound to one field. Built fluently with .check()."""
    path: str
    location: Location
    checks: tuple[Check, ...] = ()

    def check(self, predicate: Callable[[Any], bool], message: str) -> "FieldRule":
        return replace(self, checks=self.checks + (Check(predicate, message),))

    def evaluate(self, value: Any) -> list[Violation]:
        return [
            Violation(c.message, self.path, self.location, value)
            for c in self.checks
            if not c.predicate(value)
        ]


@dataclass(frozen=True)
class RuleSet:
    """All rules attached to one route."""
    rules: tuple[FieldRule, ...]

    def validate(
        self, params: Mapping[str, Any], body: Mapping[str, Any],
    ) -> list[Violation]:
        sources = {Location.PARAMS: params, Location.BODY: body}
        violations: list[Violation] = []
        for rule in self.rules:
            value = sources[rule.location].get(rule.path, MISSING)
            violations.extend(rule.evaluate(value))
        return violations

    @property
    def reads_body(self) -> bool:
        return any(r.location is Location.BODY for r in self.rules)


def param(path: str) -> FieldRule:
    return FieldRule(path, Location.PARAMS)


def body(path: str) -> FieldRule:
    return FieldRule(path, Location.BODY)


# ─── Coercion ────────────────────────────────────────────────────

_NUMERIC = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_INT = re.compile(r"[+-]?[0-9]+")
_NUMBER_LITERAL = re.compile(r"[+-]?([0-9]+[.]?[0-9]*|[.][0-9]+)([eE][+-]?[0-9]+)?")
_BOOLEAN_TEXT = frozenset({"true", "false", "1", "0"})


def as_text(value: Any) -> str:
    """Textual form of a JSON value; absent and null become empty text."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(as_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def to_number(value: Any) -> float:
    """Loose numeric coercion; anything unparseable becomes NaN."""
    if value is MISSING or isinstance(value, dict):
        return math.nan
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    text = as_text(value).strip()
    if not text:
        return 0.0
    if _NUMBER_LITERAL.fullmatch(text):
        return float(text)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return math.nan


# ─── Predicates ──────────────────────────────────────────────────

def is_int(value: Any) -> bool:
    return _INT.fullmatch(as_text(value)) is not None


def is_numeric(value: Any) -> bool:
    return _NUMERIC.fullmatch(as_text(value)) is not None


def is_boolean(value: Any) -> bool:
    return as_text(value) in _BOOLEAN_TEXT


def not_empty(value: Any) -> bool:
    return as_text(value) != ""


def has_text(value: Any) -> bool:
    """Non-blank string or a number; whitespace-only text is blank."""
    if isinstance(value, str):
        return value.strip() != ""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_positive(value: Any) -> bool:
    return to_number(value) > 0
