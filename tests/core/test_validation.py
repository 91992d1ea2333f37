"""Field Validation - tests for the pure rule engine.

Tests cover:
    - Coercion helpers (as_text, to_number) on JSON-shaped values
    - Each predicate on accepted and rejected inputs
    - FieldRule runs every check; RuleSet keeps declaration order
    - Violation.to_dict omits value for absent fields
"""

import math

import pytest

from products_api.core.validation import (
    MISSING,
    Location,
    RuleSet,
    Violation,
    as_text,
    body,
    has_text,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    not_empty,
    param,
    to_number,
)


# ─── as_text / to_number ─────────────────────────────────────────

@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (MISSING, ""),
        (None, ""),
        (True, "true"),
        (False, "false"),
        (10, "10"),
        (10.0, "10"),
        (2.5, "2.5"),
        ("hola", "hola"),
        ([1, 2], "1,2"),
        ({"a": 1}, "[object Object]"),
    ],
)
def test_as_text(value, expected):
    assert as_text(value) == expected


def test_to_number_parses_numeric_text():
    assert to_number("12.5") == 12.5
    assert to_number(" 7 ") == 7
    assert to_number("1e3") == 1000


def test_to_number_treats_null_and_blank_as_zero():
    assert to_number(None) == 0
    assert to_number("") == 0
    assert to_number("   ") == 0


def test_to_number_is_nan_for_garbage_and_absent():
    assert math.isnan(to_number("hola"))
    assert math.isnan(to_number(MISSING))
    assert math.isnan(to_number({"price": 1}))
    assert math.isnan(to_number("1_000"))


def test_to_number_booleans():
    assert to_number(True) == 1
    assert to_number(False) == 0


# ─── predicates ──────────────────────────────────────────────────

@pytest.mark.parametrize("value", ["1", "42", "-3", "+7", "007", 15])
def test_is_int_accepts(value):
    assert is_int(value)


@pytest.mark.parametrize("value", ["not-valid-url", "1.5", "", "1e3", MISSING, True])
def test_is_int_rejects(value):
    assert not is_int(value)


@pytest.mark.parametrize("value", [0, 300, 2.5, "10", "-4", ".5", "+1.25"])
def test_is_numeric_accepts(value):
    assert is_numeric(value)


@pytest.mark.parametrize("value", ["hola", "", None, MISSING, True, "1e3", "5.", [1, 2]])
def test_is_numeric_rejects(value):
    assert not is_numeric(value)


@pytest.mark.parametrize("value", [True, False, "true", "false", "1", "0", 1, 0])
def test_is_boolean_accepts(value):
    assert is_boolean(value)


@pytest.mark.parametrize("value", ["yes", "True", 2, None, MISSING, ""])
def test_is_boolean_rejects(value):
    assert not is_boolean(value)


def test_not_empty():
    assert not_empty("x")
    assert not_empty(0)
    assert not not_empty("")
    assert not not_empty(None)
    assert not not_empty(MISSING)


def test_has_text():
    assert has_text("Mouse")
    assert has_text(123)
    assert not has_text("   ")
    assert not has_text(True)
    assert not has_text(None)
    assert not has_text(MISSING)
    assert not has_text(["Mouse"])


def test_is_positive():
    assert is_positive(1)
    assert is_positive("0.01")
    assert not is_positive(0)
    assert not is_positive(-5)
    assert not is_positive("hola")
    assert not is_positive(MISSING)
    assert not is_positive(None)


def test_is_positive_with_integers_beyond_float_range():
    assert is_positive(10**400)
    assert not is_positive(-(10**400))
    assert to_number(10**400) == math.inf


# ─── FieldRule / RuleSet ─────────────────────────────────────────

def test_field_rule_check_returns_new_rule():
    base = body("price")
    extended = base.check(is_numeric, "numeric")
    assert base.checks == ()
    assert len(extended.checks) == 1


def test_failing_check_does_not_stop_later_checks():
    rule = body("price").check(is_numeric, "A").check(is_positive, "B")
    assert [v.msg for v in rule.evaluate("hola")] == ["A", "B"]


def test_rule_set_keeps_declaration_order():
    rules = RuleSet((
        param("id").check(is_int, "id"),
        body("name").check(has_text, "name"),
        body("price").check(is_numeric, "price"),
    ))
    violations = rules.validate({"id": "x"}, {})
    assert [v.msg for v in violations] == ["id", "name", "price"]
    assert [v.location for v in violations] == [
        Location.PARAMS, Location.BODY, Location.BODY,
    ]


def test_rule_set_passes_valid_input():
    rules = RuleSet((param("id").check(is_int, "id"),))
    assert rules.validate({"id": "12"}, {}) == []


def test_reads_body():
    assert RuleSet((body("name"),)).reads_body
    assert not RuleSet((param("id"),)).reads_body


def test_violation_to_dict_includes_received_value():
    v = Violation("Precio no valido", "price", Location.BODY, 0)
    assert v.to_dict() == {
        "type": "field",
        "value": 0,
        "msg": "Precio no valido",
        "path": "price",
        "location": "body",
    }


def test_violation_to_dict_omits_absent_value():
    v = Violation("Valor no valido", "price", Location.BODY)
    assert "value" not in v.to_dict()
