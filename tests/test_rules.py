from datetime import date, datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from cqrs_ddd_validation import EMPTY_UUID, ConfigurationError, RuleEngine

PROPERTY = "property"


def only_rule(engine: RuleEngine):
    result = engine.validation_result
    assert result.is_invalid
    assert len(result.broken_rules) == 1
    return result.broken_rules[0]


# --- Membership ---


def test_value_in_requires_allowed_values(engine: RuleEngine) -> None:
    with pytest.raises(ConfigurationError):
        engine.value_in(1, None, PROPERTY)
    assert engine.validation_result.is_valid


def test_value_in_breaks_when_value_not_allowed(engine: RuleEngine) -> None:
    engine.value_in(5, [1, 2, 3, 4], PROPERTY)

    rule = only_rule(engine)
    assert rule.name == PROPERTY
    assert rule.description == (
        "property has not allowed value. property value: 5. Allowed values: [1;2;3;4]"
    )


def test_value_in_passes_when_value_allowed(engine: RuleEngine) -> None:
    engine.value_in(1, [1, 2, 3, 4], PROPERTY)
    assert engine.validation_result.is_valid


def test_value_in_empty_allowed_set_rejects_everything(engine: RuleEngine) -> None:
    engine.value_in("a", [], PROPERTY)
    assert only_rule(engine).name == PROPERTY


def test_values_in_requires_allowed_values(engine: RuleEngine) -> None:
    with pytest.raises(ConfigurationError):
        engine.values_in([1, 2, 3], None, PROPERTY)


def test_values_in_adds_child_per_offending_index(engine: RuleEngine) -> None:
    engine.values_in([1, 2, 5, 3, 7], [1, 2, 3, 4], PROPERTY)

    rule = only_rule(engine)
    assert rule.name == PROPERTY
    assert [child.name for child in rule.children] == ["property[2]", "property[4]"]


def test_value_in_prints_none_as_null(engine: RuleEngine) -> None:
    engine.value_in(None, [1, 2], PROPERTY)

    assert only_rule(engine).description == (
        "property has not allowed value. property value: NULL. Allowed values: [1;2]"
    )


def test_values_in_child_descriptions(engine: RuleEngine) -> None:
    engine.values_in([1, None, 5], [1, 2], PROPERTY)

    rule = only_rule(engine)
    assert rule.description == (
        "All elements in property must have value from allowed values. "
        "Allowed values: [1;2]"
    )
    assert [child.description for child in rule.children] == [
        "Element must have allowed value. property value: NULL Allowed values: [1;2]",
        "Element must have allowed value. property value: 5 Allowed values: [1;2]",
    ]


def test_values_in_passes_when_all_allowed(engine: RuleEngine) -> None:
    engine.values_in([1, 2], [1, 2, 3, 4], PROPERTY)
    assert engine.validation_result.is_valid


def test_values_in_ignores_missing_values(engine: RuleEngine) -> None:
    engine.values_in(None, [1], PROPERTY).values_in([], [1], PROPERTY)
    assert engine.validation_result.is_valid


# --- Presence and booleans ---


def test_not_null(engine: RuleEngine) -> None:
    engine.not_null("val", PROPERTY)
    assert engine.validation_result.is_valid

    engine.not_null(None, PROPERTY)
    assert only_rule(engine).description == "property can't be null"


def test_is_true(engine: RuleEngine) -> None:
    engine.is_true(True, PROPERTY)
    assert engine.validation_result.is_valid

    engine.is_true(False, PROPERTY)
    assert only_rule(engine).description == "property can't be false"


def test_is_false(engine: RuleEngine) -> None:
    engine.is_false(False, PROPERTY)
    assert engine.validation_result.is_valid

    engine.is_false(True, PROPERTY, "Account must not be locked")
    assert only_rule(engine).description == "Account must not be locked"


def test_all_true_and_all_false() -> None:
    assert RuleEngine.all_true(True, True)
    assert not RuleEngine.all_true(True, False)
    assert RuleEngine.all_false(False, False)
    assert not RuleEngine.all_false(False, True)
    assert RuleEngine.all_true()
    assert RuleEngine.all_false()


def test_add_rule_records_custom_rule(engine: RuleEngine) -> None:
    returned = engine.add_rule("Period", "Start must precede end")

    assert returned is engine
    rule = only_rule(engine)
    assert (rule.name, rule.description) == ("Period", "Start must precede end")


# --- Identifiers ---


def test_are_not_default_adds_child_per_empty_uuid(engine: RuleEngine) -> None:
    engine.are_not_default([uuid4(), uuid4(), EMPTY_UUID, uuid4()], PROPERTY)

    rule = only_rule(engine)
    assert rule.name == PROPERTY
    assert [child.name for child in rule.children] == ["property[2]"]


@pytest.mark.parametrize("values", [None, [], [uuid4(), uuid4()]])
def test_are_not_default_passes(engine: RuleEngine, values) -> None:
    engine.are_not_default(values, PROPERTY)
    assert engine.validation_result.is_valid


@pytest.mark.parametrize("value", [None, EMPTY_UUID])
def test_not_null_or_default_breaks(engine: RuleEngine, value) -> None:
    engine.not_null_or_default(value, PROPERTY)
    assert only_rule(engine).name == PROPERTY


def test_not_null_or_default_passes(engine: RuleEngine) -> None:
    engine.not_null_or_default(uuid4(), PROPERTY)
    assert engine.validation_result.is_valid


def test_null_or_not_empty_uuid(engine: RuleEngine) -> None:
    engine.null_or_not_empty_uuid(None, PROPERTY).null_or_not_empty_uuid(
        uuid4(), PROPERTY
    )
    assert engine.validation_result.is_valid

    engine.null_or_not_empty_uuid(EMPTY_UUID, PROPERTY)
    assert only_rule(engine).name == PROPERTY


# --- Numbers ---


@pytest.mark.parametrize(
    ("method", "failing", "passing"),
    [
        ("positive_number", [-1, Decimal("-0.01"), -0.5], [0, 1, Decimal("0.01")]),
        ("greater_than_zero", [0, -1, Decimal(0)], [1, 0.1, Decimal("0.01")]),
        ("less_than_zero", [0, 1, Decimal(0)], [-1, -0.1, Decimal("-0.01")]),
        ("not_zero", [0, 0.0, Decimal(0)], [1, -1, Decimal("0.01")]),
    ],
)
def test_numeric_rules(method: str, failing: list, passing: list) -> None:
    for value in passing:
        engine = RuleEngine()
        getattr(engine, method)(value, PROPERTY)
        assert engine.validation_result.is_valid, (method, value)

    for value in failing:
        engine = RuleEngine()
        getattr(engine, method)(value, PROPERTY)
        assert only_rule(engine).name == PROPERTY, (method, value)


def test_numeric_rule_custom_description(engine: RuleEngine) -> None:
    engine.greater_than_zero(0, "Quantity", "Order at least one item")
    assert only_rule(engine).description == "Order at least one item"


@pytest.mark.parametrize(
    "value", [0, 0.0, Decimal(0), "", None, EMPTY_UUID, datetime.min, False]
)
def test_not_default_breaks_on_type_default(engine: RuleEngine, value) -> None:
    engine.not_default(value, PROPERTY)
    assert only_rule(engine).name == PROPERTY


def test_not_default_message(engine: RuleEngine) -> None:
    engine.not_default(0, "IntProperty")
    assert only_rule(engine).description == "IntProperty can't have default value (0)"


def test_not_default_passes(engine: RuleEngine) -> None:
    engine.not_default(1, PROPERTY).not_default("x", PROPERTY).not_default(
        uuid4(), PROPERTY
    )
    assert engine.validation_result.is_valid


def test_not_default_explicit_default(engine: RuleEngine) -> None:
    engine.not_default(0, PROPERTY, default=-1)
    assert engine.validation_result.is_valid

    engine.not_default(-1, PROPERTY, default=-1)
    assert only_rule(engine).name == PROPERTY


@pytest.mark.parametrize("value", [None, 1, -5, Decimal("2.5"), date(2024, 1, 1)])
def test_null_or_not_default_passes(engine: RuleEngine, value) -> None:
    engine.null_or_not_default(value, PROPERTY)
    assert engine.validation_result.is_valid


@pytest.mark.parametrize("value", [0, Decimal(0), 0.0, datetime.min, date.min])
def test_null_or_not_default_breaks(engine: RuleEngine, value) -> None:
    engine.null_or_not_default(value, PROPERTY)
    assert only_rule(engine).name == PROPERTY


def test_null_or_not_default_message(engine: RuleEngine) -> None:
    engine.null_or_not_default(0, PROPERTY)
    assert (
        only_rule(engine).description
        == "If property is not null, it can't be equal to 0."
    )


# --- Strings ---


@pytest.mark.parametrize("value", [None, "", " ", "\t\n"])
def test_not_null_or_whitespace_breaks(engine: RuleEngine, value) -> None:
    engine.not_null_or_whitespace(value, PROPERTY)
    assert only_rule(engine).name == PROPERTY


def test_not_null_or_whitespace_passes(engine: RuleEngine) -> None:
    engine.not_null_or_whitespace(" a ", PROPERTY)
    assert engine.validation_result.is_valid


@pytest.mark.parametrize("value", [None, ""])
def test_not_null_or_empty_breaks(engine: RuleEngine, value) -> None:
    engine.not_null_or_empty(value, PROPERTY)
    assert only_rule(engine).name == PROPERTY


def test_not_null_or_empty_accepts_whitespace(engine: RuleEngine) -> None:
    engine.not_null_or_empty("  ", PROPERTY)
    assert engine.validation_result.is_valid


@pytest.mark.parametrize("value", [None, "", "EU", "EURO", " EU", "EU "])
def test_valid_currency_breaks(engine: RuleEngine, value) -> None:
    engine.valid_currency(value)
    assert only_rule(engine).name == "Currency"


def test_valid_currency_passes(engine: RuleEngine) -> None:
    engine.valid_currency("EUR").valid_currency("usd", "PriceCurrency")
    assert engine.validation_result.is_valid


# --- Calendar ---


@pytest.mark.parametrize("value", [0, 13, -1])
def test_valid_month_breaks(engine: RuleEngine, value: int) -> None:
    engine.valid_month(value)
    assert only_rule(engine).name == "Month"


@pytest.mark.parametrize("value", [1, 6, 12])
def test_valid_month_passes(engine: RuleEngine, value: int) -> None:
    engine.valid_month(value, "ExpiryMonth")
    assert engine.validation_result.is_valid


def test_valid_year(engine: RuleEngine) -> None:
    engine.valid_year(2024)
    assert engine.validation_result.is_valid

    engine.valid_year(0)
    assert only_rule(engine).name == "Year"


# --- Collections ---


@pytest.mark.parametrize("values", [None, [], ()])
def test_not_empty_breaks(engine: RuleEngine, values) -> None:
    engine.not_empty(values, PROPERTY)
    assert only_rule(engine).description == "property can't be null or empty list"


def test_not_empty_passes(engine: RuleEngine) -> None:
    engine.not_empty([None], PROPERTY)
    assert engine.validation_result.is_valid


# --- Accumulation ---


def test_rules_accumulate_in_invocation_order(engine: RuleEngine) -> None:
    (
        engine.not_null(None, "A")
        .greater_than_zero(0, "B")
        .not_null("ok", "C")
        .not_null_or_empty("", "D")
        .add_rule("E", "custom rule")
    )

    names = [rule.name for rule in engine.validation_result.broken_rules]
    assert names == ["A", "B", "D", "E"]
