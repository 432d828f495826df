"""RuleEngine — the full set of rule primitives and composition operators."""

from __future__ import annotations

from .rules import (
    CalendarRules,
    CollectionRules,
    CompositionRules,
    IdentifierRules,
    MembershipRules,
    NullRules,
    NumericRules,
    StringRules,
)


class RuleEngine(
    NullRules,
    NumericRules,
    StringRules,
    IdentifierRules,
    MembershipRules,
    CollectionRules,
    CalendarRules,
    CompositionRules,
):
    """Accumulates broken rules into one :class:`ValidationResult`.

    Base of :class:`~cqrs_ddd_validation.validator.Validator` and
    :class:`~cqrs_ddd_validation.self_validating.ObjectWithValidation`. It can
    also be used on its own as a builder, e.g. inside the ``validate()`` of a
    type that should not inherit from ``ObjectWithValidation``::

        @dataclass(frozen=True)
        class Customer:
            name: str
            orders: list[Order]

            def validate(self) -> ValidationResult:
                rules = RuleEngine()
                rules.not_null_or_whitespace(self.name, "Name")
                rules.are_valid(self.orders, "Orders")
                return rules.validation_result

    Not thread-safe: one engine, one pass, one owner.
    """
