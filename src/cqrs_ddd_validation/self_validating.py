"""ObjectWithValidation — base class for data types that validate themselves."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .engine import RuleEngine

if TYPE_CHECKING:
    from .result import ValidationResult


class ObjectWithValidation(RuleEngine, ABC):
    """Gives a data type its own rule primitives and :class:`ValidationResult`.

    Subclasses satisfy :class:`~cqrs_ddd_validation.ports.ISelfValidating` and
    can be delegated to with ``is_valid(value, name)`` /
    ``are_valid(values, name)`` without a validator factory.

    Usage::

        @dataclass
        class OrderLine(ObjectWithValidation):
            sku: str
            quantity: int

            def validate(self) -> ValidationResult:
                self.not_null_or_whitespace(self.sku, "Sku")
                self.greater_than_zero(self.quantity, "Quantity")
                return self.validation_result

    Inheriting is optional: any type with a ``validate()`` method returning a
    ``ValidationResult`` is self-validating. As with :class:`Validator`,
    repeated ``validate()`` calls add to the same result.

    ``is_valid`` on a subclass is the delegation operator inherited from
    :class:`RuleEngine`, not a status flag. ``if order.is_valid:`` is always
    true; check the outcome with ``order.validate().is_valid`` instead.
    """

    @abstractmethod
    def validate(self) -> ValidationResult:
        """Check this object and return :attr:`validation_result`."""
        ...
