"""Numeric rules: sign checks, zero checks, default checks."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from ..defaults import UNSET
from .base import RuleCollector

if TYPE_CHECKING:
    from typing_extensions import Self

Number = int | float | Decimal


class NumericRules(RuleCollector):
    def positive_number(
        self, value: Number, name: str, description: str | None = None
    ) -> Self:
        """Zero counts as positive; only negative values break the rule."""
        if value < 0:
            self._break(name, description or f"{name} can't be negative")
        return self

    def greater_than_zero(
        self, value: Number, name: str, description: str | None = None
    ) -> Self:
        if value <= 0:
            self._break(name, description or f"{name} must be greater than zero")
        return self

    def less_than_zero(
        self, value: Number, name: str, description: str | None = None
    ) -> Self:
        if value >= 0:
            self._break(name, description or f"{name} must be less than zero")
        return self

    def not_zero(
        self, value: Number, name: str, description: str | None = None
    ) -> Self:
        if value == 0:
            self._break(name, description or f"{name} can't be equal to zero")
        return self

    def not_default(
        self,
        value: Any,
        name: str,
        description: str | None = None,
        default: Any = UNSET,
    ) -> Self:
        """Break when *value* equals its type's default (or *default*).

        ``None`` is its own default, so a ``None`` value always breaks.
        """
        if default is UNSET:
            default = self.defaults.default_for(type(value))
        if value == default:
            self._break(
                name, description or f"{name} can't have default value ({default})"
            )
        return self

    def null_or_not_default(
        self,
        value: Any,
        name: str,
        description: str | None = None,
        default: Any = UNSET,
    ) -> Self:
        """``None`` passes; any other value must differ from its default.

        Works for numbers, dates, datetimes and any registered type.
        """
        if value is None:
            return self
        if default is UNSET:
            default = self.defaults.default_for(type(value))
        if value == default:
            self._break(
                name,
                description
                or f"If {name} is not null, it can't be equal to {default}.",
            )
        return self
