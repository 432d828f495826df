"""Calendar rules: month and year numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import RuleCollector

if TYPE_CHECKING:
    from typing_extensions import Self

FIRST_MONTH = 1
LAST_MONTH = 12


class CalendarRules(RuleCollector):
    def valid_month(
        self, value: int, name: str = "Month", description: str | None = None
    ) -> Self:
        if not FIRST_MONTH <= value <= LAST_MONTH:
            self._break(name, description or f"{name} must be a valid month")
        return self

    def valid_year(
        self, value: int, name: str = "Year", description: str | None = None
    ) -> Self:
        if value <= 0:
            self._break(name, description or f"{name} must be a valid year")
        return self
