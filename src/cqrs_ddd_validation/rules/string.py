"""String rules: emptiness, white space, currency codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import RuleCollector

if TYPE_CHECKING:
    from typing_extensions import Self

CURRENCY_CODE_LENGTH = 3


class StringRules(RuleCollector):
    def not_null_or_whitespace(
        self, value: str | None, name: str, description: str | None = None
    ) -> Self:
        if value is None or not value.strip():
            self._break(name, description or f"{name} can't be null or white space")
        return self

    def not_null_or_empty(
        self, value: str | None, name: str, description: str | None = None
    ) -> Self:
        """White-space-only strings pass."""
        if not value:
            self._break(name, description or f"{name} can't be null or empty")
        return self

    def valid_currency(
        self,
        value: str | None,
        name: str = "Currency",
        description: str | None = None,
    ) -> Self:
        """Exactly three characters, none of them leading or trailing white space."""
        if (
            value is None
            or len(value) != CURRENCY_CODE_LENGTH
            or len(value.strip()) != CURRENCY_CODE_LENGTH
        ):
            self._break(name, description or f"{name} must be valid currency code")
        return self
