"""Membership rules: value_in, values_in.

A ``None`` value is printed as ``NULL`` in the broken-rule description.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import ConfigurationError
from ..rule import Rule
from .base import RuleCollector

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from typing_extensions import Self


def _format_allowed(allowed: Iterable[Any]) -> str:
    return "[" + ";".join(str(value) for value in allowed) + "]"


def _format_value(value: Any) -> str:
    return "NULL" if value is None else str(value)


def _require_allowed(allowed: Collection[Any] | None, name: str) -> Collection[Any]:
    if allowed is None:
        raise ConfigurationError(f"Allowed values are required to check {name}")
    return allowed


class MembershipRules(RuleCollector):
    def value_in(
        self,
        value: Any,
        allowed: Collection[Any] | None,
        name: str,
        description: str | None = None,
    ) -> Self:
        """Break when *value* is not equal to any of *allowed*.

        Raises:
            ConfigurationError: If *allowed* is ``None``.
        """
        allowed = _require_allowed(allowed, name)
        if not any(candidate == value for candidate in allowed):
            self._break(
                name,
                description
                or (
                    f"{name} has not allowed value. "
                    f"{name} value: {_format_value(value)}. "
                    f"Allowed values: {_format_allowed(allowed)}"
                ),
            )
        return self

    def values_in(
        self,
        values: Iterable[Any] | None,
        allowed: Collection[Any] | None,
        name: str,
        description: str | None = None,
    ) -> Self:
        """One child rule per element missing from *allowed*.

        ``None`` or empty *values* pass.

        Raises:
            ConfigurationError: If *allowed* is ``None``.
        """
        allowed = _require_allowed(allowed, name)
        if not values:
            return self
        formatted = _format_allowed(allowed)
        children = [
            Rule(
                f"{name}[{index}]",
                f"Element must have allowed value. {name} value: "
                f"{_format_value(value)} Allowed values: {formatted}",
            )
            for index, value in enumerate(values)
            if not any(candidate == value for candidate in allowed)
        ]
        if children:
            self._break(
                name,
                description
                or (
                    f"All elements in {name} must have value from allowed values. "
                    f"Allowed values: {formatted}"
                ),
                children,
            )
        return self
