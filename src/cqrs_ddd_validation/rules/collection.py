"""Collection rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import RuleCollector

if TYPE_CHECKING:
    from collections.abc import Collection

    from typing_extensions import Self


class CollectionRules(RuleCollector):
    def not_empty(
        self,
        values: Collection[Any] | None,
        name: str,
        description: str | None = None,
    ) -> Self:
        if values is None or len(values) == 0:
            self._break(name, description or f"{name} can't be null or empty list")
        return self
