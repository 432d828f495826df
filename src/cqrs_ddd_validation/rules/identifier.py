"""UUID identifier rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..defaults import EMPTY_UUID
from ..rule import Rule
from .base import RuleCollector

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from typing_extensions import Self


class IdentifierRules(RuleCollector):
    def not_null_or_default(
        self, value: UUID | None, name: str, description: str | None = None
    ) -> Self:
        if value is None or value == EMPTY_UUID:
            self._break(name, description or f"{name} can't be null or empty UUID.")
        return self

    def null_or_not_empty_uuid(
        self, value: UUID | None, name: str, description: str | None = None
    ) -> Self:
        if value is not None and value == EMPTY_UUID:
            self._break(
                name,
                description
                or (
                    f"If {name} is not null, "
                    f"it can't be equal to empty UUID ({EMPTY_UUID})."
                ),
            )
        return self

    def are_not_default(
        self,
        values: Sequence[UUID] | None,
        name: str,
        description: str | None = None,
    ) -> Self:
        """One child rule per empty UUID, named ``"<name>[<index>]"``.

        ``None`` or an empty sequence passes.
        """
        if not values:
            return self
        children = [
            Rule(
                f"{name}[{index}]",
                f"Element can't have default value ({EMPTY_UUID}).",
            )
            for index, value in enumerate(values)
            if value == EMPTY_UUID
        ]
        if children:
            self._break(
                name,
                description or f"No element in {name} can be default.",
                children,
            )
        return self
