"""Presence and boolean rules: not_null, is_true, is_false."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import RuleCollector

if TYPE_CHECKING:
    from typing_extensions import Self


class NullRules(RuleCollector):
    def not_null(self, value: Any, name: str, description: str | None = None) -> Self:
        if value is None:
            self._break(name, description or f"{name} can't be null")
        return self

    def is_true(self, value: bool, name: str, description: str | None = None) -> Self:
        if not value:
            self._break(name, description or f"{name} can't be false")
        return self

    def is_false(self, value: bool, name: str, description: str | None = None) -> Self:
        if value:
            self._break(name, description or f"{name} can't be true")
        return self

    @staticmethod
    def all_true(*flags: bool) -> bool:
        return all(flags)

    @staticmethod
    def all_false(*flags: bool) -> bool:
        return not any(flags)
