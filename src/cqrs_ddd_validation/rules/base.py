"""RuleCollector — shared state for the rule mixins."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..defaults import get_default_registry
from ..result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typing_extensions import Self

    from ..defaults import DefaultValueRegistry
    from ..rule import Rule

logger = logging.getLogger("cqrs_ddd.validation.rules")


class RuleCollector:
    """Owns the single :class:`ValidationResult` every rule appends to.

    The result is created lazily so that subclasses (dataclasses in
    particular) are not required to call ``super().__init__()``.
    """

    _validation_result: ValidationResult
    _defaults: DefaultValueRegistry | None

    def __init__(self, *, defaults: DefaultValueRegistry | None = None) -> None:
        self._validation_result = ValidationResult()
        self._defaults = defaults

    @property
    def validation_result(self) -> ValidationResult:
        result = self.__dict__.get("_validation_result")
        if result is None:
            result = ValidationResult()
            self.__dict__["_validation_result"] = result
        return result

    @property
    def defaults(self) -> DefaultValueRegistry:
        """The registry used to resolve type defaults."""
        return self.__dict__.get("_defaults") or get_default_registry()

    def add_rule(
        self,
        name: str,
        description: str,
        children: Iterable[Rule] | None = None,
    ) -> Self:
        """Record a custom broken rule."""
        self._break(name, description, children)
        return self

    def _break(
        self,
        name: str,
        description: str,
        children: Iterable[Rule] | None = None,
    ) -> None:
        rule = self.validation_result.add_rule(name, description, children)
        logger.debug("Broken rule %r: %s", rule.name, rule.description)
