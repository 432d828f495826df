"""
Composition rules: delegate a field or each element of a collection to
another validator, absorbing its broken rules as children.

Two delegation targets produce the same tree shape:

- an external validator, built fresh from a :data:`ValidatorFactory`
  for every delegated value;
- the value itself, when it is :class:`ISelfValidating`.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from ..exceptions import ConfigurationError
from ..ports import ISelfValidating
from ..rule import Rule
from .base import RuleCollector

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typing_extensions import Self

    from ..ports import ValidatorFactory
    from ..result import ValidationResult

logger = logging.getLogger("cqrs_ddd.validation.rules")

NULL_ELEMENT_DESCRIPTION = "Element can't be null and must be valid"


def _callable_without_arguments(value: Any) -> bool:
    """Whether ``value.validate()`` can be called without arguments.

    The structural protocol check alone also accepts pydantic models (their
    deprecated ``validate`` classmethod) and validators, whose ``validate``
    expects the value to check.
    """
    method = inspect.getattr_static(value, "validate")
    if isinstance(method, (classmethod, staticmethod)):
        return False
    try:
        signature = inspect.signature(value.validate)
    except (TypeError, ValueError):
        return False
    return all(
        parameter.default is not parameter.empty
        or parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD)
        for parameter in signature.parameters.values()
    )


def _run_delegate(value: Any, validator: ValidatorFactory | None) -> ValidationResult:
    if validator is not None:
        return validator().validate(value)
    if isinstance(value, ISelfValidating) and _callable_without_arguments(value):
        return value.validate()
    raise ConfigurationError(
        f"{type(value).__name__} is not self-validating; "
        "pass a validator factory to delegate its validation"
    )


class CompositionRules(RuleCollector):
    def is_valid(
        self,
        value: Any,
        name: str,
        validator: ValidatorFactory | None = None,
    ) -> Self:
        """Delegate *value* and nest its broken rules under *name*.

        With *validator* a fresh validator is created and run against
        *value*; without it *value* must validate itself. ``None`` breaks the
        rule without delegating.

        The factory is called with no arguments, so the delegate resolves
        defaults from the context registry, not from this engine's
        ``defaults``. Pass it along explicitly when needed::

            self.is_valid(order.customer, "Customer",
                          lambda: CustomerValidator(defaults=self.defaults))

        Exceptions raised by the delegate propagate unchanged.

        Raises:
            ConfigurationError: If no *validator* is given and *value* has no
                ``validate()`` callable without arguments.
        """
        if value is None:
            self._break(name, f"{name} can't be null and must be valid")
            return self

        result = _run_delegate(value, validator)
        if result.is_invalid:
            logger.debug(
                "Delegated check of %s failed with %d broken rule(s)",
                name,
                len(result.broken_rules),
            )
            self._break(name, f"{name} must be valid", result.broken_rules)
        return self

    def are_valid(
        self,
        values: Iterable[Any] | None,
        name: str,
        validator: ValidatorFactory | None = None,
    ) -> Self:
        """Delegate every element of *values*.

        Each invalid element becomes a child named ``"<name>[<index>]"``, index
        being its position in *values*. The aggregating rule is only recorded
        when at least one element failed. ``None`` or empty *values* pass.

        The delegate is built the same way as in :meth:`is_valid`. An
        exception raised by a delegate aborts the loop before the aggregating
        rule is recorded.
        """
        if not values:
            return self

        children: list[Rule] = []
        for index, value in enumerate(values):
            element = f"{name}[{index}]"
            if value is None:
                children.append(Rule(element, NULL_ELEMENT_DESCRIPTION))
                continue
            result = _run_delegate(value, validator)
            if result.is_invalid:
                children.append(
                    Rule(element, "Element must be valid", result.broken_rules)
                )

        if children:
            logger.debug(
                "Delegated check of %s failed for %d element(s)", name, len(children)
            )
            self._break(name, f"All elements in {name} must be valid.", children)
        return self
