"""Validator — typed validation contract built on the RuleEngine."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, get_args, get_origin

from .engine import RuleEngine
from .exceptions import CantValidateNullObjectError

if TYPE_CHECKING:
    from .result import ValidationResult

logger = logging.getLogger("cqrs_ddd.validation")

T = TypeVar("T")


class Validator(RuleEngine, ABC, Generic[T]):
    """Base class for validators of a declared type.

    Subclasses implement :meth:`validate_object` using the rule primitives
    and composition operators inherited from :class:`RuleEngine`.

    Usage::

        class OrderValidator(Validator[Order]):
            def validate_object(self, order: Order) -> None:
                self.not_null_or_default(order.id, "Id")
                self.greater_than_zero(order.total, "Total")
                self.are_valid(order.lines, "Lines", OrderLineValidator)

        result = OrderValidator().validate(order)

    Each instance owns a single :class:`ValidationResult`. Calling
    :meth:`validate` again on the same instance adds to that result instead
    of starting over; use a new instance per validation pass.

    ``entity_type`` is inferred from the ``Validator[...]`` base and is only
    used to report null inputs. Set it explicitly when the type argument is
    not a class.
    """

    entity_type: ClassVar[type[Any] | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "entity_type" not in cls.__dict__:
            cls.entity_type = _declared_entity_type(cls) or cls.entity_type

    def validate(self, value: T | None) -> ValidationResult:
        """Run :meth:`validate_object` against *value* and return the result.

        Raises:
            CantValidateNullObjectError: If *value* is ``None``.
        """
        if value is None:
            raise CantValidateNullObjectError(type(self), self.entity_type)

        validator_name = type(self).__name__
        logger.debug("Validating %s with %s", type(value).__name__, validator_name)
        self.validate_object(value)

        result = self.validation_result
        logger.debug(
            "%s finished with %d broken rule(s)",
            validator_name,
            len(result.broken_rules),
        )
        return result

    def validate_throw_if_invalid(self, value: T | None) -> ValidationResult:
        """Like :meth:`validate`, but raise if the result is invalid.

        Raises:
            CantValidateNullObjectError: If *value* is ``None``.
            InvalidObjectError: If any rule is broken.
        """
        result = self.validate(value)
        result.throw_if_invalid()
        return result

    @abstractmethod
    def validate_object(self, value: T) -> None:
        """Check *value*, recording broken rules through the rule primitives."""
        ...


def _declared_entity_type(cls: type[Any]) -> type[Any] | None:
    for base in getattr(cls, "__orig_bases__", ()):
        origin = get_origin(base)
        if isinstance(origin, type) and issubclass(origin, Validator):
            args = get_args(base)
            if args and isinstance(args[0], type):
                return args[0]
    return None
