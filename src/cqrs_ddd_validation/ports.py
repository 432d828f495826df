"""Delegation protocols: external validators and self-validating objects."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for validators that check a value passed to them.

    :class:`~cqrs_ddd_validation.validator.Validator` is the standard
    implementation.
    """

    def validate(self, value: Any) -> ValidationResult:
        """Validate *value* and return the accumulated result."""
        ...


@runtime_checkable
class ISelfValidating(Protocol):
    """Protocol for objects that validate themselves.

    Any data type with a ``validate()`` method that takes no arguments and
    returns a :class:`~cqrs_ddd_validation.result.ValidationResult` qualifies;
    no common base class is required. Delegation also checks the signature,
    since this structural check alone accepts any ``validate`` attribute.
    """

    def validate(self) -> ValidationResult:
        """Validate this object and return the accumulated result."""
        ...


ValidatorFactory = Callable[[], IValidator]
"""Zero-argument callable producing a fresh validator, usually the class itself."""
