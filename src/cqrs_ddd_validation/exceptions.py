"""
Validation engine exception hierarchy.

All exceptions inherit from ``ValidationEngineError`` and provide
``to_dict()`` for API-friendly error responses.

Broken rules are *not* exceptions: they are recorded as data on a
:class:`~cqrs_ddd_validation.result.ValidationResult`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .result import ValidationResult


class ValidationEngineError(Exception):
    """Base exception for all validation engine errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConfigurationError(ValidationEngineError):
    """A rule was invoked in a way that can never succeed.

    Raised for caller programming errors, e.g. a membership check without an
    allowed-value set. Aborts the validation pass in progress.
    """

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONFIGURATION_ERROR",
            "message": str(self),
        }


class CantValidateNullObjectError(ValidationEngineError):
    """``Validator.validate`` was called with ``None``."""

    def __init__(
        self,
        validator_type: type[Any],
        entity_type: type[Any] | None = None,
    ) -> None:
        self.validator_type = validator_type
        self.entity_type = entity_type or object
        super().__init__(
            f"Can't validate null object. Validator {validator_type.__name__} "
            f"expected instance of {self.entity_type.__name__}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CANT_VALIDATE_NULL_OBJECT",
            "validator": self.validator_type.__name__,
            "expected_type": self.entity_type.__name__,
        }


class InvalidObjectError(ValidationEngineError):
    """
    An object that had to be valid was not.

    Carries the full :class:`ValidationResult`, nested trees included, so
    callers can inspect or render it. The message is the rendered result.
    """

    def __init__(self, validation_result: ValidationResult) -> None:
        self.validation_result = validation_result
        super().__init__(validation_result.render())

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_OBJECT",
            "message": str(self),
            "result": self.validation_result.to_dict(),
        }
