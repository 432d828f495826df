"""cqrs-ddd-validation — composable object validation with nested reports.

Validators record broken rules instead of raising, delegate to nested
validators or self-validating objects, and render the outcome as an indented
tree.
"""

from __future__ import annotations

from .defaults import (
    EMPTY_UUID,
    DefaultValueRegistry,
    build_default_registry,
    get_default_registry,
    set_default_registry,
)
from .engine import RuleEngine
from .exceptions import (
    CantValidateNullObjectError,
    ConfigurationError,
    InvalidObjectError,
    ValidationEngineError,
)
from .ports import ISelfValidating, IValidator, ValidatorFactory
from .result import ValidationResult
from .rule import Rule
from .self_validating import ObjectWithValidation
from .validator import Validator

__all__ = [
    # Result tree
    "Rule",
    "ValidationResult",
    # Validation contracts
    "RuleEngine",
    "Validator",
    "ObjectWithValidation",
    "IValidator",
    "ISelfValidating",
    "ValidatorFactory",
    # Defaults
    "EMPTY_UUID",
    "DefaultValueRegistry",
    "build_default_registry",
    "get_default_registry",
    "set_default_registry",
    # Exceptions
    "ValidationEngineError",
    "ConfigurationError",
    "CantValidateNullObjectError",
    "InvalidObjectError",
]
