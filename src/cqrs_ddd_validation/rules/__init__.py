"""
Rule primitives, one mixin per family.

Every primitive shares the shape ``rule(value, name, description=None)``:
it evaluates a fixed predicate, appends at most one broken rule to the
collector's :class:`~cqrs_ddd_validation.result.ValidationResult` and returns
the collector for chaining.

The mixins are assembled into
:class:`~cqrs_ddd_validation.engine.RuleEngine`.
"""

from __future__ import annotations

from .base import RuleCollector
from .calendar import CalendarRules
from .collection import CollectionRules
from .composition import CompositionRules
from .identifier import IdentifierRules
from .null import NullRules
from .numeric import Number, NumericRules
from .set import MembershipRules
from .string import StringRules

__all__ = [
    "CalendarRules",
    "CollectionRules",
    "CompositionRules",
    "IdentifierRules",
    "MembershipRules",
    "Number",
    "NullRules",
    "NumericRules",
    "RuleCollector",
    "StringRules",
]
