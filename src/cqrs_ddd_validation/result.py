"""ValidationResult — ordered, nested broken-rule report for one validation pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidObjectError
from .rule import Rule

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger("cqrs_ddd.validation")

OBJECT_IS_VALID = "Object is valid"
INVALID_OBJECT_HEADER = "Invalid object. Broken rules: \n"
BROKEN_RULES_MARKER = " Broken Rules:\n"


def default_rules_factory() -> list[Rule]:
    """Factory for the mutable ``broken_rules`` default."""
    return []


@dataclass
class ValidationResult:
    """Collects broken rules in the order the checks were invoked.

    Usage::

        result = ValidationResult()
        result.add_rule("Name", "Name can't be null or empty")

        result.is_valid                  # False
        result.has_broken_rule("Name")   # True
        print(result.render())
    """

    broken_rules: list[Rule] = field(default_factory=default_rules_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.broken_rules) == 0

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid

    # ── Recording ────────────────────────────────────────────────

    def add_rule(
        self,
        name: str | None,
        description: str,
        children: Iterable[Rule] | None = None,
    ) -> Rule:
        """Append a broken rule, with *children* when it wraps a delegate."""
        return self.add(Rule(name, description, children))

    def add(self, rule: Rule) -> Rule:
        """Append an already built *rule*."""
        self.broken_rules.append(rule)
        return rule

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding this result's rules followed by *other*'s."""
        return ValidationResult(broken_rules=[*self.broken_rules, *other.broken_rules])

    # ── Querying ─────────────────────────────────────────────────

    def walk(self) -> Iterator[Rule]:
        """Yield every broken rule at any depth, depth-first."""
        for rule in self.broken_rules:
            yield from rule.walk()

    def find_rule(self, name: str) -> Rule | None:
        """Return the first rule named *name* (depth-first), or ``None``."""
        return next((rule for rule in self.walk() if rule.name == name), None)

    def has_broken_rule(self, name: str) -> bool:
        """Return ``True`` if any rule at any depth is named *name*."""
        return self.find_rule(name) is not None

    def throw_if_invalid(self) -> None:
        """Raise :class:`InvalidObjectError` carrying this result if invalid."""
        if self.is_invalid:
            logger.debug(
                "Rejecting invalid object with %d broken rule(s)",
                len(self.broken_rules),
            )
            raise InvalidObjectError(self)

    # ── Presentation ─────────────────────────────────────────────

    def render(self) -> str:
        """Render the result as an indented, right-aligned report.

        Names are padded to the widest name among their siblings; nested
        rules are indented one tab deeper than their parent.
        """
        if self.is_valid:
            return OBJECT_IS_VALID
        block = _render_rules(self.broken_rules).replace("\n", "\n\t")
        return f"{INVALID_OBJECT_HEADER}\t{block}\n"

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "broken_rules": [rule.to_dict() for rule in self.broken_rules],
        }

    def __str__(self) -> str:
        return self.render()

    def __bool__(self) -> bool:
        return self.is_valid


def _render_rules(rules: list[Rule]) -> str:
    width = max(len(rule.name) for rule in rules)
    parts: list[str] = []
    for rule in rules:
        parts.append(f"[{rule.name.rjust(width)}]: {rule.description}")
        if rule.children:
            nested = _render_rules(rule.children).replace("\n", "\n\t")
            parts.append(f"{BROKEN_RULES_MARKER}\t{nested}\n")
        else:
            parts.append("\n")
    return "".join(parts)
