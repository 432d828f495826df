"""Rule — one broken rule, optionally carrying nested broken rules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Rule(BaseModel):
    """A single broken rule.

    ``name`` identifies the checked field (or path segment such as
    ``"Orders[2]"``) and is frozen once the rule exists. ``description`` is a
    human-readable explanation and may be reassigned.

    ``children`` holds the broken rules reported by a delegate (nested
    validator or self-validating object). It is copied at construction, so the
    tree is a snapshot of the delegate's result at the moment of delegation.
    Like ``name`` it cannot be reassigned.

    Usage::

        leaf = Rule("Name", "Name can't be null or white space")
        nested = Rule("Address", "Address must be valid", [leaf])
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(default="", frozen=True)
    description: str = ""
    children: list[Rule] = Field(default_factory=list, frozen=True)

    def __init__(
        self,
        name: str | None = "",
        description: str = "",
        children: Iterable[Rule] | None = None,
        **data: Any,
    ) -> None:
        super().__init__(
            name=name,
            description=description,
            children=list(children or ()),
            **data,
        )

    @field_validator("name", mode="before")
    @classmethod
    def _none_name_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator[Rule]:
        """Yield this rule and every nested rule, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
