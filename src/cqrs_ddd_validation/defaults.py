"""
Default-value registry.

Maps a type to its zero-equivalent ("default") value, used by the
``not_default`` family of rules to detect unset values without reflection.

New types are supported by registering their sentinel::

    registry = get_default_registry()
    registry.register(Money, Money.zero())
"""

from __future__ import annotations

from contextvars import ContextVar
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any
from uuid import UUID

from .exceptions import ConfigurationError

EMPTY_UUID = UUID(int=0)

# Marks "no explicit default given"; ``None`` is a legitimate default.
UNSET: Any = object()


class DefaultValueRegistry:
    """
    Registry of default values keyed by type.

    Lookup walks the MRO of the requested type, so registering a base class
    covers its subclasses. Types with no registration fall back to a
    no-argument constructor call (``int()``, ``str()``, ...).

    Usage::

        registry = DefaultValueRegistry()
        registry.register(UUID, EMPTY_UUID)

        registry.default_for(UUID)   # UUID('00000000-0000-0000-0000-000000000000')
        registry.is_default(0)       # True
    """

    def __init__(self) -> None:
        self._defaults: dict[type[Any], Any] = {}

    # -- registration --------------------------------------------------------

    def register(self, kind: type[Any], value: Any) -> None:
        """Register *value* as the default of *kind*."""
        self._defaults[kind] = value

    def unregister(self, kind: type[Any]) -> None:
        """Remove the registration for *kind*."""
        self._defaults.pop(kind, None)

    # -- look-up -------------------------------------------------------------

    def has(self, kind: type[Any]) -> bool:
        return kind in self._defaults

    def get(self, kind: type[Any]) -> Any:
        """Return the registered default of *kind* (exact type only) or ``None``."""
        return self._defaults.get(kind)

    def default_for(self, kind: type[Any]) -> Any:
        """
        Resolve the default value of *kind*.

        Raises:
            ConfigurationError: If *kind* has no registered default and
                cannot be constructed without arguments.
        """
        for candidate in kind.__mro__:
            if candidate in self._defaults:
                return self._defaults[candidate]
        try:
            return kind()
        except TypeError as exc:
            raise ConfigurationError(
                f"No default value registered for {kind.__name__}"
            ) from exc

    def is_default(self, value: Any, default: Any = UNSET) -> bool:
        """Return ``True`` if *value* equals *default* or its type's default."""
        if default is UNSET:
            default = self.default_for(type(value))
        return bool(value == default)


def build_default_registry() -> DefaultValueRegistry:
    """Create a registry pre-populated with the standard library types."""
    registry = DefaultValueRegistry()
    registry.register(type(None), None)
    registry.register(bool, False)
    registry.register(int, 0)
    registry.register(float, 0.0)
    registry.register(Decimal, Decimal(0))
    registry.register(str, "")
    registry.register(UUID, EMPTY_UUID)
    registry.register(datetime, datetime.min)
    registry.register(date, date.min)
    registry.register(time, time.min)
    registry.register(timedelta, timedelta(0))
    return registry


_default_registry_var: ContextVar[DefaultValueRegistry | None] = ContextVar(
    "default_value_registry", default=None
)


def get_default_registry() -> DefaultValueRegistry:
    """Get the default-value registry for the current context.

    Creates a fresh registry from :func:`build_default_registry` on first
    access within each context.
    """
    registry = _default_registry_var.get()
    if registry is None:
        registry = build_default_registry()
        _default_registry_var.set(registry)
    return registry


def set_default_registry(registry: DefaultValueRegistry) -> None:
    """Set a custom default-value registry in the current context."""
    _default_registry_var.set(registry)
