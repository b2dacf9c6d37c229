"""
dimvalue.core.registry
======================

Factory registry used for virtual construction.

Generic operations on ``DimensionedValue`` (multiply, divide, sum, parsing)
need to create an instance of the caller's concrete value type without
knowing it in advance. Each concrete value type registers a factory for its
unit family here; lookups go by the family of the unit at hand.

The registry is thread-safe. Tests can build their own ``ValueTypeRegistry``
instead of touching ``DEFAULT_REGISTRY``.
"""

from __future__ import annotations

import logging
import threading
from decimal import Decimal
from typing import TYPE_CHECKING, Callable, Dict, Type

from dimvalue.core.dimension import Dimension

if TYPE_CHECKING:  # pragma: no cover
    from dimvalue.core.value import DimensionedValue

logger = logging.getLogger(__name__)

ValueFactory = Callable[[Dimension, Decimal], "DimensionedValue"]


class UnregisteredFamilyError(LookupError):
    """No value type is registered for a unit family."""

    def __init__(self, family: type) -> None:
        super().__init__(f"No value type registered for unit family '{family.__name__}'")
        self.family = family


class ValueTypeRegistry:
    """Thread-safe mapping ``unit family -> value type``."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._types: Dict[type, Type["DimensionedValue"]] = {}
        self._factories: Dict[type, ValueFactory] = {}

    def __contains__(self, family: type) -> bool:
        with self._lock:
            return family in self._types

    def __len__(self) -> int:
        with self._lock:
            return len(self._types)

    # -------------------------- public API ---------------------------------
    def register(
        self,
        family: type,
        value_type: Type["DimensionedValue"],
        factory: ValueFactory | None = None,
        replace: bool = False,
    ) -> None:
        """
        Register ``value_type`` as the concrete type for ``family``.

        ``factory`` defaults to the value type itself. Registering a second
        type for the same family raises ``ValueError`` unless ``replace`` is
        True; re-registering the same type is a no-op.
        """
        if not (isinstance(family, type) and issubclass(family, Dimension)):
            raise TypeError(f"family must be a Dimension subclass, got {family!r}")

        with self._lock:
            existing = self._types.get(family)
            if existing is not None and not replace:
                if existing is value_type:
                    return
                raise ValueError(
                    f"Cannot register '{value_type.__name__}' for '{family.__name__}': "
                    f"'{existing.__name__}' is already registered."
                )
            self._types[family] = value_type
            self._factories[family] = factory if factory is not None else value_type

        logger.debug("Registered %s for unit family %s", value_type.__name__, family.__name__)

    def unregister(self, family: type) -> None:
        with self._lock:
            self._types.pop(family, None)
            self._factories.pop(family, None)

    def type_for(self, family: type) -> Type["DimensionedValue"]:
        with self._lock:
            try:
                return self._types[family]
            except KeyError:
                raise UnregisteredFamilyError(family) from None

    def factory_for(self, family: type) -> ValueFactory:
        with self._lock:
            try:
                return self._factories[family]
            except KeyError:
                raise UnregisteredFamilyError(family) from None

    def new_instance(self, unit: Dimension, value: Decimal) -> "DimensionedValue":
        """Create a value of the type registered for ``unit``'s family."""
        return self.factory_for(type(unit))(unit, value)

    def families(self) -> tuple[type, ...]:
        with self._lock:
            return tuple(self._types)


DEFAULT_REGISTRY = ValueTypeRegistry()


__all__ = [
    "ValueFactory",
    "UnregisteredFamilyError",
    "ValueTypeRegistry",
    "DEFAULT_REGISTRY",
]
