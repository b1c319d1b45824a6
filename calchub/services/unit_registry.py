"""
Unit registries: one flat, linear table per physical quantity.

Every unit carries a factor to the registry's base unit, so
value_in_base = value * factor. Tables are declared once as module
constants (see calchub.units) and never mutated.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


class RegistryError(ValueError):
    """Raised when a unit table is declared inconsistently."""
    pass


@dataclass(frozen=True)
class Unit:
    key: str
    name: str
    factor: float  # factor to base unit

    def to_dict(self):
        return {"key": self.key, "name": self.name, "factor": self.factor}


class Registry:
    """Ordered, immutable set of units for one quantity.

    The base unit is declared by key and must have factor 1. Exact aliases of
    the base (e.g. g/L next to kg/m3) may also carry factor 1.
    """

    def __init__(self, quantity: str, base: str, units: Iterable[Unit]):
        self.quantity = quantity
        self._units = tuple(units)
        self._by_key = {}

        if not self._units:
            raise RegistryError(f"Registry '{quantity}' has no units")

        for u in self._units:
            if u.key in self._by_key:
                raise RegistryError(f"Registry '{quantity}': duplicate unit key '{u.key}'")
            if not math.isfinite(u.factor) or u.factor <= 0:
                raise RegistryError(f"Registry '{quantity}': unit '{u.key}' has invalid factor {u.factor!r}")
            self._by_key[u.key] = u

        base_unit = self._by_key.get(base)
        if base_unit is None:
            raise RegistryError(f"Registry '{quantity}': base unit '{base}' not declared")
        if base_unit.factor != 1:
            raise RegistryError(f"Registry '{quantity}': base unit '{base}' must have factor 1, got {base_unit.factor!r}")
        self.base = base

    @property
    def units(self) -> tuple:
        return self._units

    def keys(self) -> list[str]:
        return [u.key for u in self._units]

    def get(self, key: str) -> Optional[Unit]:
        return self._by_key.get(key)

    def __contains__(self, key) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"Registry({self.quantity!r}, base={self.base!r}, units={len(self._units)})"


def lookup(registry: Registry, key: Optional[str]) -> Optional[Unit]:
    """Pure map read. Unknown keys give None; callers must guard."""
    if key is None:
        return None
    return registry.get(key)
