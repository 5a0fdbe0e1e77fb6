from dataclasses import dataclass
from typing import Iterable
from standards.iec_tables import HEAT_SOURCE_CATALOG
from standards.control_tables import DC_LOAD_CATALOG

@dataclass
class HeatSource:
    name: str
    watts: float  # Dissipation per unit
    quantity: int = 1

    @property
    def total_watts(self) -> float:
        if self.quantity <= 0 or self.watts <= 0:
            return 0.0
        return self.watts * self.quantity

    @classmethod
    def from_catalog(cls, name: str, quantity: int = 1) -> "HeatSource":
        if name not in HEAT_SOURCE_CATALOG:
            raise ValueError(f"Unknown heat source: {name!r}")
        return cls(name=name, watts=HEAT_SOURCE_CATALOG[name], quantity=quantity)

def total_heat_watts(sources: Iterable[HeatSource]) -> float:
    """Internal dissipation of an enclosure. Entries with no quantity or watts add nothing."""
    return sum(s.total_watts for s in sources)

@dataclass
class DcLoad:
    name: str
    nominal_ma: float  # Per unit
    inrush_ma: float = 0.0
    quantity: int = 1

    @property
    def counts(self) -> bool:
        return self.quantity > 0 and self.nominal_ma > 0

    @property
    def total_ma(self) -> float:
        return self.nominal_ma * self.quantity if self.counts else 0.0

    @classmethod
    def from_catalog(cls, name: str, quantity: int = 1) -> "DcLoad":
        if name not in DC_LOAD_CATALOG:
            raise ValueError(f"Unknown DC load: {name!r}")
        nominal, inrush = DC_LOAD_CATALOG[name]
        return cls(name=name, nominal_ma=nominal, inrush_ma=inrush, quantity=quantity)
