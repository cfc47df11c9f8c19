"""Enumeration types for property and loan records."""

from enum import Enum


class StructureKind(str, Enum):
    WOODEN = "WOODEN"
    LIGHT_STEEL = "LIGHT_STEEL"
    MIDDLE_STEEL = "MIDDLE_STEEL"
    HEAVY_STEEL = "HEAVY_STEEL"
    REINFORCED_CONCRETE = "REINFORCED_CONCRETE"
    STEEL_REINFORCED_CONCRETE = "STEEL_REINFORCED_CONCRETE"

    @property
    def useful_life(self) -> int:
        """Statutory useful life of a residential building, in years."""
        return _USEFUL_LIFE[self]


_USEFUL_LIFE = {
    StructureKind.WOODEN: 22,
    StructureKind.LIGHT_STEEL: 19,
    StructureKind.MIDDLE_STEEL: 27,
    StructureKind.HEAVY_STEEL: 34,
    StructureKind.REINFORCED_CONCRETE: 47,
    StructureKind.STEEL_REINFORCED_CONCRETE: 47,
}


class LandRightKind(str, Enum):
    OWNERSHIP = "OWNERSHIP"
    LEASEHOLD = "LEASEHOLD"


class ValuationState(str, Enum):
    UNINITIALIZED = "UNINITIALIZED"
    VALUATED = "VALUATED"


class RepaymentMethod(str, Enum):
    EQUAL_INSTALLMENT = "EQUAL_INSTALLMENT"  # fixed monthly payment
    EQUAL_PRINCIPAL = "EQUAL_PRINCIPAL"  # declining payment
