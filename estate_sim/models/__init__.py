"""Property, loan and simulation records."""

from estate_sim.models.enums import (
    LandRightKind,
    RepaymentMethod,
    StructureKind,
    ValuationState,
)
from estate_sim.models.loan import Installment, LoanRecord
from estate_sim.models.property import FIXED_ASSET_TAX_RATE, PropertyRecord
from estate_sim.models.simulation import SimulationRecord

__all__ = [
    "FIXED_ASSET_TAX_RATE",
    "Installment",
    "LandRightKind",
    "LoanRecord",
    "PropertyRecord",
    "RepaymentMethod",
    "SimulationRecord",
    "StructureKind",
    "ValuationState",
]
