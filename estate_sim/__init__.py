"""Real-estate investment simulator."""

__version__ = "0.1.0"

from estate_sim.models import (
    Installment,
    LandRightKind,
    LoanRecord,
    PropertyRecord,
    RepaymentMethod,
    SimulationRecord,
    StructureKind,
    ValuationState,
)

__all__ = [
    "Installment",
    "LandRightKind",
    "LoanRecord",
    "PropertyRecord",
    "RepaymentMethod",
    "SimulationRecord",
    "StructureKind",
    "ValuationState",
]
