"""Simulation combining a property with its purchase loan."""

from dataclasses import dataclass

from estate_sim.arithmetic import ieee_divide, truncate
from estate_sim.models.loan import LoanRecord
from estate_sim.models.property import PropertyRecord


@dataclass
class SimulationRecord:
    """Investment simulation for one property and one loan.

    Either side may be missing; metrics that need it then return 0.
    """

    estate: PropertyRecord | None
    loan: LoanRecord | None
    full_occupancy_rate: float = 90.0  # Percentage of potential rent collected

    def adjusted_annual_income(self) -> int | float:
        """Annual income after vacancy, truncated."""
        if self.estate is None:
            return 0
        return truncate(self.estate.estimated_annual_income * (self.full_occupancy_rate / 100.0))

    def repayment_ratio(self) -> float:
        """Equal-installment payment as a percentage of monthly income.

        Monthly income must be non-zero; zero yields inf or NaN.
        """
        if self.estate is None or self.loan is None:
            return 0.0

        monthly_repayment = self.loan.equal_installment_repayment()
        return ieee_divide(monthly_repayment, self.estate.monthly_income()) * 100.0
