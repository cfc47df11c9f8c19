"""Loan record and repayment calculations."""

import math
from dataclasses import dataclass
from typing import Iterator

from estate_sim.arithmetic import ieee_divide, truncate
from estate_sim.models.enums import RepaymentMethod


@dataclass(frozen=True)
class Installment:
    """One monthly repayment of a loan."""

    installment_number: int  # 1, 2, 3, ...
    repayment_method: RepaymentMethod
    amount: int | float


@dataclass(frozen=True)
class LoanRecord:
    """Purchase loan."""

    amount: int  # Principal in currency units
    interest_rate: float  # Annual rate in percent (e.g. 2.55)
    period: int  # Years

    @property
    def total_repayment_count(self) -> int:
        return self.period * 12

    @property
    def monthly_interest_rate(self) -> float:
        return (self.interest_rate / 100.0) / 12.0

    def equal_installment_repayment(self) -> int | float:
        """Monthly payment when every installment is the same amount.

        A zero interest rate makes the annuity factor 0/0 and yields NaN.
        """
        rate = self.monthly_interest_rate
        growth = (1.0 + rate) ** self.total_repayment_count

        numerator = self.amount * rate * growth
        denominator = growth - 1.0
        return truncate(ieee_divide(numerator, denominator))

    def equal_principal_repayment(self, elapsed_repayment_count: int) -> int | float:
        """Monthly payment after ``elapsed_repayment_count`` installments.

        The remaining balance is reduced by interest on the original
        principal rather than by the repaid principal, so the schedule
        declines faster than a textbook equal-principal plan. Counts beyond
        the loan term are not rejected.
        """
        rate = self.monthly_interest_rate
        remaining = self.amount - (self.amount * rate * elapsed_repayment_count)

        repayment = ieee_divide(remaining, self.total_repayment_count) + math.trunc(
            remaining * rate
        )
        return truncate(repayment)

    def installments(
        self, method: RepaymentMethod = RepaymentMethod.EQUAL_INSTALLMENT
    ) -> Iterator[Installment]:
        """Yield every installment over the loan term."""
        for i in range(1, self.total_repayment_count + 1):
            if method == RepaymentMethod.EQUAL_INSTALLMENT:
                amount = self.equal_installment_repayment()
            else:
                amount = self.equal_principal_repayment(i - 1)

            yield Installment(installment_number=i, repayment_method=method, amount=amount)

    def total_repayment(
        self, method: RepaymentMethod = RepaymentMethod.EQUAL_INSTALLMENT
    ) -> int | float:
        """Sum of all installments over the loan term."""
        return sum(installment.amount for installment in self.installments(method))
