"""Console reporter for simulation results."""

from estate_sim.models import LoanRecord, PropertyRecord, SimulationRecord


class ConsoleReporter:
    """Print a simulation as a labelled text report (stdout)."""

    def __init__(self, currency: str = "JPY") -> None:
        """Initialize console reporter.

        Parameters
        ----------
        currency : str
            Currency label printed after amounts.
        """
        self.currency = currency

    def write(self, simulation: SimulationRecord) -> None:
        """Print every available section of the simulation."""
        if simulation.estate is not None:
            self._write_estate(simulation.estate)

        if simulation.loan is not None:
            self._write_loan(simulation.loan)

        self._header("Simulation")
        self._line("Full occupancy rate", f"{simulation.full_occupancy_rate}%")
        self._line("Adjusted annual income", self._money(simulation.adjusted_annual_income()))
        self._line("Repayment ratio", f"{simulation.repayment_ratio():.2f}%")

    def _write_estate(self, estate: PropertyRecord) -> None:
        self._header("Property")
        self._line("Price", self._money(estate.price))
        self._line("Estimated annual income", self._money(estate.estimated_annual_income))
        self._line("Estimated monthly income", self._money(estate.monthly_income()))
        self._line("Gross yield", f"{estate.gross_yield():.2f}%")
        self._line("Land appraised value", self._money(estate.land_appraised_value))
        self._line("Building appraised value", self._money(estate.building_appraised_value))
        self._line(
            "Estimated price",
            f"{self._money(estate.estimated_price)} ({estate.estimated_price_ratio():.2f}%)",
        )
        self._line(
            "Profit price",
            f"{self._money(estate.profit_price())} ({estate.profit_price_ratio():.2f}%)",
        )
        self._line("Net profit", self._money(estate.net_profit()))
        self._line("Capitalization rate", f"{estate.capitalization_rate():.4f}%")
        self._line("Fixed asset tax", self._money(estate.fixed_asset_tax()))
        self._line("Location", estate.location)
        if estate.construction_date is not None:
            self._line(
                "Construction year",
                f"{estate.construction_date.year} (age {estate.age()})",
            )
        structure = estate.structure_kind
        self._line("Structure", f"{structure.value} (useful life {structure.useful_life} years)")
        self._line("Land right", estate.land_right_kind.value)
        self._line("Land area", f"{estate.land_area} m^2")
        self._line("Building area", f"{estate.building_area} m^2")
        self._line("Floors", f"{estate.floor_count:g}")
        self._line("Total units", str(estate.total_unit_count))
        self._line("Building coverage ratio", f"{estate.building_coverage_ratio}%")
        self._line("Floor area ratio", f"{estate.floor_area_ratio}%")

    def _write_loan(self, loan: LoanRecord) -> None:
        self._header("Loan")
        self._line("Amount", self._money(loan.amount))
        self._line("Interest rate", f"{loan.interest_rate}%")
        self._line("Period", f"{loan.period} years")
        self._line("Monthly repayment", self._money(loan.equal_installment_repayment()))

    def _money(self, amount: int | float) -> str:
        return f"{amount:,} {self.currency}"

    @staticmethod
    def _header(title: str) -> None:
        print(f"\n{'='*60}")
        print(title)
        print("=" * 60)

    @staticmethod
    def _line(label: str, value: str) -> None:
        print(f"  {label}: {value}")
