"""Property record and its derived investment metrics."""

import math
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

from estate_sim.arithmetic import ieee_divide, trunc_div, truncate
from estate_sim.clock import Clock, SystemClock
from estate_sim.exceptions import ImmutableFieldError
from estate_sim.logging import get_logger
from estate_sim.models.enums import LandRightKind, StructureKind, ValuationState
from estate_sim.valuation import StubValuationProvider, ValuationProvider, ValuationResult

logger = get_logger(__name__)

# Standard fixed asset tax rate (1.4% of appraised value)
FIXED_ASSET_TAX_RATE = Decimal("0.014")

_IMMUTABLE_FIELDS = frozenset(
    {
        "price",
        "estimated_annual_income",
        "location",
        "construction_date",
        "structure_kind",
        "land_right_kind",
        "land_area",
        "building_area",
        "floor_count",
        "total_unit_count",
        "building_coverage_ratio",
        "floor_area_ratio",
    }
)


@dataclass
class PropertyRecord:
    """Income property offered for sale.

    The twelve leading fields are fixed at construction. ``road_price`` and
    ``expenses`` may be set at any time before the metrics that depend on
    them are read. The appraised values are filled in by
    :meth:`run_valuation`, which should be called once ``road_price`` is set.

    Every metric is recomputed on each call.
    """

    price: int  # Currency units
    estimated_annual_income: int
    location: str
    construction_date: date | None
    structure_kind: StructureKind
    land_right_kind: LandRightKind
    land_area: float  # Square meters
    building_area: float  # Square meters
    floor_count: float
    total_unit_count: int
    building_coverage_ratio: float  # Percentage
    floor_area_ratio: float  # Percentage
    road_price: int = 0  # Land reference price per square meter
    expenses: int = 0  # Annual operating cost
    building_appraised_value: int = 0
    land_appraised_value: int = 0
    estimated_price: int = 0  # Cost-approach price
    valuation_state: ValuationState = ValuationState.UNINITIALIZED
    clock: Clock = field(default_factory=SystemClock, repr=False, compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise ImmutableFieldError(f"{name} is fixed at construction")
        super().__setattr__(name, value)

    def monthly_income(self) -> int:
        """Estimated monthly income, truncated toward zero."""
        return trunc_div(self.estimated_annual_income, 12)

    def gross_yield(self) -> float:
        """Surface yield in percent, truncated to two decimal places.

        Returns 0.0 for a non-positive price.
        """
        if self.price <= 0:
            return 0.0

        gross_yield = (self.estimated_annual_income / self.price) * 100.0
        return math.floor(gross_yield * 100.0) / 100.0

    def net_profit(self) -> int:
        return self.estimated_annual_income - self.expenses - self.fixed_asset_tax()

    def capitalization_rate(self) -> float:
        """Net profit over price, in percent.

        The price must be positive; a zero price yields inf or NaN.
        """
        return ieee_divide(self.net_profit(), self.price) * 100.0

    def age(self) -> int:
        """Building age in years, counting the construction year as year one."""
        if self.construction_date is None:
            return 0
        return self.clock.current_year() - self.construction_date.year + 1

    def profit_price(self) -> int | float:
        """Income-approach price: net profit capitalized at the cap rate."""
        return truncate(ieee_divide(self.net_profit(), self.capitalization_rate() / 100.0))

    def land_fixed_asset_tax(self) -> int:
        return truncate(Decimal(self.land_appraised_value) * FIXED_ASSET_TAX_RATE)

    def building_fixed_asset_tax(self) -> int:
        return truncate(Decimal(self.building_appraised_value) * FIXED_ASSET_TAX_RATE)

    def fixed_asset_tax(self) -> int:
        return self.land_fixed_asset_tax() + self.building_fixed_asset_tax()

    def estimated_price_ratio(self) -> float:
        """Cost-approach price as a percentage of the asking price."""
        return ieee_divide(self.estimated_price, self.price) * 100.0

    def profit_price_ratio(self) -> float:
        """Income-approach price as a percentage of the asking price."""
        return ieee_divide(self.profit_price(), self.price) * 100.0

    def run_valuation(self, provider: ValuationProvider | None = None) -> None:
        """Populate the appraised values from a valuation provider.

        Parameters
        ----------
        provider : ValuationProvider | None
            Appraisal source (default: the fixed-value stub).
        """
        provider = provider or StubValuationProvider()

        if self.road_price == 0:
            logger.warning("Valuating %s before its road price is set", self.location)

        result = ValuationResult.coerce(provider.estimate(self))
        if result.total_value != result.building_value + result.land_value:
            logger.warning(
                "Estimated price %d differs from building %d + land %d",
                result.total_value,
                result.building_value,
                result.land_value,
            )

        self.building_appraised_value = result.building_value
        self.land_appraised_value = result.land_value
        self.estimated_price = result.total_value
        self.valuation_state = ValuationState.VALUATED

        logger.debug("Valuated %s at %d", self.location, self.estimated_price)
