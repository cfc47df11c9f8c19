"""Sample property and loan generators."""

import math
import random

from estate_sim.clock import Clock, SystemClock
from estate_sim.generators.base import BaseGenerator
from estate_sim.logging import get_logger
from estate_sim.models import LandRightKind, LoanRecord, PropertyRecord, StructureKind

logger = get_logger(__name__)


class PropertyGenerator(BaseGenerator):
    """Generate plausible income properties."""

    COVERAGE_RATIOS = [30.0, 40.0, 50.0, 60.0, 80.0]
    FLOOR_AREA_RATIOS = [100.0, 150.0, 200.0, 300.0, 400.0]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "ja_JP",
        clock: Clock | None = None,
    ) -> None:
        super().__init__(seed, locale)
        self._clock = clock or SystemClock()

    def generate(self) -> PropertyRecord:
        """Generate a property.

        Returns
        -------
        PropertyRecord
            Property with road price and expenses set, not yet valuated.
        """
        price = random.randint(30, 300) * 1_000_000

        # Monthly rent rounded to the thousand, 3-10% gross yield
        gross_yield = random.uniform(3.0, 10.0)
        monthly_rent = round(price * gross_yield / 100 / 12 / 1000) * 1000

        land_area = round(random.uniform(50, 500), 1)
        coverage_ratio = random.choice(self.COVERAGE_RATIOS)
        floor_area_ratio = random.choice(self.FLOOR_AREA_RATIOS)

        # Stay within the floor area ratio
        max_floors = max(1, int(floor_area_ratio // coverage_ratio))
        floor_count = float(random.randint(1, max_floors))
        max_building_area = land_area * coverage_ratio / 100
        building_area = math.floor(max_building_area * random.uniform(0.6, 1.0) * 10) / 10

        estate = PropertyRecord(
            price,
            monthly_rent * 12,
            self.fake.address(),
            self.fake.date_between(start_date="-40y", end_date="today"),
            random.choice(list(StructureKind)),
            random.choice(list(LandRightKind)),
            land_area,
            building_area,
            floor_count,
            random.randint(1, 40),
            coverage_ratio,
            floor_area_ratio,
            clock=self._clock,
        )
        estate.road_price = random.randint(50, 1000) * 1000
        estate.expenses = random.randint(10, 200) * 1000

        logger.debug("Generated property at %s priced %d", estate.location, price)
        return estate


class LoanGenerator(BaseGenerator):
    """Generate purchase loans for a given price."""

    PERIODS = [10, 15, 20, 25, 30, 35]

    def generate(self, price: int) -> LoanRecord:
        """Generate a loan financing 80-100% of ``price``.

        Parameters
        ----------
        price : int
            Purchase price to finance.

        Returns
        -------
        LoanRecord
            Generated loan.
        """
        amount = round(price * random.uniform(0.8, 1.0) / 100_000) * 100_000
        return LoanRecord(
            amount=amount,
            interest_rate=round(random.uniform(0.5, 4.0), 2),
            period=random.choice(self.PERIODS),
        )
