"""Pytest configuration and fixtures."""

from datetime import date
from typing import Callable

import pytest

from estate_sim.clock import FixedClock
from estate_sim.models import (
    LandRightKind,
    LoanRecord,
    PropertyRecord,
    SimulationRecord,
    StructureKind,
)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to 2024."""
    return FixedClock(2024)


EstateFactory = Callable[..., PropertyRecord]


@pytest.fixture
def make_estate(clock: FixedClock) -> EstateFactory:
    """Factory for the reference Osaka property with overridable price and income."""

    def _make(
        price: int = 88_420_000,
        annual_income: int = 420_000 * 12,
        construction_date: date | None = date(1998, 6, 1),
    ) -> PropertyRecord:
        return PropertyRecord(
            price,
            annual_income,
            "大阪府大阪市福島区大開2丁目",
            construction_date,
            StructureKind.WOODEN,
            LandRightKind.OWNERSHIP,
            130.0,
            120.0,
            3.0,
            6,
            60.0,
            200.0,
            clock=clock,
        )

    return _make


@pytest.fixture
def estate(make_estate: EstateFactory) -> PropertyRecord:
    """Reference property, not yet valuated."""
    return make_estate()


@pytest.fixture
def valuated_estate(estate: PropertyRecord) -> PropertyRecord:
    """Reference property after road price, valuation and expenses are set."""
    estate.road_price = 205_000
    estate.run_valuation()
    estate.expenses = 35_000
    return estate


@pytest.fixture
def loan() -> LoanRecord:
    """Reference loan: 85.7M at 2.55% over 35 years."""
    return LoanRecord(amount=85_700_000, interest_rate=2.55, period=35)


@pytest.fixture
def simulation(valuated_estate: PropertyRecord, loan: LoanRecord) -> SimulationRecord:
    """Reference simulation."""
    return SimulationRecord(valuated_estate, loan)
