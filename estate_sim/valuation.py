"""Cost-approach valuation providers.

A provider appraises the building and the land of a property separately and
reports their sum as the estimated (cost-approach) price.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, NamedTuple

from estate_sim.exceptions import ValuationError
from estate_sim.logging import get_logger

if TYPE_CHECKING:
    from estate_sim.models.property import PropertyRecord

logger = get_logger(__name__)


class ValuationResult(NamedTuple):
    """Appraised values in currency units."""

    building_value: int
    land_value: int
    total_value: int

    @classmethod
    def coerce(cls, raw: Any) -> ValuationResult:
        """Build a result from any 3-item sequence of integers."""
        try:
            building_value, land_value, total_value = raw
        except (TypeError, ValueError) as e:
            raise ValuationError(
                f"Expected (building, land, total), got {raw!r}"
            ) from e

        values = (building_value, land_value, total_value)
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            raise ValuationError(f"Appraised values must be integers, got {values!r}")

        return cls(building_value, land_value, total_value)


class ValuationProvider(ABC):
    """Source of appraised values for a property."""

    @abstractmethod
    def estimate(self, estate: PropertyRecord) -> ValuationResult:
        """Appraise the building and land of ``estate``."""


class StubValuationProvider(ValuationProvider):
    """Placeholder provider returning fixed appraisals.

    Stands in for a lookup against an external price database; the values
    are those of the reference Osaka property.
    """

    BUILDING_VALUE = 18_000_000
    LAND_VALUE = 26_650_000
    TOTAL_VALUE = 44_650_000

    def estimate(self, estate: PropertyRecord) -> ValuationResult:
        logger.debug("Using stub appraisal for %s", estate.location)
        return ValuationResult(self.BUILDING_VALUE, self.LAND_VALUE, self.TOTAL_VALUE)
