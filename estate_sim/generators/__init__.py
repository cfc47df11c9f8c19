"""Sample input generators."""

from estate_sim.generators.property import LoanGenerator, PropertyGenerator

__all__ = ["LoanGenerator", "PropertyGenerator"]
