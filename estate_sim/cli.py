"""Command-line entry point for running an investment simulation.

Without arguments the reference Osaka property and its loan are simulated.
``--random`` simulates a generated property instead.
"""

import argparse
from datetime import date

from estate_sim.config import SimulatorConfig
from estate_sim.generators import LoanGenerator, PropertyGenerator
from estate_sim.logging import get_logger, setup_logging
from estate_sim.models import (
    LandRightKind,
    LoanRecord,
    PropertyRecord,
    SimulationRecord,
    StructureKind,
)
from estate_sim.reports import ConsoleReporter, JsonFileReporter

logger = get_logger(__name__)


def build_reference_simulation(full_occupancy_rate: float = 90.0) -> SimulationRecord:
    """Build the reference property, valuate it and attach its loan."""
    estate = PropertyRecord(
        88_420_000,
        420_000 * 12,
        "大阪府大阪市福島区大開2丁目",
        date(1998, 6, 1),
        StructureKind.WOODEN,
        LandRightKind.OWNERSHIP,
        130.0,
        120.0,
        3.0,
        6,
        60.0,
        200.0,
    )
    estate.road_price = 205_000
    estate.run_valuation()
    estate.expenses = 35_000

    loan = LoanRecord(amount=85_700_000, interest_rate=2.55, period=35)
    return SimulationRecord(estate, loan, full_occupancy_rate=full_occupancy_rate)


def build_random_simulation(
    seed: int | None = None, full_occupancy_rate: float = 90.0
) -> SimulationRecord:
    """Generate a property and a loan for it, then valuate the property."""
    estate = PropertyGenerator(seed=seed).generate()
    estate.run_valuation()
    loan = LoanGenerator(seed=seed).generate(estate.price)
    return SimulationRecord(estate, loan, full_occupancy_rate=full_occupancy_rate)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    config = SimulatorConfig.from_env()

    parser = argparse.ArgumentParser(description="Simulate a real-estate investment")
    parser.add_argument(
        "--random",
        action="store_true",
        help="Simulate a generated property instead of the reference one",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --random (default: none)",
    )
    parser.add_argument(
        "--occupancy",
        type=float,
        default=config.full_occupancy_rate,
        help=f"Full occupancy rate in percent (default: {config.full_occupancy_rate})",
    )
    parser.add_argument(
        "--json-dir",
        type=str,
        default=None,
        help="Also write the report as JSON into this directory",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=config.log_format,
        help=f"Log format (default: {config.log_format})",
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    if args.random:
        logger.info("Simulating generated property (seed=%s)", args.seed)
        simulation = build_random_simulation(args.seed, args.occupancy)
    else:
        logger.info("Simulating reference property")
        simulation = build_reference_simulation(args.occupancy)

    ConsoleReporter().write(simulation)

    if args.json_dir:
        JsonFileReporter(args.json_dir, pretty=args.pretty).write("simulation", simulation)


if __name__ == "__main__":
    main()
