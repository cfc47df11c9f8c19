"""JSON file reporter for exporting simulation results."""

import json
from pathlib import Path

from estate_sim.exceptions import ReportError
from estate_sim.logging import get_logger
from estate_sim.models import SimulationRecord
from estate_sim.reports.serialization import simulation_to_dict

logger = get_logger(__name__)


class JsonFileReporter:
    """Output simulations to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file reporter.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.pretty = pretty

    def write(self, name: str, simulation: SimulationRecord) -> Path:
        """Write ``simulation`` to ``<output_dir>/<name>.json``.

        Returns
        -------
        Path
            The written file.

        Raises
        ------
        ReportError
            If the directory or file cannot be written.
        """
        file_path = self.output_dir / f"{name}.json"
        data = simulation_to_dict(simulation)

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            raise ReportError(f"Cannot write report to {file_path}: {e}") from e

        logger.info("Wrote report to %s", file_path)
        return file_path
