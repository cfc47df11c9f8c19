"""Reporters for rendering simulation results."""

from estate_sim.reports.console import ConsoleReporter
from estate_sim.reports.json_file import JsonFileReporter

__all__ = ["ConsoleReporter", "JsonFileReporter"]
