"""Shared serialization utilities for reporters."""

from dataclasses import fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from estate_sim.models import LoanRecord, PropertyRecord, SimulationRecord


def estate_to_dict(estate: PropertyRecord) -> dict[str, Any]:
    """Serialize a property's inputs and derived metrics."""
    result = {
        f.name: serialize_value(getattr(estate, f.name))
        for f in fields(estate)
        if f.name != "clock"
    }
    result.update(
        monthly_income=estate.monthly_income(),
        gross_yield=estate.gross_yield(),
        net_profit=estate.net_profit(),
        capitalization_rate=estate.capitalization_rate(),
        age=estate.age(),
        profit_price=estate.profit_price(),
        land_fixed_asset_tax=estate.land_fixed_asset_tax(),
        building_fixed_asset_tax=estate.building_fixed_asset_tax(),
        fixed_asset_tax=estate.fixed_asset_tax(),
        estimated_price_ratio=estate.estimated_price_ratio(),
        profit_price_ratio=estate.profit_price_ratio(),
    )
    return result


def loan_to_dict(loan: LoanRecord) -> dict[str, Any]:
    """Serialize a loan's inputs and first-month repayments."""
    return {
        "amount": loan.amount,
        "interest_rate": loan.interest_rate,
        "period": loan.period,
        "total_repayment_count": loan.total_repayment_count,
        "equal_installment_repayment": loan.equal_installment_repayment(),
        "equal_principal_repayment": loan.equal_principal_repayment(0),
    }


def simulation_to_dict(simulation: SimulationRecord) -> dict[str, Any]:
    """Serialize a simulation with its property and loan."""
    return {
        "estate": estate_to_dict(simulation.estate) if simulation.estate else None,
        "loan": loan_to_dict(simulation.loan) if simulation.loan else None,
        "full_occupancy_rate": simulation.full_occupancy_rate,
        "adjusted_annual_income": simulation.adjusted_annual_income(),
        "repayment_ratio": simulation.repayment_ratio(),
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
