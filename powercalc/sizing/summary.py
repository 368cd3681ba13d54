"""Human readable views of appliances and sizing results."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .models import Appliance, SizingResult
from .sizer import daily_energy_wh

SUCCESS_TITLE = "Power needs calculated successfully!"
BREAKDOWN_HEADING = "Recommended System Specifications:"


def _num(value: float) -> str:
    return f"{value:g}"


def format_breakdown(result: SizingResult) -> List[str]:
    """Return the three sizing outputs, each to 2 decimal places."""
    return [
        f"Solar Panels: {result.solar_size_kw:.2f} kW",
        f"Battery Bank: {result.battery_size_kwh:.2f} kWh",
        f"Inverter: {result.inverter_size_kw:.2f} kW",
    ]


def describe_appliance(appliance: Appliance) -> str:
    wh = daily_energy_wh(appliance)
    return (
        f"{appliance.name} ({_num(appliance.watts)}W × {_num(appliance.hours)}h"
        f" = {_num(wh)}Wh/day)"
    )


def appliance_rows(appliances: Iterable[Appliance]) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for a in appliances:
        rows.append(
            {
                "Appliance": a.name,
                "Watts": a.watts,
                "Hours/day": a.hours,
                "Wh/day": daily_energy_wh(a),
            }
        )
    return rows
