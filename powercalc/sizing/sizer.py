from __future__ import annotations

import logging
from typing import Iterable

from ..errors import EmptyInputError
from .models import Appliance, SizingResult, SystemParameters

logger = logging.getLogger(__name__)

# 20% headroom over the largest single load.
INVERTER_OVERHEAD = 1.2


def daily_energy_wh(appliance: Appliance) -> float:
    """Energy an appliance uses per day (Wh)."""
    return appliance.watts * appliance.hours


def calculate(appliances: Iterable[Appliance], params: SystemParameters) -> SizingResult:
    """
    Size an off-grid system for a list of appliances:
    - solar array (kW) to replace one day of usage within the available sun-hours
    - battery bank (kWh) to carry the load for ``backup_days``
    - inverter (kW) to start the largest single appliance with overhead

    Both the array and the battery are derated by the round-trip efficiency.
    ``params`` is used as given.
    """
    appliances = list(appliances)
    if not appliances:
        raise EmptyInputError("Please add at least one appliance")

    daily_usage = 0.0
    for a in appliances:
        daily_usage += a.watts * a.hours

    sun_hours = params.sun_hours
    backup_days = params.backup_days
    efficiency = params.efficiency

    solar_size = (daily_usage / (sun_hours * efficiency)) / 1000
    battery_size = (daily_usage * backup_days) / (efficiency * 1000)
    inverter_size = (max(a.watts for a in appliances) * INVERTER_OVERHEAD) / 1000

    logger.debug(
        "Sized %d appliances: %.1f Wh/day -> solar %.3f kW, battery %.3f kWh, inverter %.3f kW",
        len(appliances),
        daily_usage,
        solar_size,
        battery_size,
        inverter_size,
    )

    return SizingResult(
        parameters=params,
        daily_usage_wh=float(daily_usage),
        solar_size_kw=float(solar_size),
        battery_size_kwh=float(battery_size),
        inverter_size_kw=float(inverter_size),
    )
