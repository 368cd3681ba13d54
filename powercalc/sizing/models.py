from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, confloat


class Appliance(BaseModel):
    """A user-declared electrical load.

    Values are not checked here: a candidate may be built from raw form input
    and is validated when it is added to an ``ApplianceLedger``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Appliance name.")
    watts: float = Field(0.0, description="Power draw while running (W).")
    hours: float = Field(1.0, description="Hours of operation per day.")

    @property
    def daily_wh(self) -> float:
        return self.watts * self.hours


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Catalog appliance name.")
    watts: PositiveFloat = Field(..., description="Canonical power draw (W).")


class SystemParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    sun_hours: PositiveFloat = Field(5.0, description="Average peak-sun hours per day.")
    backup_days: PositiveFloat = Field(
        1.0, description="Days the battery bank must carry the load without sun."
    )
    efficiency: confloat(gt=0, le=1) = Field(0.85, description="Round-trip system efficiency (fraction).")


class SizingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    parameters: SystemParameters

    daily_usage_wh: float = Field(..., description="Total energy consumed per day (Wh).")
    solar_size_kw: float = Field(..., description="Required solar array capacity (kW).")
    battery_size_kwh: float = Field(..., description="Required battery capacity (kWh).")
    inverter_size_kw: float = Field(..., description="Required inverter capacity (kW).")

    def to_record(self) -> Dict[str, Any]:
        """Flatten into the column layout of the ``stats`` table."""
        return {
            "daily_usage": self.daily_usage_wh,
            "sun_hours": self.parameters.sun_hours,
            "backup_days": self.parameters.backup_days,
            "efficiency": self.parameters.efficiency,
            "solar_size": self.solar_size_kw,
            "battery_size": self.battery_size_kwh,
            "inverter_size": self.inverter_size_kw,
        }


class SavedCalculation(BaseModel):
    """A stored calculation record with its server-assigned identity."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    created_at: datetime

    daily_usage: float
    sun_hours: float
    backup_days: float
    efficiency: float
    solar_size: float
    battery_size: float
    inverter_size: float


class ParameterInput(BaseModel):
    """System parameters as supplied in an input file; unset ones use the defaults."""

    model_config = ConfigDict(extra="forbid")

    sun_hours: Optional[float] = None
    backup_days: Optional[float] = None
    efficiency: Optional[float] = None


class CalculationInput(BaseModel):
    appliances: List[Appliance] = Field(default_factory=list, description="Appliances to size for.")
    parameters: ParameterInput = Field(default_factory=ParameterInput)
