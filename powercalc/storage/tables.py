"""
SQLAlchemy ORM models for the calculation history database.

One row per sizing calculation. ``id`` and ``created_at`` are assigned by the
database on insert; rows are never updated.
"""

import datetime

from sqlalchemy import DateTime, Double, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all calculator ORM models."""

    pass


class Stat(Base):
    """A persisted sizing calculation.

    Attributes:
        id: Server-assigned record identifier.
        created_at: Server-assigned insert timestamp.
        daily_usage: Total daily energy of all appliances (Wh).
        sun_hours: Peak-sun hours per day used for the calculation.
        backup_days: Days of battery autonomy used for the calculation.
        efficiency: Round-trip efficiency used for the calculation.
        solar_size: Required solar array size (kW).
        battery_size: Required battery bank size (kWh).
        inverter_size: Required inverter size (kW).
    """

    __tablename__ = "stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
    daily_usage: Mapped[float] = mapped_column(Double, nullable=False)
    sun_hours: Mapped[float] = mapped_column(Double, nullable=False)
    backup_days: Mapped[float] = mapped_column(Double, nullable=False)
    efficiency: Mapped[float] = mapped_column(Double, nullable=False)
    solar_size: Mapped[float] = mapped_column(Double, nullable=False)
    battery_size: Mapped[float] = mapped_column(Double, nullable=False)
    inverter_size: Mapped[float] = mapped_column(Double, nullable=False)

    def __repr__(self) -> str:
        return f"Stat(id={self.id!r}, daily_usage={self.daily_usage!r}, created_at={self.created_at!r})"
