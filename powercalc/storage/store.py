from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Protocol

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..config import Settings
from ..errors import PersistenceError
from ..sizing.models import SavedCalculation
from .tables import Base, Stat

logger = logging.getLogger(__name__)

RECORD_FIELDS = (
    "daily_usage",
    "sun_hours",
    "backup_days",
    "efficiency",
    "solar_size",
    "battery_size",
    "inverter_size",
)


class RecordSink(Protocol):
    def insert(self, record: Mapping[str, float]) -> SavedCalculation: ...


class StatsStore:
    """Insert-only store for calculation records."""

    def __init__(self, engine: Engine, *, create_tables: bool = True) -> None:
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)
        # Tables are created lazily on the first insert.
        self._tables_ready = not create_tables

    @classmethod
    def from_url(cls, url: str, *, echo: bool = False) -> "StatsStore":
        try:
            engine = create_engine(url, echo=echo)
        except (SQLAlchemyError, ValueError) as e:
            raise PersistenceError(f"Invalid database URL {url!r}: {e}") from e
        return cls(engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "StatsStore":
        return cls.from_url(settings.database_url, echo=settings.echo_sql)

    def insert(self, record: Mapping[str, float]) -> SavedCalculation:
        """
        Store one record and return it with its server-assigned id and timestamp.

        Raises PersistenceError on any database failure; the insert is not retried.
        """
        missing = [f for f in RECORD_FIELDS if f not in record]
        if missing:
            raise PersistenceError(f"Record is missing fields: {', '.join(missing)}")
        values: Dict[str, Any] = {f: float(record[f]) for f in RECORD_FIELDS}

        session: Session = self._sessions()
        try:
            if not self._tables_ready:
                Base.metadata.create_all(self.engine)
                self._tables_ready = True
            row = Stat(**values)
            session.add(row)
            session.commit()
            session.refresh(row)
            saved = SavedCalculation.model_validate(row)
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Failed to store calculation record")
            raise PersistenceError(f"Failed to store calculation: {e}") from e
        finally:
            session.close()

        logger.info("Stored calculation #%d (%.1f Wh/day)", saved.id, saved.daily_usage)
        return saved

