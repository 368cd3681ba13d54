"""
Storage Module
==============

Calculation history persisted with SQLAlchemy:
- ``stats`` table of sizing records
- Insert-only store used as the persistence sink
"""

from .store import RecordSink, StatsStore
from .tables import Base, Stat

__all__ = ["Base", "RecordSink", "Stat", "StatsStore"]
