"""
Appliance Ledger
================

Working set of appliances for one calculator session:
- Validated add of custom appliances
- Quick add from the common appliance catalog
- Removal by position
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Tuple

from ..errors import ValidationError
from .models import Appliance, CatalogEntry

logger = logging.getLogger(__name__)

CATALOG_DEFAULT_HOURS = 1.0


def validate_appliance(candidate: Appliance) -> None:
    """Raise ValidationError unless *candidate* has a name and finite, positive watts/hours."""
    if not candidate.name or not candidate.name.strip():
        raise ValidationError("Appliance name is required", field="name")
    if not (math.isfinite(candidate.watts) and candidate.watts > 0):
        raise ValidationError("watts must be a positive number", field="watts")
    if not (math.isfinite(candidate.hours) and candidate.hours > 0):
        raise ValidationError("hours must be a positive number", field="hours")


class ApplianceLedger:
    """Ordered, session-scoped list of appliances.

    Insertion order is the display order and carries no other meaning.
    """

    def __init__(self) -> None:
        self._items: List[Appliance] = []

    def add(self, candidate: Appliance) -> None:
        try:
            validate_appliance(candidate)
        except ValidationError:
            logger.warning("Rejected appliance %r", candidate)
            raise
        self._items.append(candidate)
        logger.info("Added %s (%g W x %g h)", candidate.name, candidate.watts, candidate.hours)

    def add_from_catalog(self, entry: CatalogEntry) -> None:
        appliance = Appliance(name=entry.name, watts=entry.watts, hours=CATALOG_DEFAULT_HOURS)
        self._items.append(appliance)
        logger.info("Quick-added %s (%g W)", entry.name, entry.watts)

    def remove_at(self, index: int) -> None:
        # Out of range is a no-op; negative indices never wrap around.
        if 0 <= index < len(self._items):
            removed = self._items.pop(index)
            logger.info("Removed %s at position %d", removed.name, index)

    def list(self) -> Tuple[Appliance, ...]:
        return tuple(self._items)

    def clear(self) -> None:
        self._items.clear()

    def total_daily_wh(self) -> float:
        return sum(a.daily_wh for a in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Appliance]:
        return iter(self.list())

    def __bool__(self) -> bool:
        return bool(self._items)
