"""Common household appliances offered for quick add."""

from __future__ import annotations

from typing import Tuple

from ..errors import ValidationError
from .models import CatalogEntry


COMMON_APPLIANCES: Tuple[CatalogEntry, ...] = (
    CatalogEntry(name="Refrigerator", watts=150),
    CatalogEntry(name="LED TV", watts=100),
    CatalogEntry(name="Air Conditioner (1.5 ton)", watts=1500),
    CatalogEntry(name="Ceiling Fan", watts=75),
    CatalogEntry(name="Microwave", watts=1000),
    CatalogEntry(name="Desktop Computer", watts=200),
    CatalogEntry(name="Washing Machine", watts=500),
    CatalogEntry(name="Water Heater", watts=3000),
)


def find_catalog_entry(name: str) -> CatalogEntry:
    """Return the catalog entry whose name matches *name* (case-insensitive)."""
    key = name.strip().casefold()
    for entry in COMMON_APPLIANCES:
        if entry.name.casefold() == key:
            return entry
    raise ValidationError(f"Unknown catalog appliance: {name!r}", field="name")
