"""
Sizing toolchain.

Converts a household appliance list plus sun-hours, backup-days and
round-trip efficiency into solar array, battery bank and inverter sizes for
an off-grid power system.
"""

from .catalog import COMMON_APPLIANCES, find_catalog_entry
from .ledger import ApplianceLedger
from .models import Appliance, CatalogEntry, SizingResult, SystemParameters
from .sizer import calculate, daily_energy_wh

__all__ = [
    "COMMON_APPLIANCES",
    "Appliance",
    "ApplianceLedger",
    "CatalogEntry",
    "SizingResult",
    "SystemParameters",
    "calculate",
    "daily_energy_wh",
    "find_catalog_entry",
]
