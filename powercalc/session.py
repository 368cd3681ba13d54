"""
Calculator Session
==================

Ties one appliance ledger and one set of system parameters to the
persistence and notifier sinks. A session lives as long as the calculator
view that opened it.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from .errors import EmptyInputError, PersistenceError, ValidationError
from .notify import GENERIC_FAILURE, INVALID_APPLIANCE, Notifier
from .sizing.ledger import ApplianceLedger
from .sizing.models import Appliance, CatalogEntry, SavedCalculation, SizingResult, SystemParameters
from .sizing.sizer import calculate
from .sizing.summary import BREAKDOWN_HEADING, SUCCESS_TITLE, format_breakdown
from .storage.store import RecordSink

logger = logging.getLogger(__name__)


def parameters_from_form(
    sun_hours: Optional[float] = None,
    backup_days: Optional[float] = None,
    efficiency: Optional[float] = None,
) -> SystemParameters:
    """
    Build SystemParameters from form values.

    Blank or zero inputs fall back to the defaults; anything else out of
    range raises ValidationError naming the offending field.
    """
    data = {}
    for name, value in (("sun_hours", sun_hours), ("backup_days", backup_days), ("efficiency", efficiency)):
        if value:
            data[name] = value
    try:
        return SystemParameters.model_validate(data)
    except PydanticValidationError as e:
        err = e.errors()[0]
        field = str(err["loc"][0]) if err.get("loc") else None
        raise ValidationError(f"{field}: {err['msg']}", field=field) from e


class CalculatorSession:
    def __init__(
        self,
        sink: Optional[RecordSink],
        notifier: Notifier,
        params: Optional[SystemParameters] = None,
    ) -> None:
        self.sink = sink
        self.notifier = notifier
        self.ledger = ApplianceLedger()
        self.params = params or SystemParameters()
        self.busy = False
        self.last_result: Optional[SizingResult] = None
        self.last_saved: Optional[SavedCalculation] = None

    @property
    def can_calculate(self) -> bool:
        return bool(self.ledger) and not self.busy

    def add_appliance(self, name: str, watts: float, hours: float = 1.0) -> bool:
        """Validate and add a custom appliance; notify and return False on bad input."""
        candidate = Appliance(name=(name or "").strip(), watts=watts or 0.0, hours=hours or 0.0)
        try:
            self.ledger.add(candidate)
        except ValidationError as e:
            self.notifier.validation_error(f"{INVALID_APPLIANCE}: {e}", field=e.field)
            return False
        return True

    def quick_add(self, entry: CatalogEntry) -> None:
        self.ledger.add_from_catalog(entry)

    def remove_appliance(self, index: int) -> None:
        self.ledger.remove_at(index)

    def set_parameters(
        self,
        sun_hours: Optional[float] = None,
        backup_days: Optional[float] = None,
        efficiency: Optional[float] = None,
    ) -> bool:
        try:
            self.params = parameters_from_form(sun_hours, backup_days, efficiency)
        except ValidationError as e:
            self.notifier.validation_error(str(e), field=e.field)
            return False
        return True

    def reset(self) -> None:
        self.ledger.clear()
        self.params = SystemParameters()
        self.last_result = None
        self.last_saved = None

    def calculate_and_save(self) -> Optional[SizingResult]:
        """
        Size the current ledger, store the record, then notify.

        Returns the result on success and None on any handled failure. A call
        made while another is still in flight is refused.
        """
        if self.busy:
            logger.warning("Calculation already in progress; ignoring request")
            return None

        self.busy = True
        try:
            try:
                result = calculate(self.ledger.list(), self.params)
            except EmptyInputError as e:
                self.notifier.error(str(e))
                return None

            saved = None
            if self.sink is not None:
                try:
                    saved = self.sink.insert(result.to_record())
                except PersistenceError:
                    logger.exception("Error calculating power needs")
                    self.notifier.error(GENERIC_FAILURE)
                    return None

            self.last_result = result
            self.last_saved = saved
            self.notifier.success(SUCCESS_TITLE, [BREAKDOWN_HEADING, *format_breakdown(result)])
            return result
        finally:
            self.busy = False
