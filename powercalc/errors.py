"""Exception types raised by the calculator and its sinks."""

from __future__ import annotations

from typing import Optional


class PowerCalcError(Exception):
    """Base class for all calculator errors."""


class ValidationError(PowerCalcError, ValueError):
    """Raised when an appliance or parameter value is missing or invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class EmptyInputError(PowerCalcError, ValueError):
    """Raised when a calculation is requested with no appliances."""


class PersistenceError(PowerCalcError, RuntimeError):
    """Raised when a calculation record could not be stored."""
