"""
Notifier sinks
==============

User-facing messages emitted by a calculator session:
- success with a breakdown of the sizing outputs
- generic failure
- field-specific validation failure
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, TextIO

GENERIC_FAILURE = "Failed to calculate power needs"
INVALID_APPLIANCE = "Please fill in all appliance details correctly"


class Notifier(Protocol):
    def success(self, title: str, details: Sequence[str]) -> None: ...

    def error(self, message: str) -> None: ...

    def validation_error(self, message: str, field: Optional[str] = None) -> None: ...


@dataclass(frozen=True)
class Notification:
    kind: str  # "success" | "error" | "validation"
    message: str
    details: tuple = ()
    field: Optional[str] = None


@dataclass
class RecordingNotifier:
    """Keeps every notification in memory, newest last."""

    notifications: List[Notification] = field(default_factory=list)

    def success(self, title: str, details: Sequence[str]) -> None:
        self.notifications.append(Notification("success", title, tuple(details)))

    def error(self, message: str) -> None:
        self.notifications.append(Notification("error", message))

    def validation_error(self, message: str, field: Optional[str] = None) -> None:
        self.notifications.append(Notification("validation", message, field=field))

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None


class ConsoleNotifier:
    """Prints successes to *out* and failures to *err*."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def success(self, title: str, details: Sequence[str]) -> None:
        print(title, file=self.out)
        for line in details:
            print(line, file=self.out)

    def error(self, message: str) -> None:
        print(f"Error: {message}", file=self.err)

    def validation_error(self, message: str, field: Optional[str] = None) -> None:
        where = f" ({field})" if field else ""
        print(f"Invalid input{where}: {message}", file=self.err)
