"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "POWERCALC_"


class Settings(BaseModel):
    database_url: str = Field(
        "sqlite:///powercalc.db", description="SQLAlchemy URL of the calculation history database."
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "WARNING", description="Root log level for the CLI and UI."
    )
    echo_sql: bool = Field(False, description="Log every SQL statement issued by the store.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``POWERCALC_*`` variables; unset ones keep their defaults."""
        env = os.environ if environ is None else environ
        data = {}
        for name in cls.model_fields:
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip():
                data[name] = raw.strip().upper() if name == "log_level" else raw.strip()
        return cls.model_validate(data)
