from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from ..config import Settings
from ..errors import PersistenceError, ValidationError
from ..notify import GENERIC_FAILURE, ConsoleNotifier
from ..session import CalculatorSession
from ..storage.store import StatsStore
from .catalog import COMMON_APPLIANCES, find_catalog_entry
from .models import Appliance, CalculationInput
from .summary import describe_appliance

logger = logging.getLogger(__name__)


def _prompt_float(prompt: str, *, min_v: float | None = None, default: float | None = None) -> float:
    while True:
        raw = input(prompt).strip()
        if not raw and default is not None:
            return default
        try:
            v = float(raw)
        except ValueError:
            print("Please enter a number.", file=sys.stderr)
            continue
        if min_v is not None and v <= min_v:
            print(f"Must be > {min_v}.", file=sys.stderr)
            continue
        return v


def parse_appliance(spec: str) -> Appliance:
    """Parse ``NAME:WATTS[:HOURS]``; the name may itself contain colons."""
    parts = spec.rsplit(":", 2)
    try:
        if len(parts) == 3:
            try:
                return Appliance(name=parts[0].strip(), watts=float(parts[1]), hours=float(parts[2]))
            except ValueError:
                # "Name:With:Colon:WATTS" with no hours
                name, watts = spec.rsplit(":", 1)
                return Appliance(name=name.strip(), watts=float(watts), hours=1.0)
        if len(parts) == 2:
            return Appliance(name=parts[0].strip(), watts=float(parts[1]), hours=1.0)
    except ValueError:
        pass
    raise ValidationError(f"Expected NAME:WATTS[:HOURS], got {spec!r}", field="appliance")


def load_inputs(path: str | None, *, interactive: bool, have_appliances: bool) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if path:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Input JSON not found: {path}")
        data = json.loads(p.read_text())
        if not isinstance(data, dict):
            raise ValidationError(
                f"Input JSON must be an object with \"appliances\" and \"parameters\", got {type(data).__name__}",
                field="input",
            )

    # Ask for appliances only when nothing else supplied any
    if interactive and not have_appliances and not data.get("appliances"):
        appliances: List[Dict[str, Any]] = []
        while True:
            name = input("Appliance name (blank to finish): ").strip()
            if not name:
                break
            watts = _prompt_float("  Power (watts): ", min_v=0.0)
            hours = _prompt_float("  Hours per day [1]: ", min_v=0.0, default=1.0)
            appliances.append({"name": name, "watts": watts, "hours": hours})
        data["appliances"] = appliances

    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="powercalc",
        description="Off-grid solar, battery and inverter sizing from an appliance list.",
    )
    parser.add_argument(
        "--input",
        "-i",
        help='Path to JSON with "appliances" and optional "parameters".',
    )
    parser.add_argument(
        "--appliance",
        "-a",
        action="append",
        default=[],
        metavar="NAME:WATTS[:HOURS]",
        help="Add a custom appliance (hours default to 1). Repeatable.",
    )
    parser.add_argument(
        "--quick",
        "-q",
        action="append",
        default=[],
        metavar="NAME",
        help="Quick add a common appliance by name (1 hour/day). Repeatable.",
    )
    parser.add_argument("--sun-hours", type=float, help="Peak-sun hours per day (default 5).")
    parser.add_argument("--backup-days", type=float, help="Days of battery autonomy (default 1).")
    parser.add_argument("--efficiency", type=float, help="Round-trip system efficiency (default 0.85).")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for appliances when none were given.",
    )
    parser.add_argument(
        "--list-catalog",
        action="store_true",
        help="Print the common appliance catalog and exit.",
    )
    parser.add_argument("--output", "-o", help="Path to write the sizing result JSON.")
    parser.add_argument("--no-save", action="store_true", help="Do not store the calculation.")
    parser.add_argument("--database-url", help="SQLAlchemy URL overriding POWERCALC_DATABASE_URL.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level overriding POWERCALC_LOG_LEVEL.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    if args.database_url:
        settings = settings.model_copy(update={"database_url": args.database_url})
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list_catalog:
        for entry in COMMON_APPLIANCES:
            print(f"{entry.name}: {entry.watts:g} W")
        return 0

    notifier = ConsoleNotifier()
    sink = None
    if not args.no_save:
        try:
            sink = StatsStore.from_settings(settings)
        except PersistenceError:
            logger.exception("Could not open calculation history")
            notifier.error(GENERIC_FAILURE)
            return 1
    session = CalculatorSession(sink, notifier)

    try:
        raw = load_inputs(
            args.input,
            interactive=args.interactive,
            have_appliances=bool(args.appliance or args.quick),
        )
        inputs = CalculationInput.model_validate(raw)
        candidates = list(inputs.appliances)
        candidates += [parse_appliance(s) for s in args.appliance]
        entries = [find_catalog_entry(n) for n in args.quick]
        for candidate in candidates:
            session.ledger.add(candidate)
        for entry in entries:
            session.quick_add(entry)

        params = inputs.parameters.model_dump()
        for key in ("sun_hours", "backup_days", "efficiency"):
            if getattr(args, key) is not None:
                params[key] = getattr(args, key)
        if not session.set_parameters(**params):
            return 2
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 2
    except ValidationError as e:
        notifier.validation_error(str(e), field=e.field)
        return 2
    except PydanticValidationError as e:
        print("Input validation error:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    if not session.ledger:
        session.calculate_and_save()
        return 2

    for appliance in session.ledger:
        print(f"- {describe_appliance(appliance)}")

    result = session.calculate_and_save()
    if result is None:
        return 1

    print(f"Daily usage: {result.daily_usage_wh:.0f} Wh")
    if session.last_saved is not None:
        print(f"Saved as record #{session.last_saved.id}")
    if args.output:
        Path(args.output).write_text(result.model_dump_json(indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
