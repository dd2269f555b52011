"""LAUNDRY OS CLI

Commands:
- machines (roster with current status)
- serve (REST API)
"""

import argparse
import logging
from datetime import UTC

from laundry_os import config
from laundry_os.observability import configure_logging
from laundry_os.time_truth import MachineRegistry, RegistryError, SystemClock

logger = logging.getLogger(__name__)


def print_table(headers: list, rows: list, widths: list = None):
    """Print a simple table."""
    if not widths:
        widths = [max(len(str(row[i])) for row in [headers] + rows) for i in range(len(headers))]

    header_str = " │ ".join(str(h).ljust(w) for h, w in zip(headers, widths))
    print(header_str)
    print("─" * len(header_str))

    for row in rows:
        print(" │ ".join(str(c)[:w].ljust(w) for c, w in zip(row, widths)))


def cmd_machines(registry: MachineRegistry, args) -> int:
    machines = registry.machines()
    if not machines:
        print("No machines configured.")
        return 0

    rows = []
    for machine in machines:
        next_slot = machine.get_schedule().next_busy_time_slot()
        rows.append(
            [
                machine.get_id(),
                machine.get_name(),
                machine.get_status(),
                next_slot.start.strftime("%Y-%m-%d %H:%M") if next_slot else "-",
            ]
        )
    print_table(["ID", "Name", "Status", "Next booking"], rows)
    return 0


def cmd_serve(registry: MachineRegistry, args) -> int:
    from laundry_os.api import run

    run(registry, host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="laundry-os")
    p.add_argument("--config", default=None, help="Path to machines.yaml")
    p.add_argument("--log-level", default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ERROR")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("machines", help="List machines and their status")

    s = sub.add_parser("serve", help="Run the REST API")
    s.add_argument("--host", default=config.HOST)
    s.add_argument("--port", type=int, default=config.PORT)

    return p


COMMANDS = {
    "machines": cmd_machines,
    "serve": cmd_serve,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, json_format=config.LOG_JSON)

    # The API normalizes request timestamps to UTC, so its schedules run on a UTC clock
    clock = SystemClock(UTC) if args.cmd == "serve" else SystemClock()
    try:
        registry = MachineRegistry.from_config(args.config, clock=clock)
    except RegistryError as e:
        logger.error(f"Could not load machine roster: {e}")
        return 1

    return COMMANDS[args.cmd](registry, args)


if __name__ == "__main__":
    raise SystemExit(main())
