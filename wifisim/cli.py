"""Interactive command that runs the WiFi 4, 5 or 6 simulation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from wifisim.access_point import AccessPoint
from wifisim.simulation import WiFiSimulation
from wifisim.wifi4 import WiFi4Simulation
from wifisim.wifi5 import WiFi5Simulation
from wifisim.wifi6 import WiFi6Simulation

__all__ = ["main"]

_SIMULATIONS: dict[int, type[WiFiSimulation]] = {
    1: WiFi4Simulation,
    2: WiFi5Simulation,
    3: WiFi6Simulation,
}
_EXIT_CHOICE = 4

_MENU = (
    "\nSelect the WiFi simulation to run:\n"
    "1. WiFi 4 (CSMA/CA)\n"
    "2. WiFi 5 (MU-MIMO)\n"
    "3. WiFi 6 (OFDMA)\n"
    "4. Exit\n"
    "Enter your choice (1-4): "
)


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _to_int(token: str | None) -> int:
    """Parse a token as an integer; unreadable input counts as 0."""
    if token is None:
        return 0
    try:
        return int(token)
    except ValueError:
        return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wifisim",
        description="Simulate WiFi 4, 5 and 6 channel access for a number of users.",
    )
    parser.add_argument(
        "-u",
        "--users",
        type=int,
        help="number of users (asked for interactively when omitted)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Ask for a user count, then run chosen simulations until told to exit."""
    args = _build_parser().parse_args(argv)
    tokens = _tokens()
    try:
        if args.users is not None:
            number_of_users = args.users
        else:
            _prompt("Enter the number of users: ")
            number_of_users = _to_int(next(tokens, None))

        if number_of_users <= 0:
            print(
                "Number of users must be greater than 0. Exiting program.",
                file=sys.stderr,
            )
            return 1

        while True:
            _prompt(_MENU)
            token = next(tokens, None)
            if token is None:
                print()
                break
            choice = _to_int(token)

            if choice == _EXIT_CHOICE:
                print("Exiting program. Goodbye!")
                break

            simulation_class = _SIMULATIONS.get(choice)
            if simulation_class is None:
                print("Invalid choice! Please select a valid option.", file=sys.stderr)
                continue

            access_point = AccessPoint(number_of_users, simulation_class())
            access_point.run_simulation()
    except Exception as exc:  # noqa: BLE001 - top-level report
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())