"""An access point that owns the users and the channel a simulation runs on."""

from __future__ import annotations

import sys

from wifisim.channel import Channel
from wifisim.simulation import WiFiSimulation
from wifisim.user import User

__all__ = ["AccessPoint"]

DEFAULT_PACKET_SIZE = 1024


class AccessPoint:
    """Creates ``num_users`` users on one channel and runs a simulation on them."""

    def __init__(
        self,
        num_users: int,
        simulation: WiFiSimulation,
        packet_size: int = DEFAULT_PACKET_SIZE,
    ) -> None:
        if num_users <= 0:
            raise ValueError("Number of users must be positive.")
        self.simulation = simulation
        self.users: list[User] = [
            User(user_id, packet_size) for user_id in range(1, num_users + 1)
        ]
        self.channel = Channel()

    def run_simulation(self) -> None:
        """Run the simulation; a failure is reported on stderr, not raised."""
        try:
            self.simulation.run(self.users, self.channel)
        except Exception as exc:  # noqa: BLE001 - reported, as the simulation may fail any way
            print(f"Simulation error: {exc}", file=sys.stderr)