"""WiFi 4 simulation: contention with CSMA/CA and exponential backoff."""

from __future__ import annotations

import csv
import heapq
import math
import random
import sys
from typing import TextIO

from wifisim.channel import Channel
from wifisim.simulation import WiFiSimulation
from wifisim.user import User
from wifisim.utils import get_random_backoff_time, initialize_random_seed

__all__ = ["WiFi4Simulation"]


def _percent(numerator: float, denominator: float) -> float:
    if denominator:
        return 100.0 * numerator / denominator
    if numerator:
        return math.copysign(math.inf, numerator)
    return math.nan


class WiFi4Simulation(WiFiSimulation):
    """Users sense the channel and back off exponentially when it is busy."""

    PACKET_SIZE = 1024
    BANDWIDTH = 20_000_000.0
    MOD_EFFICIENCY = 8.0
    CODE_RATE = 5.0 / 6.0
    MAX_BACKOFF = 20
    SIM_DURATION = 10_000
    RESULTS_PATH = "wifi4_results.csv"

    def __init__(
        self,
        sim_duration: int = SIM_DURATION,
        results_path: str = RESULTS_PATH,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(out)
        self.sim_duration = sim_duration
        self.results_path = results_path

    def calculate_transmission_time(self) -> int:
        """Airtime of one packet in whole milliseconds, rounded half up."""
        bits = self.PACKET_SIZE * 8
        rate = self.BANDWIDTH * self.MOD_EFFICIENCY * self.CODE_RATE
        ms = bits / rate * 1000.0
        return int(math.floor(ms + 0.5))

    def exponential_backoff(self, attempt_count: int) -> int:
        """Random backoff in ms from 1 to 2**min(attempt_count, 5)."""
        window = 1 << min(attempt_count, 5)
        return random.randrange(window) + 1

    def run(self, users: list[User], channel: Channel) -> None:
        initialize_random_seed()
        events: list[tuple[float, int]] = []
        current_time = 0.0
        emit = self._emit

        emit("Simulating WiFi 4 Communication (CSMA/CA)...")
        emit(f"Packet Size: {self.PACKET_SIZE} bytes")
        emit(f"Transmission Time: {self.calculate_transmission_time()}ms")

        users[:] = [User(uid, self.PACKET_SIZE) for uid in range(1, len(users) + 1)]
        for user in users:
            user.next_attempt_time = get_random_backoff_time(1, self.MAX_BACKOFF)

        while current_time < self.sim_duration:
            if not events:
                current_time += 1
            else:
                current_time = float(int(events[0][0]))
                while events and events[0][0] <= current_time:
                    _, user_id = heapq.heappop(events)
                    channel.release()
                    emit(f"User {user_id} completed transmission at {current_time:g}ms")

            order = list(users)
            random.shuffle(order)
            for user in order:
                if user.next_attempt_time > current_time:
                    continue
                emit(f"User {user.id} is sniffing the channel...")
                if channel.is_free():
                    emit(f"User {user.id} found the channel free!")
                    tx_time = max(1, self.calculate_transmission_time())
                    channel.occupy()
                    heapq.heappush(events, (current_time + tx_time, user.id))
                    latency = int(current_time - user.next_attempt_time)
                    user.record_transmission(current_time, tx_time, latency)
                    user.reset_attempt_count()
                    emit(
                        f"User {user.id} starts transmission at {current_time:g}ms"
                        f" for {tx_time}ms"
                    )
                else:
                    emit(f"User {user.id} found the channel busy!")
                    backoff = self.exponential_backoff(user.attempt_count)
                    user.increment_attempt_count()
                    user.next_attempt_time = int(current_time + backoff)
                    emit(f"User {user.id} backs off for {backoff}ms at {current_time:g}ms")

            if events:
                current_time = min(events[0][0], current_time + 1)
            else:
                current_time += 1

        self.save_results(users, self.results_path)
        self.print_final_metrics(users)

    def save_results(self, users: list[User], path: str) -> None:
        """Write per-user latency, throughput and attempts as CSV."""
        try:
            with open(path, "w", newline="") as handle:
                writer = csv.writer(handle, lineterminator="\n")
                writer.writerow(
                    ["UserID", "AvgLatency(ms)", "Throughput(Mbps)", "Attempts"]
                )
                for user in users:
                    writer.writerow(
                        [
                            user.id,
                            f"{user.average_latency:g}",
                            f"{user.throughput_mbps:g}",
                            user.total_attempts,
                        ]
                    )
        except OSError:
            print(f"Error writing to {path}", file=sys.stderr)
            return
        self._emit(f"Results saved to {path}")

    def print_final_metrics(self, users: list[User]) -> None:
        """Print per-user results and a network summary."""
        emit = self._emit
        total_throughput = 0.0
        total_latency = 0.0
        total_attempts = 0
        successful_tx = 0

        emit()
        emit("=== Simulation Results ===")
        for user in users:
            success_rate = (
                100.0 * user.successful_transmissions / user.total_attempts
                if user.total_attempts > 0
                else 0.0
            )
            emit(f"User {user.id}:")
            emit(f"  Latency: {user.average_latency:g}ms")
            emit(f"  Throughput: {user.throughput_mbps:g} Mbps")
            emit(f"  Success Rate: {success_rate:g}%")
            total_throughput += user.throughput_mbps
            total_latency += user.average_latency
            total_attempts += user.total_attempts
            successful_tx += user.successful_transmissions

        avg_latency = total_latency / len(users) if users else math.nan
        emit()
        emit("Network Summary:")
        emit(f"  Avg Latency: {avg_latency:g}ms")
        emit(f"  Total Throughput: {total_throughput:g} Mbps")
        emit(f"  Success Rate: {_percent(successful_tx, total_attempts):g}%")
        emit(
            "  Collision Rate: "
            f"{_percent(total_attempts - successful_tx, total_attempts):g}%"
        )