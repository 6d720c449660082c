"""WiFi 6 simulation: OFDMA resource units shared out round robin."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TextIO

from wifisim.channel import Channel
from wifisim.simulation import WiFiSimulation
from wifisim.user import User

__all__ = ["ResourceUnit", "WiFi6Simulation"]


@dataclass(frozen=True)
class ResourceUnit:
    """A slice of the channel, in MHz, granted to one user."""

    user_id: int
    bandwidth: float


class WiFi6Simulation(WiFiSimulation):
    """Every round the 20 MHz channel is split into RUs given out in turn."""

    RU_SIZES = (2, 4, 10)
    OFDMA_WINDOW_MS = 5.0
    TOTAL_BANDWIDTH = 20.0
    MOD_EFFICIENCY = 8.0
    CODE_RATE = 5.0 / 6.0
    DEFAULT_DURATION_MS = 100

    def __init__(
        self, duration_ms: int = DEFAULT_DURATION_MS, out: TextIO | None = None
    ) -> None:
        super().__init__(out)
        self.sim_duration = int(duration_ms)
        self._user_index = 0
        self._rng = random.Random()

    def allocate_rus_round_robin(self, users: list[User]) -> list[ResourceUnit]:
        """Split the channel into randomly chosen RU sizes, one user after another."""
        rus: list[ResourceUnit] = []
        remaining = self.TOTAL_BANDWIDTH
        sizes = list(self.RU_SIZES)
        self._rng.shuffle(sizes)

        while remaining > 0 and users:
            for size in sizes:
                if size <= remaining:
                    user = users[self._user_index % len(users)]
                    rus.append(ResourceUnit(user.id, float(size)))
                    remaining -= size
                    self._user_index += 1
                    break
            else:
                break
        return rus

    def run(self, users: list[User], channel: Channel) -> None:
        current_time = 0.0
        emit = self._emit
        emit("=== WiFi 6 OFDMA Simulation ===")
        emit("Config: 256-QAM, 20MHz total, RU Sizes = {10, 4, 2} MHz, 5ms rounds")
        emit()

        by_id: dict[int, User] = {}
        for user in users:
            by_id.setdefault(user.id, user)

        while current_time < self.sim_duration:
            for user in users:
                user.generate_packet(current_time)

            rus = self.allocate_rus_round_robin(users)
            allocated = "".join(f"{ru.bandwidth:g}MHz(U{ru.user_id}) " for ru in rus)
            emit(f"[T+{current_time:g}ms] Allocated: {allocated}")

            for ru in rus:
                user = by_id.get(ru.user_id)
                if user is None:
                    continue
                latency = current_time - user.oldest_packet_time
                user.record_ofdma_stats(current_time, self.OFDMA_WINDOW_MS, latency)
                user.pop_oldest_packet()
                user.throughput = (user.packet_size * 8.0) / (self.OFDMA_WINDOW_MS / 1000.0)

            current_time += self.OFDMA_WINDOW_MS

        sim_time_sec = current_time / 1000.0
        for user in users:
            user.calculate_throughput(sim_time_sec)
        self.print_final_metrics(users)

    def print_final_metrics(self, users: list[User]) -> None:
        """Print a per-user table and network totals."""
        emit = self._emit
        emit()
        emit("=== FINAL METRICS ===")
        emit("User ID | Success TX | Avg Latency | Throughput")
        emit("--------|------------|-------------|-----------")

        total_throughput = 0.0
        total_latency = 0.0
        total_tx = 0
        for user in users:
            avg_latency = user.average_latency
            mbps = user.throughput_mbps
            tx_count = user.successful_transmissions
            emit(
                f"{user.id:>7} | {tx_count:>10} | {avg_latency:>11.2f} ms | "
                f"{mbps:>9.2f} Mbps"
            )
            total_throughput += mbps
            total_latency += avg_latency
            total_tx += tx_count

        mean_latency = total_latency / len(users) if users else 0.0
        emit()
        emit("NETWORK TOTALS:")
        emit(f"- Aggregate Throughput: {total_throughput:.2f} Mbps")
        emit(f"- Mean Latency: {mean_latency:.2f} ms")
        emit(f"- Total Frames Delivered: {total_tx}")