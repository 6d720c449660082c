"""WiFi 5 simulation: channel sounding followed by MU-MIMO transmission."""

from __future__ import annotations

import math
from typing import TextIO

from wifisim.channel import Channel
from wifisim.simulation import WiFiSimulation
from wifisim.user import User
from wifisim.utils import initialize_random_seed

__all__ = ["WiFi5Simulation"]


class WiFi5Simulation(WiFiSimulation):
    """Cycles of AP broadcast, sequential CSI feedback and a parallel window."""

    CSI_TIME_PER_USER = 0.012
    CSI_PACKET_SIZE = 200
    PACKET_SIZE = 1024
    PARALLEL_WINDOW_MS = 15.0
    BROADCAST_PACKET_SIZE = 100
    BANDWIDTH = 20e6
    MOD_EFFICIENCY = 8.0
    CODE_RATE = 5.0 / 6.0
    DEFAULT_DURATION_MS = 60_000

    def __init__(
        self, duration_ms: int = DEFAULT_DURATION_MS, out: TextIO | None = None
    ) -> None:
        super().__init__(out)
        self.sim_duration = int(duration_ms)

    def calculate_transmission_time(self, packet_size_bytes: float) -> float:
        """Airtime in milliseconds of a packet of the given size."""
        bits = packet_size_bytes * 8.0
        rate = self.BANDWIDTH * self.MOD_EFFICIENCY * self.CODE_RATE
        return bits / rate * 1000.0

    def run(self, users: list[User], channel: Channel) -> None:
        initialize_random_seed()
        current_time = 0.0
        emit = self._emit
        emit("=== WiFi 5 MU-MIMO Simulation ===")

        while current_time < self.sim_duration:
            emit()
            emit(f"[Cycle Start @ T+{current_time:.3f}ms]")
            emit(f"1. AP Broadcast Phase ({self.BROADCAST_PACKET_SIZE}B)")
            for user in users:
                user.generate_packet(current_time)
            current_time = self.perform_channel_sounding(users, channel, current_time)
            emit(f"3. Parallel Transmission Phase ({self.PARALLEL_WINDOW_MS:g}ms window)")
            current_time = self.parallel_transmission(users, current_time)
            emit(f"[Cycle End @ T+{current_time:.3f}ms]")

        total_sim_time_sec = current_time / 1000.0
        for user in users:
            user.calculate_throughput(total_sim_time_sec)
        self.print_final_metrics(users)

    def perform_channel_sounding(
        self, users: list[User], channel: Channel, current_time: float
    ) -> float:
        """Broadcast, collect CSI from each user in turn; return the new time."""
        emit = self._emit
        channel.occupy()
        broadcast_time = self.calculate_transmission_time(self.BROADCAST_PACKET_SIZE)
        emit(f"   - AP broadcasting for {broadcast_time:.6f}ms")
        current_time += broadcast_time
        channel.release()

        emit("2. Sequential CSI Feedback Phase:")
        for user in users:
            channel.occupy()
            csi_time = self.calculate_transmission_time(self.CSI_PACKET_SIZE)
            emit(f"   - User {user.id} ({self.CSI_PACKET_SIZE}B): {csi_time:.6f}ms")
            user.record_csi_transmission(current_time, csi_time)
            current_time += csi_time
            channel.release()
        emit(f"   Total CSI Time: {current_time:.6f}ms")
        return current_time

    def parallel_transmission(self, users: list[User], current_time: float) -> float:
        """Let every user send within one shared window; return the window's end."""
        window_end = current_time + self.PARALLEL_WINDOW_MS
        for index, user in enumerate(users):
            if not user.has_data_to_send:
                continue
            needed_time = self.calculate_transmission_time(user.pending_data_size)
            if needed_time > self.PARALLEL_WINDOW_MS:
                continue
            user.record_successful_transmission()
            latency = (current_time - user.oldest_packet_time) + index * self.CSI_TIME_PER_USER
            user.record_latency(latency)
            user.record_transmission(current_time, needed_time, int(latency))
        return window_end

    def print_final_metrics(self, users: list[User]) -> None:
        """Print a per-user table and network totals."""
        emit = self._emit
        total_throughput = 0.0
        total_latency = 0.0
        total_frames = 0

        emit()
        emit("=== FINAL METRICS ===")
        emit("User ID | Success TX | Avg Latency | Throughput")
        emit("--------|------------|-------------|-----------")
        for user in users:
            emit(
                f"{user.id:>7} | {user.successful_transmissions:>10} | "
                f"{user.average_latency:>11.2f}ms | {user.throughput_mbps:>9.2f} Mbps"
            )
            total_throughput += user.throughput_mbps
            total_latency += user.average_latency
            total_frames += user.successful_transmissions

        mean_latency = total_latency / len(users) if users else math.nan
        emit()
        emit("NETWORK TOTALS:")
        emit(f"- Aggregate Throughput: {total_throughput:.2f} Mbps")
        emit(f"- Mean Latency: {mean_latency:.2f}ms")
        emit(f"- Total Frames Delivered: {total_frames}")