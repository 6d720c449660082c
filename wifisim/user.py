"""A station on the network and the statistics it collects."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

__all__ = ["User"]

_PHY_RATE_BPS = 20e6 * 8 * (5.0 / 6.0)


@dataclass
class User:
    """A station that sends packets and records latency and throughput."""

    id: int
    packet_size: int = 1024
    next_attempt_time: int = 0
    attempt_count: int = 0
    total_attempts: int = 0
    successful_transmissions: int = 0
    total_tx_time: float = 0.0
    total_bytes: float = 0.0
    latency: int = 0
    throughput: float = 0.0
    latencies: list[float] = field(default_factory=list)
    transmission_times: list[float] = field(default_factory=list)
    packet_generation_times: deque[float] = field(default_factory=deque)

    @property
    def average_latency(self) -> float:
        """Mean of recorded latencies in ms, or 0 when none are recorded."""
        if not self.latencies:
            return 0.0
        return sum(self.latencies) / len(self.latencies)

    @property
    def throughput_mbps(self) -> float:
        """Current throughput in megabits per second."""
        return self.throughput / 1e6

    @property
    def has_data_to_send(self) -> bool:
        """Whether the user has traffic queued; users are always saturated."""
        return True

    @property
    def pending_data_size(self) -> int:
        """Size in bytes of the data waiting to be sent."""
        return self.packet_size

    @property
    def oldest_packet_time(self) -> float:
        """Generation time of the oldest queued packet, or 0 when none."""
        if not self.packet_generation_times:
            return 0
        return self.packet_generation_times[0]

    def set_latency(self, latency: int) -> None:
        """Set the current latency and overwrite the most recent sample."""
        self.latency = latency
        if self.latencies:
            self.latencies[-1] = latency
        else:
            self.latencies.append(latency)

    def increment_attempt_count(self) -> None:
        """Count one more attempt, both in the current run and overall."""
        self.attempt_count += 1
        self.total_attempts += 1

    def reset_attempt_count(self) -> None:
        """Clear the consecutive attempt counter."""
        self.attempt_count = 0

    def _update_throughput(self) -> None:
        self.throughput = (self.total_bytes * 8) / self.total_tx_time

    def transmit_data(self, packet_size_override: int = 0) -> None:
        """Send one packet at the fixed PHY rate and update statistics."""
        effective_size = packet_size_override or self.packet_size
        seconds = effective_size * 8.0 / _PHY_RATE_BPS
        transmission_time = max(1, int(seconds * 1000))
        self.set_latency(transmission_time)
        self.total_bytes += effective_size
        self.total_tx_time += transmission_time / 1000.0
        self._update_throughput()

    def record_transmission(self, start_time: float, duration_ms: float, latency: float) -> None:
        """Record a successful transmission of one packet."""
        self.latencies.append(latency)
        self.total_bytes += self.packet_size
        self.total_tx_time += duration_ms / 1000.0
        self._update_throughput()
        self.successful_transmissions += 1

    def record_csi_transmission(self, current_time: float, duration: float) -> None:
        """Record the start time of a channel-state feedback transmission."""
        self.transmission_times.append(current_time)

    def record_parallel_transmission(self, start_time: float, duration: float, latency: float) -> None:
        """Record a transmission made in a shared parallel window."""
        self.transmission_times.append(start_time)
        self.latencies.append(latency)
        self.total_bytes += self.packet_size
        self.total_tx_time += duration / 1000.0
        self._update_throughput()

    def generate_packet(self, current_time: float) -> None:
        """Queue a new packet generated at ``current_time``."""
        self.packet_generation_times.append(current_time)

    def pop_oldest_packet(self) -> None:
        """Drop the oldest queued packet, if any."""
        if self.packet_generation_times:
            self.packet_generation_times.popleft()

    def record_successful_transmission(self) -> None:
        """Count one successful transmission."""
        self.successful_transmissions += 1

    def calculate_throughput(self, total_sim_time_sec: float) -> None:
        """Set throughput from successful transmissions over the whole run."""
        self.throughput = (
            self.successful_transmissions * self.packet_size * 8
        ) / total_sim_time_sec

    def record_latency(self, latency: float) -> None:
        """Append a latency sample."""
        self.latencies.append(latency)

    def record_ofdma_stats(self, start_time: float, duration_ms: float, latency: float) -> None:
        """Record a transmission made on an OFDMA resource unit."""
        self.transmission_times.append(start_time)
        self.latencies.append(latency)
        self.total_bytes += self.packet_size
        self.total_tx_time += duration_ms / 1000.0
        self._update_throughput()
        self.successful_transmissions += 1