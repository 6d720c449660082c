"""A shared radio channel that can be occupied and released."""

from __future__ import annotations

import time

__all__ = ["Channel"]


class Channel:
    """A single shared channel with a fixed bandwidth in MHz."""

    def __init__(self) -> None:
        self.total_bandwidth = 20
        self._busy = False

    def is_free(self) -> bool:
        """Return True when no one is transmitting on the channel."""
        return not self._busy

    def occupy(self) -> None:
        """Mark the channel as busy."""
        self._busy = True

    def release(self) -> None:
        """Mark the channel as free."""
        self._busy = False

    def simulate_transmission(self, transmission_duration: float) -> None:
        """Hold the channel busy for ``transmission_duration`` milliseconds."""
        self.occupy()
        try:
            time.sleep(transmission_duration / 1000.0)
        finally:
            self.release()