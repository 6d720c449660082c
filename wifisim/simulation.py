"""Common interface for the WiFi generation simulations."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from wifisim.channel import Channel
from wifisim.user import User

__all__ = ["WiFiSimulation"]


class WiFiSimulation(ABC):
    """A simulation that drives a set of users over one shared channel."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    @property
    def output(self) -> TextIO:
        """Stream that progress and results are written to."""
        return self._out if self._out is not None else sys.stdout

    def _emit(self, text: str = "") -> None:
        print(text, file=self.output)

    @abstractmethod
    def run(self, users: list[User], channel: Channel) -> None:
        """Run the simulation, updating the users' statistics in place."""