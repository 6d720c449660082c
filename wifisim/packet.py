"""A data packet with its size and creation time."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Packet"]


@dataclass
class Packet:
    """A packet of ``size`` bytes created at ``creation_time`` milliseconds."""

    size: int = 1024
    creation_time: int = 0