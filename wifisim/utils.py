"""Random-number and throughput helpers shared by the simulations."""

from __future__ import annotations

import random
import time

__all__ = [
    "get_random_number",
    "initialize_random_seed",
    "calculate_throughput",
    "get_random_backoff_time",
]


def get_random_number(min_value: int, max_value: int) -> int:
    """Return a random integer in the inclusive range [min_value, max_value]."""
    if max_value < min_value:
        raise ValueError(
            f"empty range: min_value {min_value} is greater than max_value {max_value}"
        )
    return random.randint(min_value, max_value)


def initialize_random_seed() -> None:
    """Seed the shared random generator with the current time in whole seconds."""
    random.seed(int(time.time()))


def calculate_throughput(total_bytes: int, time_in_seconds: float) -> float:
    """Return throughput in bits per second for a byte count over a duration."""
    return (total_bytes * 8) / time_in_seconds


def get_random_backoff_time(min_value: int, max_value: int) -> int:
    """Return a random backoff time in milliseconds within [min_value, max_value]."""
    return get_random_number(min_value, max_value)