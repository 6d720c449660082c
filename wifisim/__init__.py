"""Simulations of channel access in WiFi 4, WiFi 5 and WiFi 6 networks."""

__version__ = "0.1.0"