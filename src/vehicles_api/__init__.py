"""Vehicles API: REST service for car inventory records."""

__version__ = "0.1.0"
