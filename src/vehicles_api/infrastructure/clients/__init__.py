"""Clients for upstream services."""

from .maps_client import MapsClient
from .pricing_client import PricingClient

__all__ = ["MapsClient", "PricingClient"]
