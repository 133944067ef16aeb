"""HTTP client for the pricing service."""

from decimal import Decimal, InvalidOperation

import httpx

from ..logging import get_logger, log_upstream_failure
from ...application.exceptions import UpstreamServiceError
from ...application.ports.upstream import PriceProvider

logger = get_logger(__name__)

SERVICE_NAME = "pricing"


def format_price(currency: str, amount: Decimal) -> str:
    """Format a price quote, e.g. ``USD 12500.00``."""
    return f"{currency} {amount.quantize(Decimal('0.01'))}"


class PricingClient(PriceProvider):
    """Fetch price quotes via ``GET /services/price?vehicleId=``."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient):
        self._base_url = base_url.rstrip("/")
        self._http = http_client

    async def get_price(self, car_id: int) -> str:
        """Get the formatted price quote for a car."""
        url = f"{self._base_url}/services/price"
        try:
            response = await self._http.get(url, params={"vehicleId": car_id})
            response.raise_for_status()
            data = response.json()
            return format_price(str(data["currency"]), Decimal(str(data["price"])))
        except (httpx.HTTPError, ValueError, KeyError, TypeError, InvalidOperation) as exc:
            reason = str(exc) or type(exc).__name__
            log_upstream_failure(logger, SERVICE_NAME, url, reason)
            raise UpstreamServiceError(SERVICE_NAME, reason) from exc
