"""HTTP client for the location lookup (maps) service."""

import httpx

from ..logging import get_logger, log_upstream_failure
from ...application.exceptions import UpstreamServiceError
from ...application.ports.upstream import LocationProvider
from ...domain.value_objects.location import Address

logger = get_logger(__name__)

SERVICE_NAME = "maps"
ADDRESS_FIELDS = ("address", "city", "state", "zip")


class MapsClient(LocationProvider):
    """Resolve coordinates to a street address via ``GET /maps?lat=&lon=``."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient):
        self._base_url = base_url.rstrip("/")
        self._http = http_client

    async def get_address(self, lat: float, lon: float) -> Address:
        """Resolve coordinates into a street address."""
        url = f"{self._base_url}/maps"
        try:
            response = await self._http.get(url, params={"lat": lat, "lon": lon})
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            log_upstream_failure(logger, SERVICE_NAME, url, str(exc))
            raise UpstreamServiceError(SERVICE_NAME, str(exc)) from exc

        if not isinstance(data, dict):
            log_upstream_failure(logger, SERVICE_NAME, url, "unexpected response body")
            raise UpstreamServiceError(SERVICE_NAME, "unexpected response body")

        fields = {}
        for name in ADDRESS_FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                reason = f"field {name!r} is not a string"
                log_upstream_failure(logger, SERVICE_NAME, url, reason)
                raise UpstreamServiceError(SERVICE_NAME, reason)
            fields[name] = value

        return Address(**fields)
