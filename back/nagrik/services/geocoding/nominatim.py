# Standard library imports
from dataclasses import dataclass
from typing import Any, Protocol

# Third-party imports
import httpx

# Local application imports
from nagrik.core.monitoring.logging import get_contextual_logger
from nagrik.settings import settings
from nagrik.utils.geo_utils import format_coordinates, is_valid_coordinates

logger = get_contextual_logger(__name__)

UNKNOWN_LOCATION = "Unknown Location"

# Each address part falls back through these Nominatim keys in order
ADDRESS_PARTS: tuple[tuple[str, ...], ...] = (
    ("road", "pedestrian"),
    ("suburb", "neighbourhood"),
    ("city", "town", "village"),
    ("state", "state_district"),
    ("postcode",),
    ("country",),
)


@dataclass(frozen=True)
class GeocodedLocation:
    lat: float
    lng: float
    address: str
    success: bool

    @classmethod
    def failed(cls, area_name: str) -> "GeocodedLocation":
        return cls(lat=0.0, lng=0.0, address=area_name, success=False)


class Geocoder(Protocol):
    async def geocode(self, area_name: str) -> GeocodedLocation: ...

    async def reverse_geocode(self, lat: float, lng: float) -> str: ...


def display_address(lat: float | None, lng: float | None, address: str | None) -> str | None:
    """Stored address if there is one, else the raw coordinates, else None."""
    if address:
        return address
    if lat is not None and lng is not None:
        return format_coordinates(lat, lng)
    return None


def format_reverse_address(payload: dict[str, Any]) -> str:
    address = payload.get("address") or {}
    parts = []
    for keys in ADDRESS_PARTS:
        value = next((address[key] for key in keys if address.get(key)), None)
        if value:
            parts.append(value)
    return ", ".join(parts) if parts else UNKNOWN_LOCATION


class NominatimGeocoder:
    """
    Forward and reverse geocoding against OpenStreetMap Nominatim.

    Both calls are best-effort: every failure is logged and turned into a
    fallback value, never raised, so the reporting flow can carry on without
    coordinates.
    """

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        default_city: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.NOMINATIM_BASE_URL).rstrip("/")
        self.user_agent = user_agent or settings.NOMINATIM_USER_AGENT
        self.timeout = timeout if timeout is not None else settings.GEOCODING_TIMEOUT
        self.default_city = default_city if default_city is not None else settings.GEOCODING_DEFAULT_CITY
        self._transport = transport

    def build_search_query(self, area_name: str) -> str:
        """Pin the search to the default city unless the name already mentions it."""
        if not self.default_city or self.default_city.lower() in area_name.lower():
            return area_name
        return f"{area_name}, {self.default_city}, India"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout,
            transport=self._transport,
        )

    async def geocode(self, area_name: str) -> GeocodedLocation:
        query = self.build_search_query(area_name)
        logger.debug(f"Geocoding area: {query}")

        try:
            async with self._client() as client:
                response = await client.get("/search", params={"format": "json", "q": query, "limit": 1})
                response.raise_for_status()
                results = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Geocoding failed for area {area_name!r}: {e}")
            return GeocodedLocation.failed(area_name)

        if not isinstance(results, list) or not results:
            logger.warning(f"No geocoding results for area {area_name!r}: {results!r}")
            return GeocodedLocation.failed(area_name)

        first = results[0]
        if not isinstance(first, dict):
            logger.warning(f"Malformed geocoding result for area {area_name!r}: {first!r}")
            return GeocodedLocation.failed(area_name)

        try:
            lat = float(first["lat"])
            lng = float(first["lon"])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Malformed geocoding result for area {area_name!r}: {first}")
            return GeocodedLocation.failed(area_name)

        if not is_valid_coordinates(lat, lng):
            logger.warning(f"Invalid coordinates returned for area {area_name!r}: {lat}, {lng}")
            return GeocodedLocation.failed(area_name)

        return GeocodedLocation(lat=lat, lng=lng, address=first.get("display_name") or area_name, success=True)

    async def reverse_geocode(self, lat: float, lng: float) -> str:
        params = {
            "format": "json",
            "lat": lat,
            "lon": lng,
            "zoom": 18,
            "addressdetails": 1,
            "accept-language": "en",
        }
        try:
            async with self._client() as client:
                response = await client.get("/reverse", params=params)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Reverse geocoding failed for {lat}, {lng}: {e}")
            return UNKNOWN_LOCATION

        if not isinstance(payload, dict):
            return UNKNOWN_LOCATION
        return format_reverse_address(payload)
