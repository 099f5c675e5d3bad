# Local application imports
from nagrik.services.geocoding.nominatim import (
    UNKNOWN_LOCATION,
    GeocodedLocation,
    Geocoder,
    NominatimGeocoder,
    display_address,
    format_reverse_address,
)

__all__ = [
    "UNKNOWN_LOCATION",
    "GeocodedLocation",
    "Geocoder",
    "NominatimGeocoder",
    "display_address",
    "format_reverse_address",
]
