# Standard library imports
from functools import lru_cache

# Local application imports
from nagrik.services.geocoding import Geocoder, NominatimGeocoder
from nagrik.services.storage import PhotoStorage, S3PhotoStorage


@lru_cache
def get_geocoder() -> Geocoder:
    """Geocoding capability; tests swap it through ``app.dependency_overrides``."""
    return NominatimGeocoder()


@lru_cache
def get_photo_storage() -> PhotoStorage:
    return S3PhotoStorage()
