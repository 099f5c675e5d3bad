# Third-party imports
import httpx

# Local application imports
from nagrik.services.geocoding import UNKNOWN_LOCATION, NominatimGeocoder, display_address, format_reverse_address


def make_geocoder(handler) -> NominatimGeocoder:
    return NominatimGeocoder(
        base_url="https://nominatim.test",
        user_agent="Nagrik-Seva-Tests/1.0",
        timeout=1.0,
        default_city="Delhi",
        transport=httpx.MockTransport(handler),
    )


class TestSearchQuery:
    def test_appends_city(self):
        assert make_geocoder(None).build_search_query("Lajpat Nagar") == "Lajpat Nagar, Delhi, India"

    def test_leaves_queries_that_mention_the_city(self):
        assert make_geocoder(None).build_search_query("Karol Bagh, new DELHI") == "Karol Bagh, new DELHI"


class TestGeocode:
    async def test_success(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["q"] = request.url.params["q"]
            seen["user_agent"] = request.headers["user-agent"]
            return httpx.Response(200, json=[{"lat": "28.5677", "lon": "77.2433", "display_name": "Lajpat Nagar"}])

        result = await make_geocoder(handler).geocode("Lajpat Nagar")

        assert result.success
        assert (result.lat, result.lng) == (28.5677, 77.2433)
        assert result.address == "Lajpat Nagar"
        assert seen == {"path": "/search", "q": "Lajpat Nagar, Delhi, India", "user_agent": "Nagrik-Seva-Tests/1.0"}

    async def test_empty_results_fail_softly(self):
        result = await make_geocoder(lambda request: httpx.Response(200, json=[])).geocode("Nowhere")
        assert not result.success
        assert (result.lat, result.lng, result.address) == (0.0, 0.0, "Nowhere")

    async def test_error_object_body_fails_softly(self):
        handler = lambda request: httpx.Response(200, json={"error": "Unable to geocode"})  # noqa: E731
        result = await make_geocoder(handler).geocode("Sector 4 Park")
        assert not result.success
        assert result.address == "Sector 4 Park"

    async def test_non_object_result_fails_softly(self):
        handler = lambda request: httpx.Response(200, json=["28.5, 77.2"])  # noqa: E731
        assert not (await make_geocoder(handler).geocode("Saket")).success

    async def test_http_error_fails_softly(self):
        result = await make_geocoder(lambda request: httpx.Response(503)).geocode("Saket")
        assert not result.success

    async def test_transport_error_fails_softly(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await make_geocoder(handler).geocode("Saket")
        assert not result.success

    async def test_out_of_range_coordinates_fail(self):
        handler = lambda request: httpx.Response(200, json=[{"lat": "123.0", "lon": "77.0"}])  # noqa: E731
        assert not (await make_geocoder(handler).geocode("Saket")).success


class TestReverseGeocode:
    async def test_joins_address_parts_with_fallbacks(self):
        payload = {
            "address": {
                "pedestrian": "Janpath",
                "neighbourhood": "Connaught Place",
                "town": "New Delhi",
                "state": "Delhi",
                "postcode": "110001",
                "country": "India",
            }
        }
        address = await make_geocoder(lambda request: httpx.Response(200, json=payload)).reverse_geocode(28.63, 77.21)
        assert address == "Janpath, Connaught Place, New Delhi, Delhi, 110001, India"

    async def test_failure_gives_unknown_location(self):
        address = await make_geocoder(lambda request: httpx.Response(500)).reverse_geocode(28.63, 77.21)
        assert address == UNKNOWN_LOCATION

    def test_empty_address_gives_unknown_location(self):
        assert format_reverse_address({"address": {}}) == UNKNOWN_LOCATION


class TestDisplayAddress:
    def test_prefers_stored_address(self):
        assert display_address(28.6, 77.2, "Janpath") == "Janpath"

    def test_falls_back_to_coordinates(self):
        assert display_address(28.613912, 77.209023, None) == "28.6139, 77.2090"

    def test_nothing_known(self):
        assert display_address(None, None, None) is None
