# Standard library imports
from datetime import UTC, datetime
from uuid import UUID

# Third-party imports
import pytest

# Local application imports
from nagrik.config.helplines import DELHI_HELPLINES, get_helpline_info
from nagrik.services.storage import build_photo_key
from nagrik.utils.geo_utils import is_valid_coordinates
from nagrik.utils.validators.file_validator import normalize_file_name
from nagrik.utils.validators.phone_validator import validate_phone_number


class TestHelplines:
    @pytest.mark.parametrize(
        ("category", "key"),
        [
            ("Waste", "waste"),
            ("Garbage", "waste"),
            ("Electricity", "energy"),
            ("Street Lighting", "street_lighting"),
            ("Traffic", "transport"),
            ("Medical", "health"),
        ],
    )
    def test_category_mapping(self, category, key):
        assert get_helpline_info(category) == DELHI_HELPLINES[key]

    def test_unknown_category_gets_default(self):
        assert get_helpline_info("Noise") == DELHI_HELPLINES["default"]

    def test_lookup_is_exact_match(self):
        assert get_helpline_info("water") == DELHI_HELPLINES["default"]


class TestPhoneValidator:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("9876543210", "+919876543210"),
            ("98765 43210", "+919876543210"),
            ("919876543210", "+919876543210"),
            ("+91 (98765)-43210", "+919876543210"),
        ],
    )
    def test_normalizes_to_e164(self, raw, expected):
        assert validate_phone_number(raw) == expected

    @pytest.mark.parametrize("raw", ["12345", "not a phone", "", None])
    def test_rejects_invalid(self, raw):
        assert validate_phone_number(raw) is None


class TestCoordinates:
    @pytest.mark.parametrize(
        ("lat", "lng", "valid"),
        [
            (28.6, 77.2, True),
            (-90, 180, True),
            (0, 0, False),
            (None, 77.2, False),
            (91, 77.2, False),
            (28.6, -181, False),
        ],
    )
    def test_is_valid_coordinates(self, lat, lng, valid):
        assert is_valid_coordinates(lat, lng) is valid


class TestPhotoKeys:
    def test_file_name_is_normalized(self):
        assert normalize_file_name("C:\\Users\\me\\My Photo (1).JPG") == "my_photo__1_.jpg"
        assert normalize_file_name(None) is None

    def test_key_layout(self):
        user_id = UUID("12345678-1234-5678-1234-567812345678")
        key = build_photo_key(user_id, "pothole.png", datetime(2024, 5, 20, 9, 30, 15, 123, tzinfo=UTC))
        assert key == f"issues/{user_id}/20240520T093015000123_pothole.png"

    def test_missing_name_gets_placeholder(self):
        user_id = UUID("12345678-1234-5678-1234-567812345678")
        assert build_photo_key(user_id, None).endswith("_photo")
