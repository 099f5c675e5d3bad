# Standard library imports
import re

# Third-party imports
import phonenumbers

DEFAULT_REGION = "IN"


def validate_phone_number(value: str | None, region: str = DEFAULT_REGION) -> str | None:
    """
    Normalise a phone number to E.164 using the `phonenumbers` library.

    Bare 10-digit numbers and numbers prefixed with the country code but no
    ``+`` are read as Indian numbers. Returns None for anything that does not
    parse to a valid number.
    """
    if value is None:
        return None

    cleaned = re.sub(r"[\s\-()]", "", str(value))
    if cleaned.isdigit():
        if len(cleaned) == 10:
            cleaned = f"+91{cleaned}"
        elif cleaned.startswith("91") and len(cleaned) == 12:
            cleaned = f"+{cleaned}"

    try:
        parsed = phonenumbers.parse(cleaned, region)
    except phonenumbers.NumberParseException:
        return None

    if not phonenumbers.is_valid_number(parsed):
        return None

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
