# Standard library imports
from typing import Any

# Third-party imports
from pydantic import BaseModel

# Error details can be a message, a list of messages, or a structured dict
DetailsType = str | list[str] | dict[str, Any]


class ErrorDetails(BaseModel):
    code: str
    message: str
    details: DetailsType | None = None


class BaseResponse(BaseModel):
    """Envelope for every error the API returns."""

    ok: bool
    error: ErrorDetails | None = None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        data = super().model_dump(**kwargs)

        # Drop empty envelope members
        if data.get("error") is None:
            data.pop("error", None)
        elif data["error"].get("details") is None:
            data["error"].pop("details", None)

        return data

    @classmethod
    def failure(cls, code: str, message: str, details: DetailsType | None = None) -> "BaseResponse":
        return cls(ok=False, error=ErrorDetails(code=code, message=message, details=details))
