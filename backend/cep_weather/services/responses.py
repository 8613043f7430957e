"""Service-level response type shared by the gateway and the resolver."""

from dataclasses import dataclass

from ..core.constants import MediaTypes


@dataclass(frozen=True)
class ServiceResponse:
    """The ``(status code, body)`` pair a service hands back to its endpoint.

    ``media_type`` is None when the body is relayed from a downstream response
    that carried no content type.
    """
    status_code: int
    body: bytes
    media_type: str | None = MediaTypes.JSON

    @classmethod
    def text(cls, status_code: int, message: str) -> "ServiceResponse":
        """Short plain-text error response."""
        return cls(status_code=status_code, body=message.encode("utf-8"), media_type=MediaTypes.TEXT)

    @classmethod
    def json(cls, status_code: int, body: bytes) -> "ServiceResponse":
        return cls(status_code=status_code, body=body, media_type=MediaTypes.JSON)
