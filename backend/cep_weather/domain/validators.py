"""Postal code (CEP) validation.

Shared by the gateway and the resolver. Each service validates independently
at its own boundary, but both use these functions so the rule is defined once.
"""

import json
import re

from ..core.constants import PostalCode
from ..core.exceptions import InvalidPostalCodeError, MalformedRequestError
from .models import PostalCodeRequest

_CEP_RE = re.compile(PostalCode.PATTERN, re.ASCII)


def normalize_cep(raw: str) -> str:
    """Remove every hyphen from ``raw``.

    Examples:
        >>> normalize_cep("01310-100")
        "01310100"
    """
    return raw.replace(PostalCode.SEPARATOR, "")


def validate_cep(raw: str) -> bool:
    """Return True iff ``raw`` is exactly 8 ASCII digits once hyphens are removed.

    No whitespace tolerance and no variable length.

    Examples:
        >>> validate_cep("01310-100")
        True
        >>> validate_cep("0131010")
        False
        >>> validate_cep("abcdefgh")
        False
    """
    if not isinstance(raw, str):
        return False
    return _CEP_RE.fullmatch(normalize_cep(raw)) is not None


def parse_cep_request(body: bytes) -> PostalCodeRequest:
    """Decode a request body into a normalized ``PostalCodeRequest``.

    Args:
        body: Raw request body

    Returns:
        PostalCodeRequest with the hyphen-free CEP

    Raises:
        MalformedRequestError: Body is not JSON, not an object, or ``cep`` is not a string
        InvalidPostalCodeError: ``cep`` fails the 8-digit rule
    """
    try:
        payload = json.loads(body)
    except (ValueError, TypeError) as e:
        raise MalformedRequestError(f"Request body is not valid JSON: {e}") from e

    # JSON null at either level decodes to an empty CEP
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise MalformedRequestError("Request body must be a JSON object")

    raw_cep = payload.get(PostalCode.FIELD_NAME)
    if raw_cep is None:
        raw_cep = ""
    if not isinstance(raw_cep, str):
        raise MalformedRequestError(f"'{PostalCode.FIELD_NAME}' must be a string")

    if not validate_cep(raw_cep):
        raise InvalidPostalCodeError(raw_cep)

    return PostalCodeRequest(cep=normalize_cep(raw_cep))
