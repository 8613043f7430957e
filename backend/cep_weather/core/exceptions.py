"""Custom Exceptions for Request Validation.

Input problems are raised as exceptions by the shared validator and converted
to an HTTP status by the service that detected them.

Collaborator failures (directory and weather lookups) are NOT exceptions:
they are returned as tagged results (see ``providers.base.LookupOutcome``) so
services can map every outcome to a status code explicitly.
"""


class CepWeatherError(Exception):
    """Base exception for all application errors."""
    pass


class ValidationError(CepWeatherError):
    """Client input that will never succeed as sent.

    Terminal for the request, never retried.
    """
    pass


class MalformedRequestError(ValidationError):
    """Request body is not a JSON object with a string ``cep`` field."""
    pass


class InvalidPostalCodeError(ValidationError):
    """CEP is not exactly 8 digits once hyphens are removed."""

    def __init__(self, cep: str):
        super().__init__(f"Invalid postal code: {cep!r}")
        self.cep = cep
