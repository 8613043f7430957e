"""Application Constants.

Centralized constants used throughout the application.
This file contains all hardcoded values that should be maintained in one place.
"""

# ============================================================================
# POSTAL CODE CONSTANTS
# ============================================================================

class PostalCode:
    """CEP format rules."""
    SEPARATOR = "-"
    PATTERN = r"[0-9]{8}"
    FIELD_NAME = "cep"


# ============================================================================
# TEMPERATURE CONSTANTS
# ============================================================================

class Temperature:
    """Celsius conversion factors."""
    FAHRENHEIT_FACTOR = 1.8
    FAHRENHEIT_OFFSET = 32
    KELVIN_OFFSET = 273.15


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Client-facing error messages. Kept short; upstream detail is only logged."""
    INTERNAL_SERVER_ERROR = "Internal server error"
    INVALID_REQUEST_BODY = "invalid request body"
    INVALID_ZIPCODE = "invalid zipcode"
    ZIPCODE_NOT_FOUND = "can not find zipcode"
    WEATHER_UNAVAILABLE = "can not fetch weather"
    SERVICE_UNAVAILABLE = "service unavailable"


# ============================================================================
# HTTP CONSTANTS
# ============================================================================

class HttpHeaders:
    """HTTP header names."""
    REQUEST_ID = "X-Request-ID"
    PROCESS_TIME = "X-Process-Time"
    CONTENT_TYPE = "Content-Type"


class MediaTypes:
    """Response media types."""
    JSON = "application/json"
    TEXT = "text/plain; charset=utf-8"


class HttpStatusCodes:
    """HTTP status code constants."""
    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


# ============================================================================
# API ENDPOINTS
# ============================================================================

class ApiEndpoints:
    """API endpoint paths."""
    CEP = "/cep"
    HEALTH = "/health"
    METRICS = "/metrics"
    DOCS = "/docs"
    OPENAPI = "/openapi.json"


# ============================================================================
# SERVICE NAMES
# ============================================================================

class ServiceNames:
    """Service identifiers used for tracing resources, metrics and logs."""
    GATEWAY = "service-a"
    RESOLVER = "service-b"


class Collaborators:
    """External collaborator identifiers (metric labels)."""
    DIRECTORY = "viacep"
    WEATHER = "weatherapi"


# ============================================================================
# TRACING CONSTANTS
# ============================================================================

class SpanNames:
    """Span names, one per component operation."""
    GATEWAY_HANDLE = "gateway.handle"
    GATEWAY_FORWARD = "gateway.forward"
    RESOLVER_HANDLE = "resolver.handle"
    DIRECTORY_LOOKUP = "directory.resolve_city"
    WEATHER_LOOKUP = "weather.resolve_temperature"


# ============================================================================
# LOGGING CONSTANTS
# ============================================================================

class Logging:
    """Logging limits."""
    MAX_UPSTREAM_BODY_CHARS = 500
