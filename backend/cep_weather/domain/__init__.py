"""Domain layer: request/response models, CEP validation and unit conversion."""

from .conversion import build_aggregated_result, celsius_to_fahrenheit, celsius_to_kelvin
from .models import AggregatedResult, CityResolution, PostalCodeRequest, WeatherReading
from .validators import normalize_cep, parse_cep_request, validate_cep

__all__ = [
    "AggregatedResult",
    "CityResolution",
    "PostalCodeRequest",
    "WeatherReading",
    "build_aggregated_result",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "normalize_cep",
    "parse_cep_request",
    "validate_cep",
]
