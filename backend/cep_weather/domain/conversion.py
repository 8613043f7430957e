"""Temperature conversion and response shaping."""

from ..core.constants import Temperature
from .models import AggregatedResult


def celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * Temperature.FAHRENHEIT_FACTOR + Temperature.FAHRENHEIT_OFFSET


def celsius_to_kelvin(temp_c: float) -> float:
    return temp_c + Temperature.KELVIN_OFFSET


def build_aggregated_result(city: str, temp_c: float) -> AggregatedResult:
    """Combine a city and its Celsius reading into the response payload.

    Linear conversions, no rounding.
    """
    return AggregatedResult(
        city=city,
        temp_c=temp_c,
        temp_f=celsius_to_fahrenheit(temp_c),
        temp_k=celsius_to_kelvin(temp_c),
    )
