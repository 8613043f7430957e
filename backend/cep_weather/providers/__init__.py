"""Lookup Providers.

This module provides abstractions for the external collaborators the resolver
depends on, plus their HTTP implementations.
"""

from .base import (
    CityLookupResult,
    DirectoryProvider,
    LookupOutcome,
    TemperatureLookupResult,
    WeatherProvider,
)
from .viacep import ViaCepDirectoryProvider
from .weatherapi import WeatherApiProvider

__all__ = [
    "CityLookupResult",
    "DirectoryProvider",
    "LookupOutcome",
    "TemperatureLookupResult",
    "WeatherProvider",
    "ViaCepDirectoryProvider",
    "WeatherApiProvider",
]
