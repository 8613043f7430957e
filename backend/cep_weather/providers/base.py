"""Base Lookup Provider Interfaces.

This module defines the abstract interfaces that the directory (CEP -> city)
and weather (city -> temperature) collaborators must implement, and the
tagged result types they return.

Collaborators never raise for expected failures. Every call returns a result
whose ``outcome`` tells the caller what happened, so the resolver can map
each outcome to an HTTP status explicitly.
"""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..domain.models import CityResolution, WeatherReading


class LookupOutcome(str, enum.Enum):
    """Outcome of a single collaborator call."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"
    CONFIG_MISSING = "config_missing"


@dataclass(frozen=True)
class CityLookupResult:
    """Result of ``DirectoryProvider.resolve_city``.

    ``city`` is set only when ``outcome`` is FOUND; ``detail`` is diagnostic
    text for logs and never reaches the client.
    """
    outcome: LookupOutcome
    city: CityResolution | None = None
    detail: str = ""

    @classmethod
    def found(cls, city_name: str) -> "CityLookupResult":
        return cls(outcome=LookupOutcome.FOUND, city=CityResolution(city_name=city_name))

    @classmethod
    def failure(cls, outcome: LookupOutcome, detail: str) -> "CityLookupResult":
        return cls(outcome=outcome, detail=detail)


@dataclass(frozen=True)
class TemperatureLookupResult:
    """Result of ``WeatherProvider.resolve_temperature``."""
    outcome: LookupOutcome
    reading: WeatherReading | None = None
    detail: str = ""

    @classmethod
    def found(cls, temperature_celsius: float) -> "TemperatureLookupResult":
        return cls(
            outcome=LookupOutcome.FOUND,
            reading=WeatherReading(temperature_celsius=temperature_celsius),
        )

    @classmethod
    def failure(cls, outcome: LookupOutcome, detail: str) -> "TemperatureLookupResult":
        return cls(outcome=outcome, detail=detail)


class DirectoryProvider(ABC):
    """Abstract base class for CEP directory providers.

    This abstraction allows:
    - Swapping the real HTTP client for a stub in tests
    - Future integration with other directory services
    """

    def __init__(self, provider_name: str):
        self.provider_name = provider_name

    @abstractmethod
    async def resolve_city(self, cep: str) -> CityLookupResult:
        """Resolve a normalized CEP to a city name.

        A single attempt, no retry. An empty or absent locality is NOT_FOUND.

        Args:
            cep: 8-digit normalized postal code

        Returns:
            CityLookupResult
        """
        pass

    def get_provider_name(self) -> str:
        """Get the provider name."""
        return self.provider_name


class WeatherProvider(ABC):
    """Abstract base class for current-weather providers."""

    def __init__(self, provider_name: str):
        self.provider_name = provider_name

    @abstractmethod
    async def resolve_temperature(self, city_name: str) -> TemperatureLookupResult:
        """Resolve a city name to its current temperature in Celsius.

        A missing credential is CONFIG_MISSING and is reported before any
        network call. A single attempt, no retry.

        Args:
            city_name: City name as returned by the directory provider

        Returns:
            TemperatureLookupResult
        """
        pass

    def get_provider_name(self) -> str:
        """Get the provider name."""
        return self.provider_name
