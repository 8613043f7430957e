"""Pydantic models for requests, lookup results and the aggregated response.

All models are frozen: each is built once per request and never mutated.
"""

from pydantic import BaseModel, ConfigDict, Field


class PostalCodeRequest(BaseModel):
    """Incoming lookup request. ``cep`` is always normalized (8 digits)."""
    model_config = ConfigDict(frozen=True)

    cep: str = Field(..., min_length=8, max_length=8, pattern=r"^[0-9]{8}$")


class CityResolution(BaseModel):
    """City resolved from a CEP by the directory collaborator."""
    model_config = ConfigDict(frozen=True)

    city_name: str = Field(..., min_length=1)


class WeatherReading(BaseModel):
    """Current temperature reported by the weather collaborator."""
    model_config = ConfigDict(frozen=True)

    temperature_celsius: float = Field(..., allow_inf_nan=False)


class AggregatedResult(BaseModel):
    """Final payload returned by the resolver.

    Serialized with aliases so the wire format is
    ``{"city", "tempC", "tempF", "tempK"}``. Temperatures are always finite.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: str
    temp_c: float = Field(..., alias="tempC", allow_inf_nan=False)
    temp_f: float = Field(..., alias="tempF", allow_inf_nan=False)
    temp_k: float = Field(..., alias="tempK", allow_inf_nan=False)

    def to_json_bytes(self) -> bytes:
        """Serialize using the public field names."""
        return self.model_dump_json(by_alias=True).encode("utf-8")
