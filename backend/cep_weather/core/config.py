"""Application Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
Both services (gateway and resolver) read the same settings class; each one only
uses the values it needs.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "CEP Weather"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # Server
    SERVICE_ROLE: str = Field(
        default="gateway",
        description="Which application `python -m cep_weather.main` serves: 'gateway' or 'resolver'"
    )
    HOST: str = Field(default="0.0.0.0")
    GATEWAY_PORT: int = Field(default=8080)
    RESOLVER_PORT: int = Field(default=8081)

    # Downstream services
    RESOLVER_URL: str = Field(
        default="http://service-b:8081/cep",
        description="Endpoint the gateway forwards validated requests to"
    )
    VIACEP_BASE_URL: str = Field(default="https://viacep.com.br/ws")
    WEATHER_API_BASE_URL: str = Field(default="http://api.weatherapi.com/v1/current.json")
    WEATHER_API_KEY: str | None = Field(
        default=None,
        description="WeatherAPI credential. Missing key fails weather lookups at request time, not at startup."
    )
    HTTP_TIMEOUT_SECONDS: float = Field(default=5.0, gt=0)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Distributed Tracing
    TRACING_ENABLED: bool = Field(
        default=False,
        description="Enable distributed tracing with OpenTelemetry"
    )
    TRACING_EXPORTER: str = Field(
        default="console",
        description="Tracing exporter: 'console' for development, 'otlp' for production"
    )
    TRACING_OTLP_ENDPOINT: str = Field(
        default="http://localhost:4318/v1/traces",
        description="OTLP endpoint for trace export (Jaeger, Zipkin, etc.)"
    )

    @field_validator('SERVICE_ROLE', mode='after')
    @classmethod
    def validate_service_role(cls, v):
        """Validate SERVICE_ROLE names one of the two applications."""
        role = v.strip().lower()
        if role not in ('gateway', 'resolver'):
            raise ValueError("SERVICE_ROLE must be 'gateway' or 'resolver'")
        return role

    @field_validator('LOG_LEVEL', mode='after')
    @classmethod
    def validate_log_level(cls, v):
        """Normalize LOG_LEVEL and make sure logging knows it."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator('WEATHER_API_KEY', mode='after')
    @classmethod
    def blank_api_key_is_unset(cls, v):
        """Treat an empty WEATHER_API_KEY the same as a missing one."""
        if v is None or not v.strip():
            return None
        return v.strip()

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
