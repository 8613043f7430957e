"""Prometheus Metrics.

This module defines and exports Prometheus metrics for monitoring both services.
Metrics include counters, gauges and histograms for tracking:
- API requests and responses
- External collaborator calls (ViaCEP, WeatherAPI) and their outcomes
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Gauge,
    Histogram,
    Info,
    generate_latest,
)

# ========================================
# API Metrics
# ========================================

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['service', 'method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['service', 'method', 'endpoint'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

http_requests_in_progress = Gauge(
    'http_requests_in_progress',
    'Number of HTTP requests currently being processed',
    ['service', 'method', 'endpoint']
)

cep_requests_total = Counter(
    'cep_requests_total',
    'CEP lookups answered by each service, by result',
    ['service', 'result']
)

# ========================================
# Collaborator Metrics
# ========================================

lookup_requests_total = Counter(
    'lookup_requests_total',
    'Total calls to external lookup collaborators by outcome',
    ['collaborator', 'outcome']
)

lookup_duration_seconds = Histogram(
    'lookup_duration_seconds',
    'External lookup duration in seconds',
    ['collaborator'],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

# ========================================
# Application Info
# ========================================

app_info = Info(
    'app',
    'Application information'
)


def set_app_info(version: str, environment: str, service: str):
    """Set application information for Prometheus.

    Call this during app startup.
    """
    app_info.info({
        'version': version,
        'environment': environment,
        'service': service
    })


def record_lookup(collaborator: str, outcome: str, duration: float) -> None:
    """Record one collaborator call."""
    lookup_requests_total.labels(collaborator=collaborator, outcome=outcome).inc()
    lookup_duration_seconds.labels(collaborator=collaborator).observe(duration)


# ========================================
# Utility Functions
# ========================================

def get_metrics():
    """Get current Prometheus metrics in text format.

    Use this for the /metrics endpoint.
    """
    return generate_latest()


def get_content_type():
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
