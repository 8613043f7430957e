"""Utility functions organized by domain.

Prefer importing from specific modules for clarity:
    from cep_weather.utils.generators import generate_request_id
    from cep_weather.utils.strings import truncate_string
"""

# Converters
from .converters import normalize_path

# Generators
from .generators import generate_request_id

# Strings
from .strings import truncate_string

__all__ = [
    # Converters
    "normalize_path",
    # Generators
    "generate_request_id",
    # Strings
    "truncate_string",
]
