"""Data conversion utilities."""

import re


def normalize_path(path: str) -> str:
    """Normalize API path by replacing numeric segments with a placeholder.

    Useful for metrics labels to avoid high cardinality when clients probe
    paths such as ``/cep/01310100``.

    Args:
        path: API path to normalize

    Returns:
        Normalized path with IDs replaced

    Examples:
        >>> normalize_path("/cep")
        "/cep"
        >>> normalize_path("/cep/01310100")
        "/cep/{id}"
    """
    if not path:
        return path

    return re.sub(r'/\d+(?=/|$)', '/{id}', path)
