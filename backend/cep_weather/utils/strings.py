"""String manipulation utilities."""


def truncate_string(value: str, max_length: int, suffix: str = "...") -> str:
    """Truncate string to maximum length with suffix.

    Used to keep upstream response bodies short in diagnostic logs.

    Args:
        value: String to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated (default: "...")

    Returns:
        Truncated string

    Examples:
        >>> truncate_string("Hello world", 8)
        "Hello..."
        >>> truncate_string("Hi", 5)
        "Hi"
    """
    if not value or len(value) <= max_length:
        return value or ""

    return value[:max_length - len(suffix)] + suffix
