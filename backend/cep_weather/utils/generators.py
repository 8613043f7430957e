"""ID generation utilities."""

import uuid


def generate_request_id() -> str:
    """Generate a unique request ID.

    Returns:
        Request ID string (UUID)

    Examples:
        >>> generate_request_id()
        "a1b2c3d4-e5f6-7890-abcd-ef1234567890"
    """
    return str(uuid.uuid4())
