class InvalidArgument(ValueError):
    """Raised when a required string argument is empty or whitespace-only."""


def require_text(value, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{name} must be a non-empty string")
    return value
