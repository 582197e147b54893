from typing import Any, Optional

from .compression import CompressionRegistry
from .content_types import get_extension

CONTENT_ENCODING = "Content-Encoding"


def apply_content_encoding(
    response: Any, file_name: str, registry: CompressionRegistry
) -> Optional[str]:
    """Set Content-Encoding on ``response`` when ``file_name`` is pre-compressed.

    Leaves the headers untouched for any other file and returns the encoding
    that was applied, if one was.
    """
    encoding = registry.lookup(get_extension(file_name))
    if encoding is not None:
        response.headers[CONTENT_ENCODING] = encoding
    return encoding


class ContentEncodingHook:
    """``(response, file_name)`` callback bound to one registry."""

    def __init__(self, registry: CompressionRegistry) -> None:
        self.registry = registry

    def __call__(self, response: Any, file_name: str) -> Optional[str]:
        return apply_content_encoding(response, file_name, self.registry)
