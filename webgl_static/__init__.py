from .compression import DEFAULT_ENCODINGS, CompressionRegistry
from .content_types import ContentTypeResolver, build_base_table, get_extension
from .errors import InvalidArgument
from .hooks import ContentEncodingHook, apply_content_encoding
from .static_files import PrecompressedStaticFiles

__all__ = [
    "DEFAULT_ENCODINGS",
    "CompressionRegistry",
    "ContentEncodingHook",
    "ContentTypeResolver",
    "InvalidArgument",
    "PrecompressedStaticFiles",
    "apply_content_encoding",
    "build_base_table",
    "get_extension",
]
