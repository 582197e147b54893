"""Content-Type resolution for static files, including pre-compressed ones.

``Build/app.wasm.br`` is served as ``application/wasm``: the compression
suffix is cut off first and the remaining extension is looked up in the
base table. Which suffixes count as compression is decided by the
:class:`~webgl_static.compression.CompressionRegistry`, the same registry
that drives the ``Content-Encoding`` header.
"""
from __future__ import annotations

import mimetypes
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .compression import CompressionRegistry
from .errors import InvalidArgument, require_text

OCTET_STREAM = "application/octet-stream"

# Entries the standard table lacks or that WebGL builds depend on.
CUSTOM_CONTENT_TYPES: Mapping[str, str] = MappingProxyType({
    ".data": OCTET_STREAM,
    ".wasm": "application/wasm",
})


def get_extension(path: str) -> Optional[str]:
    """Return the last ``.``-suffix of the final path segment, dot included."""
    if not isinstance(path, str):
        raise InvalidArgument("path must be a string")
    segment_start = max(path.rfind("/"), path.rfind("\\")) + 1
    dot = path.rfind(".")
    if dot < segment_start:
        return None
    return path[dot:]


def build_base_table() -> Dict[str, str]:
    # MimeTypes() only knows the interpreter's built-in defaults, so the
    # table does not depend on /etc/mime.types of the host.
    table = dict(mimetypes.MimeTypes().types_map[True])
    table.update(CUSTOM_CONTENT_TYPES)
    return table


class ContentTypeResolver:
    def __init__(
        self,
        registry: CompressionRegistry,
        base_table: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.registry = registry
        self._table: Dict[str, str] = dict(
            build_base_table() if base_table is None else base_table
        )

    def add_mapping(self, extension: str, mime_type: str) -> None:
        """Append ``extension`` -> ``mime_type`` to the base table at startup."""
        require_text(extension, "extension")
        require_text(mime_type, "mime_type")
        self._table[extension] = mime_type

    def mappings(self) -> Dict[str, str]:
        return dict(self._table)

    def real_path(self, file_path: str) -> str:
        """Strip one registered compression suffix from ``file_path``."""
        require_text(file_path, "file_path")
        extension = get_extension(file_path)
        if self.registry.lookup(extension) is not None:
            return file_path[: -len(extension)]
        return file_path

    def resolve(self, file_path: str) -> Tuple[Optional[str], bool]:
        """Return ``(mime_type, found)`` for ``file_path``.

        An unknown or missing extension gives ``(None, False)``; only a blank
        path is an error.
        """
        require_text(file_path, "file_path")
        extension = get_extension(self.real_path(file_path))
        if extension is None:
            return None, False
        mime_type = self._table.get(extension)
        return mime_type, mime_type is not None
