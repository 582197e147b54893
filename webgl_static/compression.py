"""Registry of pre-compressed file suffixes and their Content-Encoding tokens."""
from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .errors import require_text

logger = logging.getLogger(__name__)

GZIP_EXTENSION = ".gz"
BROTLI_EXTENSION = ".br"

DEFAULT_ENCODINGS: Mapping[str, str] = MappingProxyType({
    GZIP_EXTENSION: "gzip",
    BROTLI_EXTENSION: "br",
})


class CompressionRegistry:
    """Maps a compressed-file suffix such as ``.gz`` to its encoding token.

    The first registration of a suffix wins; later ones are ignored. Writes
    are serialized so a reader never sees a half-inserted entry, while
    ``lookup`` stays a plain dictionary read.
    """

    def __init__(self, encodings: Optional[Mapping[str, str]] = None) -> None:
        self._encodings: Dict[str, str] = {}
        self._lock = threading.Lock()
        for extension, encoding in (DEFAULT_ENCODINGS if encodings is None else encodings).items():
            self.register(extension, encoding)

    def lookup(self, extension: Optional[str]) -> Optional[str]:
        if extension is None:
            return None
        return self._encodings.get(extension)

    def register(self, extension: str, encoding: str) -> bool:
        """Add ``extension`` -> ``encoding``; return False if already known."""
        require_text(extension, "extension")
        require_text(encoding, "encoding")
        with self._lock:
            existing = self._encodings.get(extension)
            if existing is not None:
                logger.debug(
                    "Compression extension %s already maps to %s; keeping it",
                    extension,
                    existing,
                )
                return False
            self._encodings[extension] = encoding
        logger.debug("Registered compression extension %s -> %s", extension, encoding)
        return True

    def items(self) -> Tuple[Tuple[str, str], ...]:
        with self._lock:
            return tuple(self._encodings.items())

    def __contains__(self, extension: object) -> bool:
        return extension in self._encodings

    def __iter__(self) -> Iterator[str]:
        return iter(dict(self.items()))

    def __len__(self) -> int:
        return len(self._encodings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"
