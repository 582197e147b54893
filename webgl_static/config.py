"""Settings read from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .content_types import OCTET_STREAM
from .static_files import DEFAULT_CACHE_CONTROL

logger = logging.getLogger(__name__)


def parse_pairs(value: str, variable: str = "") -> Dict[str, str]:
    """Parse ``".zst=zstd, .lz4=lz4"`` into a dict, skipping bad entries."""
    pairs: Dict[str, str] = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, val = item.partition("=")
        key, val = key.strip(), val.strip()
        if not sep or not key.startswith(".") or len(key) < 2 or not val:
            logger.warning("Ignoring malformed entry %r in %s", item, variable or "pair list")
            continue
        pairs.setdefault(key, val)
    return pairs


@dataclass
class Settings:
    static_dir: str = "static"
    mount_path: str = "/"
    cache_control: str = DEFAULT_CACHE_CONTROL
    default_content_type: str = OCTET_STREAM
    extra_encodings: Dict[str, str] = field(default_factory=dict)
    extra_content_types: Dict[str, str] = field(default_factory=dict)
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def _get_port(env: Mapping[str, str]) -> int:
    try:
        return int(env.get("PORT", "8000"))
    except ValueError:
        logger.warning("Invalid PORT %r; falling back to 8000", env.get("PORT"))
        return 8000


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    mount_path = "/" + env.get("STATIC_MOUNT_PATH", "/").strip("/")
    return Settings(
        static_dir=env.get("STATIC_DIR", "static"),
        mount_path=mount_path,
        cache_control=env.get("STATIC_CACHE_CONTROL", DEFAULT_CACHE_CONTROL),
        default_content_type=env.get("STATIC_DEFAULT_CONTENT_TYPE", OCTET_STREAM),
        extra_encodings=parse_pairs(
            env.get("EXTRA_COMPRESSION_ENCODINGS", ""), "EXTRA_COMPRESSION_ENCODINGS"
        ),
        extra_content_types=parse_pairs(
            env.get("EXTRA_CONTENT_TYPES", ""), "EXTRA_CONTENT_TYPES"
        ),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        host=env.get("HOST", "127.0.0.1"),
        port=_get_port(env),
    )
