import gzip
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from webgl_static.compression import CompressionRegistry
from webgl_static.config import Settings
from webgl_static.content_types import ContentTypeResolver
from webgl_static.main import create_app


@pytest.fixture
def registry():
    return CompressionRegistry()


@pytest.fixture
def resolver(registry):
    return ContentTypeResolver(registry)


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    build = tmp_path / "Build"
    build.mkdir()
    (build / "app.data.gz").write_bytes(gzip.compress(b"unity data" * 8))
    (build / "app.wasm.br").write_bytes(b"w" * 64)
    (build / "app.framework.js").write_text("var x = 1;")
    (build / "scene.unknownext").write_bytes(b"?")
    (build / "README").write_text("no extension")
    return tmp_path


@pytest.fixture
def client(build_dir: Path):
    settings = Settings(static_dir=str(build_dir), cache_control="no-cache")
    with TestClient(create_app(settings)) as c:
        yield c
