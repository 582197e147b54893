import logging
from typing import Optional

from fastapi import FastAPI, Request

from .compression import CompressionRegistry
from .config import Settings, load_settings
from .content_types import ContentTypeResolver
from .static_files import PrecompressedStaticFiles

logger = logging.getLogger(__name__)
if not logger.handlers:
    logging.basicConfig(level=logging.INFO)


def _set_log_level(level: str) -> None:
    try:
        logging.getLogger("webgl_static").setLevel(level)
    except ValueError:
        logger.warning("Invalid LOG_LEVEL %r; keeping INFO", level)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    _set_log_level(settings.log_level)

    registry = CompressionRegistry()
    for extension, encoding in settings.extra_encodings.items():
        if not registry.register(extension, encoding):
            logger.warning(
                "Compression extension %s is already registered as %s",
                extension,
                registry.lookup(extension),
            )
    resolver = ContentTypeResolver(registry)
    for extension, mime_type in settings.extra_content_types.items():
        resolver.add_mapping(extension, mime_type)

    logger.info(
        "Serving %s at %s with encodings %s",
        settings.static_dir,
        settings.mount_path,
        ", ".join(f"{ext}={enc}" for ext, enc in registry.items()),
    )

    app = FastAPI(title="WebGL static host")
    app.state.registry = registry
    app.state.resolver = resolver

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/health/encodings")
    def encodings(request: Request):
        return dict(request.app.state.registry.items())

    app.mount(
        settings.mount_path,
        PrecompressedStaticFiles(
            directory=settings.static_dir,
            resolver=resolver,
            cachecontrol=settings.cache_control,
            default_content_type=settings.default_content_type,
            check_dir=False,
        ),
        name="static",
    )
    return app


app = create_app()
