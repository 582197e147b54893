import logging
import os
from typing import Any, Callable, Optional

from starlette.datastructures import Headers
from starlette.responses import FileResponse, Response
from starlette.staticfiles import NotModifiedResponse, StaticFiles
from starlette.types import Scope

from .content_types import OCTET_STREAM, ContentTypeResolver
from .hooks import ContentEncodingHook

logger = logging.getLogger(__name__)

DEFAULT_CACHE_CONTROL = "public, max-age=31536000"

PrepareResponse = Callable[[Response, str], Any]


class PrecompressedStaticFiles(StaticFiles):
    """StaticFiles subclass that understands ``.gz``/``.br`` files on disk.

    The media type comes from the resolver, so ``app.data.gz`` is sent as
    ``application/octet-stream`` rather than as a gzip archive, and the
    ``prepare_response`` hook adds the matching Content-Encoding header.
    """

    def __init__(
        self,
        directory: str,
        resolver: ContentTypeResolver,
        prepare_response: Optional[PrepareResponse] = None,
        cachecontrol: str = DEFAULT_CACHE_CONTROL,
        default_content_type: str = OCTET_STREAM,
        **kwargs,
    ):
        super().__init__(directory=directory, **kwargs)
        self.resolver = resolver
        self.prepare_response = prepare_response or ContentEncodingHook(resolver.registry)
        self.cachecontrol = cachecontrol
        self.default_content_type = default_content_type

    def media_type_for(self, full_path: str) -> str:
        media_type, found = self.resolver.resolve(str(full_path))
        if not found:
            logger.debug("No content type for %s; using %s", full_path, self.default_content_type)
            return self.default_content_type
        return media_type

    def file_response(self, full_path, stat_result, scope: Scope, status_code: int = 200) -> Response:
        request_headers = Headers(scope=scope)
        response = FileResponse(
            full_path,
            status_code=status_code,
            stat_result=stat_result,
            media_type=self.media_type_for(full_path),
        )
        self.prepare_response(response, os.path.basename(full_path))
        if status_code == 200:
            response.headers.setdefault("Cache-Control", self.cachecontrol)
        if self.is_not_modified(response.headers, request_headers):
            return NotModifiedResponse(response.headers)
        return response
