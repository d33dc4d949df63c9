"""
Static Resources
Versioned urls and guarded reads for package resources.
"""

import gzip
import mimetypes
import posixpath
import re
from dataclasses import dataclass
from typing import Protocol

from ..core import ResourceAccessDeniedError, get_logger
from ..core.hash import Algorithm, hash_bytes
from .locator import package_dir

logger = get_logger(__name__)

_VERSION_PATTERN = re.compile(r"-ver-\d+(?=\.[^./]*$|$)")

_COMPRESSIBLE = ("text/", "application/javascript", "application/json", "application/xml", "image/svg+xml")


class ResourceFactory(Protocol):
    """Creates a dynamic resource from a specification string."""

    def new_resource(self, specification: str, locale: str | None, style: str | None) -> bytes:
        ...


@dataclass(frozen=True)
class ResourceResponse:
    """A resolved resource ready to be written to a response."""

    path: str
    body: bytes
    content_type: str
    etag: str
    gzipped: bool = False
    last_modified: float | None = None


class StaticResourceResolver:
    """Serves files found by the resource settings' stream locator."""

    def __init__(self, resource_settings):
        self.resource_settings = resource_settings

    def _full_path(self, path: str, scope: type | None) -> str:
        if scope is not None and package_dir(scope):
            return posixpath.normpath(f"{package_dir(scope)}/{path}")
        return posixpath.normpath(path)

    def url_for(self, path: str, scope: type | None = None) -> str:
        """Public url for a resource (relative to the resource root)."""
        full = self._full_path(path, scope)
        found = self.resource_settings.resource_stream_locator.locate(None, full)
        if found is None:
            raise FileNotFoundError(full)

        url = path if scope is None else f"{package_dir(scope)}/{path}"
        placeholder = self.resource_settings.parent_folder_placeholder
        if placeholder:
            url = "/".join(placeholder if part == ".." else part for part in url.split("/"))

        if self.resource_settings.use_timestamp_on_resources:
            base, extension = posixpath.splitext(url)
            url = f"{base}-ver-{int(found.stat().st_mtime)}{extension}"
        return url

    def decode(self, url: str) -> str:
        """Undo url_for: strip the version segment and restore ``..``."""
        path = _VERSION_PATTERN.sub("", url, count=1)
        placeholder = self.resource_settings.parent_folder_placeholder
        if placeholder:
            path = "/".join(".." if part == placeholder else part for part in path.split("/"))
        return posixpath.normpath(path)

    def read(self, url: str, accept_gzip: bool = False) -> ResourceResponse:
        """
        Resolve a url produced by ``url_for``.

        Raises:
            ResourceAccessDeniedError: The package resource guard rejected the path
            FileNotFoundError: No such resource
        """
        settings = self.resource_settings
        path = self.decode(url)
        if not settings.package_resource_guard.accept(path):
            raise ResourceAccessDeniedError(f"Access denied to resource '{path}'")

        found = settings.resource_stream_locator.locate(None, path)
        if found is None:
            raise FileNotFoundError(path)

        body = found.read_bytes()
        content_type = mimetypes.guess_type(found.name)[0] or "application/octet-stream"

        compressor = settings.javascript_compressor
        if compressor is not None and found.suffix == ".js":
            body = compressor.compress(body.decode("utf-8")).encode("utf-8")

        etag = hash_bytes(body, Algorithm.SHA256, truncate=16)

        gzipped = False
        if accept_gzip and not settings.disable_gzip_compression and content_type.startswith(_COMPRESSIBLE):
            body = gzip.compress(body)
            gzipped = True

        logger.debug("resource_served", path=path, size=len(body), gzipped=gzipped)
        return ResourceResponse(
            path=path,
            body=body,
            content_type=content_type,
            etag=etag,
            gzipped=gzipped,
            last_modified=found.stat().st_mtime,
        )

    def create(
        self,
        factory_name: str,
        specification: str,
        locale: str | None = None,
        style: str | None = None,
    ) -> bytes:
        """Build a dynamic resource with a registered resource factory."""
        factory = self.resource_settings.get_resource_factory(factory_name)
        if factory is None:
            raise LookupError(f"No resource factory registered under '{factory_name}'")
        return factory.new_resource(specification, locale, style)


__all__ = ["ResourceFactory", "ResourceResponse", "StaticResourceResolver"]
