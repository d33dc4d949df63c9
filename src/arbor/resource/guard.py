"""Package resource guard: decides which files may be served."""

import posixpath

from ..core import get_logger

logger = get_logger(__name__)

DEFAULT_ALLOWED_EXTENSIONS = frozenset(
    {
        "css", "js", "map", "json", "xml", "txt", "html", "htm",
        "png", "jpg", "jpeg", "gif", "ico", "svg", "webp", "bmp",
        "woff", "woff2", "ttf", "eot", "otf", "pdf",
    }
)


class PackageResourceGuard:
    """
    Whitelists static resources by extension.

    Rejects hidden files, paths escaping the resource root and, unless
    ``allow_access_to_root_resources``, files directly at the root.
    """

    def __init__(
        self,
        allowed_extensions: frozenset[str] | set[str] | None = None,
        allow_access_to_root_resources: bool = False,
    ):
        self.allowed_extensions = frozenset(
            e.lower().lstrip(".") for e in (allowed_extensions or DEFAULT_ALLOWED_EXTENSIONS)
        )
        self.allow_access_to_root_resources = allow_access_to_root_resources

    def accept(self, path: str) -> bool:
        normalized = posixpath.normpath(path.replace("\\", "/")).lstrip("/")

        if normalized == ".." or normalized.startswith("../"):
            logger.warning("resource_denied", path=path, reason="outside_root")
            return False

        name = posixpath.basename(normalized)
        if not name or name.startswith("."):
            logger.warning("resource_denied", path=path, reason="hidden")
            return False

        extension = posixpath.splitext(name)[1].lower().lstrip(".")
        if extension not in self.allowed_extensions:
            logger.warning("resource_denied", path=path, reason="extension")
            return False

        if "/" not in normalized and not self.allow_access_to_root_resources:
            logger.warning("resource_denied", path=path, reason="root")
            return False

        return True


__all__ = ["PackageResourceGuard", "DEFAULT_ALLOWED_EXTENSIONS"]
