"""
Resource Finders
Map relative resource paths to files.
"""

from importlib import resources
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from ..core import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ResourceFinder(Protocol):
    """Finds a file for a ``/``-separated relative path."""

    def find(self, path: str) -> Path | None:
        ...


@runtime_checkable
class PathStyleFinder(ResourceFinder, Protocol):
    """Finder configured with an ordered list of folders."""

    def add(self, folder: str | Path) -> "PathStyleFinder":
        ...


class ResourcePath:
    """
    Searches folders in the order they were added.

    Paths resolving outside a folder (via ``..`` or symlinks) are never
    returned from that folder.
    """

    def __init__(self, folders: Iterable[str | Path] = ()):
        self._folders: list[Path] = []
        for folder in folders:
            self.add(folder)

    def add(self, folder: str | Path) -> "ResourcePath":
        path = Path(folder)
        if path not in self._folders:
            self._folders.append(path)
            logger.debug("resource_folder_added", folder=str(path))
        return self

    @property
    def folders(self) -> tuple[Path, ...]:
        return tuple(self._folders)

    def find(self, path: str) -> Path | None:
        for folder in self._folders:
            root = folder.resolve()
            candidate = (root / path).resolve()
            if not candidate.is_relative_to(root):
                continue
            if candidate.is_file():
                return candidate
        return None

    def __repr__(self) -> str:
        return f"ResourcePath({[str(f) for f in self._folders]})"


class PackageResourceFinder:
    """Finds files shipped inside an importable package. Not path-style."""

    def __init__(self, package: str):
        self.package = package

    def find(self, path: str) -> Path | None:
        candidate = resources.files(self.package).joinpath(*[p for p in path.split("/") if p])
        if candidate.is_file():
            return Path(str(candidate))
        return None

    def __repr__(self) -> str:
        return f"PackageResourceFinder({self.package!r})"


__all__ = ["ResourceFinder", "PathStyleFinder", "ResourcePath", "PackageResourceFinder"]
