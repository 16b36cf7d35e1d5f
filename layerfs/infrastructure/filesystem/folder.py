"""Filesystem onto a folder of the host operating system."""
import os
from typing import List

from layerfs.core.exceptions import (
    BackendError,
    InvalidRootError,
    IsADirError,
    NotADirError,
    NotFoundError,
)
from layerfs.core.fs import FS, File
from layerfs.core.types import DirEntry
from layerfs.infrastructure.filesystem.memory_file import MemoryFile
from layerfs.infrastructure.filesystem.path_security import secure_path
from layerfs.infrastructure.logging import get_logger

logger = get_logger(__name__)


class FolderFS(FS):
    """Serves a host directory; paths can never leave it."""

    def __init__(self, path: str):
        self.path = os.path.normpath(os.path.abspath(path))

        if not os.path.exists(self.path):
            raise InvalidRootError(self.path, "directory does not exist")
        if not os.path.isdir(self.path):
            raise InvalidRootError(self.path, "not a directory")

        logger.debug("folder_fs_created", root=self.path)

    def open(self, name: str) -> File:
        return MemoryFile(self.read_file(name))

    def read_dir(self, name: str) -> List[DirEntry]:
        path = self._build_path(name)

        try:
            with os.scandir(path) as it:
                return [DirEntry.from_os_entry(entry) for entry in it]
        except OSError as e:
            raise self._translate_error(e, name) from e

    def read_file(self, name: str) -> bytes:
        path = self._build_path(name)

        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise self._translate_error(e, name) from e

    def sub(self, dir: str) -> FS:
        return FolderFS(self._build_path(dir))

    def _build_path(self, name: str) -> str:
        """Resolve a virtual path to an existing host path below the root."""
        path = secure_path(self.path, name, pathmod=os.path)

        if not os.path.lexists(path):
            raise NotFoundError(name)

        return path

    def _translate_error(self, error: OSError, name: str) -> Exception:
        if isinstance(error, FileNotFoundError):
            return NotFoundError(name)
        if isinstance(error, IsADirectoryError):
            return IsADirError(name)
        if isinstance(error, NotADirectoryError):
            return NotADirError(name)

        logger.warning(
            "folder_fs_io_error",
            root=self.path,
            path=name,
            error=str(error),
        )
        return BackendError(name, error.strerror or str(error))

    def __repr__(self) -> str:
        return f"FolderFS({self.path!r})"


def get_os_fs(path: str = ".") -> FolderFS:
    """Filesystem onto ``path`` of the host, the working directory by default."""
    return FolderFS(path)
