"""Sub-filesystem confining another filesystem to a directory."""
from typing import List

from layerfs.core.fs import FS, File
from layerfs.core.types import DirEntry
from layerfs.infrastructure.filesystem.path_security import (
    normalize_virtual,
    secure_path,
)


class SubFS(FS):
    """Delegates every call to a root filesystem with a prefix prepended.

    Wrapping a ``SubFS`` unwraps it and composes the prefixes, so a chain of
    sub-filesystems is always a single indirection over the underlying root.
    """

    def __init__(self, root: FS, path: str):
        if isinstance(root, SubFS):
            self.root = root.root
            self.path = secure_path(root.path, path)
        else:
            self.root = root
            self.path = normalize_virtual(path)

    def open(self, name: str) -> File:
        return self.root.open(self._resolve(name))

    def read_dir(self, name: str) -> List[DirEntry]:
        return self.root.read_dir(self._resolve(name))

    def read_file(self, name: str) -> bytes:
        return self.root.read_file(self._resolve(name))

    def sub(self, dir: str) -> FS:
        return SubFS(self.root, self._resolve(dir))

    def _resolve(self, name: str) -> str:
        return secure_path(self.path, name)

    def __repr__(self) -> str:
        return f"SubFS({self.root!r}, {self.path!r})"
