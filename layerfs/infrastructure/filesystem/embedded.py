"""Filesystem serving a fixed table of in-memory entries.

Tables are usually produced by the embed generator, which writes a module
constructing an ``EmbeddedFS`` at import time. Directory markers carry no
content; they exist so that ``read_dir`` can list directories which have
no file content of their own.
"""
import posixpath
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Union

from layerfs.core.exceptions import IsADirError, NotADirError, NotFoundError
from layerfs.core.fs import FS, File
from layerfs.core.types import DirEntry, FileKind
from layerfs.infrastructure.filesystem.memory_file import MemoryFile
from layerfs.infrastructure.filesystem.path_security import (
    VIRTUAL_ROOT,
    normalize_virtual,
)
from layerfs.infrastructure.filesystem.sub import SubFS
from layerfs.infrastructure.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EmbeddedFsEntry:
    """Content and kind of one embedded path"""
    content: Optional[bytes]
    kind: FileKind
    size: int

    def __post_init__(self):
        if isinstance(self.content, str):
            object.__setattr__(self, "content", self.content.encode("utf-8"))
        elif self.content is not None and not isinstance(self.content, bytes):
            object.__setattr__(self, "content", bytes(self.content))

    @classmethod
    def file(cls, content: Union[bytes, str]) -> "EmbeddedFsEntry":
        if isinstance(content, str):
            content = content.encode("utf-8")
        return cls(content=content, kind=FileKind.FILE, size=len(content))

    @classmethod
    def directory(cls) -> "EmbeddedFsEntry":
        return cls(content=None, kind=FileKind.DIR, size=-1)

    def open(self) -> File:
        return MemoryFile(self.read_file())

    def read_file(self) -> bytes:
        return self.content if self.content is not None else b""


class EmbeddedFS(FS):
    """Read-only filesystem over an in-memory table"""

    def __init__(self, entries: Mapping[str, EmbeddedFsEntry]):
        self._entries: Dict[str, EmbeddedFsEntry] = {
            normalize_virtual(path): entry for path, entry in entries.items()
        }
        logger.debug("embedded_fs_created", entries=len(self._entries))

    def open(self, name: str) -> File:
        return self._lookup_file(name).open()

    def read_dir(self, name: str) -> List[DirEntry]:
        path = normalize_virtual(name)

        entries = [
            DirEntry(posixpath.basename(key), entry.kind, entry.size)
            for key, entry in self._entries.items()
            if key != VIRTUAL_ROOT and posixpath.dirname(key) == path
        ]

        if not entries and path != VIRTUAL_ROOT:
            own = self._entries.get(path)
            if own is None:
                raise NotFoundError(name)
            if own.kind is not FileKind.DIR:
                raise NotADirError(name)

        return entries

    def read_file(self, name: str) -> bytes:
        return self._lookup_file(name).read_file()

    def sub(self, dir: str) -> FS:
        return SubFS(self, dir)

    def paths(self) -> Iterator[str]:
        """Normalized paths of all entries, in table order"""
        return iter(self._entries)

    def _lookup_file(self, name: str) -> EmbeddedFsEntry:
        path = normalize_virtual(name)

        entry = self._entries.get(path)
        if entry is None:
            raise NotFoundError(name)
        if entry.kind is FileKind.DIR:
            raise IsADirError(name)

        return entry

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_virtual(name) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"EmbeddedFS(<{len(self._entries)} entries>)"
