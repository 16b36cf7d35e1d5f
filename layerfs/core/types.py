"""Common type definitions for layerfs"""

import os
from dataclasses import dataclass
from enum import Enum


class FileKind(Enum):
    """Kind of a file or path"""

    # Kind not known; always an error when it shows up in a result
    UNKNOWN = "unknown"
    DIR = "dir"
    FILE = "file"
    SYMLINK = "symlink"


class WalkAction(Enum):
    """Return value of a walk visitor"""

    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"
    STOP = "stop"


@dataclass(frozen=True)
class DirEntry:
    """Entry of a directory listing

    Attributes:
        name: Name of the entry relative to the listed directory
        kind: Kind of the entry
        size: Byte length for files; backend dependent for directories
    """
    name: str
    kind: FileKind = FileKind.UNKNOWN
    size: int = 0

    @property
    def is_dir(self) -> bool:
        return self.kind is FileKind.DIR

    @property
    def is_file(self) -> bool:
        return self.kind is FileKind.FILE

    @property
    def is_symlink(self) -> bool:
        return self.kind is FileKind.SYMLINK

    @classmethod
    def from_os_entry(cls, entry: os.DirEntry) -> "DirEntry":
        """
        Build an entry from a host directory entry.

        Symlinks are reported as such and never followed.

        Args:
            entry: Entry produced by os.scandir

        Returns:
            DirEntry carrying the leaf name, kind and size
        """
        if entry.is_symlink():
            kind = FileKind.SYMLINK
        elif entry.is_dir(follow_symlinks=False):
            kind = FileKind.DIR
        elif entry.is_file(follow_symlinks=False):
            kind = FileKind.FILE
        else:
            kind = FileKind.UNKNOWN

        return cls(
            name=entry.name,
            kind=kind,
            size=entry.stat(follow_symlinks=False).st_size,
        )
