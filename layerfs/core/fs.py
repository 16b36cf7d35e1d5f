"""Filesystem and file handle interfaces.

Every backend and composite implements ``FS``. Composites only ever hold
other filesystems through this interface, so any backend can be layered or
sub-rooted the same way.
"""

from abc import ABC, abstractmethod
from typing import List

from layerfs.core.types import DirEntry


class File(ABC):
    """Read handle onto the content of a file"""

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """
        Read up to ``size`` bytes from the current position.

        Args:
            size: Number of bytes to read; negative reads everything left

        Returns:
            The bytes read
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the handle; any further use is an error"""
        pass

    def __enter__(self) -> "File":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FS(ABC):
    """Read-only filesystem"""

    @abstractmethod
    def open(self, name: str) -> File:
        """
        Open a file.

        Args:
            name: Virtual path of the file

        Returns:
            Handle reading the file content

        Raises:
            NotFoundError: If the file does not exist
            SecurityViolationError: If the path escapes the root
        """
        pass

    @abstractmethod
    def read_dir(self, name: str) -> List[DirEntry]:
        """
        List the direct children of a directory.

        Args:
            name: Virtual path of the directory

        Returns:
            Entries in the order the backend produces them

        Raises:
            NotFoundError: If the directory does not exist
            SecurityViolationError: If the path escapes the root
        """
        pass

    @abstractmethod
    def read_file(self, name: str) -> bytes:
        """
        Read the whole content of a file.

        Args:
            name: Virtual path of the file

        Returns:
            The file content

        Raises:
            NotFoundError: If the file does not exist
            SecurityViolationError: If the path escapes the root
        """
        pass

    @abstractmethod
    def sub(self, dir: str) -> "FS":
        """
        Create a filesystem rooted at a directory of this one.

        Args:
            dir: Virtual path of the new root

        Returns:
            The sub-filesystem

        Raises:
            SecurityViolationError: If the path escapes the root
        """
        pass
