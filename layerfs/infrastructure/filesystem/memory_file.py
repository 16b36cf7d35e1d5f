"""In-memory file handle."""
import os

from layerfs.core.exceptions import FileClosedError
from layerfs.core.fs import File


class MemoryFile(File):
    """File handle over a byte buffer held in memory.

    Reads past the end are clamped to the bytes that are left, and return
    ``b""`` once the end is reached. Every operation except ``close`` raises
    ``FileClosedError`` after the handle was closed.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self.position = 0
        self.closed = False

    def read(self, size: int = -1) -> bytes:
        self._check_open()

        if size is None or size < 0:
            end = len(self._data)
        else:
            end = min(self.position + size, len(self._data))

        chunk = self._data[self.position:end]
        self.position += len(chunk)
        return chunk

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        """
        Move the cursor.

        Args:
            offset: Byte offset
            whence: os.SEEK_SET, os.SEEK_CUR or os.SEEK_END

        Returns:
            The new position
        """
        self._check_open()

        if whence == os.SEEK_SET:
            target = offset
        elif whence == os.SEEK_CUR:
            target = self.position + offset
        elif whence == os.SEEK_END:
            target = len(self._data) + offset
        else:
            raise ValueError(f"Invalid whence: {whence}")

        if target < 0:
            raise ValueError(f"Negative seek position: {target}")

        self.position = target
        return self.position

    def tell(self) -> int:
        self._check_open()
        return self.position

    def close(self) -> None:
        self.closed = True

    def __len__(self) -> int:
        return len(self._data)

    def _check_open(self) -> None:
        if self.closed:
            raise FileClosedError()
