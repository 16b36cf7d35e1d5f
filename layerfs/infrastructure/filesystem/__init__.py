"""Filesystem backends and composites."""
from .embedded import EmbeddedFS, EmbeddedFsEntry
from .folder import FolderFS, get_os_fs
from .layered import LayeredFS
from .memory_file import MemoryFile
from .path_security import normalize_virtual, secure_path
from .sub import SubFS

__all__ = [
    'EmbeddedFS',
    'EmbeddedFsEntry',
    'FolderFS',
    'LayeredFS',
    'MemoryFile',
    'SubFS',
    'get_os_fs',
    'normalize_virtual',
    'secure_path',
]
