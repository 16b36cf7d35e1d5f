"""
layerfs - uniform read access to folders, embedded data and overlays of both.

Example usage:

    from layerfs import EmbeddedFS, EmbeddedFsEntry, FolderFS, LayeredFS

    defaults = EmbeddedFS({
        "/config.toml": EmbeddedFsEntry.file("debug = false"),
    })
    fs = LayeredFS(FolderFS("./overrides"), defaults)

    fs.read_file("/config.toml")
"""

from layerfs.core import (
    FS,
    BackendError,
    DirEntry,
    EmbedConfigurationError,
    File,
    FileClosedError,
    FileKind,
    InvalidRootError,
    IsADirError,
    LayerFailureError,
    LayerFsError,
    NotADirError,
    NotFoundError,
    SecurityViolationError,
    WalkAction,
    iter_tree,
    walk,
)
from layerfs.infrastructure.filesystem import (
    EmbeddedFS,
    EmbeddedFsEntry,
    FolderFS,
    LayeredFS,
    MemoryFile,
    SubFS,
    get_os_fs,
    secure_path,
)

__all__ = [
    "FS",
    "File",
    "DirEntry",
    "FileKind",
    "WalkAction",
    "walk",
    "iter_tree",
    "EmbeddedFS",
    "EmbeddedFsEntry",
    "FolderFS",
    "LayeredFS",
    "MemoryFile",
    "SubFS",
    "get_os_fs",
    "secure_path",
    "LayerFsError",
    "NotFoundError",
    "SecurityViolationError",
    "InvalidRootError",
    "LayerFailureError",
    "IsADirError",
    "NotADirError",
    "BackendError",
    "FileClosedError",
    "EmbedConfigurationError",
]
__version__ = "0.1.0"
