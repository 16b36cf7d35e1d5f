"""Core interfaces and types for layerfs."""
from layerfs.core.exceptions import (
    BackendError,
    EmbedConfigurationError,
    FileClosedError,
    InvalidRootError,
    IsADirError,
    LayerFailureError,
    LayerFsError,
    NotADirError,
    NotFoundError,
    SecurityViolationError,
)
from layerfs.core.fs import FS, File
from layerfs.core.types import DirEntry, FileKind, WalkAction
from layerfs.core.walk import iter_tree, walk

__all__ = [
    "FS",
    "File",
    "DirEntry",
    "FileKind",
    "WalkAction",
    "walk",
    "iter_tree",
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
