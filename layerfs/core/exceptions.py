"""Base exception classes for layerfs"""

from typing import Any, Dict, Optional


class LayerFsError(Exception):
    """Base exception for all layerfs errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(LayerFsError):
    """Raised when a file or directory does not exist"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Could not find file or directory: {path}",
            {"path": path}
        )


class SecurityViolationError(LayerFsError):
    """Raised when a path escapes the root it is confined to"""

    def __init__(self, base: str, path: str):
        self.base = base
        self.path = path
        super().__init__(
            f"Path '{path}' escapes confinement to '{base}'",
            {"base": base, "path": path}
        )


class InvalidRootError(LayerFsError):
    """Raised when a filesystem is constructed on an unusable root"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Invalid filesystem root '{path}': {reason}",
            {"path": path, "reason": reason}
        )


class LayerFailureError(LayerFsError):
    """Raised when a layer of a layered filesystem fails with anything but not-found"""

    def __init__(self, index: int, layer: Any, cause: BaseException):
        self.index = index
        self.layer = layer
        self.cause = cause
        layer_name = type(layer).__name__
        super().__init__(
            f"Layer {index} ({layer_name}) failed: {cause}",
            {"index": index, "layer": layer_name, "cause": repr(cause)}
        )


class IsADirError(LayerFsError):
    """Raised when file content is requested for a directory"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Is a directory: {path}", {"path": path})


class NotADirError(LayerFsError):
    """Raised when a listing is requested for something that is not a directory"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a directory: {path}", {"path": path})


class BackendError(LayerFsError):
    """Raised when the storage behind a backend fails"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Backend failure on '{path}': {reason}",
            {"path": path, "reason": reason}
        )


class FileClosedError(LayerFsError):
    """Raised when a closed file handle is used"""

    def __init__(self):
        super().__init__("I/O operation on closed file")


class EmbedConfigurationError(LayerFsError):
    """Raised when the embed generator is misconfigured"""
    pass
