"""Layered filesystem: an overlay of several filesystems."""
from typing import Callable, List, Tuple, TypeVar

from layerfs.core.exceptions import LayerFailureError, NotFoundError
from layerfs.core.fs import FS, File
from layerfs.core.types import DirEntry
from layerfs.infrastructure.filesystem.sub import SubFS
from layerfs.infrastructure.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class LayeredFS(FS):
    """Tries its layers in order; the first layer that has the path wins.

    Only ``NotFoundError`` moves on to the next layer. Any other failure is
    raised as ``LayerFailureError`` right away, so a broken layer is never
    mistaken for a missing file.
    """

    def __init__(self, *layers: FS):
        self.layers: Tuple[FS, ...] = layers

    def open(self, name: str) -> File:
        return self._first(name, "open", lambda layer: layer.open(name))

    def read_dir(self, name: str) -> List[DirEntry]:
        return self._first(name, "read_dir", lambda layer: layer.read_dir(name))

    def read_file(self, name: str) -> bytes:
        return self._first(name, "read_file", lambda layer: layer.read_file(name))

    def sub(self, dir: str) -> FS:
        return SubFS(self, dir)

    def _first(self, name: str, operation: str, call: Callable[[FS], T]) -> T:
        for index, layer in enumerate(self.layers):
            try:
                return call(layer)
            except NotFoundError:
                logger.debug(
                    "layer_miss",
                    operation=operation,
                    path=name,
                    layer=index,
                )
                continue
            except Exception as e:
                logger.warning(
                    "layer_failed",
                    operation=operation,
                    path=name,
                    layer=index,
                    layer_type=type(layer).__name__,
                    error=str(e),
                )
                raise LayerFailureError(index, layer, e) from e

        raise NotFoundError(name)

    def __repr__(self) -> str:
        return f"LayeredFS({', '.join(repr(layer) for layer in self.layers)})"
