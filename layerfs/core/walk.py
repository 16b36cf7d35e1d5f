"""Depth-first traversal over any filesystem."""

import posixpath
from typing import Callable, Iterator, Optional, Tuple

from layerfs.core.fs import FS
from layerfs.core.types import DirEntry, WalkAction

Visitor = Callable[[FS, DirEntry], WalkAction]


def walk(fs: FS, start_dir: str, visit: Visitor) -> bool:
    """
    Walk ``start_dir`` depth-first, pre-order.

    Entries are visited in the order ``fs.read_dir`` returns them. Returning
    ``WalkAction.CONTINUE`` for a directory descends into it before its
    siblings are visited, ``WalkAction.SKIP_SUBTREE`` skips the descent,
    and ``WalkAction.STOP`` ends the whole walk.

    Args:
        fs: Filesystem to walk
        start_dir: Directory to start at
        visit: Callback invoked with the filesystem and each entry

    Returns:
        True if the walk completed, False if it was stopped
    """
    for entry in fs.read_dir(start_dir):
        action = visit(fs, entry)

        if action is WalkAction.STOP:
            return False
        if action is WalkAction.SKIP_SUBTREE:
            continue
        if action is not WalkAction.CONTINUE:
            raise TypeError(f"Visitor must return a WalkAction, got {action!r}")

        if entry.is_dir:
            if not walk(fs, posixpath.join(start_dir, entry.name), visit):
                return False

    return True


def iter_tree(
    fs: FS, start_dir: str = "/", max_depth: Optional[int] = None
) -> Iterator[Tuple[str, DirEntry]]:
    """
    Yield ``(path, entry)`` for everything below ``start_dir`` in walk order.

    Args:
        fs: Filesystem to walk
        start_dir: Directory to start at
        max_depth: Deepest level to yield, 1 being the children of start_dir
    """
    if max_depth is not None and max_depth < 1:
        return

    for entry in fs.read_dir(start_dir):
        path = posixpath.join(start_dir, entry.name)
        yield path, entry
        if entry.is_dir:
            yield from iter_tree(
                fs, path, None if max_depth is None else max_depth - 1
            )
