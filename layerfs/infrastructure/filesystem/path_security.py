"""Path confinement for virtual and host paths."""
import posixpath

from layerfs.core.exceptions import SecurityViolationError
from layerfs.infrastructure.logging import get_logger

logger = get_logger(__name__)

VIRTUAL_ROOT = "/"


def secure_path(base: str, path: str, *, pathmod=posixpath) -> str:
    """
    Join ``path`` below ``base`` and make sure the result stays there.

    A leading separator in ``path`` refers to ``base`` itself, not to the
    host root. The joined path is normalized before it is checked, so
    ``..`` segments cannot sneak past the prefix comparison.

    Args:
        base: Directory the result is confined to
        path: Path relative to ``base``
        pathmod: Path flavour, ``posixpath`` for virtual paths or
            ``os.path`` for host paths

    Returns:
        Normalized path inside ``base``

    Raises:
        SecurityViolationError: If the normalized path leaves ``base``
    """
    base = pathmod.normpath(base)
    relative = path.lstrip(pathmod.sep)
    if pathmod.altsep:
        relative = relative.lstrip(pathmod.altsep)

    resolved = pathmod.normpath(pathmod.join(base, relative))

    if not is_within(base, resolved, pathmod=pathmod):
        logger.warning("path_escape_rejected", base=base, path=path)
        raise SecurityViolationError(base, path)

    return resolved


def is_within(base: str, path: str, *, pathmod=posixpath) -> bool:
    """Check whether normalized ``path`` equals ``base`` or lies below it."""
    if path == base:
        return True

    if base == pathmod.curdir:
        return not pathmod.isabs(path) and path.split(pathmod.sep)[0] != pathmod.pardir

    prefix = base if base.endswith(pathmod.sep) else base + pathmod.sep
    return path.startswith(prefix)


def normalize_virtual(path: str) -> str:
    """Canonical absolute form of a virtual path."""
    return secure_path(VIRTUAL_ROOT, path)
