"""layerfs command line interface."""

from layerfs import __version__

__all__ = ["__version__"]
