"""Application services.

This module contains tooling that combines the core filesystem types with
infrastructure, such as the embedded data module generator.
"""

from layerfs.application.embed_generator import (
    EmbedDeclaration,
    EmbedGenerator,
    add_to_ignore_file,
)

__all__ = [
    "EmbedDeclaration",
    "EmbedGenerator",
    "add_to_ignore_file",
]
