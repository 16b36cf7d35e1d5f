"""Pytest configuration and fixtures"""

import logging
from pathlib import Path
from typing import Generator

import pytest
import structlog

from layerfs import EmbeddedFS, EmbeddedFsEntry, FolderFS
from layerfs.core.config import reset_settings
from layerfs.infrastructure.logging import configure_library_logging


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch) -> Generator[None, None, None]:
    """Keep settings and logging configuration from leaking between tests"""
    for name in (
        "LAYERFS_DEFAULT_ROOTS",
        "LAYERFS_OUTPUT_FORMAT",
        "LAYERFS_ENVIRONMENT",
        "LAYERFS_LOG_FORMAT",
        "LAYERFS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()

    yield

    reset_settings()
    structlog.reset_defaults()
    configure_library_logging()
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def sample_entries() -> dict:
    """Embedded table with a directory marker, a nested file and top-level files"""
    return {
        "/test.txt": EmbeddedFsEntry.file("a"),
        "/folder": EmbeddedFsEntry.directory(),
        "/folder/a.txt": EmbeddedFsEntry.file("c"),
        "/test1.txt": EmbeddedFsEntry.file("b"),
    }


@pytest.fixture
def embedded_fs(sample_entries: dict) -> EmbeddedFS:
    return EmbeddedFS(sample_entries)


@pytest.fixture
def host_tree(tmp_path: Path) -> Path:
    """Create a small directory tree on the host

    Layout:
        root/hello.txt
        root/docs/guide.md
        root/docs/api/index.md
        root/empty/
        secret.txt   (next to root, must stay unreachable)
    """
    root = tmp_path / "root"
    (root / "docs" / "api").mkdir(parents=True)
    (root / "empty").mkdir()

    (root / "hello.txt").write_bytes(b"Hello, layerfs!")
    (root / "docs" / "guide.md").write_text("# Guide\n")
    (root / "docs" / "api" / "index.md").write_text("# API\n")
    (tmp_path / "secret.txt").write_text("do not leak")

    return root


@pytest.fixture
def folder_fs(host_tree: Path) -> FolderFS:
    return FolderFS(str(host_tree))
