"""Shared fixtures for simple-ssg tests."""

from __future__ import annotations

import typing as typ
from pathlib import Path, PurePosixPath

import pytest

from simple_ssg.config import BuildConfig
from simple_ssg.generator.models import DirEntry, Ledger, RenderedPage

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def write_tree(root: Path, files: cabc.Mapping[str, str | bytes]) -> Path:
    """Create ``files`` (relative path -> content) below ``root``."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


def ledger_from_paths(paths: cabc.Iterable[str]) -> Ledger:
    """Build a walk-ordered ledger from rendered page paths.

    Files precede subdirectories within each directory and both are sorted
    by name, matching the walker's ordering.
    """
    tree: dict[str, typ.Any] = {}
    for path in paths:
        node = tree
        *folders, name = PurePosixPath(path).parts
        for folder in folders:
            node = node.setdefault(folder + "/", {})
        node[name] = None

    ledger: Ledger = []

    def _emit(node: dict[str, typ.Any], prefix: PurePosixPath, depth: int) -> None:
        files = sorted(name for name, child in node.items() if child is None)
        folders = sorted(name for name, child in node.items() if child is not None)
        for name in files:
            ledger.append(RenderedPage(depth, prefix / name, html=""))
        for name in folders:
            relative = prefix / name.rstrip("/")
            ledger.append(DirEntry(depth, relative))
            _emit(node[name], relative, depth + 1)

    _emit(tree, PurePosixPath(), 1)
    return ledger


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Return an empty source directory inside ``tmp_path``."""
    path = tmp_path / "target"
    path.mkdir()
    return path


@pytest.fixture
def make_config(
    source_dir: Path, tmp_path: Path
) -> cabc.Callable[..., BuildConfig]:
    """Return a factory for BuildConfig objects rooted at ``source_dir``."""

    def _make(**overrides: typ.Any) -> BuildConfig:
        values: dict[str, typ.Any] = {
            "source": source_dir,
            "output_dir": tmp_path / "output",
        }
        values.update(overrides)
        return BuildConfig(**values)

    return _make


@pytest.fixture
def tree_writer() -> cabc.Callable[[Path, cabc.Mapping[str, str | bytes]], Path]:
    """Expose :func:`write_tree` to tests."""
    return write_tree


@pytest.fixture
def ledger_builder() -> cabc.Callable[[cabc.Iterable[str]], Ledger]:
    """Expose :func:`ledger_from_paths` to tests."""
    return ledger_from_paths
