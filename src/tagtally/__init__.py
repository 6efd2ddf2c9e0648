"""Tagtally public API."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .tags import TagCounter, count_tags, count_tags_async

try:
    __version__ = version("tagtally")
except PackageNotFoundError:  # pragma: no cover - during source-only use
    __version__ = "unknown"

__all__ = ["__version__", "TagCounter", "count_tags", "count_tags_async"]
