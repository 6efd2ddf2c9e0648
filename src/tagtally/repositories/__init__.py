"""Public interface for tagtally repositories."""

from .content_repository import ContentRepository
from .types import ContentRepositoryConfig

__all__ = [
    "ContentRepository",
    "ContentRepositoryConfig",
]
