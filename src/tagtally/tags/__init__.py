from .counter import DocumentSource, TagCounter, count_tags, count_tags_async
from .types import DocumentMeta

__all__ = [
    "DocumentMeta",
    "DocumentSource",
    "TagCounter",
    "count_tags",
    "count_tags_async",
]
