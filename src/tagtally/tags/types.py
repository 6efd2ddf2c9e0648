from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class DocumentMeta:
    """Frontmatter fields that decide whether and how a document is counted."""

    tags: tuple[str, ...] = ()
    draft: bool = False

    @property
    def has_tags(self) -> bool:
        return bool(self.tags)

    @property
    def is_countable(self) -> bool:
        return not self.draft and self.has_tags

    @classmethod
    def from_data(cls, data: Mapping[str, Any] | None) -> DocumentMeta:
        if not data:
            return cls()
        # Only a real boolean true marks a draft; "true" strings do not.
        draft = data.get("draft") is True
        return cls(tags=_coerce_tags(data.get("tags")), draft=draft)


def _coerce_tags(value: Any) -> tuple[str, ...]:
    # Falsy values ("", 0, false) mean no tags.
    if not value or isinstance(value, Mapping):
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(item) for item in value if item is not None)
    return (str(value),)
