"""Tag frequency counting over the documents of one content type."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from collections.abc import Callable, Sequence
from typing import Protocol

from tagtally.utils.frontmatter import FrontMatter, parse_frontmatter
from tagtally.utils.slug import kebab_case

from .types import DocumentMeta

FrontMatterParser = Callable[[str], FrontMatter]
TagNormalizer = Callable[[str], str]


class DocumentSource(Protocol):
    def list_documents(self, content_type: str) -> Sequence[str]: ...

    def read(self, content_type: str, filename: str) -> str: ...


class TagCounter:
    """Count normalized tags across the non-draft documents of a content type.

    Every call lists and reads the documents again; nothing is cached. Errors
    raised by the document source propagate as they are.
    """

    def __init__(
        self,
        repository: DocumentSource,
        parse: FrontMatterParser = parse_frontmatter,
        normalize: TagNormalizer = kebab_case,
        logger: logging.Logger | None = None,
    ) -> None:
        self._repository = repository
        self._parse = parse
        self._normalize = normalize
        self._logger = logger or logging.getLogger("tagtally.tags")

    def count(self, content_type: str) -> dict[str, int]:
        filenames = self._repository.list_documents(content_type)
        counts: Counter[str] = Counter()
        for filename in filenames:
            text = self._repository.read(content_type, filename)
            self._add_document(counts, filename, text)
        return self._finish(content_type, filenames, counts)

    async def count_async(self, content_type: str) -> dict[str, int]:
        filenames = await asyncio.to_thread(
            self._repository.list_documents, content_type
        )
        counts: Counter[str] = Counter()
        # One document at a time; reads are moved off the event loop only.
        for filename in filenames:
            text = await asyncio.to_thread(
                self._repository.read, content_type, filename
            )
            self._add_document(counts, filename, text)
        return self._finish(content_type, filenames, counts)

    def _add_document(self, counts: Counter[str], filename: str, text: str) -> None:
        meta = DocumentMeta.from_data(self._parse(text).data)
        if not meta.is_countable:
            reason = "draft" if meta.draft else "no tags"
            self._logger.debug("Skipping %s: %s", reason, filename)
            return
        for tag in meta.tags:
            # Repeated tags in one document each count.
            counts[self._normalize(tag)] += 1

    def _finish(
        self, content_type: str, filenames: Sequence[str], counts: Counter[str]
    ) -> dict[str, int]:
        self._logger.debug(
            "Counted %d distinct tags across %d %s documents",
            len(counts),
            len(filenames),
            content_type,
        )
        return dict(counts)


def count_tags(
    content_type: str,
    *,
    repository: DocumentSource,
    parse: FrontMatterParser = parse_frontmatter,
    normalize: TagNormalizer = kebab_case,
    logger: logging.Logger | None = None,
) -> dict[str, int]:
    counter = TagCounter(repository, parse=parse, normalize=normalize, logger=logger)
    return counter.count(content_type)


async def count_tags_async(
    content_type: str,
    *,
    repository: DocumentSource,
    parse: FrontMatterParser = parse_frontmatter,
    normalize: TagNormalizer = kebab_case,
    logger: logging.Logger | None = None,
) -> dict[str, int]:
    counter = TagCounter(repository, parse=parse, normalize=normalize, logger=logger)
    return await counter.count_async(content_type)
