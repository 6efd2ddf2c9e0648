"""pipelines"""

import json
from collections.abc import Mapping
from typing import Any

from tagtally import config
from tagtally.logging import get_logger
from tagtally.repositories import ContentRepository
from tagtally.tags import TagCounter


def _merge_config(cli_options: Mapping[str, Any] | None) -> dict[str, Any]:
    return config.get_config(cli_options or {})


def run_count(cli_options: Mapping[str, Any] | None = None) -> dict[str, int]:
    """
    Count command
    """

    settings = _merge_config(cli_options)
    logger = get_logger("tagtally.count", bool(settings.get("verbose", False)))

    content_type = str(settings.get("content_type") or "")
    repository = ContentRepository.from_settings(settings)
    logger.debug("Counting tags of %s under %s", content_type, repository.config.root_dir)
    counts = TagCounter(repository, logger=logger).count(content_type)

    if settings.get("json"):
        print(json.dumps(counts, ensure_ascii=False, indent=2))
    else:
        for tag, count in counts.items():
            print(f"{tag}\t{count}")
    return counts


def run_types(cli_options: Mapping[str, Any] | None = None) -> list[str]:
    """
    Types command
    """

    settings = _merge_config(cli_options)
    repository = ContentRepository.from_settings(settings)
    content_types = repository.list_content_types()
    for name in content_types:
        print(name)
    return content_types
