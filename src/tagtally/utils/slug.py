"""Kebab-case helper used to key tags."""

from __future__ import annotations

import re
import unicodedata

_SLUG_REGEX = re.compile(r"[^a-z0-9]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _ascii_slug(value: str) -> str:
    normalized = unicodedata.normalize("NFKD", value)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")
    ascii_text = _CAMEL_BOUNDARY.sub("-", ascii_text).lower()
    return _SLUG_REGEX.sub("-", ascii_text).strip("-")


def kebab_case(value: str) -> str:
    """`Machine Learning`, `machineLearning` and `machine_learning` all map to
    `machine-learning`. Applying it twice gives the same result as once."""

    slug = _ascii_slug(value)
    if slug:
        return slug
    # Nothing survives ASCII folding (e.g. CJK tags): keep the text itself.
    folded = "-".join(unicodedata.normalize("NFKC", value).casefold().split())
    # Casefolding can itself produce ASCII (ß -> ss).
    return _ascii_slug(folded) or folded
