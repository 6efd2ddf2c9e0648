"""YAML frontmatter parser for content documents."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

_OPENER = "---"
_CLOSERS = ("---", "...")

_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"


class _CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 core booleans and integers.

    `yes`, `no`, `on` and `off` stay strings and `010` is decimal ten, as
    in the JavaScript frontmatter tooling most content repositories use.
    """


_CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_BOOL_TAG, _INT_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_CoreSchemaLoader.add_implicit_resolver(
    _BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF")
)
_CoreSchemaLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)


def _construct_int(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> int:
    value = str(loader.construct_scalar(node))
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value, 10)


_CoreSchemaLoader.add_constructor(_INT_TAG, _construct_int)


@dataclass(frozen=True, slots=True)
class FrontMatter:
    """Parsed frontmatter metadata and the document body."""

    data: dict[str, Any] = field(default_factory=dict)
    content: str = ""


def parse_frontmatter(text: str) -> FrontMatter:
    """Split ``text`` into its leading YAML block and body.

    A document without a block, with an unterminated block, or whose block
    is not a YAML mapping gets empty ``data`` and its whole text as
    ``content``. Malformed YAML is not an error.
    """

    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _OPENER:
        return FrontMatter(data={}, content=text)

    end_idx = None
    for idx, line in enumerate(lines[1:], start=1):
        if line.rstrip() in _CLOSERS:
            end_idx = idx
            break
    if end_idx is None:
        return FrontMatter(data={}, content=text)

    block = "".join(lines[1:end_idx])
    content = "".join(lines[end_idx + 1 :])
    try:
        data = yaml.load(block, Loader=_CoreSchemaLoader)
    except yaml.YAMLError:
        return FrontMatter(data={}, content=text)
    if data is None:
        return FrontMatter(data={}, content=content)
    if not isinstance(data, Mapping):
        return FrontMatter(data={}, content=text)
    return FrontMatter(data=dict(data), content=content)
