"""リポジトリデータクラス"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from tagtally.errors import MissingSettingError

_DEFAULT_EXTENSIONS = (".md", ".mdx")


def _normalize_extensions(value: Any) -> tuple[str, ...]:
    if value is None:
        return _DEFAULT_EXTENSIONS
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    else:
        items = value
    extensions: list[str] = []
    for item in items:
        ext = str(item).strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in extensions:
            extensions.append(ext)
    return tuple(extensions) or _DEFAULT_EXTENSIONS


# --- Config. ---
@dataclass(frozen=True, slots=True)
class ContentRepositoryConfig:
    """コンテンツ読み込みに必要な設定値を束ねる。"""

    root_dir: Path
    extensions: tuple[str, ...] = _DEFAULT_EXTENSIONS
    encoding: str = "utf-8"
    recursive: bool = True
    decode_errors: str = "replace"

    def __post_init__(self) -> None:  # type: ignore[override]
        object.__setattr__(self, "root_dir", Path(self.root_dir).expanduser())
        object.__setattr__(self, "extensions", _normalize_extensions(self.extensions))

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> ContentRepositoryConfig:
        content_dir = settings.get("content_dir")
        if not content_dir:
            raise MissingSettingError("content_dir")
        return cls(
            root_dir=Path(str(content_dir)),
            extensions=settings.get("content_extensions") or _DEFAULT_EXTENSIONS,
            encoding=str(settings.get("content_encoding") or "utf-8"),
            recursive=bool(settings.get("content_recursive", True)),
            decode_errors=str(settings.get("content_decode_errors") or "replace"),
        )
