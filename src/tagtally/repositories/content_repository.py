from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from tagtally.errors import ContentReadError, ContentTypeNotFoundError

from .types import ContentRepositoryConfig


@dataclass(slots=True)
class ContentRepository:
    """コンテンツ種別ごとのディレクトリからドキュメントを読み出す。"""

    config: ContentRepositoryConfig

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> ContentRepository:
        return cls(ContentRepositoryConfig.from_settings(settings))

    def resolve_type_dir(self, content_type: str) -> Path:
        """種別名をコンテンツルート配下のディレクトリへ解決する。"""

        name = content_type.strip()
        parts = PurePosixPath(name.replace("\\", "/")).parts
        if not name or PurePosixPath(name).is_absolute() or ".." in parts:
            raise ContentTypeNotFoundError(
                f"Invalid content type: {content_type!r}",
                hint="Use the name of a directory inside the content root.",
            )
        return self.config.root_dir / name

    def list_documents(self, content_type: str) -> list[str]:
        """種別ディレクトリ配下のドキュメントを相対パス（POSIX形式）で返す。"""

        type_dir = self.resolve_type_dir(content_type)
        if not type_dir.is_dir():
            raise ContentTypeNotFoundError(
                f"Content type not found: {content_type} ({type_dir})",
                hint="Check `content_dir` or run `tagtally types` to list known types.",
            )
        iterator = type_dir.rglob("*") if self.config.recursive else type_dir.glob("*")
        extensions = self.config.extensions
        return sorted(
            path.relative_to(type_dir).as_posix()
            for path in iterator
            if path.is_file() and path.suffix.lower() in extensions
        )

    def read(self, content_type: str, filename: str) -> str:
        """ドキュメント全文を設定のエンコーディングで読み込む。"""

        target = self.resolve_type_dir(content_type) / filename
        try:
            return target.read_text(
                encoding=self.config.encoding, errors=self.config.decode_errors
            )
        except FileNotFoundError as exc:
            raise ContentReadError(f"Document not found: {target}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentReadError(f"Failed to read document: {target}") from exc

    def list_content_types(self) -> list[str]:
        root = self.config.root_dir
        if not root.is_dir():
            return []
        return sorted(
            path.name
            for path in root.iterdir()
            if path.is_dir() and not path.name.startswith(".")
        )
