from __future__ import annotations

from pathlib import Path

import pytest

from tagtally.errors import ContentReadError, ContentTypeNotFoundError, MissingSettingError
from tagtally.repositories import ContentRepository, ContentRepositoryConfig


def _touch(path: Path, text: str = "x") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_config_from_settings(tmp_path: Path) -> None:
    config = ContentRepositoryConfig.from_settings(
        {
            "content_dir": str(tmp_path),
            "content_extensions": ["md", ".Markdown"],
            "content_recursive": False,
        }
    )
    assert config.root_dir == tmp_path
    assert config.extensions == (".md", ".markdown")
    assert config.recursive is False
    assert config.encoding == "utf-8"


def test_config_missing_content_dir() -> None:
    with pytest.raises(MissingSettingError):
        ContentRepositoryConfig.from_settings({})


def test_list_documents_recursive(tmp_path: Path) -> None:
    _touch(tmp_path / "blog" / "b.md")
    _touch(tmp_path / "blog" / "a.mdx")
    _touch(tmp_path / "blog" / "2024" / "c.MD")
    _touch(tmp_path / "blog" / "image.png")
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path))
    assert repo.list_documents("blog") == ["2024/c.MD", "a.mdx", "b.md"]


def test_list_documents_flat(tmp_path: Path) -> None:
    _touch(tmp_path / "blog" / "a.md")
    _touch(tmp_path / "blog" / "2024" / "c.md")
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path, recursive=False))
    assert repo.list_documents("blog") == ["a.md"]


def test_list_documents_missing_type(tmp_path: Path) -> None:
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path))
    with pytest.raises(ContentTypeNotFoundError):
        repo.list_documents("blog")


@pytest.mark.parametrize("content_type", ["", "../outside", "/etc"])
def test_invalid_content_type(tmp_path: Path, content_type: str) -> None:
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path))
    with pytest.raises(ContentTypeNotFoundError):
        repo.resolve_type_dir(content_type)


def test_read_document(tmp_path: Path) -> None:
    _touch(tmp_path / "blog" / "2024" / "a.md", "---\ntags: [x]\n---\n")
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path))
    assert repo.read("blog", "2024/a.md").startswith("---")


def test_read_missing_document(tmp_path: Path) -> None:
    (tmp_path / "blog").mkdir()
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path))
    with pytest.raises(ContentReadError) as excinfo:
        repo.read("blog", "gone.md")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_list_content_types(tmp_path: Path) -> None:
    (tmp_path / "blog").mkdir()
    (tmp_path / "notes").mkdir()
    (tmp_path / ".git").mkdir()
    _touch(tmp_path / "README.md")
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path))
    assert repo.list_content_types() == ["blog", "notes"]


def test_list_content_types_without_root(tmp_path: Path) -> None:
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path / "nope"))
    assert repo.list_content_types() == []


def test_read_replaces_undecodable_bytes(tmp_path: Path) -> None:
    target = tmp_path / "blog" / "a.md"
    target.parent.mkdir(parents=True)
    target.write_bytes(b"body \xff\n")
    repo = ContentRepository(ContentRepositoryConfig(root_dir=tmp_path))
    assert repo.read("blog", "a.md") == "body \ufffd\n"


def test_read_strict_decoding_raises(tmp_path: Path) -> None:
    target = tmp_path / "blog" / "a.md"
    target.parent.mkdir(parents=True)
    target.write_bytes(b"body \xff\n")
    config = ContentRepositoryConfig.from_settings(
        {"content_dir": str(tmp_path), "content_decode_errors": "strict"}
    )
    with pytest.raises(ContentReadError) as excinfo:
        ContentRepository(config).read("blog", "a.md")
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
