from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from zulip_markdown.filesystem import (
    collect_file_stat,
    contains_symlink,
    enforce_file_size,
    ensure_file_unchanged,
    get_max_file_size,
    normalize_filepath,
    read_text,
    safe_read,
    write_atomic,
)


def test_get_max_file_size_uses_default(monkeypatch):
    monkeypatch.delenv("ZULIP_MARKDOWN_MAX_FILE_SIZE", raising=False)
    assert get_max_file_size(default=123) == 123


def test_get_max_file_size_reads_environment(monkeypatch):
    monkeypatch.setenv("ZULIP_MARKDOWN_MAX_FILE_SIZE", "2048")
    assert get_max_file_size() == 2048


def test_get_max_file_size_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("ZULIP_MARKDOWN_MAX_FILE_SIZE", "invalid")
    with pytest.raises(ValueError):
        get_max_file_size()


def test_get_max_file_size_rejects_non_positive(monkeypatch):
    monkeypatch.setenv("ZULIP_MARKDOWN_MAX_FILE_SIZE", "0")
    with pytest.raises(ValueError):
        get_max_file_size()


def test_normalize_filepath_missing_file(tmp_path: Path):
    with pytest.raises(ValueError):
        normalize_filepath(str(tmp_path / "missing.md"), tmp_path)


def test_normalize_filepath_resolves_relative_paths(tmp_path: Path):
    target = tmp_path / "reply.md"
    target.write_text("text", encoding="utf-8")
    base_dir = tmp_path.resolve()

    assert normalize_filepath("reply.md", base_dir) == base_dir / "reply.md"


def test_normalize_filepath_rejects_directory(tmp_path: Path):
    folder = tmp_path / "folder"
    folder.mkdir()
    with pytest.raises(ValueError):
        normalize_filepath(str(folder), tmp_path)


def test_normalize_filepath_rejects_outside_base(tmp_path: Path):
    inside = tmp_path / "inside"
    inside.mkdir()
    outside = tmp_path / "outside.md"
    outside.write_text("text", encoding="utf-8")

    with pytest.raises(ValueError, match="outside of the working directory"):
        normalize_filepath(str(outside), inside.resolve())


def test_contains_symlink_handles_oserror(monkeypatch, tmp_path: Path):
    candidate = tmp_path / "candidate.md"
    candidate.write_text("text", encoding="utf-8")
    original_is_symlink = Path.is_symlink
    call_count = {"count": 0}

    def _flaky_is_symlink(self):
        if self == candidate and call_count["count"] == 0:
            call_count["count"] += 1
            raise OSError("stat boom")
        return original_is_symlink(self)

    monkeypatch.setattr(Path, "is_symlink", _flaky_is_symlink)
    assert contains_symlink(candidate) is False


def test_collect_file_stat_handles_missing_file(tmp_path: Path):
    with pytest.raises(IOError):
        collect_file_stat(tmp_path / "missing.md")


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="Symlink support is required")
def test_collect_file_stat_rejects_symlink(tmp_path: Path):
    target = tmp_path / "actual.md"
    target.write_text("text", encoding="utf-8")
    link = tmp_path / "alias.md"
    os.symlink(target, link)

    with pytest.raises(IOError):
        collect_file_stat(link)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="mkfifo not available")
def test_collect_file_stat_rejects_fifo(tmp_path: Path):
    fifo = tmp_path / "pipe.md"
    try:
        os.mkfifo(fifo)
    except OSError:  # pragma: no cover
        pytest.skip("Unable to create FIFO")

    with pytest.raises(IOError) as exc_info:
        collect_file_stat(fifo)
    assert "is not a regular file" in str(exc_info.value)


def test_enforce_file_size(tmp_path: Path):
    target = tmp_path / "big.md"
    target.write_text("X" * 20, encoding="utf-8")
    stat_result = target.stat()

    enforce_file_size(stat_result, 20, target)
    with pytest.raises(IOError, match="maximum allowed size"):
        enforce_file_size(stat_result, 19, target)


def test_ensure_file_unchanged_detects_modification(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_text("one", encoding="utf-8")
    before = target.stat()
    target.write_text("one two", encoding="utf-8")

    with pytest.raises(IOError, match="changed during processing"):
        ensure_file_unchanged(before, target.stat(), target)


def test_safe_read_raises_for_directory(tmp_path: Path):
    directory = tmp_path / "folder"
    directory.mkdir()

    with pytest.raises(IOError):
        safe_read(directory)


def test_read_text_keeps_line_endings(tmp_path: Path):
    target = tmp_path / "crlf.md"
    target.write_bytes(b"line one\r\nline two")

    content, stat_result = read_text(target, 1024)

    assert content == "line one\r\nline two"
    assert stat_result.st_size == len(b"line one\r\nline two")


def test_read_text_rejects_invalid_utf8(tmp_path: Path):
    target = tmp_path / "broken.md"
    target.write_bytes(b"\xff\xfe text")

    with pytest.raises(IOError, match="Invalid UTF-8"):
        read_text(target, 1024)


def test_write_atomic_preserves_permissions(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_text("old", encoding="utf-8")
    os.chmod(target, 0o640)
    before = collect_file_stat(target)

    write_atomic(target, "new\r\ncontent", before)

    assert target.read_bytes() == b"new\r\ncontent"
    assert stat.S_IMODE(target.stat().st_mode) == 0o640
    assert list(tmp_path.iterdir()) == [target]


def test_write_atomic_refuses_changed_file(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_text("old", encoding="utf-8")
    before = collect_file_stat(target)
    target.write_text("changed meanwhile", encoding="utf-8")

    with pytest.raises(IOError, match="changed during processing"):
        write_atomic(target, "new", before)

    assert target.read_text(encoding="utf-8") == "changed meanwhile"


def test_ensure_file_unchanged_accepts_same_snapshot(tmp_path: Path):
    target = tmp_path / "doc.md"
    target.write_text("one", encoding="utf-8")
    snapshot = target.stat()

    ensure_file_unchanged(snapshot, target.stat(), target)
