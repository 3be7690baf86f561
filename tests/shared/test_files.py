import pytest

from awesome_projects.shared.exceptions import (
    InputNotFoundError,
    InputUnreadableError,
    OutputWriteError,
)
from awesome_projects.shared.files import (
    ensure_tmp_directory,
    read_file_content,
    write_output_file,
)


def test_read_file_content(tmp_path):
    path = tmp_path / "README.md"
    path.write_text("## 🚀 Projects\n", encoding="utf-8")

    assert read_file_content(path) == "## 🚀 Projects\n"


def test_read_file_content_missing(tmp_path):
    with pytest.raises(InputNotFoundError):
        read_file_content(tmp_path / "missing.md")


def test_read_file_content_directory(tmp_path):
    with pytest.raises(InputUnreadableError):
        read_file_content(tmp_path)


def test_read_file_content_bad_encoding(tmp_path):
    path = tmp_path / "README.md"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(InputUnreadableError):
        read_file_content(path)


def test_write_output_file_creates_parents(tmp_path):
    path = tmp_path / "a" / "b" / "out.txt"
    write_output_file(path, "content\n")

    assert path.read_text(encoding="utf-8") == "content\n"


def test_write_output_file_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(OutputWriteError):
        write_output_file(blocker / "out.txt", "content")


def test_ensure_tmp_directory(tmp_path):
    path = ensure_tmp_directory(tmp_path / "tmp")

    assert path.is_dir()
    assert ensure_tmp_directory(path) == path
