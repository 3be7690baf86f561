import logging
from pathlib import Path

from awesome_projects.shared.exceptions import (
    InputNotFoundError,
    InputUnreadableError,
    OutputWriteError,
)

logger = logging.getLogger(__name__)


def read_file_content(path: Path) -> str:
    """Read a UTF-8 text file, mapping failures onto the input error kinds."""
    if not path.exists():
        raise InputNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise InputUnreadableError(f"Not a regular file: {path}")

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputUnreadableError(f"Cannot decode {path} as UTF-8: {e}") from e
    except OSError as e:
        raise InputUnreadableError(f"Cannot read {path}: {e}") from e


def write_output_file(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {path}: {e}") from e
    logger.debug("Wrote %d chars to %s", len(content), path)


def ensure_tmp_directory(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Cannot create directory {path}: {e}") from e
    return path
