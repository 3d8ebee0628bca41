"""Filesystem helpers for zulip-markdown."""

from __future__ import annotations

import os
import stat
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .constants import DEFAULT_MAX_FILE_SIZE

MAX_FILE_SIZE_ENV_VAR = "ZULIP_MARKDOWN_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Resolve the maximum allowed file size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed file size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def contains_symlink(path: Path) -> bool:
    """Check whether a path or any parent directory is a symlink."""
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


def normalize_filepath(raw_path: str, base_dir: Path) -> Path:
    """Resolve and validate an input filepath under a base directory.

    Args:
        raw_path: User-supplied path (absolute or relative).
        base_dir: Working directory that constrains allowed paths.

    Returns:
        Path: Absolute path to the file.

    Raises:
        ValueError: If the path does not exist, is not a regular file, is
            outside `base_dir`, or traverses a symlink.
    """
    path = Path(raw_path).expanduser()
    if not path.is_absolute():
        path = base_dir / path

    if contains_symlink(path):
        error_message = f"Symlinks are not supported for security reasons: {path}"
        raise ValueError(error_message)

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        error_message = f"{path} does not exist."
        raise ValueError(error_message) from error
    except OSError as error:
        error_message = f"Error resolving {path}: {error}"
        raise ValueError(error_message) from error

    if not resolved.is_file():
        error_message = f"{resolved} is not a regular file."
        raise ValueError(error_message)

    try:
        resolved.relative_to(base_dir)
    except ValueError as error:
        error_message = f"{resolved} is outside of the working directory {base_dir}."
        raise ValueError(error_message) from error

    return resolved


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Return stat information for a file while disallowing symlinks.

    Raises:
        IOError: If the path is inaccessible, a symlink, or not a regular file.
    """
    try:
        stat_result = os.stat(filepath, follow_symlinks=False)
    except OSError as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error

    if stat.S_ISLNK(stat_result.st_mode):
        error_message = f"Symlinks are not supported: {filepath}."
        raise IOError(error_message)

    if not stat.S_ISREG(stat_result.st_mode):
        error_message = f"{filepath} is not a regular file."
        raise IOError(error_message)

    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    """Guard against files that exceed the configured maximum size.

    Raises:
        IOError: If `stat_result.st_size` exceeds `max_size`.
    """
    if stat_result.st_size > max_size:
        error_message = f"{filepath} exceeds the maximum allowed size of {max_size} bytes."
        raise IOError(error_message)


def _fingerprint(stat_result: os.stat_result) -> tuple:
    return (
        getattr(stat_result, "st_ino", None),
        getattr(stat_result, "st_dev", None),
        stat_result.st_size,
        stat_result.st_mtime_ns,
    )


def ensure_file_unchanged(
    expected_stat: os.stat_result, current_stat: os.stat_result, filepath: Path
):
    """Refuse to continue when a file was replaced or edited since `expected_stat`.

    Raises:
        IOError: If inode, device, size, or modification time differ.
    """
    if _fingerprint(expected_stat) != _fingerprint(current_stat):
        error_message = f"{filepath} changed during processing; refusing to overwrite."
        raise IOError(error_message)


def safe_read(filepath: Path) -> TextIO:
    """Open a file for reading with consistent error handling.

    Line endings are not translated, so the text reads back byte-for-byte.

    Raises:
        IOError: If the path is missing, inaccessible, or not a file.
    """
    try:
        return open(filepath, "r", encoding="UTF-8", newline="")
    except (
        FileNotFoundError,
        PermissionError,
        IsADirectoryError,
        NotADirectoryError,
    ) as error:
        error_message = f"Error accessing {filepath}: {error}"
        raise IOError(error_message) from error


def read_text(filepath: Path, max_size: int) -> tuple[str, os.stat_result]:
    """Read a UTF-8 file after checking its type and size.

    Args:
        filepath: Path to the file.
        max_size: Maximum allowed size in bytes.

    Returns:
        tuple[str, os.stat_result]: File content and the stat taken before
            reading, for later change detection.

    Raises:
        IOError: If the file is not a readable regular file, is too large, or
            is not valid UTF-8.
    """
    stat_result = collect_file_stat(filepath)
    enforce_file_size(stat_result, max_size, filepath)
    try:
        with safe_read(filepath) as handle:
            content = handle.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise IOError(error_message) from error
    return content, stat_result


def write_atomic(
    filepath: Path,
    content: str,
    expected_stat: os.stat_result,
    warn: Callable[[str], None] | None = None,
):
    """Replace a file's content atomically, keeping its metadata.

    Args:
        filepath: File to overwrite.
        content: New file content, written without newline translation.
        expected_stat: Stat captured before reading, used to detect races and
            to restore permissions, ownership, and access time.
        warn: Optional callback for non-fatal warnings.

    Raises:
        IOError: If the file changed since `expected_stat` was taken or cannot
            be replaced.
    """
    current_stat = collect_file_stat(filepath)
    ensure_file_unchanged(expected_stat, current_stat, filepath)

    permissions = stat.S_IMODE(expected_stat.st_mode)
    uid = getattr(expected_stat, "st_uid", None)
    gid = getattr(expected_stat, "st_gid", None)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", encoding="UTF-8", newline="", delete=False, dir=filepath.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
            os.chmod(tmp_file.name, permissions)

            if uid is not None and gid is not None and hasattr(os, "chown"):
                try:
                    os.chown(tmp_file.name, uid, gid)
                except PermissionError:
                    if warn is not None:
                        warn(
                            f"Warning: Could not preserve file ownership for {filepath.name} "
                            "(requires elevated privileges)"
                        )

        os.replace(temp_path, filepath)

        # Keep the original atime; mtime reflects the rewrite
        new_stat = filepath.stat()
        os.utime(filepath, ns=(expected_stat.st_atime_ns, new_stat.st_mtime_ns))
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass
