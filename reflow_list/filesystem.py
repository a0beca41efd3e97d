"""Reading and rewriting the text files reflow-list operates on."""

from __future__ import annotations

import os
import stat
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE
from .exceptions import SourceFileError

MAX_FILE_SIZE_ENV_VAR = "REFLOW_LIST_MAX_FILE_SIZE"


@dataclass(frozen=True)
class SourceFile:
    """A file's text together with the state it was read in.

    Attributes:
        path: Resolved location. A symlink is followed, so rewriting replaces
            the file it points to and leaves the link in place.
        content: Decoded text with its line endings untranslated.
        status: Metadata captured before reading, used to detect concurrent
            edits and to restore the file mode and owner on rewrite.
    """

    path: Path
    content: str
    status: os.stat_result


def max_file_size(configured: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the size limit, honoring ``REFLOW_LIST_MAX_FILE_SIZE`` when set.

    Raises:
        ValueError: If the environment value is not a positive integer.
    """
    raw_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw_value is None:
        return configured

    if not raw_value.strip().isdigit() or int(raw_value) == 0:
        raise ValueError(
            f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {raw_value!r}."
        )
    return int(raw_value)


def _regular_file_status(path: Path) -> os.stat_result:
    try:
        status = path.stat()
    except OSError as error:
        raise SourceFileError(path, f"cannot be accessed: {error.strerror}") from error

    # Reading a FIFO or a device would block or never end
    if not stat.S_ISREG(status.st_mode):
        raise SourceFileError(path, "is not a regular file.")
    return status


def _same_state(before: os.stat_result, after: os.stat_result) -> bool:
    return (before.st_ino, before.st_dev, before.st_size, before.st_mtime_ns) == (
        after.st_ino,
        after.st_dev,
        after.st_size,
        after.st_mtime_ns,
    )


def read_source(path: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> SourceFile:
    """Read a UTF-8 text file for reflowing.

    Args:
        path: File to read. ``~`` is expanded and symlinks are followed.
        max_size: Largest accepted size in bytes.

    Returns:
        SourceFile: The file's text and the state it was read in.

    Raises:
        SourceFileError: If the file is missing, not a regular file, too
            large, not valid UTF-8, or modified while being read.

    Examples:
        source = read_source(Path("src/main.c"), max_size=1_048_576)
    """
    try:
        resolved = Path(path).expanduser().resolve(strict=True)
    except FileNotFoundError as error:
        raise SourceFileError(path, "does not exist.") from error
    except OSError as error:
        raise SourceFileError(path, f"cannot be resolved: {error}") from error

    status = _regular_file_status(resolved)
    if status.st_size > max_size:
        raise SourceFileError(resolved, f"exceeds the maximum allowed size of {max_size} bytes.")

    try:
        with open(resolved, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except UnicodeDecodeError as error:
        raise SourceFileError(
            resolved, f"contains an invalid UTF-8 sequence at byte {error.start}."
        ) from error
    except OSError as error:
        raise SourceFileError(resolved, f"cannot be read: {error.strerror}") from error

    if not _same_state(status, _regular_file_status(resolved)):
        raise SourceFileError(resolved, "changed while being read.")

    return SourceFile(path=resolved, content=content, status=status)


def write_source(
    source: SourceFile,
    content: str,
    warn: Callable[[str], None] | None = None,
):
    """Replace the file `source` was read from with `content`.

    The text goes to a temporary file next to the original, which is synced
    and then renamed over it, so readers see either the old or the new file.
    The mode is copied; the owner is copied when privileges allow it.

    Args:
        source: Result of `read_source` for the file to replace.
        content: New text, line endings included.
        warn: Callback for non-fatal problems, such as a lost owner.

    Raises:
        SourceFileError: If the file changed since it was read, or the
            replacement cannot be written.
    """
    path = source.path
    if not _same_state(source.status, _regular_file_status(path)):
        raise SourceFileError(path, "changed during processing; refusing to overwrite.")

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())

        os.chmod(temp_path, stat.S_IMODE(source.status.st_mode))
        if hasattr(os, "chown"):
            try:
                os.chown(temp_path, source.status.st_uid, source.status.st_gid)
            except PermissionError:
                if warn is not None:
                    warn(f"Warning: could not keep the owner of {path.name}; it now belongs to you")

        os.replace(temp_path, path)
    except OSError as error:
        raise SourceFileError(path, f"could not be rewritten: {error}") from error
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
