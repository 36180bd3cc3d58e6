"""Load and save splice target files.

Files are read and written as UTF-8 with newline translation disabled, so
a buffer round-trips byte-for-byte.
"""

import logging
from pathlib import Path

from splice_engine.splice.errors import (
    MissingSourceAndCannotCreate,
    SaveTargetMissing,
    UndecodableSource,
)

logger = logging.getLogger(__name__)


def load_buffer(path: Path | str, default_content: str) -> str:
    """Read a target file, creating it with ``default_content`` if absent.

    Args:
        path: Target file.
        default_content: Written to the file only when it does not exist yet.

    Returns:
        The file contents (``default_content`` for a freshly created file).

    Raises:
        MissingSourceAndCannotCreate: If the file can neither be read nor created.
    """
    target = Path(path)
    try:
        with open(target, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        pass
    except (OSError, UnicodeDecodeError) as e:
        raise MissingSourceAndCannotCreate(str(target), str(e)) from e

    try:
        # "x" refuses to clobber a file that appeared since the read attempt
        with open(target, "x", encoding="utf-8", newline="") as f:
            f.write(default_content)
    except FileExistsError:
        return load_buffer(target, default_content)
    except OSError as e:
        raise MissingSourceAndCannotCreate(str(target), str(e)) from e

    logger.info("created %s from default content", target)
    return default_content


def read_text(path: Path | str) -> str:
    """Read a content or template file verbatim.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UndecodableSource: If the file is not valid UTF-8.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise UndecodableSource(str(path), str(e)) from e


def save_buffer(path: Path | str, buffer: str) -> None:
    """Truncate an existing target file and write ``buffer`` in full.

    Raises:
        SaveTargetMissing: If the file does not exist. Saving never creates.
    """
    target = Path(path)
    try:
        f = open(target, "r+", encoding="utf-8", newline="")
    except FileNotFoundError as e:
        raise SaveTargetMissing(str(target)) from e
    with f:
        f.write(buffer)
        f.truncate()
    logger.debug("saved %d chars to %s", len(buffer), target)
