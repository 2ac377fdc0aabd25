"""Breadth-first file enumeration for utf8sweep.

Provides a lazy generator over every regular file beneath a root directory.
Directories that cannot be listed are logged and skipped so one unreadable
folder never stops the rest of the sweep.
"""

import logging
from collections import deque
from pathlib import Path
from typing import Callable, Deque, Iterator, List, Optional, Union

# Logger for this module
logger = logging.getLogger(__name__)


def _list_directory(
    directory: Path, on_error: Optional[Callable[[str], None]]
) -> Optional[List[Path]]:
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        msg = f"Error accessing directory {directory}: {e}"
        logger.warning(msg)
        if on_error is not None:
            on_error(msg)
        return None


def iter_files(
    root: Union[str, Path],
    on_error: Optional[Callable[[str], None]] = None,
) -> Iterator[Path]:
    """Yield every file under *root*, breadth-first.

    Subdirectories of the current directory are queued before its files are
    yielded. Symlinked directories are not followed.

    Args:
        root: Directory to walk.
        on_error: Called with a message for each directory that could not be
            listed.

    Yields:
        Absolute paths of regular files.

    Raises:
        FileNotFoundError: If root doesn't exist
        NotADirectoryError: If root is not a directory
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root}")

    return _walk(root.absolute(), on_error)


def _walk(
    root: Path, on_error: Optional[Callable[[str], None]]
) -> Iterator[Path]:
    queue: Deque[Path] = deque([root])
    while queue:
        current = queue.popleft()
        entries = _list_directory(current, on_error)
        if entries is None:
            continue

        files: List[Path] = []
        for entry in entries:
            try:
                if entry.is_dir() and not entry.is_symlink():
                    queue.append(entry)
                elif entry.is_file():
                    files.append(entry)
            except OSError as e:
                # Entry vanished or became unreadable between listing and stat
                logger.warning(f"Error accessing {entry}: {e}")
                if on_error is not None:
                    on_error(f"Error accessing {entry}: {e}")

        yield from files
