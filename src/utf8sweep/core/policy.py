"""Exclusion policy for the conversion sweep."""

from pathlib import Path
from typing import Union

from utf8sweep.models.settings import Settings


def get_extension(path: Union[str, Path]) -> str:
    """Return the final extension of *path* including the dot, or ``""``.

    ``archive.tar.gz`` gives ``.gz``. A dotfile such as ``.gitignore`` is its
    own extension. A name ending in a dot has no extension.
    """
    name = Path(path).name
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:]


def should_process(path: Union[str, Path], settings: Settings) -> bool:
    """Decide whether a file takes part in conversion.

    Args:
        path: File path observed during traversal.
        settings: Current exclusion list and extensionless policy.

    Returns:
        False if the file has no extension and extensionless files are not
        whitelisted, or if its extension is excluded (case-insensitive).
        True otherwise.
    """
    ext = get_extension(path)
    if not ext:
        return settings.whitelist_extensionless
    return not settings.is_excluded(ext)
