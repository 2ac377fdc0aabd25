"""Persistent conversion settings.

This module defines the configuration object passed into every sweep.
- The exclusion list holds lower-cased extensions with a leading dot.
- Two boolean preferences control extensionless files and BOM retention.
- Loading and saving live in utils.config; this model only holds state and
  mutation helpers, so nothing here touches the disk.
"""

from typing import Iterable, List

from pydantic import BaseModel, Field, field_validator

# Binary formats that make no sense to re-encode as text.
DEFAULT_EXCLUDED_EXTENSIONS: List[str] = [
    ".exe",
    ".dll",
    ".com",
    ".db",
    ".sys",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".pdb",
    ".mp3",
    ".mp4",
    ".mov",
    ".ogg",
    ".wav",
    ".webp",
    ".obj",
    ".bmp",
    ".fbx",
    ".rar",
    ".zip",
    ".7z",
    ".jar",
]


def normalize_extension(value: str) -> str:
    """Return *value* lower-cased with exactly one leading dot.

    Args:
        value: An extension such as ``"log"``, ``".LOG"`` or ``" .txt "``.

    Returns:
        The normalised extension, e.g. ``".log"``. Blank input yields ``""``.
    """
    ext = value.strip().lower().lstrip(".")
    return f".{ext}" if ext else ""


class Settings(BaseModel):
    """Exclusion list and policy flags for a conversion run."""

    excluded_extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_EXTENSIONS)
    )
    """Extensions the sweep must skip, lower-cased with a leading dot."""

    whitelist_extensionless: bool = False
    """Whether files without an extension take part in conversion."""

    add_bom: bool = True
    """Whether a byte-order mark found in the source is kept (as UTF-8 BOM)."""

    @field_validator("excluded_extensions")
    @classmethod
    def _dedupe_extensions(cls, value: List[str]) -> List[str]:
        seen: List[str] = []
        for item in value:
            ext = normalize_extension(item)
            if ext and ext not in seen:
                seen.append(ext)
        return seen

    def is_excluded(self, extension: str) -> bool:
        """Return True if *extension* is on the exclusion list (any casing)."""
        return extension.lower() in self.excluded_extensions

    def add_extensions(self, extensions: Iterable[str]) -> List[str]:
        """Append extensions that are not already excluded.

        Args:
            extensions: Extensions with or without a leading dot.

        Returns:
            The normalised extensions that were actually added.
        """
        added: List[str] = []
        for item in extensions:
            ext = normalize_extension(item)
            if ext and ext not in self.excluded_extensions:
                self.excluded_extensions.append(ext)
                added.append(ext)
        return added

    def remove_extensions(self, extensions: Iterable[str]) -> List[str]:
        """Remove extensions from the list; absent entries are ignored.

        Returns:
            The normalised extensions that were actually removed.
        """
        removed: List[str] = []
        for item in extensions:
            ext = normalize_extension(item)
            if ext in self.excluded_extensions:
                self.excluded_extensions.remove(ext)
                removed.append(ext)
        return removed
