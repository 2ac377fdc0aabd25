"""Domain models for the utf8sweep application."""

from utf8sweep.models.core import (
    ConversionStatus,
    EncodingTag,
    FileOutcome,
)
from utf8sweep.models.settings import (
    DEFAULT_EXCLUDED_EXTENSIONS,
    Settings,
    normalize_extension,
)

__all__ = [
    "ConversionStatus",
    "DEFAULT_EXCLUDED_EXTENSIONS",
    "EncodingTag",
    "FileOutcome",
    "Settings",
    "normalize_extension",
]
