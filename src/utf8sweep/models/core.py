"""Core domain models for utf8sweep.

This module defines the data structures shared by the sniffer, the conversion
engine and the CLI.
- EncodingTag classifies a file by its byte-order mark.
- ConversionStatus and FileOutcome describe what happened to a single file
  during a sweep, so failures travel as values instead of exceptions.
- All file paths are absolute for safety and cross-platform correctness.
"""

import codecs
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, model_validator


class EncodingTag(str, Enum):
    """Text encoding family identified from a byte-order mark.

    UNMARKED covers every file without a recognised BOM; its bytes are treated
    as already being ASCII/UTF-8 compatible.
    """

    UTF7 = "utf-7"
    UTF8 = "utf-8"
    UTF16_LE = "utf-16-le"
    UTF16_BE = "utf-16-be"
    UTF32 = "utf-32"
    UNMARKED = "unmarked"

    @property
    def bom(self) -> bytes:
        """Return the byte-order mark that identifies this encoding."""
        return _BOMS[self]

    @property
    def codec(self) -> Optional[str]:
        """Return the Python codec name used to decode the file content.

        UNMARKED has no codec: its content is copied through untouched.
        """
        return _CODECS[self]


_BOMS = {
    EncodingTag.UTF7: b"+/v",
    EncodingTag.UTF8: codecs.BOM_UTF8,
    EncodingTag.UTF16_LE: codecs.BOM_UTF16_LE,
    EncodingTag.UTF16_BE: codecs.BOM_UTF16_BE,
    EncodingTag.UTF32: codecs.BOM_UTF32_BE,
    EncodingTag.UNMARKED: b"",
}

# The BOM of every marked encoding decodes to U+FEFF with these codecs.
_CODECS = {
    EncodingTag.UTF7: "utf-7",
    EncodingTag.UTF8: "utf-8",
    EncodingTag.UTF16_LE: "utf-16-le",
    EncodingTag.UTF16_BE: "utf-16-be",
    EncodingTag.UTF32: "utf-32-be",
    EncodingTag.UNMARKED: None,
}


class ConversionStatus(str, Enum):
    """Outcome of processing a single file during a sweep."""

    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


class FileOutcome(BaseModel):
    """Result of converting (or skipping) one file.

    Produced by the conversion engine for every path the traversal yields.
    """

    path: Path
    """Absolute path to the file."""

    status: ConversionStatus
    """Whether the file was converted, skipped by policy, or failed."""

    encoding: Optional[EncodingTag] = None
    """Encoding detected by the sniffer, if sniffing got that far."""

    error: Optional[str] = None
    """Human-readable cause when status is FAILED."""

    @property
    def ok(self) -> bool:
        """True when the file completed a full sniff/read/write round-trip."""
        return self.status == ConversionStatus.CONVERTED

    @model_validator(mode="after")
    def validate_path(self: "FileOutcome") -> "FileOutcome":
        """Ensure the path is absolute.

        Raises:
            ValueError: If the path is not absolute.
        """
        if not self.path.is_absolute():
            raise ValueError(f"Path must be absolute: {self.path}")
        return self
