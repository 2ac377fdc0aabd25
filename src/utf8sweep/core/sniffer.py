"""Byte-order mark sniffing.

Classifies a file into an EncodingTag from its first four bytes. Only the BOM
is inspected; files without one are reported as UNMARKED.
"""

from pathlib import Path
from typing import Union

from utf8sweep.models.core import EncodingTag

PREFIX_SIZE = 4

# Evaluated in order, first match wins. UTF-32 is tested before the two-byte
# UTF-16 marks.
_PRECEDENCE = (
    EncodingTag.UTF7,
    EncodingTag.UTF8,
    EncodingTag.UTF32,
    EncodingTag.UTF16_LE,
    EncodingTag.UTF16_BE,
)


def classify_prefix(prefix: bytes) -> EncodingTag:
    """Classify a byte prefix into an EncodingTag.

    Missing bytes (short or empty input) are treated as zero.

    Args:
        prefix: Leading bytes of a file. Anything past four bytes is ignored.

    Returns:
        The matching EncodingTag, or UNMARKED if no BOM matches.
    """
    padded = prefix[:PREFIX_SIZE].ljust(PREFIX_SIZE, b"\x00")
    for tag in _PRECEDENCE:
        if padded.startswith(tag.bom):
            return tag
    return EncodingTag.UNMARKED


def sniff_encoding(path: Union[str, Path]) -> EncodingTag:
    """Detect the encoding of the file at *path* from its BOM.

    The file is opened read-only and closed again before returning.

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
    """
    with open(path, "rb") as f:
        prefix = f.read(PREFIX_SIZE)
    return classify_prefix(prefix)
