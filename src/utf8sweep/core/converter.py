"""Conversion engine for utf8sweep.

This module rewrites files as UTF-8 based on their byte-order mark.
- Each file is sniffed, read in full, transcoded and written back in place.
- Per-file problems (permissions, locks, files vanishing, undecodable bytes)
  become FAILED outcomes; a sweep never aborts because of a single file.
- Directory-level enumeration errors are collected on the result and the sweep
  continues with sibling directories.
"""

import codecs
import logging
import time as time_mod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from utf8sweep.core.policy import should_process
from utf8sweep.core.sniffer import sniff_encoding
from utf8sweep.fs.traversal import iter_files
from utf8sweep.models.core import ConversionStatus, EncodingTag, FileOutcome
from utf8sweep.models.settings import Settings

# Logger for this module
logger = logging.getLogger(__name__)


class TranscodeError(ValueError):
    """Raised when file content is not valid for its sniffed encoding."""

    def __init__(self, tag: EncodingTag, reason: str) -> None:
        self.tag = tag
        super().__init__(f"Invalid {tag.value} content: {reason}")


@dataclass
class ConversionResult:
    """Result of a conversion sweep."""

    converted: int = 0
    skipped: int = 0
    failed: int = 0
    failures: List[FileOutcome] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    duration: float = 0.0

    @property
    def success(self) -> bool:
        return self.failed == 0 and not self.errors


def transcode(data: bytes, tag: EncodingTag, *, add_bom: bool) -> bytes:
    """Re-encode *data* from *tag* to UTF-8.

    Args:
        data: Full file content, including any BOM.
        tag: Encoding detected by the sniffer.
        add_bom: Keep the byte-order mark, rewritten as the UTF-8 BOM.

    Returns:
        UTF-8 bytes. UNMARKED content is returned unchanged.

    Raises:
        TranscodeError: If data cannot be decoded with the tag's codec or
            the decoded text cannot be represented in UTF-8.
    """
    if tag.codec is None:
        return data
    try:
        text = data.decode(tag.codec)
        if text.startswith("\ufeff"):
            text = text[1:]
        # UTF-7 can decode to lone surrogates, which UTF-8 cannot encode
        body = text.encode("utf-8")
    except UnicodeError as e:
        raise TranscodeError(tag, str(e)) from e
    return codecs.BOM_UTF8 + body if add_bom else body


def convert_file(
    path: Union[str, Path], settings: Settings, *, dry_run: bool = False
) -> FileOutcome:
    """Convert a single file in place.

    Args:
        path: File to convert.
        settings: Exclusion list and BOM/extensionless policies.
        dry_run: Compute the new content but do not write it.

    Returns:
        FileOutcome describing what happened. Never raises for I/O or
        decoding problems.
    """
    path = Path(path).absolute()
    if not should_process(path, settings):
        return FileOutcome(path=path, status=ConversionStatus.SKIPPED)

    tag: Optional[EncodingTag] = None
    try:
        tag = sniff_encoding(path)
        data = path.read_bytes()
        converted = transcode(data, tag, add_bom=settings.add_bom)
        if not dry_run:
            path.write_bytes(converted)
    except (OSError, TranscodeError) as e:
        logger.error(f"Failed to convert {path}: {e}")
        return FileOutcome(
            path=path, status=ConversionStatus.FAILED, encoding=tag, error=str(e)
        )

    logger.debug(f"Converted {path} from {tag.value}")
    return FileOutcome(path=path, status=ConversionStatus.CONVERTED, encoding=tag)


def run_conversion(
    root: Union[str, Path],
    settings: Settings,
    *,
    dry_run: bool = False,
    on_outcome: Optional[Callable[[FileOutcome], None]] = None,
) -> ConversionResult:
    """Convert every eligible file under *root* to UTF-8.

    Args:
        root: Directory to sweep.
        settings: Exclusion list and policies, read once for the whole run.
        dry_run: If True, report what would be converted without writing.
        on_outcome: Called with each FileOutcome as soon as it is known.

    Returns:
        ConversionResult with per-status counts, failed outcomes and
        enumeration errors.

    Raises:
        FileNotFoundError: If root doesn't exist
        NotADirectoryError: If root is not a directory
    """
    start = time_mod.time()
    result = ConversionResult()

    for file_path in iter_files(root, on_error=result.errors.append):
        outcome = convert_file(file_path, settings, dry_run=dry_run)
        if outcome.status == ConversionStatus.CONVERTED:
            result.converted += 1
        elif outcome.status == ConversionStatus.SKIPPED:
            result.skipped += 1
        else:
            result.failed += 1
            result.failures.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    result.duration = time_mod.time() - start
    logger.info(
        f"Converted {result.converted} file(s), skipped {result.skipped}, "
        f"failed {result.failed} in {result.duration:.2f}s"
    )
    return result


__all__ = [
    "ConversionResult",
    "TranscodeError",
    "convert_file",
    "run_conversion",
    "transcode",
]
