"""Core conversion logic for utf8sweep."""

from utf8sweep.core.converter import (
    ConversionResult,
    TranscodeError,
    convert_file,
    run_conversion,
    transcode,
)
from utf8sweep.core.inventory import list_extensions
from utf8sweep.core.policy import get_extension, should_process
from utf8sweep.core.sniffer import classify_prefix, sniff_encoding

__all__ = [
    "ConversionResult",
    "TranscodeError",
    "classify_prefix",
    "convert_file",
    "get_extension",
    "list_extensions",
    "run_conversion",
    "should_process",
    "sniff_encoding",
    "transcode",
]
