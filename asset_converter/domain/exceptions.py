"""
Defines custom exception types for the Asset Converter.

Conversion stops at the first failure, so these exceptions mostly serve to
tell the user *what kind* of failure ended the batch: a filesystem problem
(permissions, disk full) or an encoder rejecting a file (corrupt input,
unsupported format, missing ffmpeg).

All custom exceptions inherit from the base `AssetConverterException`.
"""
from pathlib import Path
from typing import List, Optional


class AssetConverterException(Exception):
    """Base class for all custom exceptions in the Asset Converter."""

    pass


class FileSystemException(AssetConverterException):
    """
    Raised when an output directory or file cannot be created or written.

    Typical causes are missing permissions or a full disk. An input root that
    does not exist is *not* an error and never raises this.
    """

    pass


# --- Encoding Specific Exceptions ---
class EncodingException(AssetConverterException):
    """
    Base class for failures reported by an image or video encoder.

    Attributes:
        source_path: The raw file being converted.
        output_path: The output file the encoder was asked to produce.
    """

    def __init__(self, message: str, source_path: Optional[Path] = None, output_path: Optional[Path] = None):
        super().__init__(message)
        self.source_path = source_path
        self.output_path = output_path


class ImageEncodeException(EncodingException):
    """Raised when Pillow cannot open the source image or save a target format."""

    pass


class VideoEncodeException(EncodingException):
    """
    Raised when an ffmpeg run exits with a non-zero status or cannot start.

    The message carries the tail of ffmpeg's stderr, which usually names the
    real cause (unknown encoder, invalid data found when processing input...).
    """

    pass


class ConversionCancelledException(AssetConverterException):
    """Raised when the batch cancel token is set between two encodes."""

    pass


class BatchFailedException(AssetConverterException):
    """
    Raised at the end of a continue-on-error run that collected failures.

    Attributes:
        errors: Every per-file exception, in the order they occurred.
    """

    def __init__(self, errors: List[Exception]):
        self.errors = list(errors)
        summary = "; ".join(f"{type(e).__name__}: {e}" for e in self.errors)
        super().__init__(f"{len(self.errors)} file(s) failed to convert: {summary}")
