"""
Command-Line Interface (CLI) setup for the Asset Converter.

Running without arguments converts `raw-assets/images` in the current
directory into `public/images`. The optional flags below only widen that
default; none is required.
"""
import argparse
from typing import Optional, Sequence

from .config.common import DEFAULT_LOG_LEVEL


def get_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the Asset Converter.

    Args:
        argv: Argument list to parse; `sys.argv[1:]` when None.

    Returns:
        argparse.Namespace with `target_dir`, `videos`, `no_images`,
        `continue_on_error` and `log_level`.
    """
    parser = argparse.ArgumentParser(
        description="Convert raw-assets/{images,videos} into web-optimized variants under public/."
    )
    parser.add_argument(
        "--target-dir", type=str, default=None,
        help="Project directory containing raw-assets/ and public/ (default: current directory)."
    )
    parser.add_argument(
        "--videos", action="store_true", default=None,
        help="Also convert raw-assets/videos to WebM and MP4 (requires FFmpeg)."
    )
    parser.add_argument(
        "--no-images", action="store_true", help="Skip image conversion."
    )
    parser.add_argument(
        "--continue-on-error", action="store_true",
        help="Keep converting after a file fails and report every failure at the end."
    )
    parser.add_argument(
        "--log-level", type=str, default=DEFAULT_LOG_LEVEL, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set the logging level."
    )
    return parser.parse_args(argv)
