"""
Main entry point for the Asset Converter.

Configures logging, reads the optional user config, and runs one conversion
batch. Exits with status 0 on success and 1 on failure.
"""

import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from asset_converter.cli import get_args
from asset_converter.config.common import DEFAULT_LOG_LEVEL, LOGGER_FORMAT, load_user_config
from asset_converter.config.video import RUN_VIDEOS_DEFAULT
from asset_converter.pipeline.batch_runner import BatchOptions, BatchRunner
from asset_converter.utils.ffmpeg_utils import get_ffmpeg_command, verify_ffmpeg

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def configure_logger(level: str):
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOGGER_FORMAT)


def build_options(args, user_config: dict) -> BatchOptions:
    """Merges CLI flags over `config.user.yaml` over the built-in defaults."""
    if args.videos is not None:
        run_videos = args.videos
    elif user_config.get("run_videos") is not None:
        run_videos = user_config["run_videos"]
    else:
        run_videos = RUN_VIDEOS_DEFAULT

    return BatchOptions(
        run_images=not args.no_images,
        run_videos=run_videos,
        continue_on_error=args.continue_on_error,
        ffmpeg_dir=user_config.get("ffmpeg_dir"),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logger(DEFAULT_LOG_LEVEL)
    args = get_args(argv)
    configure_logger(args.log_level)
    logger.debug(f"Parsed arguments: {args}")

    if args.target_dir:
        project_dir = Path(args.target_dir).resolve()
        logger.info(f"Target directory specified: {project_dir}")
    else:
        project_dir = Path.cwd().resolve()

    options = build_options(args, load_user_config(project_dir))
    logger.debug(f"Batch options: {options}")

    if options.run_videos and not verify_ffmpeg(get_ffmpeg_command(options.ffmpeg_dir)):
        logger.error("Video conversion is enabled but FFmpeg is not usable. Aborting.")
        return EXIT_FAILURE

    try:
        result = BatchRunner(project_dir, options).run()
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED

    return EXIT_SUCCESS if result.succeeded else EXIT_FAILURE


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
