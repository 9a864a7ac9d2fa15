"""
Sequences the image and video pipelines for one project directory.

The runner is single-use: it moves from `idle` through the running states to
`done` or `failed` and cannot be restarted. On failure the first error (or,
in continue-on-error mode, the collected errors) is logged, appended to the
plain-text error log, and returned in the `BatchResult`.
"""
import threading
import traceback
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..config.common import (
    BATCH_STATE_DONE,
    BATCH_STATE_FAILED,
    BATCH_STATE_IDLE,
    BATCH_STATE_RUNNING_IMAGES,
    BATCH_STATE_RUNNING_VIDEOS,
    TERMINAL_BATCH_STATES,
    error_dir_for,
)
from ..config.image import PUBLIC_IMAGES_DIR, RAW_IMAGES_DIR
from ..config.video import PUBLIC_VIDEOS_DIR, RAW_VIDEOS_DIR, RUN_VIDEOS_DEFAULT
from ..domain.exceptions import BatchFailedException
from ..domain.media import AssetRoot
from ..services.encoder_base import Encoder
from ..services.logging_service import ErrorLog
from ..services.video_encoder import VideoEncoder
from ..utils.ffmpeg_utils import get_ffmpeg_command
from ..utils.format_utils import format_timedelta
from .asset_pipeline import ImageConversionPipeline, VideoConversionPipeline

IMAGES_ROOT = AssetRoot("image", RAW_IMAGES_DIR, PUBLIC_IMAGES_DIR)
VIDEOS_ROOT = AssetRoot("video", RAW_VIDEOS_DIR, PUBLIC_VIDEOS_DIR)


@dataclass(frozen=True)
class BatchOptions:
    """
    Toggles for one batch.

    Attributes:
        run_images: Run the image pipeline.
        run_videos: Run the video pipeline after the image pipeline.
        continue_on_error: Keep converting after a file fails and report all
                           failures at the end instead of stopping at the first.
        ffmpeg_dir: Directory holding the ffmpeg executable, if not on PATH.
    """

    run_images: bool = True
    run_videos: bool = RUN_VIDEOS_DEFAULT
    continue_on_error: bool = False
    ffmpeg_dir: Optional[Path] = None


@dataclass
class BatchResult:
    state: str
    error: Optional[Exception] = None
    elapsed: timedelta = timedelta(0)

    @property
    def succeeded(self) -> bool:
        return self.state == BATCH_STATE_DONE


class BatchRunner:
    def __init__(
        self,
        project_dir: Path,
        options: Optional[BatchOptions] = None,
        image_encoder: Optional[Encoder] = None,
        video_encoder: Optional[Encoder] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.project_dir = project_dir.resolve()
        self.options = options or BatchOptions()
        self.image_encoder = image_encoder
        self.video_encoder = video_encoder
        self.cancel_event = cancel_event
        self.state = BATCH_STATE_IDLE
        self.images_root = IMAGES_ROOT.resolved_against(self.project_dir)
        self.videos_root = VIDEOS_ROOT.resolved_against(self.project_dir)

    def run(self) -> BatchResult:
        """
        Runs the enabled pipelines in order and reports the outcome.

        Errors raised while converting never escape this method; they end the
        batch in the `failed` state. `KeyboardInterrupt` is logged and re-raised.

        Raises:
            RuntimeError: If the runner already reached a terminal state.
        """
        if self.state in TERMINAL_BATCH_STATES:
            raise RuntimeError(f"BatchRunner already finished (state: {self.state}); create a new runner.")

        start_time = datetime.now()
        logger.info(f"Converting assets in {self.project_dir}")
        try:
            collected_errors = self._run_pipelines()
            if collected_errors:
                raise BatchFailedException(collected_errors)
        except KeyboardInterrupt:
            self.state = BATCH_STATE_FAILED
            logger.warning("Conversion interrupted by user.")
            raise
        except Exception as e:
            return self._fail(e, datetime.now() - start_time)

        self.state = BATCH_STATE_DONE
        elapsed = datetime.now() - start_time
        logger.success(f"All assets converted successfully! ({format_timedelta(elapsed)})")
        return BatchResult(state=self.state, elapsed=elapsed)

    def _run_pipelines(self) -> List[Exception]:
        collected_errors: List[Exception] = []

        if self.options.run_images:
            self.state = BATCH_STATE_RUNNING_IMAGES
            image_pipeline = ImageConversionPipeline(
                self.images_root,
                encoder=self.image_encoder,
                cancel_event=self.cancel_event,
                continue_on_error=self.options.continue_on_error,
            )
            collected_errors.extend(image_pipeline.run())
        else:
            logger.info("Image conversion disabled.")

        if self.options.run_videos:
            self.state = BATCH_STATE_RUNNING_VIDEOS
            video_pipeline = VideoConversionPipeline(
                self.videos_root,
                encoder=self.video_encoder or VideoEncoder(get_ffmpeg_command(self.options.ffmpeg_dir)),
                cancel_event=self.cancel_event,
                continue_on_error=self.options.continue_on_error,
            )
            collected_errors.extend(video_pipeline.run())
        else:
            logger.debug("Video conversion disabled.")

        return collected_errors

    def _fail(self, error: Exception, elapsed: timedelta) -> BatchResult:
        failed_during = self.state
        self.state = BATCH_STATE_FAILED
        logger.error(f"Error converting assets: {type(error).__name__}: {error}")
        tb_str = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        logger.debug(f"Traceback:\n{tb_str}")
        ErrorLog(error_dir_for(self.project_dir)).write(
            f"Batch failed during: {failed_during}",
            f"Project directory: {self.project_dir}",
            f"Exception type: {type(error).__name__}",
            f"Exception message: {error}",
            f"Traceback:\n{tb_str}",
        )
        return BatchResult(state=self.state, error=error, elapsed=elapsed)
