"""
The image and video conversion pipelines.

Both share one loop: walk the input root, mirror each file's subdirectory into
the output root, then apply every target of the media kind in table order.
Encodes never overlap; each one finishes before the next target or file.
"""
import threading
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from loguru import logger

from ..config.image import IMAGE_TARGETS
from ..config.video import VIDEO_TARGETS
from ..domain.exceptions import AssetConverterException, ConversionCancelledException
from ..domain.media import AssetRoot, RelativeIdentity
from ..services.encoder_base import Encoder
from ..services.file_discovery_service import ensure_mirrored_dir, list_files
from ..services.image_encoder import ImageEncoder
from ..services.video_encoder import VideoEncoder
from ..utils.format_utils import format_timedelta, formatted_size


class BaseConversionPipeline:
    """
    Converts every file of one asset root into every configured target.

    Files are processed in walker order; for each file the targets are applied
    in table order, each encode finishing before the next starts. By default
    the first exception aborts the whole run. With `continue_on_error` the
    failing file is logged, its exception collected, and the next file starts.
    """

    media_kind: str = ""

    def __init__(
        self,
        asset_root: AssetRoot,
        encoder: Encoder,
        targets: Sequence,
        cancel_event: Optional[threading.Event] = None,
        continue_on_error: bool = False,
    ):
        self.asset_root = AssetRoot(asset_root.kind, asset_root.input_dir.resolve(), asset_root.output_dir.resolve())
        self.encoder = encoder
        self.targets = tuple(targets)
        self.cancel_event = cancel_event
        self.continue_on_error = continue_on_error
        self.errors: List[Exception] = []

    def run(self) -> List[Exception]:
        """
        Processes the whole asset root.

        Returns:
            The exceptions collected in continue-on-error mode (always empty in
            the default fail-fast mode, where the first one is raised instead).
        """
        input_dir = self.asset_root.input_dir
        if not input_dir.exists():
            logger.debug(f"No {self.media_kind} directory at {input_dir}. Skipping {self.media_kind} conversion.")
            return []

        start_time = datetime.now()
        files = list_files(input_dir)
        logger.info(f"Found {len(files)} {self.media_kind} file(s) in {input_dir}")

        for file_path in files:
            try:
                self.process_single_file(file_path)
            except ConversionCancelledException:
                raise
            except AssetConverterException as e:
                if not self.continue_on_error:
                    raise
                logger.error(f"Failed to convert {self.media_kind} {file_path.name}: {e}")
                self.errors.append(e)

        elapsed = format_timedelta(datetime.now() - start_time)
        logger.info(f"Finished {self.media_kind} conversion of {len(files)} file(s) in {elapsed}")
        return list(self.errors)

    def process_single_file(self, file_path: Path):
        identity = RelativeIdentity.from_path(self.asset_root.input_dir, file_path)
        output_dir = ensure_mirrored_dir(self.asset_root.input_dir, self.asset_root.output_dir, file_path)
        logger.info(f"Processing {self.media_kind}: {(identity.relative_dir / file_path.name).as_posix()}")
        self._apply_targets(file_path, identity, output_dir)

    def _apply_targets(self, file_path: Path, identity: RelativeIdentity, output_dir: Path):
        for target in self.targets:
            self._check_cancelled()
            output_path = identity.output_file(output_dir, target.extension)
            self.encoder.encode(file_path, target, output_path)
            if output_path.exists():
                logger.debug(
                    f"  -> {output_path.name} ({self.encoder.describe_target(target)}, "
                    f"{formatted_size(output_path.stat().st_size)})"
                )

    def _check_cancelled(self):
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise ConversionCancelledException(f"{self.media_kind.capitalize()} conversion cancelled.")


class ImageConversionPipeline(BaseConversionPipeline):
    media_kind = "image"

    def __init__(
        self,
        asset_root: AssetRoot,
        encoder: Optional[Encoder] = None,
        targets: Sequence = IMAGE_TARGETS,
        cancel_event: Optional[threading.Event] = None,
        continue_on_error: bool = False,
    ):
        super().__init__(asset_root, encoder or ImageEncoder(), targets, cancel_event, continue_on_error)


class VideoConversionPipeline(BaseConversionPipeline):
    media_kind = "video"

    def __init__(
        self,
        asset_root: AssetRoot,
        encoder: Optional[Encoder] = None,
        targets: Sequence = VIDEO_TARGETS,
        cancel_event: Optional[threading.Event] = None,
        continue_on_error: bool = False,
    ):
        super().__init__(asset_root, encoder or VideoEncoder(), targets, cancel_event, continue_on_error)


def convert_images(input_root: Path, output_root: Path, encoder: Optional[Encoder] = None) -> None:
    """Converts every image under `input_root` into `output_root`, stopping at the first failure."""
    ImageConversionPipeline(AssetRoot("image", input_root, output_root), encoder=encoder).run()


def convert_videos(input_root: Path, output_root: Path, encoder: Optional[Encoder] = None) -> None:
    """Converts every video under `input_root` into `output_root`, stopping at the first failure."""
    VideoConversionPipeline(AssetRoot("video", input_root, output_root), encoder=encoder).run()
