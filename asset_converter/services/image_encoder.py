"""
Image encoding through Pillow.

Each call opens the source afresh and saves exactly one target, mirroring how
the conversion pipeline applies targets one after another.
"""
from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..domain.exceptions import FileSystemException, ImageEncodeException
from ..domain.media import ImageTarget
from .encoder_base import Encoder

# Modes WebP and AVIF encoders accept directly.
_DIRECT_MODES = ("RGB", "RGBA")


def _prepare_image(image: Image.Image, target: ImageTarget) -> Image.Image:
    if target.mode:
        if image.mode != target.mode:
            return image.convert(target.mode)
        return image
    if image.mode in _DIRECT_MODES:
        return image
    has_alpha = "A" in image.getbands() or "transparency" in image.info
    return image.convert("RGBA" if has_alpha else "RGB")


class ImageEncoder(Encoder):
    media_kind = "image"

    def encode(self, source_path: Path, target: ImageTarget, output_path: Path) -> None:
        """
        Saves `source_path` as `target.pil_format` at `target.quality` into `output_path`.

        Raises:
            ImageEncodeException: The source is not a readable image, or Pillow
                cannot encode the target format (e.g. no AVIF support).
            FileSystemException: The output file cannot be written.
        """
        try:
            with Image.open(source_path) as source_image:
                source_image.load()
                prepared = _prepare_image(source_image, target)
                save_kwargs = dict(target.save_options)
                save_kwargs["quality"] = target.quality
                try:
                    prepared.save(output_path, format=target.pil_format, **save_kwargs)
                except (KeyError, ValueError) as e:
                    raise ImageEncodeException(
                        f"Pillow cannot encode {target.pil_format} for {source_path.name}: {e!r}",
                        source_path=source_path,
                        output_path=output_path,
                    ) from e
                except OSError as e:
                    # errno is only set for real I/O failures, not encoder errors.
                    if e.errno is not None:
                        raise FileSystemException(f"Cannot write {output_path}: {e}") from e
                    raise ImageEncodeException(
                        f"Failed to encode {source_path.name} as {target.pil_format}: {e}",
                        source_path=source_path,
                        output_path=output_path,
                    ) from e
        except UnidentifiedImageError as e:
            raise ImageEncodeException(
                f"Not a recognized image file: {source_path}",
                source_path=source_path,
                output_path=output_path,
            ) from e
        except Image.DecompressionBombError as e:
            raise ImageEncodeException(
                f"Cannot decode {source_path.name}: {e}",
                source_path=source_path,
                output_path=output_path,
            ) from e
        except OSError as e:
            if e.errno is not None:
                raise FileSystemException(f"Cannot read {source_path}: {e}") from e
            raise ImageEncodeException(
                f"Cannot decode {source_path.name}: {e}",
                source_path=source_path,
                output_path=output_path,
            ) from e

        logger.trace(f"Saved {output_path.name} ({target.pil_format}, q={target.quality})")
