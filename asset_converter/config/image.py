"""
Configuration settings related to image conversion.

Every raw image is written once per entry of `IMAGE_TARGETS`, in order. The
extension doubles as the output suffix; `pil_format` is the format name Pillow
expects in `Image.save`.
"""
from pathlib import Path

from ..domain.media import ImageTarget

# --- Roots (relative to the project directory) ---
RAW_IMAGES_DIR = Path("raw-assets") / "images"
PUBLIC_IMAGES_DIR = Path("public") / "images"

# --- Targets ---
WEBP_QUALITY = 80
AVIF_QUALITY = 60
JPEG_QUALITY = 85
WEBP_METHOD = 6

IMAGE_TARGETS = (
    # method=6 is the slowest, smallest WebP compression effort.
    ImageTarget(extension="webp", pil_format="WEBP", quality=WEBP_QUALITY, save_options=(("method", WEBP_METHOD),)),
    ImageTarget(extension="avif", pil_format="AVIF", quality=AVIF_QUALITY),
    # JPEG has no alpha channel, so the source is flattened to RGB first.
    ImageTarget(extension="jpg", pil_format="JPEG", quality=JPEG_QUALITY, mode="RGB"),
)
