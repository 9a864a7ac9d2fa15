"""
Services Package for the Asset Converter.

- **File Discovery (`list_files`, `ensure_mirrored_dir`):**
  Recursive, deterministic listing of raw files and creation of the mirrored
  output directory for each of them.

- **Encoders (`ImageEncoder`, `VideoEncoder`):**
  Thin wrappers around the external codecs. `ImageEncoder` saves through
  Pillow, `VideoEncoder` builds an ffmpeg command with ffmpeg-python and waits
  for the process to exit. Both translate library failures into the
  `EncodingException` family.

- **Logging Service (`ErrorLog`):**
  Appends the failure that ended a batch to a plain-text log file, separate
  from the real-time console logging.
"""
from .encoder_base import Encoder
from .file_discovery_service import ensure_mirrored_dir, list_files
from .image_encoder import ImageEncoder
from .logging_service import ErrorLog
from .video_encoder import VideoEncoder

__all__ = ["Encoder", "ErrorLog", "ImageEncoder", "VideoEncoder", "ensure_mirrored_dir", "list_files"]
