"""
Configuration settings related to video conversion.

Each entry of `VIDEO_TARGETS` is one ffmpeg run: codecs plus the output
options passed through ffmpeg-python (`{"crf": 30}` becomes `-crf 30`).
"""
from pathlib import Path

from ..domain.media import VideoTarget

# --- Roots (relative to the project directory) ---
RAW_VIDEOS_DIR = Path("raw-assets") / "videos"
PUBLIC_VIDEOS_DIR = Path("public") / "videos"

# Video conversion is feature-flagged off unless enabled by CLI or user config.
RUN_VIDEOS_DEFAULT = False

# --- Encoder Settings ---
VP9_ENCODER = "libvpx-vp9"
OPUS_ENCODER = "libopus"
H264_ENCODER = "libx264"
AAC_ENCODER = "aac"

WEBM_CRF = 30
MP4_CRF = 28
MP4_PRESET = "veryfast"

VIDEO_TARGETS = (
    # Constant-quality VP9 requires the bitrate ceiling to be zero.
    VideoTarget(
        extension="webm",
        video_codec=VP9_ENCODER,
        audio_codec=OPUS_ENCODER,
        output_options=(("crf", WEBM_CRF), ("b:v", 0)),
    ),
    VideoTarget(
        extension="mp4",
        video_codec=H264_ENCODER,
        audio_codec=AAC_ENCODER,
        output_options=(("crf", MP4_CRF), ("preset", MP4_PRESET)),
    ),
)
