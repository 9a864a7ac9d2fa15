"""
Asset Converter: turns a tree of raw images and videos into web-optimized
variants (WebP/AVIF/JPEG, WebM/MP4) inside a mirrored output tree.

Subpackages:
    config: Fixed roots, target tables and the optional user override file.
    domain: Value objects describing roots, targets and file identities,
            plus the exception hierarchy.
    services: File discovery, the Pillow image encoder, the ffmpeg video
              encoder and the plain-text error log.
    pipeline: The image and video conversion pipelines and the batch runner.
    utils: ffmpeg command helpers and human-readable formatting.
"""

__version__ = "0.1.0"
