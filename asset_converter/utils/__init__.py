"""
Utilities Package for the Asset Converter.

Modules:
    - ffmpeg_utils.py: Locating and verifying the ffmpeg executable and running
      external commands with captured output.
    - format_utils.py: Human-readable elapsed times and file sizes for log lines.
"""
