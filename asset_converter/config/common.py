"""
Common configuration settings used throughout the application.

Holds the logging format, the error log location and the values read from the
optional `config.user.yaml` file in the project directory. The user file only
overrides where ffmpeg lives and whether videos are converted by default; the
conversion targets themselves stay fixed.
"""
from pathlib import Path
from typing import Any, Dict

import yaml
from loguru import logger

USER_CONFIG_FILE_NAME = "config.user.yaml"


def load_user_config(project_dir: Path) -> Dict[str, Any]:
    """
    Reads `config.user.yaml` from the project directory.

    Recognized keys:
        paths.ffmpeg_dir: Directory containing the ffmpeg executable.
        conversion.run_videos: Default for the video pipeline toggle.

    Args:
        project_dir: Directory the raw-assets/ and public/ roots are resolved against.

    Returns:
        A dict with the keys `ffmpeg_dir` (Path or None) and `run_videos`
        (bool or None). Missing or unreadable files yield all-None values.
    """
    settings: Dict[str, Any] = {"ffmpeg_dir": None, "run_videos": None}
    user_config_path = project_dir / USER_CONFIG_FILE_NAME
    if not user_config_path.is_file():
        logger.debug(f"User config '{user_config_path}' not found. Using built-in defaults.")
        return settings

    try:
        with user_config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{user_config_path}': {e}")
        return settings

    if not isinstance(user_config, dict):
        logger.warning(f"Ignoring '{user_config_path}': top level must be a mapping.")
        return settings

    paths_config = user_config.get("paths") or {}
    ffmpeg_dir_str = paths_config.get("ffmpeg_dir")
    if ffmpeg_dir_str:
        settings["ffmpeg_dir"] = Path(ffmpeg_dir_str)

    conversion_config = user_config.get("conversion") or {}
    run_videos = conversion_config.get("run_videos")
    if run_videos is not None:
        settings["run_videos"] = bool(run_videos)

    logger.debug(f"Loaded user config from '{user_config_path}': {settings}")
    return settings


# --- Logging Configuration ---

# The format string for the Loguru logger.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

DEFAULT_LOG_LEVEL = "INFO"


# --- Error Reporting ---

# Directory (relative to the project dir) receiving the plain-text error log
# when a batch fails.
ERROR_DIR_NAME = "asset_convert_error"
ERROR_LOG_FILE_NAME = "error.txt"


def error_dir_for(project_dir: Path) -> Path:
    return project_dir / ERROR_DIR_NAME


# The ffmpeg executable name used when no `ffmpeg_dir` is configured.
DEFAULT_FFMPEG_COMMAND = "ffmpeg"

# Number of trailing stderr lines kept in a failed ffmpeg run's error message.
FFMPEG_STDERR_TAIL_LINES = 15



# --- Batch State Constants ---
# States of the batch runner. `done` and `failed` are terminal.

BATCH_STATE_IDLE = "idle"
BATCH_STATE_RUNNING_IMAGES = "running_images"
BATCH_STATE_RUNNING_VIDEOS = "running_videos"
BATCH_STATE_DONE = "done"
BATCH_STATE_FAILED = "failed"

TERMINAL_BATCH_STATES = (BATCH_STATE_DONE, BATCH_STATE_FAILED)
