"""
This module provides utility functions related to FFmpeg.
It includes locating the executable, a startup version check and a
wrapper for running command-line processes with captured output.
"""

import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from ..config.common import DEFAULT_FFMPEG_COMMAND


def get_ffmpeg_command(ffmpeg_dir: Optional[Path] = None) -> str:
    """
    Determines the FFmpeg executable to use.

    The executable inside `ffmpeg_dir` (from `config.user.yaml`) takes
    priority. If it is not configured or not found there, 'ffmpeg' is
    returned and resolved through the system PATH.
    """
    ffmpeg_exe_name = "ffmpeg.exe" if sys.platform == "win32" else DEFAULT_FFMPEG_COMMAND

    if ffmpeg_dir and ffmpeg_dir.is_dir():
        configured_ffmpeg_path = ffmpeg_dir / ffmpeg_exe_name
        if configured_ffmpeg_path.is_file():
            logger.debug(f"Using FFmpeg from configured path: '{configured_ffmpeg_path}'")
            return str(configured_ffmpeg_path)
        logger.warning(
            f"`ffmpeg_dir` is configured, but '{ffmpeg_exe_name}' was not found there. Falling back to system PATH."
        )
    elif ffmpeg_dir:
        logger.warning(f"Configured `ffmpeg_dir` '{ffmpeg_dir}' is not a directory. Falling back to system PATH.")

    return DEFAULT_FFMPEG_COMMAND


def display_cmd(cmd_list: List[str]) -> str:
    """Joins a command list into a string that can be pasted into a shell."""
    if os.name == "nt":
        return subprocess.list2cmdline(cmd_list)
    return shlex.join(cmd_list)


def run_cmd(cmd_list: List[str], show_cmd: bool = False) -> subprocess.CompletedProcess:
    """
    Executes an external command and waits for it to finish.

    This is the single suspension point of a video encode: the call returns
    only once the process has exited, and the return code is the
    success/failure signal.

    Args:
        cmd_list: The command and its arguments. Never run through a shell.
        show_cmd: If True, the command is logged at DEBUG level before running.

    Returns:
        The `subprocess.CompletedProcess` with text stdout/stderr.

    Raises:
        FileNotFoundError: If the executable does not exist.
        OSError: If the process cannot be started for another reason.
    """
    if not cmd_list:
        raise ValueError("run_cmd received an empty command list.")

    if show_cmd:
        logger.debug(f"Executing command: {display_cmd(cmd_list)}")

    result = subprocess.run(
        cmd_list,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        shell=False,
    )

    if result.stdout and len(result.stdout) > 500:
        logger.trace(f"Command stdout (truncated): {result.stdout[:500]}...")
    elif result.stdout:
        logger.trace(f"Command stdout: {result.stdout}")

    # ffmpeg writes progress to stderr even on success.
    if result.stderr and result.returncode != 0:
        logger.debug(f"Command stderr (error, rc={result.returncode}): {result.stderr}")
    elif result.stderr:
        logger.trace(f"Command stderr (non-error, rc={result.returncode}): {result.stderr}")

    return result


def stderr_tail(stderr: Optional[str], max_lines: int) -> str:
    """Returns the last `max_lines` non-empty lines of a process's stderr."""
    if not stderr:
        return ""
    lines = [line for line in stderr.splitlines() if line.strip()]
    return "\n".join(lines[-max_lines:])


def verify_ffmpeg(ffmpeg_cmd: str) -> bool:
    """
    Verifies that FFmpeg is installed, accessible, and can be executed.

    Runs `ffmpeg -version` and logs the first line of the output on success,
    or a detailed error message if the command fails or cannot be found.

    Returns:
        True if the version check succeeded.
    """
    try:
        result = subprocess.run(
            [ffmpeg_cmd, "-version"],
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"FFmpeg version command failed (return code {e.returncode}):\n{e.stderr}")
        return False
    except FileNotFoundError:
        logger.error(
            "FFmpeg command not found. Please ensure FFmpeg is installed and accessible.\n"
            "You can either add it to your system's PATH or specify its location in the 'config.user.yaml' file."
        )
        return False

    version_output_lines = result.stdout.splitlines()
    first_line = version_output_lines[0] if version_output_lines else "(no output)"
    logger.info(f"FFmpeg version check successful: {first_line}")
    return True
