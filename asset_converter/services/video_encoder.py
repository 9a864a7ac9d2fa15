"""
Video encoding through the ffmpeg executable.

The command line for each target is compiled with ffmpeg-python and executed
by a blocking command runner. ffmpeg's exit status is the completion signal:
zero means the output is complete, anything else is an encoder failure.
"""
import subprocess
from pathlib import Path
from typing import Callable, List

import ffmpeg
from loguru import logger

from ..config.common import DEFAULT_FFMPEG_COMMAND, FFMPEG_STDERR_TAIL_LINES
from ..domain.exceptions import VideoEncodeException
from ..domain.media import VideoTarget
from ..utils.ffmpeg_utils import display_cmd, run_cmd, stderr_tail
from .encoder_base import Encoder

CommandRunner = Callable[..., subprocess.CompletedProcess]


class VideoEncoder(Encoder):
    """
    Encodes one video target per call.

    Attributes:
        ffmpeg_cmd: The ffmpeg executable (name on PATH or absolute path).
        command_runner: Callable executing a command list and returning a
                        `CompletedProcess`; `run_cmd` unless replaced in tests.
    """

    media_kind = "video"

    def __init__(self, ffmpeg_cmd: str = DEFAULT_FFMPEG_COMMAND, command_runner: CommandRunner = run_cmd):
        self.ffmpeg_cmd = ffmpeg_cmd
        self.command_runner = command_runner

    def build_command(self, source_path: Path, target: VideoTarget, output_path: Path) -> List[str]:
        stream = (
            ffmpeg.input(str(source_path))
            .output(str(output_path), **target.ffmpeg_output_kwargs())
            .global_args("-hide_banner", "-nostdin")
            .overwrite_output()
        )
        return stream.compile(cmd=self.ffmpeg_cmd)

    def encode(self, source_path: Path, target: VideoTarget, output_path: Path) -> None:
        """
        Runs ffmpeg for one target and waits for it to exit.

        Raises:
            VideoEncodeException: ffmpeg is missing, could not start, or exited
                with a non-zero status.
        """
        cmd_list = self.build_command(source_path, target, output_path)
        logger.debug(f"Encoding {source_path.name} -> {output_path.name} ({target.video_codec}/{target.audio_codec})")
        try:
            result = self.command_runner(cmd_list, show_cmd=__debug__)
        except FileNotFoundError as e:
            raise VideoEncodeException(
                f"FFmpeg executable '{self.ffmpeg_cmd}' not found. "
                "Install FFmpeg or set `paths.ffmpeg_dir` in config.user.yaml.",
                source_path=source_path,
                output_path=output_path,
            ) from e
        except OSError as e:
            raise VideoEncodeException(
                f"Could not start FFmpeg for {source_path.name}: {e}",
                source_path=source_path,
                output_path=output_path,
            ) from e

        if result.returncode != 0:
            tail = stderr_tail(result.stderr, FFMPEG_STDERR_TAIL_LINES)
            raise VideoEncodeException(
                f"FFmpeg failed (rc={result.returncode}) encoding {source_path.name} to "
                f"{output_path.name}.\nCommand: {display_cmd(cmd_list)}\n{tail}".rstrip(),
                source_path=source_path,
                output_path=output_path,
            )
