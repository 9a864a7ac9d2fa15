"""
Base class shared by the Pillow image encoder and the ffmpeg video encoder.
"""
from pathlib import Path
from typing import Any


class Encoder:
    """
    Common interface of the image and video encoders.

    An encoder turns one source file into one output file for one target and
    returns only once the output is complete. Failures are raised, never
    returned.
    """

    media_kind: str = ""

    def encode(self, source_path: Path, target: Any, output_path: Path) -> None:
        raise NotImplementedError("Subclasses must implement encode().")

    @staticmethod
    def describe_target(target: Any) -> str:
        return str(getattr(target, "extension", target))
