"""
Value objects for the conversion pipelines.

Nothing here touches the filesystem: identities are derived from paths alone,
never from file content, and targets are plain configuration records.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .exceptions import FileSystemException


@dataclass(frozen=True)
class AssetRoot:
    """
    Pairs one input directory with its mirrored output directory.

    Attributes:
        kind: Media kind label used in log lines ("image" or "video").
        input_dir: Root scanned for raw files.
        output_dir: Root receiving the encoded variants.
    """

    kind: str
    input_dir: Path
    output_dir: Path

    def resolved_against(self, project_dir: Path) -> "AssetRoot":
        """Returns a copy whose relative roots are anchored at `project_dir`."""
        return AssetRoot(
            kind=self.kind,
            input_dir=(project_dir / self.input_dir).resolve(),
            output_dir=(project_dir / self.output_dir).resolve(),
        )


@dataclass(frozen=True)
class RelativeIdentity:
    """
    The location-independent identity of a raw file.

    Attributes:
        relative_dir: Subdirectory of the file relative to its input root
                      (`Path(".")` for files directly in the root).
        base_name: File name with only the final extension removed, so
                   `a.b.png` becomes `a.b`.
    """

    relative_dir: Path
    base_name: str

    @classmethod
    def from_path(cls, input_root: Path, file_path: Path) -> "RelativeIdentity":
        try:
            relative_path = file_path.relative_to(input_root)
        except ValueError as e:
            raise FileSystemException(f"{file_path} is not located under {input_root}") from e
        return cls(relative_dir=relative_path.parent, base_name=relative_path.stem)

    def output_file(self, output_dir: Path, extension: str) -> Path:
        return output_dir / f"{self.base_name}.{extension}"


@dataclass(frozen=True)
class ImageTarget:
    """
    One image output format.

    Attributes:
        extension: Output file suffix without the dot.
        pil_format: Format name passed to `PIL.Image.Image.save`.
        quality: Encoder quality, 0-100, higher is better/larger.
        mode: Optional Pillow mode the image is converted to before saving.
        save_options: Extra (keyword, value) pairs for `Image.save`.
    """

    extension: str
    pil_format: str
    quality: int
    mode: Optional[str] = None
    save_options: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self):
        if not 0 <= self.quality <= 100:
            raise ValueError(f"Image quality must be between 0 and 100, got {self.quality}.")


@dataclass(frozen=True)
class VideoTarget:
    """
    One video output profile (container, codecs and ffmpeg output options).

    `output_options` is a tuple of (option, value) pairs handed to ffmpeg-python
    as output keyword arguments, e.g. `(("crf", 30), ("b:v", 0))` for
    `-crf 30 -b:v 0`.
    """

    extension: str
    video_codec: str
    audio_codec: str
    output_options: Tuple[Tuple[str, Any], ...] = ()

    def ffmpeg_output_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"vcodec": self.video_codec, "acodec": self.audio_codec}
        kwargs.update(dict(self.output_options))
        return kwargs
