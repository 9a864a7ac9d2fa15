from pathlib import Path
from typing import List, Optional, Set, Tuple

import pytest

from asset_converter.domain.exceptions import ImageEncodeException, VideoEncodeException
from asset_converter.services.encoder_base import Encoder


class RecordingEncoder(Encoder):
    """Writes a small placeholder file per encode and records every call."""

    def __init__(self, media_kind: str = "image", fail_on: Optional[Set[Tuple[str, str]]] = None):
        self.media_kind = media_kind
        self.fail_on = fail_on or set()
        self.calls: List[Tuple[Path, str, Path]] = []

    def encode(self, source_path: Path, target, output_path: Path) -> None:
        self.calls.append((source_path, target.extension, output_path))
        if (source_path.name, target.extension) in self.fail_on:
            exc_type = ImageEncodeException if self.media_kind == "image" else VideoEncodeException
            raise exc_type(
                f"cannot encode {source_path.name} as {target.extension}",
                source_path=source_path,
                output_path=output_path,
            )
        output_path.write_bytes(f"{source_path.name}->{target.extension}".encode("utf-8"))


def make_files(root: Path, *relative_paths: str) -> List[Path]:
    created = []
    for rel in relative_paths:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"raw")
        created.append(path)
    return created


def relative_listing(root: Path) -> List[str]:
    if not root.exists():
        return []
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


@pytest.fixture
def project_dir(tmp_path):
    """An empty project directory; raw-assets/ and public/ do not exist yet."""
    return tmp_path / "project"


@pytest.fixture
def image_encoder():
    return RecordingEncoder("image")


@pytest.fixture
def video_encoder():
    return RecordingEncoder("video")
