import sys
from pathlib import Path

import pytest

from asset_converter.domain.exceptions import FileSystemException
from asset_converter.pipeline.asset_pipeline import convert_images
from asset_converter.services.file_discovery_service import ensure_mirrored_dir, list_files

from .conftest import RecordingEncoder, make_files, relative_listing

requires_symlinks = pytest.mark.skipif(sys.platform == "win32", reason="directory symlinks need privileges on Windows")


def test_list_files_missing_root_returns_empty(tmp_path):
    assert list_files(tmp_path / "does-not-exist") == []


def test_list_files_empty_root(tmp_path):
    assert list_files(tmp_path) == []


def test_list_files_recurses_and_skips_directories(tmp_path):
    make_files(tmp_path, "b.png", "a/z.png", "a/deep/er/x.png", "c.jpg")
    (tmp_path / "empty-dir").mkdir()

    files = list_files(tmp_path)

    assert all(p.is_absolute() and p.is_file() for p in files)
    assert [p.relative_to(tmp_path).as_posix() for p in files] == [
        "a/deep/er/x.png",
        "a/z.png",
        "b.png",
        "c.jpg",
    ]


def test_list_files_order_is_stable(tmp_path):
    make_files(tmp_path, "m/2.png", "m/1.png", "k.png", "m/sub/0.png")
    assert list_files(tmp_path) == list_files(tmp_path)


def test_list_files_includes_any_extension(tmp_path):
    make_files(tmp_path, "README", "notes.txt", "photo.PNG")
    assert sorted(p.name for p in list_files(tmp_path)) == ["README", "notes.txt", "photo.PNG"]


def test_mirrored_dir_for_file_at_root(tmp_path):
    input_root, output_root = tmp_path / "in", tmp_path / "out"
    (source,) = make_files(input_root, "logo.png")

    target = ensure_mirrored_dir(input_root, output_root, source)

    assert target == output_root
    assert target.is_dir()


def test_mirrored_dir_preserves_nesting(tmp_path):
    input_root, output_root = tmp_path / "in", tmp_path / "out"
    (source,) = make_files(input_root, "icons/weather/day/sun.png")

    target = ensure_mirrored_dir(input_root, output_root, source)

    assert target == output_root / "icons" / "weather" / "day"
    assert target.is_dir()


def test_mirrored_dir_is_idempotent(tmp_path):
    input_root, output_root = tmp_path / "in", tmp_path / "out"
    (source,) = make_files(input_root, "icons/sun.png")

    first = ensure_mirrored_dir(input_root, output_root, source)
    second = ensure_mirrored_dir(input_root, output_root, source)

    assert first == second
    assert first.is_dir()


def test_mirrored_dir_rejects_file_outside_input_root(tmp_path):
    (outside,) = make_files(tmp_path, "elsewhere/logo.png")
    with pytest.raises(FileSystemException):
        ensure_mirrored_dir(tmp_path / "in", tmp_path / "out", outside)


def test_mirrored_dir_creation_failure_raises_filesystem_error(tmp_path):
    input_root, output_root = tmp_path / "in", tmp_path / "out"
    (source,) = make_files(input_root, "icons/sun.png")
    output_root.mkdir()
    # A regular file where the mirrored directory should go.
    (output_root / "icons").write_text("not a directory")

    with pytest.raises(FileSystemException):
        ensure_mirrored_dir(input_root, output_root, source)


@requires_symlinks
def test_symlink_inside_root_keeps_link_path(tmp_path):
    input_root, output_root = tmp_path / "in", tmp_path / "out"
    make_files(input_root, "real/icon.png")
    (input_root / "alias").symlink_to(input_root / "real", target_is_directory=True)

    files = list_files(input_root)

    assert [p.relative_to(input_root).as_posix() for p in files] == ["alias/icon.png", "real/icon.png"]
    assert ensure_mirrored_dir(input_root, output_root, files[0]) == output_root / "alias"

    convert_images(input_root, output_root, encoder=RecordingEncoder("image"))
    assert relative_listing(output_root) == [
        "alias/icon.avif",
        "alias/icon.jpg",
        "alias/icon.webp",
        "real/icon.avif",
        "real/icon.jpg",
        "real/icon.webp",
    ]


@requires_symlinks
def test_symlink_outside_root_is_mirrored_under_link_name(tmp_path):
    input_root, output_root = tmp_path / "in", tmp_path / "out"
    make_files(tmp_path, "shared/icon.png")
    input_root.mkdir()
    (input_root / "icons").symlink_to(tmp_path / "shared", target_is_directory=True)

    files = list_files(input_root)

    assert files == [input_root / "icons" / "icon.png"]
    assert ensure_mirrored_dir(input_root, output_root, files[0]) == output_root / "icons"

    convert_images(input_root, output_root, encoder=RecordingEncoder("image"))
    assert relative_listing(output_root) == ["icons/icon.avif", "icons/icon.jpg", "icons/icon.webp"]


def test_unreadable_entry_raises_filesystem_error(tmp_path, monkeypatch):
    make_files(tmp_path, "locked/a.png", "open.png")
    original_is_dir = Path.is_dir

    def is_dir_denied(self):
        if self.name == "locked":
            raise PermissionError(13, "Permission denied", str(self))
        return original_is_dir(self)

    monkeypatch.setattr(Path, "is_dir", is_dir_denied)

    with pytest.raises(FileSystemException, match="locked"):
        list_files(tmp_path)
