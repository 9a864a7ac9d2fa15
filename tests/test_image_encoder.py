import pytest
from PIL import Image, features

from asset_converter.config.image import IMAGE_TARGETS
from asset_converter.domain.exceptions import ImageEncodeException
from asset_converter.domain.media import ImageTarget
from asset_converter.services.image_encoder import ImageEncoder

WEBP, AVIF, JPEG = IMAGE_TARGETS


@pytest.fixture
def rgba_png(tmp_path):
    path = tmp_path / "logo.png"
    Image.new("RGBA", (32, 24), (200, 30, 30, 128)).save(path)
    return path


def test_encodes_webp(rgba_png, tmp_path):
    output = tmp_path / "logo.webp"

    ImageEncoder().encode(rgba_png, WEBP, output)

    with Image.open(output) as result:
        assert result.format == "WEBP"
        assert result.size == (32, 24)


def test_encodes_jpeg_from_image_with_alpha(rgba_png, tmp_path):
    output = tmp_path / "logo.jpg"

    ImageEncoder().encode(rgba_png, JPEG, output)

    with Image.open(output) as result:
        assert result.format == "JPEG"
        assert result.mode == "RGB"


def test_palette_image_is_converted_for_webp(tmp_path):
    source = tmp_path / "pal.gif"
    Image.new("P", (8, 8)).save(source)
    output = tmp_path / "pal.webp"

    ImageEncoder().encode(source, WEBP, output)

    assert output.stat().st_size > 0


@pytest.mark.skipif(not features.check("avif"), reason="Pillow built without AVIF support")
def test_encodes_avif(rgba_png, tmp_path):
    output = tmp_path / "logo.avif"

    ImageEncoder().encode(rgba_png, AVIF, output)

    with Image.open(output) as result:
        assert result.format == "AVIF"


def test_non_image_source_raises_encode_error(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_text("definitely not pixels")

    with pytest.raises(ImageEncodeException) as exc_info:
        ImageEncoder().encode(source, WEBP, tmp_path / "notes.webp")

    assert exc_info.value.source_path == source
    assert not (tmp_path / "notes.webp").exists()


def test_unknown_format_raises_encode_error(rgba_png, tmp_path):
    target = ImageTarget(extension="xyz", pil_format="NOT-A-FORMAT", quality=50)

    with pytest.raises(ImageEncodeException):
        ImageEncoder().encode(rgba_png, target, tmp_path / "logo.xyz")


def test_save_options_reach_pillow(rgba_png, tmp_path, monkeypatch):
    saved = {}
    original_save = Image.Image.save

    def recording_save(self, fp, format=None, **params):
        saved.update(params, format=format)
        return original_save(self, fp, format=format, **params)

    monkeypatch.setattr(Image.Image, "save", recording_save)

    ImageEncoder().encode(rgba_png, WEBP, tmp_path / "logo.webp")

    assert saved == {"format": "WEBP", "quality": 80, "method": 6}
