import base64
import io

import pytest
from PIL import Image

from deepfry.core import BitChange, ChangeMode, deepfry
from deepfry.preview import image_to_data_url, start_deepfry

PREFIX = "data:image/png;base64,"


@pytest.fixture
def source_image():
    image = Image.new("RGB", (3, 3))
    image.putdata([(i * 29 % 256, i * 53 % 256, i * 97 % 256) for i in range(9)])
    return image


def _decode(url):
    assert url.startswith(PREFIX)
    data = base64.b64decode(url[len(PREFIX):])
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


def test_data_url_round_trip(source_image):
    decoded = _decode(image_to_data_url(source_image))
    assert decoded.format == "PNG"
    assert decoded.size == source_image.size
    assert list(decoded.convert("RGB").getdata()) == list(source_image.getdata())


def test_data_url_payload_is_png(source_image):
    url = image_to_data_url(source_image)
    payload = base64.b64decode(url[len(PREFIX):])
    assert payload[:8] == b"\x89PNG\r\n\x1a\n"


def test_start_deepfry_matches_core(tmp_path, source_image):
    path = tmp_path / "picture.png"
    source_image.save(path)
    url = start_deepfry(ChangeMode.MULTIPLY, 3, 0, 255, str(path))
    expected = deepfry(source_image, BitChange(ChangeMode.MULTIPLY, 3, 0, 255))
    assert list(_decode(url).convert("RGB").getdata()) == list(expected.getdata())


def test_start_deepfry_zero_or_keeps_image(tmp_path, source_image):
    path = tmp_path / "picture.png"
    source_image.save(path)
    url = start_deepfry(ChangeMode.OR, 0, 0, 0, path)
    assert list(_decode(url).convert("RGB").getdata()) == list(source_image.getdata())


@pytest.mark.parametrize("red, green, blue", [(256, 0, 0), (0, -1, 0), (0, 0, 1000)])
def test_start_deepfry_rejects_out_of_range(tmp_path, source_image, red, green, blue):
    path = tmp_path / "picture.png"
    source_image.save(path)
    with pytest.raises(ValueError):
        start_deepfry(ChangeMode.XOR, red, green, blue, path)


def test_start_deepfry_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        start_deepfry(ChangeMode.NOT, 0, 0, 0, tmp_path / "absent.png")