import numpy as np
import pytest

from qoi_decoder import InvalidMagicError, load_image


def test_load_image(tmp_path, make_qoi):
    path = tmp_path / "pixel.qoi"
    path.write_bytes(make_qoi(2, 1, b"\xfe\x0a\x14\x1e\xc0", channels=3, colorspace=1))

    pixel_data, desc = load_image(str(path))

    assert desc == {"width": 2, "height": 1, "channels": 3, "colorspace": 1}
    assert np.array_equal(pixel_data, np.array([[[10, 20, 30], [10, 20, 30]]], dtype=np.uint8))


def test_load_image_propagates_errors(tmp_path):
    path = tmp_path / "broken.qoi"
    path.write_bytes(b"PNG\x00" + b"\x00" * 20)

    with pytest.raises(InvalidMagicError):
        load_image(str(path))
