import struct

import pytest

END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"


def build_qoi(width, height, chunks=b"", channels=4, colorspace=0, end=END_MARKER):
    """Assemble a QOI file from a raw chunk stream."""
    header = b"qoif" + struct.pack(">IIBB", width, height, channels, colorspace)
    return header + bytes(chunks) + end


@pytest.fixture
def make_qoi():
    return build_qoi
