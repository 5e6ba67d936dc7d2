from .decoder import QOIDecoder, QOIHeader, decode
from .errors import (
    InvalidDimensionsError,
    InvalidEndMarkerError,
    InvalidMagicError,
    QOIDecodeError,
    RunOverflowError,
    TruncatedDataError,
)
from .image import DecodedImage
from .qoi import QOI
from .utils import load_image

__version__ = "0.1.0"

__all__ = [
    "QOIDecoder",
    "QOIHeader",
    "QOI",
    "DecodedImage",
    "decode",
    "load_image",
    "QOIDecodeError",
    "InvalidMagicError",
    "InvalidDimensionsError",
    "InvalidEndMarkerError",
    "RunOverflowError",
    "TruncatedDataError",
]
