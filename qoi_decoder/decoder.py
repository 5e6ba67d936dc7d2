import logging
import struct
from contextlib import contextmanager
from dataclasses import dataclass

from .errors import (
    InvalidDimensionsError,
    InvalidEndMarkerError,
    InvalidMagicError,
    RunOverflowError,
    TruncatedDataError,
)
from .image import DecodedImage
from .qoi import QOI

logger = logging.getLogger(__name__)

# > : Big Endian
# i : signed int (4 bytes), so a set sign bit reads as a negative dimension
# B : unsigned char (1 byte)
_HEADER_STRUCT = struct.Struct(">iiBB")


@dataclass(frozen=True)
class QOIHeader:
    """Metadata stored in the 14 byte QOI header.

    ``channels`` and ``colorspace`` are kept exactly as they appear in the
    file. They do not change how the chunk stream is decoded.
    """

    width: int
    height: int
    channels: int
    colorspace: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


def _require(data_len: int, read_pos: int, size: int, what: str):
    if read_pos + size > data_len:
        raise TruncatedDataError(read_pos, size, what)


@contextmanager
def _view(file_data, byte_offset: int, byte_length: int | None):
    # Slice a view of the input so large buffers are not copied. Every view
    # is released on exit, so the caller may resize its buffer afterwards
    with memoryview(file_data) as view, view.cast("B") as flat:
        if byte_length is None:
            byte_length = len(flat) - byte_offset
        with flat[byte_offset : byte_offset + byte_length] as data:
            yield data


class QOIDecoder:
    """
    A class to decode QOI (Quite OK Image) files into raw RGBA pixel data.
    """

    @staticmethod
    def read_header(
        file_data,
        byte_offset: int = 0,
        byte_length: int = None,
        max_pixels: int = QOI.QOI_PIXELS_MAX,
    ) -> QOIHeader:
        """
        Parse and validate the header of a QOI file.

        :param file_data: Bytes-like object containing the QOI file.
        :param byte_offset: Offset to the start of the QOI file in file_data.
        :param byte_length: Length of the QOI file in bytes.
        :param max_pixels: Largest accepted width * height.
        :return: The parsed QOIHeader.
        """
        with _view(file_data, byte_offset, byte_length) as data:
            return QOIDecoder._parse_header(data, max_pixels)

    @staticmethod
    def _parse_header(data: memoryview, max_pixels: int) -> QOIHeader:
        # QOI Header is 14 bytes:
        # magic(4), width(4), height(4), channels(1), colorspace(1)
        _require(len(data), 0, len(QOI.QOI_MAGIC), "magic")
        magic = bytes(data[:4])
        if magic != QOI.QOI_MAGIC:
            raise InvalidMagicError(magic)

        _require(len(data), 4, QOI.QOI_HEADER_SIZE - 4, "header")
        width, height, channels, colorspace = _HEADER_STRUCT.unpack_from(data, 4)

        if width < 0 or height < 0:
            raise InvalidDimensionsError(width, height)

        if width * height > max_pixels:
            raise InvalidDimensionsError(
                width, height, f"more than {max_pixels} pixels"
            )

        if channels not in (3, 4) or colorspace not in (0, 1):
            # Passed through untouched, the chunk stream does not depend on them
            logger.debug(
                "Unusual header metadata: channels=%d colorspace=%d",
                channels,
                colorspace,
            )

        return QOIHeader(width, height, channels, colorspace)

    @staticmethod
    def decode(
        file_data,
        byte_offset: int = 0,
        byte_length: int = None,
        max_pixels: int = QOI.QOI_PIXELS_MAX,
    ) -> DecodedImage:
        """
        Decode a QOI file given as a bytes-like object.

        Offsets reported by errors are relative to byte_offset.

        :param file_data: Bytes-like object containing the QOI file.
        :param byte_offset: Offset to the start of the QOI file in file_data.
        :param byte_length: Length of the QOI file in bytes.
        :param max_pixels: Largest accepted width * height.
        :return: DecodedImage holding the header fields and RGBA pixel data.
        :raises QOIDecodeError: if the data is not a complete, valid QOI file.
        """
        with _view(file_data, byte_offset, byte_length) as data:
            return QOIDecoder._decode_view(data, max_pixels)

    @staticmethod
    def _decode_view(data: memoryview, max_pixels: int) -> DecodedImage:
        data_len = len(data)

        # --- Header Parsing ---
        header = QOIDecoder._parse_header(data, max_pixels)
        logger.debug(
            "Decoding %dx%d QOI image (channels=%d, colorspace=%d)",
            header.width,
            header.height,
            header.channels,
            header.colorspace,
        )

        # --- Initialization ---
        # Output is always RGBA, 4 bytes per pixel
        pixel_length = header.pixel_count * 4
        result = bytearray(pixel_length)

        # Index array: 64 pixels, initialized to (0, 0, 0, 0)
        index = [(0, 0, 0, 0)] * QOI.QOI_INDEX_SIZE

        # Initial pixel state (R, G, B, A)
        r, g, b, a = QOI.QOI_START_PIXEL

        read_pos = QOI.QOI_HEADER_SIZE
        write_pos = 0

        # --- Decoding Loop ---
        while write_pos < pixel_length:
            # 1. Store the current pixel before reading the next chunk, so the
            # index always holds the last pixel written at its hash position
            index[QOI._hash(r, g, b, a)] = (r, g, b, a)

            # 2. Read Next Op-Code
            _require(data_len, read_pos, 1, "chunk tag")
            b1 = data[read_pos]
            read_pos += 1

            # QOI_OP_RGB (0xFE/0b11111110)
            if b1 == QOI.QOI_OP_RGB:
                _require(data_len, read_pos, 3, "QOI_OP_RGB")
                r = data[read_pos]
                g = data[read_pos + 1]
                b = data[read_pos + 2]
                read_pos += 3

            # QOI_OP_RGBA (0xFF/0b11111111)
            elif b1 == QOI.QOI_OP_RGBA:
                _require(data_len, read_pos, 4, "QOI_OP_RGBA")
                r = data[read_pos]
                g = data[read_pos + 1]
                b = data[read_pos + 2]
                a = data[read_pos + 3]
                read_pos += 4

            # QOI_OP_INDEX (00xxxxxx)
            elif (b1 & QOI.QOI_MASK_2) == QOI.QOI_OP_INDEX:
                r, g, b, a = index[b1]

            # QOI_OP_DIFF (01xxxxxx)
            elif (b1 & QOI.QOI_MASK_2) == QOI.QOI_OP_DIFF:
                # 2-bit differences with a bias of 2, wrapped to 8-bit unsigned
                r = (r + ((b1 >> 4) & 0x03) - 2) & 0xFF
                g = (g + ((b1 >> 2) & 0x03) - 2) & 0xFF
                b = (b + (b1 & 0x03) - 2) & 0xFF

            # QOI_OP_LUMA (10xxxxxx)
            elif (b1 & QOI.QOI_MASK_2) == QOI.QOI_OP_LUMA:
                _require(data_len, read_pos, 1, "QOI_OP_LUMA")
                b2 = data[read_pos]
                read_pos += 1

                vg = (b1 & 0x3F) - 32
                r = (r + vg - 8 + ((b2 >> 4) & 0x0F)) & 0xFF
                g = (g + vg) & 0xFF
                b = (b + vg - 8 + (b2 & 0x0F)) & 0xFF

            # QOI_OP_RUN (11xxxxxx)
            else:
                run = (b1 & 0x3F) + 1
                stop = write_pos + run * 4
                if stop > pixel_length:
                    raise RunOverflowError(read_pos - 1, run, (pixel_length - write_pos) // 4)
                # Emit the current pixel run times, the index already holds it
                result[write_pos:stop] = bytes((r, g, b, a)) * run
                write_pos = stop
                continue

            # 3. Write Pixel to Result
            result[write_pos] = r
            result[write_pos + 1] = g
            result[write_pos + 2] = b
            result[write_pos + 3] = a
            write_pos += 4

        # --- End Marker ---
        # 7 bytes of 0x00 followed by 1 byte of 0x01
        for expected in QOI.QOI_END_MARKER:
            if read_pos >= data_len:
                raise InvalidEndMarkerError(read_pos, None, expected)
            if data[read_pos] != expected:
                raise InvalidEndMarkerError(read_pos, data[read_pos], expected)
            read_pos += 1

        if read_pos < data_len:
            logger.debug("Ignoring %d byte(s) after the end marker", data_len - read_pos)

        logger.debug("Decoded %d pixels from %d bytes", header.pixel_count, read_pos)

        return DecodedImage(
            width=header.width,
            height=header.height,
            channels=header.channels,
            colorspace=header.colorspace,
            data=bytes(result),
        )


def decode(file_data, byte_offset: int = 0, byte_length: int = None, **kwargs) -> DecodedImage:
    """Shortcut for QOIDecoder.decode."""
    return QOIDecoder.decode(file_data, byte_offset, byte_length, **kwargs)
