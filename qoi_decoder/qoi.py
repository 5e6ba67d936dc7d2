class QOI:
    # QOI Constants
    QOI_OP_INDEX = 0x00
    QOI_OP_DIFF  = 0x40
    QOI_OP_LUMA  = 0x80
    QOI_OP_RUN   = 0xC0
    QOI_OP_RGB   = 0xFE
    QOI_OP_RGBA  = 0xFF

    QOI_MASK_2   = 0xC0
    QOI_HEADER_SIZE = 14
    QOI_MAGIC = b'qoif'
    QOI_END_MARKER = b'\x00' * 7 + b'\x01'
    QOI_INDEX_SIZE = 64
    QOI_PIXELS_MAX = 0x7FFFFFFF  # Pixel counter is a signed 32-bit value

    # Cursor state before the first chunk (opaque black)
    QOI_START_PIXEL = (0, 0, 0, 255)

    @staticmethod
    def _hash(r, g, b, a):
        """Calculates the index position for the color array."""
        return (r * 3 + g * 5 + b * 7 + a * 11) % 64

    @classmethod
    def index_position(cls, pixel):
        """Index position of an (r, g, b, a) tuple."""
        return cls._hash(*pixel)
