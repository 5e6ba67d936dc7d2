"""Exceptions raised while decoding QOI data."""


class QOIDecodeError(ValueError):
    """Base class for every failure raised by the decoder."""

    def __init__(self, msg: str):
        super().__init__(f"QOI.decode: {msg}")


class InvalidMagicError(QOIDecodeError):
    """The stream does not start with ``qoif``."""

    def __init__(self, magic: bytes):
        self.magic = bytes(magic)
        shown = ", ".join(f"{byte:02X}" for byte in self.magic)
        super().__init__(f"Bogus qoi magic! expected 'qoif', got {shown}")


class InvalidDimensionsError(QOIDecodeError):
    """Width or height is negative, or their product is too large."""

    def __init__(self, width: int, height: int, reason: str = "negative dimension"):
        self.width = width
        self.height = height
        super().__init__(f"Bogus image dimensions of {width} x {height} ({reason})")


class InvalidEndMarkerError(QOIDecodeError):
    """The 8-byte end marker following the chunk stream is wrong or missing.

    ``value`` is the offending byte, or ``None`` when the data ran out before
    the marker was complete.
    """

    def __init__(self, offset: int, value: int | None, expected: int):
        self.offset = offset
        self.value = value
        self.expected = expected
        if value is None:
            detail = "end marker is incomplete"
        else:
            detail = f"expected {expected:#04x}, got {value:#04x}"
        super().__init__(f"Bogus QOI end marker @{offset}: {detail}")


class TruncatedDataError(QOIDecodeError, EOFError):
    """The data ended before the header or a chunk was complete."""

    def __init__(self, offset: int, needed: int, what: str):
        self.offset = offset
        self.needed = needed
        super().__init__(
            f"File too short, {what} needs {needed} byte(s) at offset {offset}"
        )


class RunOverflowError(QOIDecodeError):
    """A QOI_OP_RUN chunk repeats the pixel past the end of the image."""

    def __init__(self, offset: int, run: int, remaining: int):
        self.offset = offset
        self.run = run
        self.remaining = remaining
        super().__init__(
            f"Run of {run} pixels @{offset} overflows the image, {remaining} pixel(s) left"
        )
