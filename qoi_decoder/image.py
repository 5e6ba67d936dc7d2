from dataclasses import dataclass, field
from typing import Iterator

import numpy as np
from PIL import Image

_MODES = {3: "RGB", 4: "RGBA"}


@dataclass(frozen=True)
class DecodedImage:
    """Result of a single decode.

    ``data`` always holds RGBA quadruples in row-major order, whatever the
    header's channel count says. The helpers below repack it for callers
    that want a numpy array, packed ARGB integers or a Pillow image.
    """

    width: int
    height: int
    channels: int
    colorspace: int
    data: bytes = field(repr=False)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def description(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "channels": self.channels,
            "colorspace": self.colorspace,
        }

    def __len__(self) -> int:
        return self.pixel_count

    def pixels(self) -> Iterator[tuple[int, int, int, int]]:
        """Iterate over (r, g, b, a) tuples in decode order."""
        data = self.data
        for i in range(0, len(data), 4):
            yield data[i], data[i + 1], data[i + 2], data[i + 3]

    def _output_channels(self, channels: int | None) -> int:
        if channels is None:
            # Headers with an unusual channel count still carry RGBA data
            return self.channels if self.channels in _MODES else 4
        if channels not in _MODES:
            raise ValueError(f"Unsupported number of output channels: {channels}")
        return channels

    def to_array(self, channels: int = None) -> np.ndarray:
        """Return the pixels as a (height, width, channels) uint8 array."""
        channels = self._output_channels(channels)
        rgba = np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, 4
        )
        if channels == 3:
            return rgba[..., :3].copy()
        return rgba.copy()

    def to_argb(self) -> np.ndarray:
        """Return the pixels packed as 0xAARRGGBB in a (height, width) uint32 array."""
        rgba = np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, 4
        ).astype(np.uint32)
        return (
            (rgba[..., 3] << 24)
            | (rgba[..., 0] << 16)
            | (rgba[..., 1] << 8)
            | rgba[..., 2]
        )

    def to_image(self, mode: str = None) -> Image.Image:
        """Return a Pillow image in RGB or RGBA mode."""
        if mode is None:
            mode = _MODES[self._output_channels(None)]
        if mode not in _MODES.values():
            raise ValueError(f"Unsupported image mode: {mode}")

        img = Image.frombytes("RGBA", (self.width, self.height), self.data)
        if mode == "RGB":
            img = img.convert("RGB")
        return img
