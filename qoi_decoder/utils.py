import logging

import numpy as np

from .decoder import QOIDecoder

logger = logging.getLogger(__name__)


def load_image(filepath: str) -> tuple[np.ndarray, dict]:
    """Load a QOI image and return pixel data as numpy array + description."""

    with open(filepath, "rb") as f:
        content = f.read()

    decoded = QOIDecoder.decode(content)
    logger.info(
        "Loaded %s: %dx%d, %d channels",
        filepath,
        decoded.width,
        decoded.height,
        decoded.channels,
    )

    return decoded.to_array(), decoded.description
