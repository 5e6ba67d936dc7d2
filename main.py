import logging

from qoi_decoder import load_image
from qoi_decoder.logger import setup_logger

INPUT_QOI = "fruits.qoi"

if __name__ == "__main__":
    logger = setup_logger(logging.DEBUG)

    pixel_data, desc = load_image(INPUT_QOI)
    logger.info(
        f"Loaded image {INPUT_QOI}: {desc['width']}x{desc['height']} "
        f"Channels: {desc['channels']} Colorspace: {desc['colorspace']}"
    )
    logger.info(f"Decoded {INPUT_QOI} to {pixel_data.nbytes} bytes")
