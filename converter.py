import logging

from qoi_decoder import QOIDecoder
from qoi_decoder.logger import setup_logger

INPUT_QOI = "fruits.qoi"
OUTPUT_PNG = "fruits_converted.png"

logger = logging.getLogger("qoi_decoder.converter")


def qoi_to_png(qoi_path, png_path):
    with open(qoi_path, "rb") as f:
        content = f.read()

    decoded = QOIDecoder.decode(content)

    img = decoded.to_image()
    img.save(png_path)
    logger.info(f"Converted {qoi_path} to {png_path} ({img.mode})")
    return img


if __name__ == "__main__":
    setup_logger()
    qoi_to_png(INPUT_QOI, OUTPUT_PNG)
