import io
import logging

import pytest

from qoi_decoder import decode
from qoi_decoder.logger import LOGGER_NAME, RESET, LevelColorFormatter, setup_logger


@pytest.fixture
def package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_decoder_messages_reach_stream_and_file(package_logger, tmp_path, make_qoi):
    stream = io.StringIO()
    log_file = tmp_path / "decode.log"
    logger = setup_logger("debug", log_file=str(log_file), stream=stream)

    decode(make_qoi(1, 1, b"\xff\x0a\x14\x1e\x28"))
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert "Decoding 1x1 QOI image" in stream.getvalue()
    assert "qoi_decoder.decoder" in stream.getvalue()
    assert RESET not in stream.getvalue()
    assert "Decoding 1x1 QOI image" in log_file.read_text()


def test_level_filters_debug(package_logger, make_qoi):
    stream = io.StringIO()
    setup_logger(logging.INFO, stream=stream)

    decode(make_qoi(1, 1, b"\xff\x0a\x14\x1e\x28"))
    assert stream.getvalue() == ""


def test_setup_logger_replaces_handlers(package_logger):
    setup_logger(stream=io.StringIO())
    logger = setup_logger(stream=io.StringIO())

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_color_wraps_level_name_only():
    formatter = LevelColorFormatter("%(levelname)s|%(message)s", use_color=True)
    record = logging.LogRecord("qoi_decoder", logging.WARNING, __file__, 1, "careful", None, None)

    assert formatter.format(record) == f"\033[93mWARNING{RESET}|careful"
    assert record.levelname == "WARNING"
