import io
import logging

from fixedvec import Vector, linear_combination
from fixedvec.logging_config import setup_logging


def test_setup_logging_replaces_its_own_handler(tmp_path):
    logger = logging.getLogger("fixedvec")
    before = list(logger.handlers)

    first = setup_logging(logging.DEBUG, stream=io.StringIO())
    log_file = tmp_path / "fixedvec.log"
    second = setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert first not in logger.handlers
        assert second in logger.handlers
        # handlers installed by others (the package NullHandler) are kept
        assert logger.handlers == before + [second]
        assert logger.level == logging.DEBUG

        linear_combination([Vector([1.0, 0.0])], [2.0])
        second.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "fixedvec.vector.combine - DEBUG - linear_combination: 1 vectors of dimension 2" in text
    finally:
        logger.removeHandler(second)
        second.close()


def test_setup_logging_to_stream():
    logger = logging.getLogger("fixedvec")
    buf = io.StringIO()
    handler = setup_logging(logging.DEBUG, stream=buf)
    try:
        Vector([0.0, 0.0]).cosine(Vector([1.0, 1.0]))
        assert "zero-norm" in buf.getvalue()
    finally:
        logger.removeHandler(handler)


def test_cosine_logs_zero_norm(caplog):
    with caplog.at_level(logging.DEBUG, logger="fixedvec"):
        Vector([0.0, 0.0]).cosine(Vector([1.0, 1.0]))
    assert any("zero-norm" in r.getMessage() for r in caplog.records)
