import io
import logging

import log_anon_lib
from log_anon_lib import AnonymizingFormatter

from vectors import TOKEN_10_10_1_1


def _log_through(formatter, *args, exc_info=None):
    sink = io.StringIO()
    handler = logging.StreamHandler(sink)
    handler.setFormatter(formatter)
    logger = logging.getLogger("tests.log_formatter")
    logger.propagate = False
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    try:
        logger.warning(*args, exc_info=exc_info)
    finally:
        logger.removeHandler(handler)
    return sink.getvalue()


def test_formats_arguments(ip_anonymizer):
    formatter = AnonymizingFormatter(
        fmt="%(levelname)s %(message)s", anonymizer=ip_anonymizer
    )
    out = _log_through(formatter, "login from %s", "10.10.1.1")
    assert out == f"WARNING login from IP:{TOKEN_10_10_1_1}\n"


def test_anonymizes_exception_text(ip_anonymizer):
    formatter = AnonymizingFormatter(fmt="%(message)s", anonymizer=ip_anonymizer)
    try:
        raise ConnectionError("cannot reach 10.10.1.1")
    except ConnectionError as e:
        out = _log_through(formatter, "failed", exc_info=e)
    assert "10.10.1.1" not in out
    assert f"cannot reach IP:{TOKEN_10_10_1_1}" in out


def test_uses_default_anonymizer():
    log_anon_lib.set_salt(b"")
    out = _log_through(AnonymizingFormatter(fmt="%(message)s"), "peer 10.10.1.1")
    assert out == f"peer IP:{TOKEN_10_10_1_1}\n"
