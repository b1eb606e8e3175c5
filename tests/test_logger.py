# File: tests/test_logger.py
import io
import logging

from email_scout.logger import LOGGER_NAME, configure


def test_records_go_to_given_stream_only():
    stream = io.StringIO()
    lg = configure(level="DEBUG", stream=stream, log_format="%(levelname)s %(message)s")
    lg.debug("hello %s", "there")

    assert stream.getvalue() == "DEBUG hello there\n"
    assert lg is logging.getLogger(LOGGER_NAME)
    assert len(lg.handlers) == 1
    assert not lg.propagate


def test_reconfigure_replaces_handlers(tmp_path):
    first, second = io.StringIO(), io.StringIO()
    configure(stream=first)
    lg = configure(stream=second, log_file=tmp_path / "scout.log", log_format="%(message)s")
    lg.info("only once")
    for handler in lg.handlers:
        handler.flush()

    assert first.getvalue() == ""
    assert second.getvalue() == "only once\n"
    assert (tmp_path / "scout.log").read_text(encoding="utf-8") == "only once\n"


def test_level_filters_records():
    stream = io.StringIO()
    lg = configure(level="WARNING", stream=stream, log_format="%(message)s")
    lg.info("hidden")
    lg.warning("shown")
    assert stream.getvalue() == "shown\n"
