import io
import logging
import re

from walletunlock.logging import UTCFormatter, setup_logging


def test_utc_formatter_renders_milliseconds() -> None:
    record = logging.LogRecord("walletunlock.cli", logging.INFO, __file__, 1, "unlocking %s", ("alice",), None)
    record.created = 0.25
    record.msecs = 250.0
    assert UTCFormatter().format(record) == "1970-01-01T00:00:00.250Z INFO walletunlock.cli unlocking alice"


def test_setup_logging_replaces_handlers(monkeypatch) -> None:
    stream = io.StringIO()
    monkeypatch.setattr("sys.stderr", stream)
    logger = setup_logging(level=logging.INFO)
    setup_logging(level=logging.INFO)
    try:
        assert len(logger.handlers) == 1
        assert logger.propagate is False
        logging.getLogger("walletunlock.client").info("Calling %s", "walletpassphrase")
        line = stream.getvalue().strip()
        assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z INFO walletunlock.client Calling walletpassphrase", line)
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
