"""Tests for logging setup and helpers."""

import json
import logging
import sys

from hourcast.config.logging import JsonFormatter, setup_logging
from hourcast.utils.logging_utils import LoggerMixin, log_execution

def test_setup_logging_console_on_stderr(test_config):
    setup_logging(test_config)
    root = logging.getLogger()

    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr

def test_setup_logging_verbose(test_config):
    setup_logging(test_config, verbose=True)
    assert logging.getLogger().level == logging.DEBUG

def test_setup_logging_file(test_config, tmp_path):
    log_file = tmp_path / "logs" / "hourcast.log"
    setup_logging(test_config, log_file=str(log_file))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert log_file.parent.exists()

def test_json_formatter():
    record = logging.LogRecord("hourcast", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    data = json.loads(JsonFormatter(include_timestamp=False).format(record))
    assert data == {'level': 'INFO', 'logger': 'hourcast', 'message': 'hello world'}

class Worker(LoggerMixin):
    @log_execution(level='INFO', include_args=True)
    def run(self, value):
        self.info("Working", value=value)
        return value * 2

def test_logger_mixin_context(caplog):
    worker = Worker()
    worker.set_log_context(address="1 Main St")

    with caplog.at_level(logging.DEBUG):
        assert worker.run(2) == 4

    messages = [r.getMessage() for r in caplog.records]
    assert "Working | Context: address=1 Main St | value=2" in messages
    assert any(m.startswith("Calling run(") for m in messages)
    assert any("run completed in" in m for m in messages)

    worker.clear_log_context()
    assert worker._format_message("plain") == "plain"
