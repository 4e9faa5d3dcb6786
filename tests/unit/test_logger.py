import json
import logging
import sys

from json_response.utils.logger import ColoredFormatter, JSONFormatter, get_logger, setup_logging


def _record(level=logging.INFO, msg="hello %s", args=("world",), exc_info=None):
    return logging.LogRecord(
        name="json_response.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestSetupLogging:
    def test_prod_uses_single_json_handler(self, restore_root_logger):
        root = restore_root_logger
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())

        setup_logging("prod", "WARNING")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING

    def test_dev_uses_colored_formatter(self, restore_root_logger):
        setup_logging("dev", "debug")

        root = restore_root_logger
        assert isinstance(root.handlers[0].formatter, ColoredFormatter)
        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("prod", "LOUD")

        assert restore_root_logger.level == logging.INFO

    def test_repeated_setup_does_not_duplicate_handlers(self, restore_root_logger):
        setup_logging("prod")
        setup_logging("prod")

        assert len(restore_root_logger.handlers) == 1


class TestFormatters:
    def test_json_formatter_fields(self):
        line = JSONFormatter().format(_record())
        payload = json.loads(line)

        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "json_response.test"
        assert payload["line"] == 10
        assert "exception" not in payload

    def test_json_formatter_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        payload = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: boom" in payload["exception"]

    def test_json_formatter_extra_fields(self):
        record = _record()
        record.extra_fields = {"path": "/users"}

        assert json.loads(JSONFormatter().format(record))["path"] == "/users"

    def test_colored_formatter_restores_record(self):
        formatter = ColoredFormatter(fmt="%(asctime)s %(levelname)s %(name)s %(message)s")
        record = _record(level=logging.ERROR)

        line = formatter.format(record)

        assert "\033[31mERROR\033[0m" in line
        assert "hello world" in line
        assert record.levelname == "ERROR"
        assert record.name == "json_response.test"


def test_get_logger():
    assert get_logger("json_response.x") is logging.getLogger("json_response.x")
