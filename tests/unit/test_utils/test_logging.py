"""Unit tests for sqlchain logging helpers."""

import logging
from collections.abc import Iterator

import msgspec
import pytest

from sqlchain.builder import insert_into, select
from sqlchain.exceptions import SQLBuilderError
from sqlchain.utils.logging import ROOT_LOGGER_NAME, StructuredFormatter, configure_logging, get_logger


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate


def test_get_logger_namespacing() -> None:
    assert get_logger().name == "sqlchain"
    assert get_logger("builder").name == "sqlchain.builder"
    assert get_logger("sqlchain.builder.select").name == "sqlchain.builder.select"


def test_library_does_not_configure_logging_on_import() -> None:
    assert not any(
        isinstance(handler.formatter, StructuredFormatter) for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers
    )


def test_structured_formatter_emits_json() -> None:
    record = logging.LogRecord(
        name="sqlchain.builder",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=10,
        msg="Rendered %s statement",
        args=("Select",),
        exc_info=None,
    )
    record.extra_fields = {"statement": "SELECT 1"}

    payload = msgspec.json.decode(StructuredFormatter().format(record))

    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "sqlchain.builder"
    assert payload["message"] == "Rendered Select statement"
    assert payload["statement"] == "SELECT 1"


def test_configure_logging_installs_one_stdout_handler(restore_root_logger: logging.Logger) -> None:
    configure_logging(level="debug", format_style="simple")
    configure_logging(level="warning", format_style="structured")

    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, StructuredFormatter)
    assert restore_root_logger.level == logging.WARNING
    assert restore_root_logger.propagate is False


def test_configure_logging_extra_handlers(restore_root_logger: logging.Logger) -> None:
    extra = logging.NullHandler()
    configure_logging(extra_handlers=[extra])
    assert extra in restore_root_logger.handlers


def test_rendering_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        select("1").to_sql()
    assert any(
        record.name == "sqlchain.builder" and record.getMessage() == "Rendered Select statement: SELECT 1"
        for record in caplog.records
    )


def test_rejections_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME), pytest.raises(SQLBuilderError):
        insert_into("Dummy").values([])
    assert any(record.name == "sqlchain.builder.insert" for record in caplog.records)
