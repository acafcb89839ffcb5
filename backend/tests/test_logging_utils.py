import logging
from dataclasses import dataclass

import pytest

from utils.logging_utils import (
    ContextFormatter,
    clear_logging_context,
    configure_logging,
    get_logging_context,
    log_operation,
    set_logging_context,
)


@dataclass
class _Input:
    book_id: str


@log_operation("update_book")
def _update(service_input):
    return "done"


@log_operation("find_books_by_author")
def _find(author_id):
    return author_id


@log_operation("create_book")
def _explode(service_input):
    raise RuntimeError("boom")


@pytest.fixture(autouse=True)
def _reset_context():
    clear_logging_context()
    yield
    clear_logging_context()


def _records(caplog, message):
    return [record for record in caplog.records if record.getMessage() == message]


def test_operation_picks_up_id_from_input_attribute(caplog):
    caplog.set_level(logging.INFO)

    assert _update(_Input(book_id="b-1")) == "done"

    started = _records(caplog, "Starting update_book")[0]
    assert started.operation == "update_book"
    assert started.book_id == "b-1"
    assert _records(caplog, "Completed update_book")


def test_operation_picks_up_positional_id(caplog):
    caplog.set_level(logging.INFO)

    _find("a-1")

    assert _records(caplog, "Starting find_books_by_author")[0].author_id == "a-1"


def test_failure_is_logged_and_reraised(caplog):
    caplog.set_level(logging.INFO)

    with pytest.raises(RuntimeError):
        _explode(_Input(book_id="b-2"))

    failed = _records(caplog, "Failed create_book")[0]
    assert failed.levelno == logging.ERROR
    assert failed.error == "boom"
    assert failed.error_type == "RuntimeError"


def test_request_context_is_attached(caplog):
    caplog.set_level(logging.INFO)
    set_logging_context(request_id="req-1", path="/books")

    _update(_Input(book_id="b-3"))

    assert get_logging_context() == {"request_id": "req-1", "path": "/books"}
    assert _records(caplog, "Starting update_book")[0].request_id == "req-1"


def test_configure_logging_replaces_own_handlers(tmp_path):
    root = logging.getLogger()
    log_file = tmp_path / "book_manager.log"

    configure_logging(logging.INFO, log_file)
    configure_logging(logging.INFO, log_file)

    own = [handler for handler in root.handlers if getattr(handler, "_book_manager", False)]
    try:
        assert len(own) == 2
        assert log_file.exists()
    finally:
        configure_logging(logging.INFO, None)


def test_formatter_renders_context():
    formatter = ContextFormatter("%(levelname)s - %(message)s")
    record = logging.LogRecord("svc", logging.INFO, __file__, 1, "Starting update_book", (), None)
    record.operation = "update_book"
    record.book_id = "b-1"

    assert formatter.format(record) == "INFO - Starting update_book [operation=update_book book_id=b-1]"


def test_formatter_leaves_plain_records_alone():
    formatter = ContextFormatter("%(levelname)s - %(message)s")
    record = logging.LogRecord("svc", logging.WARNING, __file__, 1, "plain", (), None)

    assert formatter.format(record) == "WARNING - plain"


def test_configured_handlers_print_context(capsys):
    configure_logging(logging.INFO, None)
    try:
        _update(_Input(book_id="b-4"))
    finally:
        configure_logging(logging.INFO, None)

    assert "Starting update_book [operation=update_book book_id=b-4]" in capsys.readouterr().out
