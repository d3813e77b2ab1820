import logging

from proxplex.logging_config import setup_logging


def _close(logger):
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def test_setup_is_idempotent(tmp_path):
    log_file = tmp_path / "proxplex.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))

    assert logger.name == "proxplex"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("proxplex.complex").debug("hello")
    for h in logger.handlers:
        h.flush()
    assert "proxplex.complex - DEBUG - hello" in log_file.read_text(encoding="utf-8")

    _close(logger)


def test_replaced_file_handler_is_closed(tmp_path):
    first = setup_logging(log_file=str(tmp_path / "first.log"))
    old_file = next(h for h in first.handlers if isinstance(h, logging.FileHandler))

    logger = setup_logging(log_file=str(tmp_path / "second.log"))
    assert old_file not in logger.handlers
    # FileHandler.close() скидає stream у None
    assert old_file.stream is None

    _close(logger)
