"""
Tests del logger compartido entre registros.
"""

import logging

from src.utils import setup_logger


def test_reconfigure_updates_level(capsys):
    """Reconfigurar un logger existente cambia lo que se emite."""
    logger = setup_logger("tests.logger.reconfigure", level=logging.WARNING)
    logger.debug("oculto")

    setup_logger("tests.logger.reconfigure", level=logging.DEBUG)
    logger.debug("visible")

    out = capsys.readouterr().out
    assert "oculto" not in out
    assert "visible" in out
    assert "| DEBUG    | tests.logger.reconfigure | visible" in out


def test_handlers_are_not_duplicated():
    first = setup_logger("tests.logger.handlers")
    second = setup_logger("tests.logger.handlers", level=logging.INFO)

    assert first is second
    assert len(second.handlers) == 1


def test_log_file_added_once(tmp_path):
    log_file = tmp_path / "registry.log"
    setup_logger("tests.logger.file", log_file=log_file)
    logger = setup_logger("tests.logger.file", log_file=log_file)

    logger.warning("a disco")
    for handler in logger.handlers:
        handler.flush()

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert "a disco" in log_file.read_text()

    for handler in file_handlers:
        logger.removeHandler(handler)
        handler.close()
