import logging
from logging.handlers import RotatingFileHandler

from shipment_qr.logging_utils import SafeRotatingFileHandler, setup_logging


def test_safe_rotating_file_handler_swallows_permission_error(monkeypatch, tmp_path):
    log_path = tmp_path / "app.log"
    handler = SafeRotatingFileHandler(log_path, maxBytes=1, backupCount=1, encoding="utf-8")
    logger = logging.getLogger("test.safe.rotate")
    logger.handlers.clear()
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)

    def broken_rollover(self):
        raise PermissionError("locked")

    monkeypatch.setattr(RotatingFileHandler, "doRollover", broken_rollover)

    logger.info("message")
    logger.info("second message")
    handler.close()

    assert log_path.exists()


def test_setup_logging_writes_to_file(tmp_path):
    logger = setup_logging(tmp_path / "logs", logging.DEBUG)
    logging.getLogger("shipment_qr.qr_image").info("rendered")
    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "logs" / "shipment_qr.log").read_text(encoding="utf-8")
    assert "INFO | shipment_qr.qr_image | rendered" in content
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
