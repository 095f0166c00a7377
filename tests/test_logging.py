import logging

from personal_manager.logging_config import get_logger, log_request, setup_logging


def test_get_logger_lives_under_app_namespace():
    assert get_logger("crud.base").name == "personal_manager.crud.base"
    assert get_logger("personal_manager.routers").name == "personal_manager.routers"


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    app_logger = setup_logging(app_log_level="DEBUG", third_party_log_level="ERROR", log_file=str(log_file))
    try:
        log_request(get_logger("test"), "GET", "/health", 200, 1.5)
        for handler in app_logger.handlers:
            handler.flush()

        assert "GET /health -> 200 (1.5ms)" in log_file.read_text()
        assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
        assert len(app_logger.handlers) == 2
    finally:
        for handler in app_logger.handlers:
            handler.close()
        setup_logging()
