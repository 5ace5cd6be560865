import json
import logging

from rotorwash.config.logging import CustomJsonFormatter, build_logging_config
from rotorwash.config.settings import Settings
from rotorwash.core.logging import SecretMaskingProcessor, get_logger, request_id


def test_json_format_uses_json_console_formatter():
    config = build_logging_config(Settings(LOG_FORMAT="json", ENVIRONMENT="production"))

    assert config["handlers"]["console"]["formatter"] == "json"
    assert "file" not in config["handlers"]


def test_development_console_is_colored():
    config = build_logging_config(Settings(ENVIRONMENT="development"))

    assert config["handlers"]["console"]["formatter"] == "colored"


def test_log_file_adds_rotating_handler(tmp_path):
    log_file = tmp_path / "logs" / "rotorwash.log"
    config = build_logging_config(Settings(LOG_FILE=str(log_file)))

    assert config["handlers"]["file"]["class"] == "logging.handlers.RotatingFileHandler"
    assert config["loggers"]["rotorwash"]["handlers"] == ["console", "file"]
    assert log_file.parent.is_dir()


def test_logger_adapter_carries_context_and_request_id(caplog):
    logger = get_logger("rotorwash.tests").add_context(option_name="rw_theme_settings")
    token = request_id.set("req-1")
    try:
        with caplog.at_level(logging.INFO, logger="rotorwash.tests"):
            logger.info("Saved settings")
    finally:
        request_id.reset(token)

    record = caplog.records[-1]
    assert record.option_name == "rw_theme_settings"
    assert record.request_id == "req-1"


def test_secrets_are_masked():
    event = {"event": "login", "password": "hunter2", "context": {"api_token": "abc"}}

    masked = SecretMaskingProcessor()(None, "info", event)

    assert masked["password"] == "[REDACTED]"
    assert masked["context"]["api_token"] == "[REDACTED]"
    assert masked["event"] == "login"


def test_json_formatter_reports_configured_environment():
    config = build_logging_config(Settings(LOG_FORMAT="json", ENVIRONMENT="staging"))
    assert config["formatters"]["json"]["environment"] == "staging"

    formatter = CustomJsonFormatter("%(message)s", environment="staging")
    record = logging.LogRecord("rotorwash", logging.INFO, __file__, 1, "Saved settings", None, None)

    payload = json.loads(formatter.format(record))

    assert payload["environment"] == "staging"
    assert payload["message"] == "Saved settings"
