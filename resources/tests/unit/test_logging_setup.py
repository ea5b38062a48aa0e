"""
Unit tests for logging configuration.
"""

from statelydb_mcp.utils.logging import build_logging_config, setup_logging


def test_console_logs_to_stderr():
    config = build_logging_config("INFO")

    assert config["handlers"]["console"]["stream"] == "ext://sys.stderr"
    assert config["handlers"]["console"]["formatter"] == "standard"
    assert "file" not in config["handlers"]


def test_structured_and_file_logging(tmp_path):
    log_file = tmp_path / "server.log"

    config = build_logging_config("DEBUG", structured=True, log_file=log_file)

    assert config["handlers"]["console"]["formatter"] == "structured"
    assert config["handlers"]["file"]["filename"] == str(log_file)
    assert "file" in config["loggers"]["statelydb_mcp"]["handlers"]


def test_setup_logging_level_override():
    logger = setup_logging("statelydb_mcp.test_logger", level="warning")

    assert logger.name == "statelydb_mcp.test_logger"
    assert logger.level == 30
