import pytest
import logging
import os
from openai_typed.core.logger import setup_logging, LOGGER_NAME
from openai_typed.core.exceptions import LoggerError

@pytest.fixture
def temp_log_file(tmp_path):
    """Create a temporary log file"""
    return tmp_path / "test.log"

@pytest.fixture
def logger(temp_log_file):
    """Configure the package logger for a test and reset it afterwards"""
    configured = setup_logging(level="DEBUG", log_file=temp_log_file, console_output=False)
    yield configured
    for handler in configured.handlers[:]:
        configured.removeHandler(handler)
        handler.close()
    configured.setLevel(logging.NOTSET)

def read(path):
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()
    with open(path, 'r') as f:
        return f.read()

def test_logger_initialization(logger):
    """Test basic logger initialization"""
    assert logger.level == logging.DEBUG
    assert logger.name == "openai_typed"
    assert len(logger.handlers) == 1

def test_logger_file_handler(logger, temp_log_file):
    """Test if file handler is properly configured"""
    assert os.path.exists(temp_log_file)

    logger.debug("Test message")
    assert "Test message" in read(temp_log_file)

def test_module_loggers_propagate(logger, temp_log_file):
    """Records from library modules reach the package handlers"""
    logging.getLogger("openai_typed.utils.api.api_client").info("dispatching request")

    log_content = read(temp_log_file)
    assert "dispatching request" in log_content
    assert " - INFO - " in log_content

def test_invalid_log_level():
    """Test logger initialization with invalid log level"""
    with pytest.raises(LoggerError):
        setup_logging(level="INVALID_LEVEL", console_output=False)

def test_invalid_log_file(tmp_path):
    """A log path whose parent is a file cannot be used"""
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")

    with pytest.raises(LoggerError):
        setup_logging(log_file=blocker / "log.txt", console_output=False)

def test_multiple_handlers(logger, temp_log_file):
    """Test logger with multiple handlers"""
    configured = setup_logging(level="DEBUG", log_file=temp_log_file, console_output=True)
    assert len(configured.handlers) == 2  # File and console handlers

def test_reconfigure_replaces_handlers(logger):
    """Calling setup_logging again does not stack handlers"""
    configured = setup_logging(level="WARNING", console_output=True)
    assert len(configured.handlers) == 1
    assert configured.level == logging.WARNING

def test_log_rotation(tmp_path, logger):
    """Test log file rotation"""
    configured = setup_logging(
        log_file=tmp_path / "rotating.log",
        max_size=1024,  # 1KB
        backup_count=3,
        console_output=False
    )

    # Write enough logs to trigger rotation
    large_message = "x" * 512  # 512 bytes
    for _ in range(10):
        configured.info(large_message)

    # Check if backup files were created
    log_files = list(tmp_path.glob("rotating.log*"))
    assert len(log_files) > 1
