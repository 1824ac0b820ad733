"""Unit tests for loguru configuration."""

import json

import pytest
from loguru import logger

from src.contact_directory.core.exceptions import ValidationError
from src.contact_directory.core.services.contact_service import ContactService
from src.contact_directory.runtime.log_config import configure_logging
from src.contact_directory.runtime.settings import ContactDirectorySettings


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


class TestConfigureLogging:
    """Test configure_logging()."""

    def test_file_sink_plain(self, tmp_path):
        """A plain file sink should receive messages at the configured level."""
        log_file = tmp_path / "logs" / "contacts.log"
        settings = ContactDirectorySettings(
            _env_file=None, log_level="info", log_file=str(log_file)
        )

        configure_logging(settings)
        logger.debug("hidden message")
        logger.info("visible message")

        logger.remove()
        content = log_file.read_text()
        assert "visible message" in content
        assert "hidden message" not in content
        assert "INFO" in content

    def test_file_sink_json(self, tmp_path):
        """A JSON file sink should write one serialized record per line."""
        log_file = tmp_path / "contacts.json"
        settings = ContactDirectorySettings(
            _env_file=None,
            log_level="DEBUG",
            log_format="json",
            log_file=str(log_file),
        )

        configure_logging(settings)
        logger.info("structured message")

        logger.remove()
        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        messages = [record["record"]["message"] for record in records]
        assert "structured message" in messages

    def test_service_rejections_are_logged(self, tmp_path):
        """Rejected operations should be logged with their error kind."""
        log_file = tmp_path / "service.log"
        settings = ContactDirectorySettings(
            _env_file=None, log_level="WARNING", log_file=str(log_file)
        )
        configure_logging(settings)

        with pytest.raises(ValidationError):
            ContactService().delete_contact("ID1")

        logger.remove()
        assert "NOT_FOUND" in log_file.read_text()
