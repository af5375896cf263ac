"""Tests pour le module logging."""

import io

from ini_codec.codec import IniParser
from ini_codec.logging import Logger, FileLogger


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        logger = FileLogger(str(tmp_path / "test.log"))

        assert isinstance(logger, Logger)

    def test_log_info(self, tmp_path):
        """Test du logging info."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Test message")

        content = log_file.read_text(encoding="utf-8")
        assert "INFO" in content
        assert "Test message" in content

    def test_log_warning(self, tmp_path):
        """Test du logging warning."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_warning("Warning message")

        content = log_file.read_text(encoding="utf-8")
        assert "WARNING" in content
        assert "Warning message" in content

    def test_log_error(self, tmp_path):
        """Test du logging error."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_error("Error message")

        content = log_file.read_text(encoding="utf-8")
        assert "ERROR" in content
        assert "Error message" in content

    def test_creates_log_directory(self, tmp_path):
        """Test que le répertoire de log est créé si nécessaire."""
        log_file = tmp_path / "subdir" / "test.log"

        logger = FileLogger(str(log_file))
        logger.log_info("Test")

        assert log_file.exists()

    def test_level_from_config(self, tmp_path):
        """Le niveau configuré filtre les messages."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(
            str(log_file), config={"logging": {"level": "WARNING"}}
        )

        logger.log_info("hidden")
        logger.log_warning("shown")

        content = log_file.read_text(encoding="utf-8")
        assert "hidden" not in content
        assert "shown" in content

    def test_format_from_section(self, tmp_path):
        """La section logging peut être passée directement."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(
            str(log_file), config={"level": "INFO", "format": "%(levelname)s|%(message)s"}
        )

        logger.log_info("formatted")

        assert log_file.read_text(encoding="utf-8") == "INFO|formatted\n"

    def test_parser_logs_to_file(self, tmp_path):
        """Le parseur journalise ses analyses dans le fichier."""
        log_file = tmp_path / "parser.log"
        logger = FileLogger(str(log_file))

        IniParser(logger=logger).parse(io.StringIO("k=v\n"))

        assert "Analyse INI terminée" in log_file.read_text(encoding="utf-8")
