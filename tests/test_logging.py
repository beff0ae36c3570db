"""Tests pour le module logging."""

import logging

from nova_agent_watcher.config.settings import LoggingSettings
from nova_agent_watcher.logging import FileLogger, Logger


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

        content = log_file.read_text()
        assert "INFO" in content
        assert "Test message" in content

    def test_log_warning(self, tmp_path):
        """Test du logging warning."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_warning("Warning message")

        content = log_file.read_text()
        assert "WARNING" in content
        assert "Warning message" in content

    def test_log_error(self, tmp_path):
        """Test du logging error."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_error("Error message")

        content = log_file.read_text()
        assert "ERROR" in content
        assert "Error message" in content

    def test_creates_log_directory(self, tmp_path):
        """Test que le répertoire de log est créé si nécessaire."""
        log_file = tmp_path / "subdir" / "test.log"

        logger = FileLogger(str(log_file))
        logger.log_info("Test")

        assert log_file.exists()

    def test_niveau_filtre(self, tmp_path):
        """Les messages sous le niveau configuré sont ignorés."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file), level="ERROR")

        logger.log_info("ignoré")
        logger.log_error("gardé")

        content = log_file.read_text()
        assert "ignoré" not in content
        assert "gardé" in content

    def test_log_debug(self, tmp_path):
        """Les messages de debug ne sortent qu'au niveau DEBUG."""
        log_file = tmp_path / "test.log"
        FileLogger(str(log_file)).log_debug("caché")
        debug_file = tmp_path / "debug.log"
        FileLogger(str(debug_file), level="DEBUG").log_debug("visible")

        assert "caché" not in log_file.read_text()
        assert "DEBUG - visible" in debug_file.read_text()

    def test_utf8_encoding(self, tmp_path):
        """Test de l'encodage UTF-8."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Écriture dans: /tmp/rackspace-cloudinit-é")

        content = log_file.read_text(encoding="utf-8")
        assert "Écriture dans" in content

    def test_console_output_active(self, tmp_path):
        """Fichier et console produisent deux handlers."""
        logger = FileLogger(str(tmp_path / "test.log"), console_output=True)

        assert len(logger.logger.handlers) == 2

    def test_logger_handler_existant_reutilise(self, tmp_path):
        """Un second logger sur le même fichier réutilise le handler."""
        log_file = str(tmp_path / "test.log")
        first = FileLogger(log_file)
        second = FileLogger(log_file)

        assert first.handler is second.handler
        assert len(second.logger.handlers) == 1

    def test_sans_fichier_console_seule(self):
        """Sans fichier, seule la console est utilisée."""
        logger = FileLogger()

        assert logger.log_file is None
        assert all(
            type(handler) is logging.StreamHandler
            for handler in logger.logger.handlers
        )
        assert logger.logger.propagate is False


class TestFromSettings:
    """Tests pour FileLogger.from_settings()."""

    def test_section_logging(self, tmp_path):
        """Le fichier, le niveau et le format viennent de la section."""
        log_file = tmp_path / "agent.log"
        settings = LoggingSettings(
            level="WARNING",
            file=str(log_file),
            format="%(levelname)s|%(message)s",
        )
        logger = FileLogger.from_settings(settings)

        logger.log_info("ignoré")
        logger.log_warning("attention")

        assert log_file.read_text() == "WARNING|attention\n"

    def test_fichier_vide(self):
        """Un fichier vide désactive la sortie fichier."""
        logger = FileLogger.from_settings(LoggingSettings())
        assert logger.log_file is None
