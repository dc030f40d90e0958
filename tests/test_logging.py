"""Tests pour le module logging."""

import logging

from linux_config_store.logging import FileLogger, Logger, StandardLogger


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

    def test_debug_filtered_at_info_level(self, tmp_path):
        """Le niveau INFO par défaut masque les messages debug."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_debug("Hidden")

        assert "Hidden" not in log_file.read_text()

    def test_creates_log_directory(self, tmp_path):
        """Test que le répertoire de log est créé si nécessaire."""
        log_file = tmp_path / "subdir" / "test.log"

        logger = FileLogger(str(log_file))
        logger.log_info("Test")

        assert log_file.exists()

    def test_config_from_dict(self, tmp_path):
        """Test de la configuration depuis un dictionnaire."""
        log_file = tmp_path / "test.log"
        config = {
            "logging": {
                "level": "debug",
                "format": "%(levelname)s - %(message)s"
            }
        }

        logger = FileLogger(str(log_file), config=config)
        logger.log_debug("Test")

        content = log_file.read_text()
        assert "DEBUG - Test" in content

    def test_utf8_encoding(self, tmp_path):
        """Test de l'encodage UTF-8."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Message avec accents: éàü")

        content = log_file.read_text(encoding='utf-8')
        assert "éàü" in content

    def test_console_output_active(self, tmp_path):
        """FileLogger avec console_output=True crée un StreamHandler."""
        logger = FileLogger(str(tmp_path / "console.log"), console_output=True)

        assert len(logger.logger.handlers) == 2

    def test_handler_reused_for_same_file(self, tmp_path):
        """Deux FileLogger sur le même fichier partagent le handler."""
        log_file = str(tmp_path / "shared.log")
        logger1 = FileLogger(log_file)
        logger2 = FileLogger(log_file)

        assert logger2.handler is logger1.handler
        assert len(logger2.logger.handlers) == 1


class TestStandardLogger:
    """Tests pour StandardLogger."""

    def test_default_name(self):
        """Le logger standard par défaut est celui de la bibliothèque."""
        logger = StandardLogger()

        assert logger.logger.name == "linux_config_store"

    def test_levels_forwarded(self, caplog):
        """Chaque méthode est relayée au bon niveau."""
        logger = StandardLogger("linux_config_store.test")

        with caplog.at_level(logging.DEBUG, logger="linux_config_store.test"):
            logger.log_debug("d")
            logger.log_info("i")
            logger.log_warning("w")
            logger.log_error("e")

        levels = [(r.levelname, r.getMessage()) for r in caplog.records]
        assert levels == [
            ("DEBUG", "d"),
            ("INFO", "i"),
            ("WARNING", "w"),
            ("ERROR", "e"),
        ]

    def test_wraps_existing_logger(self):
        """Un logger standard fourni est utilisé tel quel."""
        std = logging.getLogger("host.bluetooth")

        assert StandardLogger(logger=std).logger is std
