"""Tests pour le module config."""

import json

import pytest

from ini_codec.config import IniSettings, LoggingSettings, load_settings
from ini_codec.errors import ConfigurationError


class TestIniSettings:
    """Tests pour les modèles IniSettings et LoggingSettings."""

    def test_defaults(self):
        """Les valeurs par défaut sont utilisables sans fichier."""
        settings = IniSettings()
        assert settings.encoding == "utf-8"
        assert settings.sort_sections is False
        assert settings.logging.level == "INFO"

    def test_level_is_uppercased(self):
        """Le niveau de journalisation est normalisé en majuscules."""
        assert LoggingSettings(level="warning").level == "WARNING"


class TestLoadSettings:
    """Tests pour load_settings."""

    def test_load_toml_settings(self, tmp_path):
        """Les réglages TOML sont chargés et validés."""
        config_file = tmp_path / "ini_codec.toml"
        config_file.write_text(
            'encoding = "latin-1"\n'
            "sort_sections = true\n"
            "\n"
            "[logging]\n"
            'level = "debug"\n'
        )

        settings = load_settings(config_file)

        assert isinstance(settings, IniSettings)
        assert settings.encoding == "latin-1"
        assert settings.sort_sections is True
        assert settings.logging.level == "DEBUG"

    def test_load_json_settings(self, tmp_path):
        """Les réglages JSON sont chargés, chemin str accepté."""
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"sort_sections": True}))

        settings = load_settings(str(config_file))

        assert settings.sort_sections is True
        assert settings.encoding == "utf-8"

    def test_unknown_encoding(self, tmp_path):
        """Un encodage inconnu lève ConfigurationError."""
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"encoding": "no-such-codec"}))

        with pytest.raises(ConfigurationError, match="Réglages invalides"):
            load_settings(config_file)

    def test_unknown_key(self, tmp_path):
        """Une clé inconnue est refusée."""
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"colour": "blue"}))

        with pytest.raises(ConfigurationError):
            load_settings(config_file)

    def test_json_not_an_object(self, tmp_path):
        """Un JSON qui n'est pas un objet est refusé."""
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps(["utf-8"]))

        with pytest.raises(ConfigurationError, match="objet clé/valeur"):
            load_settings(config_file)

    def test_malformed_toml(self, tmp_path):
        """Un TOML mal formé lève ConfigurationError."""
        config_file = tmp_path / "settings.toml"
        config_file.write_text("encoding = \n")

        with pytest.raises(ConfigurationError, match="illisible"):
            load_settings(config_file)

    def test_unsupported_extension(self, tmp_path):
        """Une extension autre que .toml ou .json est refusée."""
        config_file = tmp_path / "settings.ini"
        config_file.write_text("encoding=utf-8\n")

        with pytest.raises(ConfigurationError, match="non supporté"):
            load_settings(config_file)

    def test_missing_file(self, tmp_path):
        """Un fichier absent lève FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "absent.toml")
