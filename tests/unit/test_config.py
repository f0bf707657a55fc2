"""
Tests pour la configuration de l'application et le container DI.

Verifie:
- Les valeurs par defaut et le prefixe MARQUEE_ des Settings
- La validation des valeurs (intervalle, tentatives)
- La construction de ClientConfig par le container
- Le choix du niveau de log selon la verbosite
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from marquee.adapters.api.upcoming_client import UpcomingMoviesClient
from marquee.adapters.api.url_builder import BASE_URL
from marquee.config import Settings
from marquee.container import Container, build_client_config
from marquee.core.errors import EmptyAPIKeyError
from marquee.logging_config import _mask_api_key, level_for_verbosity


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self):
        """Les valeurs par defaut correspondent a l'API publique."""
        settings = Settings(_env_file=None)

        assert settings.api_key is None
        assert settings.api_version == "1.0"
        assert settings.base_url == BASE_URL
        assert settings.poll_interval == 1.0
        assert settings.max_attempts == 1
        assert settings.interrupt_fetch is False
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch):
        """Les variables MARQUEE_* surchargent les valeurs par defaut."""
        monkeypatch.setenv("MARQUEE_POLL_INTERVAL", "2.5")
        monkeypatch.setenv("MARQUEE_INTERRUPT_FETCH", "true")
        monkeypatch.setenv("MARQUEE_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.poll_interval == 2.5
        assert settings.interrupt_fetch is True
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "field,value",
        [("poll_interval", 0), ("request_timeout", -1), ("max_attempts", 0)],
    )
    def test_invalid_values_are_rejected(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_log_file_expands_home(self):
        """~ est etendu dans le chemin du fichier de log."""
        settings = Settings(_env_file=None, log_file="~/marquee.log")

        assert settings.log_file == Path.home() / "marquee.log"


class TestBuildClientConfig:
    """Tests pour build_client_config."""

    def test_environment_key_wins(self, monkeypatch: pytest.MonkeyPatch):
        """FANDANGO_API_KEY passe avant les cles de repli."""
        monkeypatch.setenv("FANDANGO_API_KEY", "env-key")
        settings = Settings(_env_file=None, api_key="settings-key")

        config = build_client_config(settings, fallback_keys=("cli-key",))

        assert config.api_key == "env-key"

    def test_cli_key_before_settings_key(self):
        """La cle de la ligne de commande passe avant MARQUEE_API_KEY."""
        settings = Settings(_env_file=None, api_key="settings-key")

        config = build_client_config(settings, fallback_keys=("cli-key",))

        assert config.api_key == "cli-key"

    def test_settings_key_as_last_resort(self):
        settings = Settings(_env_file=None, api_key="settings-key")

        config = build_client_config(settings, fallback_keys=(None,))

        assert config.api_key == "settings-key"

    def test_version_is_copied(self):
        settings = Settings(_env_file=None, api_key="k", api_version="2.0")

        assert build_client_config(settings).api_version == "2.0"

    def test_no_key_raises(self):
        with pytest.raises(EmptyAPIKeyError):
            build_client_config(Settings(_env_file=None))


class TestContainer:
    """Tests pour le container DI."""

    def test_upcoming_client_uses_settings(self, monkeypatch: pytest.MonkeyPatch):
        """Le client est construit avec les parametres de pagination."""
        monkeypatch.setenv("FANDANGO_API_KEY", "env-key")
        monkeypatch.setenv("MARQUEE_POLL_INTERVAL", "0.5")
        container = Container()

        client = container.upcoming_client()

        assert isinstance(client, UpcomingMoviesClient)
        assert client.config.api_key == "env-key"
        assert client._interval == 0.5

    def test_config_is_singleton(self):
        container = Container()

        assert container.config() is container.config()


class TestLoggingHelpers:
    """Tests pour les utilitaires de logging."""

    @pytest.mark.parametrize(
        "verbose,quiet,expected",
        [(0, False, "INFO"), (1, False, "DEBUG"), (2, False, "TRACE"), (5, False, "TRACE"), (2, True, "ERROR")],
    )
    def test_level_for_verbosity(self, verbose, quiet, expected):
        assert level_for_verbosity(verbose, quiet) == expected

    def test_api_key_is_masked_in_messages(self):
        """La cle API des URL journalisees est masquee."""
        record = {"message": "GET http://api.test/x?apikey=secret&page=2"}

        _mask_api_key(record)

        assert record["message"] == "GET http://api.test/x?apikey=***&page=2"
