"""
Configuration du client: cle API et version de l'API.

La configuration est le seul etat mutable partage entre appelants
concurrents. Toutes les lectures et ecritures passent par un verrou
lecteurs/redacteur (plusieurs lecteurs simultanes, redacteur exclusif).

Usage:
    config = ClientConfig.from_env("fallback-key")
    config.set_version("1.0")
    url = build_upcoming_movies_url(config, query)
"""

import os
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from marquee.core.errors import EmptyAPIKeyError

API_KEY_ENV_VAR = "FANDANGO_API_KEY"
DEFAULT_API_VERSION = "1.0"


class ReadWriteLock:
    """
    Verrou lecteurs/redacteur base sur threading.Condition.

    Plusieurs lecteurs peuvent tenir le verrou en meme temps; un redacteur
    attend que tous les lecteurs sortent et bloque les nouveaux lecteurs.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        """Acquiert le verrou en lecture (partage)."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Acquiert le verrou en ecriture (exclusif)."""
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


def resolve_api_key(env_var: str = API_KEY_ENV_VAR, *fallbacks: Optional[str]) -> str:
    """
    Resout la cle API: variable d'environnement puis cles de repli.

    La premiere valeur non vide apres suppression des espaces l'emporte.
    Le format de la cle n'est pas valide.

    Args:
        env_var: Nom de la variable d'environnement a consulter en premier
        *fallbacks: Cles de repli, essayees dans l'ordre

    Returns:
        La cle resolue, ou une chaine vide si rien ne convient
    """
    key = os.environ.get(env_var, "").strip()
    if key:
        return key

    for fallback in fallbacks:
        key = (fallback or "").strip()
        if key:
            return key

    return ""


class ClientConfig:
    """
    Cle API et version de l'API, protegees par un verrou lecteurs/redacteur.

    Attributes:
        api_key: Cle API (sans espaces autour)
        api_version: Version de l'API, "1.0" si jamais definie
    """

    def __init__(self, api_key: str = "", api_version: str = "") -> None:
        self._lock = ReadWriteLock()
        self._api_key = ""
        self._version = ""
        self.set_api_key(api_key)
        self.set_version(api_version)

    @classmethod
    def from_env(
        cls, *fallbacks: Optional[str], env_var: str = API_KEY_ENV_VAR
    ) -> "ClientConfig":
        """
        Construit une configuration depuis l'environnement ou les cles de repli.

        Raises:
            EmptyAPIKeyError: Si aucune source ne fournit de cle non vide
        """
        config = cls()
        config.set_api_key(resolve_api_key(env_var, *fallbacks))
        if not config.api_key:
            raise EmptyAPIKeyError()
        return config

    def set_api_key(self, key: str) -> None:
        with self._lock.write():
            self._api_key = (key or "").strip()

    def set_version(self, version: str) -> None:
        with self._lock.write():
            self._version = version or ""

    @property
    def api_key(self) -> str:
        with self._lock.read():
            return self._api_key

    @property
    def api_version(self) -> str:
        with self._lock.read():
            return self._version or DEFAULT_API_VERSION

    def __repr__(self) -> str:
        masked = "***" if self.api_key else ""
        return f"ClientConfig(api_key={masked!r}, api_version={self.api_version!r})"
