"""
Hierarchie d'exceptions de Marquee.

Deux familles d'erreurs:
- Erreurs synchrones (ConfigError, URLBuildError): levees avant tout
  travail asynchrone, directement a l'appelant.
- Erreurs de boucle (UpcomingMoviesError): arretent la pagination et sont
  relevees a la fin de l'iteration du flux de pages.

L'annulation n'est pas une erreur: c'est un etat terminal normal.
"""

from typing import Optional


class MarqueeError(Exception):
    """Exception de base pour toutes les erreurs de la librairie."""


class ConfigError(MarqueeError):
    """Configuration du client invalide."""


class EmptyAPIKeyError(ConfigError):
    """Aucune cle API non vide n'a pu etre resolue."""

    def __init__(self, message: str = "empty api key") -> None:
        super().__init__(message)


class URLBuildError(MarqueeError):
    """Construction de l'URL de requete impossible."""


class UpcomingMoviesError(MarqueeError):
    """Erreur survenue pendant la boucle de pagination."""


class TransportError(UpcomingMoviesError):
    """
    Echec du transport HTTP (connexion, timeout, protocole).

    Attributes:
        url: URL de la requete en echec
    """

    def __init__(self, message: str, url: str = "") -> None:
        super().__init__(message)
        self.url = url


class HTTPStatusError(UpcomingMoviesError):
    """
    Reponse HTTP hors de la plage [200, 299].

    Attributes:
        status_code: Code de statut HTTP
        status: Texte du statut (ex: "503 Service Unavailable")
    """

    def __init__(self, status_code: int, status: str) -> None:
        super().__init__(status)
        self.status_code = status_code
        self.status = status


class RateLimitError(HTTPStatusError):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        super().__init__(429, "429 Too Many Requests")
        self.retry_after = retry_after
        self.args = (f"Rate limited. Retry after: {retry_after}s",)


class BodyReadError(UpcomingMoviesError):
    """Lecture du corps de la reponse impossible."""


class DecodeError(UpcomingMoviesError):
    """Corps de reponse qui n'est pas du JSON valide ou mal forme."""


class PaginationError(UpcomingMoviesError):
    """Echec inattendu de la boucle de pagination (cause dans __cause__)."""
