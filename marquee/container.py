"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI:
parametres, configuration du client et client de l'API de listing.
"""

from typing import Optional

from dependency_injector import containers, providers

from .adapters.api.upcoming_client import UpcomingMoviesClient
from .config import Settings
from .core.client_config import ClientConfig


def build_client_config(
    settings: Settings,
    fallback_keys: tuple[Optional[str], ...] = (),
) -> ClientConfig:
    """
    Construit la configuration du client depuis les parametres.

    Ordre de resolution de la cle: FANDANGO_API_KEY, puis les cles de repli
    explicites (ex: option --api-key), puis MARQUEE_API_KEY.

    Raises:
        EmptyAPIKeyError: Si aucune cle n'est disponible
    """
    config = ClientConfig.from_env(*fallback_keys, settings.api_key)
    config.set_version(settings.api_version)
    return config


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.upcoming_client()
        # ou avec une cle de repli fournie en ligne de commande
        config = container.client_config(fallback_keys=("my-key",))
        client = container.upcoming_client(config=config)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Configuration du client - Factory car la cle peut venir de la CLI
    client_config = providers.Factory(
        build_client_config,
        settings=config,
    )

    # Client API - Factory, chaque commande ferme son client
    upcoming_client = providers.Factory(
        UpcomingMoviesClient,
        config=client_config,
        interval=config.provided.poll_interval,
        base_url=config.provided.base_url,
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.max_attempts,
        interrupt_fetch=config.provided.interrupt_fetch,
    )
