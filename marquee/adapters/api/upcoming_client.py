"""
Client du listing des films a venir (API publique Rotten Tomatoes).

Implemente l'interface IUpcomingMoviesClient. Chaque appel a
upcoming_movies() demarre un paginateur independant qui suit les liens
"next" du serveur a cadence fixe.

Usage:
    client = UpcomingMoviesClient.from_env()
    query = UpcomingMovieSearch(items_per_page=10, max_page=1)
    async for page in client.upcoming_movies(query):
        print(page.total, len(page.movies))
    await client.close()
"""

from typing import Optional

import httpx
from loguru import logger

from marquee.adapters.api.paginator import (
    DEFAULT_INTERVAL,
    PageStream,
    UpcomingMoviesPaginator,
)
from marquee.adapters.api.url_builder import BASE_URL, build_upcoming_movies_url
from marquee.core.client_config import ClientConfig
from marquee.core.entities.listing import UpcomingMovieSearch, UpcomingMoviesPage
from marquee.core.errors import EmptyAPIKeyError
from marquee.core.ports.api_clients import IUpcomingMoviesClient


class UpcomingMoviesClient(IUpcomingMoviesClient):
    """
    Client API pour le listing pagine des films a venir.

    Implemente IUpcomingMoviesClient avec:
    - Validation synchrone de la cle API avant tout travail asynchrone
    - Pagination a cadence fixe (1 requete par seconde par defaut)
    - Retry optionnel sur rate limiting (429)
    - Client httpx cree a la demande et partage entre les paginations

    Example:
        client = UpcomingMoviesClient(ClientConfig(api_key="xxx"), interval=0.5)
        pages = await client.collect_upcoming_movies(
            UpcomingMovieSearch(items_per_page=10), max_pages=3
        )
        await client.close()
    """

    def __init__(
        self,
        config: ClientConfig,
        interval: float = DEFAULT_INTERVAL,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        max_attempts: int = 1,
        interrupt_fetch: bool = False,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            config: Configuration (cle API et version)
            interval: Intervalle entre deux requetes, en secondes
            base_url: URL de base de l'API publique
            timeout: Timeout des requetes HTTP, en secondes
            max_attempts: Tentatives par page sur reponse 429
            interrupt_fetch: Si True, l'annulation interrompt la requete en vol
            http_client: Client httpx fourni par l'appelant (non ferme par close())
        """
        self._config = config
        self._interval = interval
        self._base_url = base_url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._interrupt_fetch = interrupt_fetch
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_env(cls, *fallback_keys: Optional[str], **kwargs) -> "UpcomingMoviesClient":
        """
        Cree un client avec la cle de FANDANGO_API_KEY ou des cles de repli.

        Raises:
            EmptyAPIKeyError: Si aucune cle non vide n'est trouvee
        """
        return cls(ClientConfig.from_env(*fallback_keys), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "rottentomatoes"

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
            self._owns_client = True
        return self._client

    def upcoming_movies(
        self,
        query: Optional[UpcomingMovieSearch] = None,
    ) -> PageStream:
        """
        Demarre la pagination des films a venir.

        Doit etre appele depuis une boucle asyncio en cours d'execution.

        Args:
            query: Requete optionnelle (taille de page, page de depart, pays, annulation)

        Returns:
            PageStream des pages, dans l'ordre de la chaine "next"

        Raises:
            EmptyAPIKeyError: Si la configuration ne contient pas de cle
            URLBuildError: Si l'URL de la premiere page ne peut etre construite
        """
        if not self._config.api_key:
            raise EmptyAPIKeyError()

        url = build_upcoming_movies_url(self._config, query, base_url=self._base_url)

        paginator = UpcomingMoviesPaginator(
            self._get_client(),
            url,
            cancel=query.cancel if query is not None else None,
            interval=self._interval,
            max_attempts=self._max_attempts,
            interrupt_fetch=self._interrupt_fetch,
        )
        logger.debug(f"Demarrage de la pagination {self.source} (intervalle {self._interval}s)")
        return paginator.start()

    async def collect_upcoming_movies(
        self,
        query: Optional[UpcomingMovieSearch] = None,
        max_pages: Optional[int] = None,
    ) -> list[UpcomingMoviesPage]:
        """
        Rassemble les pages du flux dans une liste.

        Args:
            query: Requete optionnelle
            max_pages: Nombre maximum de pages a recuperer (None = toutes)

        Returns:
            Liste des pages recues

        Raises:
            UpcomingMoviesError: Si la pagination s'arrete sur une erreur
        """
        pages: list[UpcomingMoviesPage] = []
        async with self.upcoming_movies(query) as stream:
            async for page in stream:
                pages.append(page)
                if max_pages is not None and len(pages) >= max_pages:
                    break
        return pages

    async def close(self) -> None:
        """
        Ferme le client HTTP s'il a ete cree par ce client.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "UpcomingMoviesClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
