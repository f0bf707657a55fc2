"""
Mecanisme de retry avec backoff exponentiel pour l'API de listing.

Gere automatiquement les erreurs 429 (rate limiting) en relancant
les requetes avec un delai croissant et du jitter aleatoire.
Les autres reponses, succes ou erreur, sont rendues telles quelles:
la validation du statut appartient au parseur de reponse.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=5, max_wait=60)
    async def my_api_call():
        ...

    # Avec la fonction helper (reponse ouverte en mode stream)
    response = await request_with_retry(client, "GET", url)
"""

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from marquee.core.errors import RateLimitError


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP en mode stream avec retry automatique sur 429.

    Le corps n'est pas lu: l'appelant est responsable de la reponse rendue
    (lecture et fermeture). Les reponses 429 sont fermees avant de relancer.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler
        max_attempts: Nombre maximum de tentatives (1 = pas de retry)
        max_wait: Delai maximum entre les tentatives en secondes
        **kwargs: Arguments supplementaires passes a client.build_request()

    Returns:
        httpx.Response non lue, quel que soit son statut hors 429

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPError: Pour les erreurs de transport
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        request = client.build_request(method, url, **kwargs)
        response = await client.send(request, stream=True)
        if response.status_code == 429:
            retry_after_header = response.headers.get("Retry-After")
            await response.aclose()
            try:
                retry_after = int(retry_after_header) if retry_after_header else None
            except ValueError:
                retry_after = None
            logger.warning(f"Rate limit atteint sur {url} (Retry-After: {retry_after})")
            raise RateLimitError(retry_after)
        return response

    return await _do_request()
