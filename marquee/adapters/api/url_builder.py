"""
Construction de l'URL de la premiere page du listing des films a venir.

Exemple d'URL produite:
    http://api.rottentomatoes.com/api/public/v1.0/lists/movies/upcoming/json?apikey=KEY&page_limit=10
"""

from typing import Optional
from urllib.parse import urlencode

from marquee.core.client_config import ClientConfig
from marquee.core.entities.listing import UpcomingMovieSearch
from marquee.core.errors import URLBuildError

BASE_URL = "http://api.rottentomatoes.com/api/public"
UPCOMING_MOVIES_PATH = "/v{version}/lists/movies/upcoming/json"


def build_upcoming_movies_url(
    config: ClientConfig,
    query: Optional[UpcomingMovieSearch] = None,
    base_url: str = BASE_URL,
) -> str:
    """
    Construit l'URL complete de la premiere page.

    La cle API est toujours presente. page_limit, page et country ne sont
    ajoutes que si le champ correspondant de la requete est renseigne
    (strictement positif ou non vide), dans cet ordre.

    Args:
        config: Configuration du client (cle et version)
        query: Requete optionnelle
        base_url: URL de base de l'API publique

    Returns:
        URL absolue de la premiere page

    Raises:
        URLBuildError: Si l'URL de base n'est pas absolue
    """
    if not base_url.startswith(("http://", "https://")):
        raise URLBuildError(f"base URL must be absolute: {base_url!r}")

    params = {"apikey": config.api_key}
    if query is not None:
        if query.items_per_page > 0:
            params["page_limit"] = str(query.items_per_page)
        if query.max_page > 0:
            params["page"] = str(query.max_page)
        if query.country:
            params["country"] = query.country

    path = UPCOMING_MOVIES_PATH.format(version=config.api_version)
    return f"{base_url.rstrip('/')}{path}?{urlencode(params)}"
