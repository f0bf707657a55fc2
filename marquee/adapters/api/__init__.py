"""
Client de l'API de listing des films a venir.

Ce module fournit:
- UpcomingMoviesClient: Facade qui valide la configuration et demarre les paginations
- UpcomingMoviesPaginator: Boucle de pagination a cadence fixe
- PageStream: Flux asynchrone des pages produites
- build_upcoming_movies_url / parse_upcoming_movies_response: URL et decodage

Le client implemente IUpcomingMoviesClient defini dans core/ports/api_clients.py.
"""

from marquee.adapters.api.paginator import (
    PageStream,
    PaginatorState,
    StopReason,
    UpcomingMoviesPaginator,
)
from marquee.adapters.api.response_parser import (
    page_from_payload,
    parse_upcoming_movies_response,
)
from marquee.adapters.api.upcoming_client import UpcomingMoviesClient
from marquee.adapters.api.url_builder import BASE_URL, build_upcoming_movies_url

__all__ = [
    "BASE_URL",
    "PageStream",
    "PaginatorState",
    "StopReason",
    "UpcomingMoviesClient",
    "UpcomingMoviesPaginator",
    "build_upcoming_movies_url",
    "page_from_payload",
    "parse_upcoming_movies_response",
]
