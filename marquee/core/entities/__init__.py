"""
Entites du listing des films a venir.

- UpcomingMoviesPage : Une page de resultats avec ses liens de pagination
- Movie, Star, Size : Enregistrements decodes depuis l'API
- UpcomingMovieSearch : Requete de demarrage d'une pagination
"""

from marquee.core.entities.listing import (
    Movie,
    Size,
    Star,
    UpcomingMovieSearch,
    UpcomingMoviesPage,
    get_next_url,
)

__all__ = [
    "Movie",
    "Size",
    "Star",
    "UpcomingMovieSearch",
    "UpcomingMoviesPage",
    "get_next_url",
]
