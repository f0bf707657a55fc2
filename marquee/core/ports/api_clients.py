"""
Interface port pour le client du listing des films a venir.

Interface abstraite (port) definissant le contrat de l'API de listing.
L'implementation (adaptateur) fournit le client HTTP concret.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from marquee.core.entities.listing import UpcomingMovieSearch, UpcomingMoviesPage


class IUpcomingMoviesClient(ABC):
    """
    Interface de base pour les clients du listing des films a venir.

    Definit le contrat pour demarrer une pagination et consommer les pages
    sous forme de flux asynchrone.
    """

    @abstractmethod
    def upcoming_movies(
        self,
        query: Optional[UpcomingMovieSearch] = None,
    ) -> AsyncIterator[UpcomingMoviesPage]:
        """
        Demarre la pagination des films a venir.

        Args :
            query : Requete optionnelle (taille de page, page de depart, pays, annulation)

        Retourne :
            Flux asynchrone des pages, ferme quand la pagination se termine

        Leve :
            ConfigError : Si la cle API est vide (avant tout travail asynchrone)
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'rottentomatoes')."""
        ...
