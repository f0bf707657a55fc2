"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports client API : Contrats pour les services externes
- IUpcomingMoviesClient : Client du listing pagine des films a venir
"""

from marquee.core.ports.api_clients import IUpcomingMoviesClient

__all__ = [
    "IUpcomingMoviesClient",
]
