"""
Interface ligne de commande de Marquee (Typer + Rich).

- upcoming : Affichage des films a venir, page par page
"""

from marquee.adapters.cli.upcoming_command import upcoming

__all__ = [
    "upcoming",
]
