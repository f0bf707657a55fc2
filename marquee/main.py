"""
Point d'entrée CLI de Marquee.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli import upcoming
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_for_verbosity

__version__ = "0.1.0"

app = typer.Typer(
    name="marquee",
    help="Listing des films à venir (API Rotten Tomatoes)",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Marquee - Films à venir."""
    settings = get_config()
    level = settings.log_level
    if verbose or quiet:
        level = level_for_verbosity(verbose, quiet)
    configure_logging(
        log_level=level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(upcoming)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Marquee")
    typer.echo(f"API : {config.base_url} (v{config.api_version})")
    typer.echo(f"Clé API (MARQUEE_API_KEY) : {'définie' if config.api_key else 'non définie'}")
    typer.echo(f"Intervalle de pagination : {config.poll_interval}s")
    typer.echo(f"Timeout des requêtes : {config.request_timeout}s")
    typer.echo(f"Tentatives sur 429 : {config.max_attempts}")
    typer.echo(f"Interruption des requêtes en vol : {'oui' if config.interrupt_fetch else 'non'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Marquee v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
