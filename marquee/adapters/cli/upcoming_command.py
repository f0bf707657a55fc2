"""
Commande CLI d'affichage des films a venir.

Chaque page recue est affichee des son arrivee: numero de page, total
annonce par le serveur, puis un tableau des films avec leurs dates de sortie.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from marquee.adapters.cli.helpers import console, suppress_loguru, with_container
from marquee.core.entities.listing import UpcomingMovieSearch, UpcomingMoviesPage
from marquee.core.errors import ConfigError, UpcomingMoviesError


def upcoming(
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", help="Nombre de films par page (0 = defaut serveur)"),
    ] = 10,
    page: Annotated[
        int,
        typer.Option("--page", "-p", help="Page de depart (0 = defaut serveur)"),
    ] = 1,
    country: Annotated[
        str,
        typer.Option("--country", "-c", help="Code pays (ex: us)"),
    ] = "",
    max_pages: Annotated[
        Optional[int],
        typer.Option("--max-pages", help="Arreter apres ce nombre de pages"),
    ] = None,
    interval: Annotated[
        Optional[float],
        typer.Option("--interval", help="Secondes entre deux requetes"),
    ] = None,
    api_key: Annotated[
        Optional[str],
        typer.Option("--api-key", help="Cle API de repli si FANDANGO_API_KEY est vide"),
    ] = None,
) -> None:
    """Affiche les films a venir, page par page."""
    asyncio.run(_upcoming_async(limit, page, country, max_pages, interval, api_key))


@with_container()
async def _upcoming_async(
    container,
    limit: int,
    page: int,
    country: str,
    max_pages: Optional[int],
    interval: Optional[float],
    api_key: Optional[str],
) -> None:
    """Implementation async de la commande upcoming."""
    try:
        config = container.client_config(fallback_keys=(api_key,))
    except ConfigError as e:
        console.print(f"[red]Configuration invalide:[/red] {e}")
        console.print("[dim]Definir FANDANGO_API_KEY ou utiliser --api-key.[/dim]")
        raise typer.Exit(code=1)

    overrides = {"config": config}
    if interval is not None:
        overrides["interval"] = interval
    client = container.upcoming_client(**overrides)

    cancel = asyncio.Event()
    query = UpcomingMovieSearch(
        items_per_page=limit,
        max_page=page,
        country=country,
        cancel=cancel,
    )

    count = 0
    async with client:
        try:
            async for result in client.upcoming_movies(query):
                with suppress_loguru():
                    render_page(count, result)
                count += 1
                if max_pages is not None and count >= max_pages:
                    cancel.set()
        except UpcomingMoviesError as e:
            console.print(f"[red]Pagination interrompue:[/red] {e}")
            raise typer.Exit(code=1)

    console.print(f"\n[bold]{count}[/bold] page(s) recue(s)")


def render_page(index: int, page: UpcomingMoviesPage) -> None:
    """Affiche une page de resultats."""
    console.print(
        f"[bold cyan]Page {index}[/bold cyan] - Total #Movies: {page.total}"
    )
    if not page.movies:
        console.print("[dim]Aucun film sur cette page.[/dim]")
        return

    table = Table(show_header=True, show_lines=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Classement")
    table.add_column("Sorties")
    table.add_column("Synopsis", max_width=60)

    for i, movie in enumerate(page.movies):
        releases = "\n".join(
            f"{kind}: {date}" for kind, date in movie.release_dates.items()
        )
        table.add_row(
            str(i),
            movie.title,
            str(movie.year) if movie.year else "-",
            movie.mpaa_rating or "-",
            releases or "-",
            movie.synopsis,
        )

    console.print(table)
