"""
Decodage des reponses de l'endpoint des films a venir.

La reponse HTTP est consommee une seule fois puis fermee, quel que soit le
resultat. Les erreurs sont converties dans la hierarchie de marquee.core.errors:
- statut hors [200, 299] -> HTTPStatusError
- echec de lecture du corps -> BodyReadError
- JSON invalide ou mal forme -> DecodeError

Les champs absents (ou null) prennent leur valeur zero. Un champ present
du mauvais type JSON est une DecodeError.
"""

import json
from typing import Any, Optional

import httpx
from loguru import logger

from marquee.core.entities.listing import Movie, Size, Star, UpcomingMoviesPage
from marquee.core.errors import BodyReadError, DecodeError, HTTPStatusError


def status_ok(code: int) -> bool:
    """Indique si le code de statut est un succes (2xx)."""
    return 200 <= code <= 299


async def parse_upcoming_movies_response(response: httpx.Response) -> UpcomingMoviesPage:
    """
    Valide et decode une reponse de l'endpoint des films a venir.

    Args:
        response: Reponse httpx, idealement ouverte en mode stream

    Returns:
        La page decodee, sans autre validation

    Raises:
        HTTPStatusError: Statut hors de la plage 2xx
        BodyReadError: Lecture du corps impossible
        DecodeError: Corps qui n'est pas une page JSON valide
    """
    try:
        if not status_ok(response.status_code):
            status = f"{response.status_code} {response.reason_phrase}".strip()
            raise HTTPStatusError(response.status_code, status)

        try:
            blob = await response.aread()
        except httpx.HTTPError as e:
            raise BodyReadError(f"reading response body: {e}") from e

        try:
            data = json.loads(blob)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"invalid JSON body: {e}") from e

        return page_from_payload(data)
    finally:
        await response.aclose()


def page_from_payload(data: Any) -> UpcomingMoviesPage:
    """
    Construit une UpcomingMoviesPage depuis le JSON deja decode.

    Raises:
        DecodeError: Si la structure ne correspond pas a une page
    """
    data = _expect_object(data, "page")

    total = _field(data, "total", int, 0)
    if total < 0:
        raise DecodeError(f"page.total: expected unsigned integer, got {total}")

    movies = tuple(
        _movie_from_payload(item, f"movies[{i}]")
        for i, item in enumerate(_field(data, "movies", list, []))
    )

    return UpcomingMoviesPage(
        total=total,
        movies=movies,
        links=_links(data, "links", "page"),
        link_template=_field(data, "link_template", str, ""),
    )


def _movie_from_payload(item: Any, where: str) -> Movie:
    item = _expect_object(item, where)

    posters: dict[Size, str] = {}
    for key, url in _field(item, "posters", dict, {}).items():
        url = _expect(url, str, f"{where}.posters.{key}")
        size = Size.from_key(key)
        if size in posters:
            # Plusieurs cles hors de l'ensemble connu: la premiere est gardee
            logger.debug(f"{where}.posters.{key} ignore (taille deja presente: {size.name})")
            continue
        posters[size] = url

    release_dates = {
        kind: _expect(date, str, f"{where}.release_dates.{kind}")
        for kind, date in _field(item, "release_dates", dict, {}).items()
    }

    cast = tuple(
        _star_from_payload(star, f"{where}.abridged_cast[{i}]")
        for i, star in enumerate(_field(item, "abridged_cast", list, []))
    )

    return Movie(
        title=_field(item, "title", str, ""),
        year=_field(item, "year", int, 0),
        mpaa_rating=_field(item, "mpaa_rating", str, ""),
        runtime_minutes=float(_field(item, "runtime", (int, float), 0.0)),
        critics_consensus=_field(item, "critics_consensus", str, ""),
        release_dates=release_dates,
        ratings=dict(_field(item, "ratings", dict, {})),
        synopsis=_field(item, "synopsis", str, ""),
        posters=posters,
        cast=cast,
        links=_links(item, "links", where),
    )


def _star_from_payload(item: Any, where: str) -> Star:
    item = _expect_object(item, where)
    characters = tuple(
        _expect(character, str, f"{where}.characters[{i}]")
        for i, character in enumerate(_field(item, "characters", list, []))
    )
    return Star(
        name=_field(item, "name", str, ""),
        id=_field(item, "id", str, ""),
        characters=characters,
    )


def _links(data: dict, key: str, where: str) -> Optional[dict[str, str]]:
    raw = data.get(key)
    if raw is None:
        return None
    raw = _expect(raw, dict, f"{where}.{key}")
    return {rel: _expect(url, str, f"{where}.{key}.{rel}") for rel, url in raw.items()}


def _field(data: dict, key: str, expected, default):
    value = data.get(key)
    if value is None:
        return default
    return _expect(value, expected, key)


def _expect(value: Any, expected, where: str):
    # bool est un int en Python mais pas un nombre en JSON
    if isinstance(value, bool) and expected is not bool:
        raise DecodeError(f"{where}: unexpected boolean")
    if not isinstance(value, expected):
        raise DecodeError(
            f"{where}: expected {_type_name(expected)}, got {type(value).__name__}"
        )
    return value


def _expect_object(value: Any, where: str) -> dict:
    return _expect(value, dict, where)


def _type_name(expected) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__
