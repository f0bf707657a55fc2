"""
Upcoming movies listing entities.

Immutable records decoded from the upcoming movies endpoint, plus the
search query used to start a pagination run.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class Size(Enum):
    """Poster size, used as key of Movie.posters.

    Values:
        UNKNOWN: Size not part of the known set
        THUMBNAIL: Small thumbnail
        PROFILE: Profile sized poster
        ORIGINAL: Full size poster
    """

    UNKNOWN = "unknown"
    THUMBNAIL = "thumbnail"
    PROFILE = "profile"
    ORIGINAL = "original"

    @classmethod
    def from_key(cls, key: str) -> "Size":
        """Map a wire poster key to a Size, UNKNOWN when outside the set."""
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Star:
    """
    Cast member of a movie.

    Attributes:
        name: Actor name
        id: Provider actor ID
        characters: Characters played, in server order
    """

    name: str = ""
    id: str = ""
    characters: tuple[str, ...] = ()


@dataclass(frozen=True)
class Movie:
    """
    Upcoming movie as returned by the listing endpoint.

    Attributes:
        title: Movie title
        year: Release year (0 when unknown)
        mpaa_rating: MPAA rating (ex: "PG-13")
        runtime_minutes: Runtime in minutes
        critics_consensus: Critics consensus text
        release_dates: Release type -> date string (ex: "theater" -> "2024-05-03")
        ratings: Open-ended ratings mapping
        synopsis: Plot summary
        posters: Poster URL by Size
        cast: Abridged cast, in server order
        links: Relation name -> URL (None when absent)
    """

    title: str = ""
    year: int = 0
    mpaa_rating: str = ""
    runtime_minutes: float = 0.0
    critics_consensus: str = ""
    release_dates: dict[str, str] = field(default_factory=dict)
    ratings: dict[str, Any] = field(default_factory=dict)
    synopsis: str = ""
    posters: dict[Size, str] = field(default_factory=dict)
    cast: tuple[Star, ...] = ()
    links: Optional[dict[str, str]] = None


def get_next_url(links: Optional[Mapping[str, str]]) -> str:
    """
    Return the "next" page URL of a links map.

    An absent map or an absent "next" key means there are no more pages,
    both give an empty string.
    """
    if links is None:
        return ""
    return links.get("next", "")


@dataclass(frozen=True)
class UpcomingMoviesPage:
    """
    One page of the upcoming movies listing.

    Attributes:
        total: Total number of upcoming movies on the server
        movies: Movies of this page, in server order
        links: Pagination links (must hold "next" when more pages exist)
        link_template: URL template advertised by the server
    """

    total: int = 0
    movies: tuple[Movie, ...] = ()
    links: Optional[dict[str, str]] = None
    link_template: str = ""

    @property
    def next_url(self) -> str:
        """URL of the next page, empty string on the last page."""
        return get_next_url(self.links)


@dataclass(frozen=True)
class UpcomingMovieSearch:
    """
    Query of an upcoming movies pagination run.

    Zero or empty fields are left out of the request so the server
    applies its own defaults.

    Attributes:
        items_per_page: Page size (page_limit)
        max_page: Page to start from (page)
        country: Country code
        cancel: One-shot cancellation signal, checked at each cycle
    """

    items_per_page: int = 0
    max_page: int = 0
    country: str = ""
    cancel: Optional[asyncio.Event] = field(default=None, compare=False)
