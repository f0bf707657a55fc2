"""
Tests pour les entites du listing (UpcomingMoviesPage, Movie, Size) et
la resolution du lien "next".
"""

import asyncio
import dataclasses

import pytest

from marquee.core.entities.listing import (
    Movie,
    Size,
    Star,
    UpcomingMovieSearch,
    UpcomingMoviesPage,
    get_next_url,
)


class TestGetNextURL:
    """Tests pour get_next_url."""

    def test_returns_next_link(self):
        """Le lien "next" est retourne tel quel."""
        assert get_next_url({"next": "X"}) == "X"

    def test_none_links_give_empty_string(self):
        """Une map absente signifie qu'il n'y a plus de pages."""
        assert get_next_url(None) == ""

    def test_empty_links_give_empty_string(self):
        """Une map sans "next" signifie qu'il n'y a plus de pages."""
        assert get_next_url({}) == ""

    def test_lookup_is_case_sensitive(self):
        """La cle "Next" n'est pas la cle "next"."""
        assert get_next_url({"Next": "X", "self": "Y"}) == ""

    def test_is_idempotent(self):
        """Deux appels sur la meme map donnent le meme resultat."""
        links = {"next": "http://api.test/page2", "self": "http://api.test/page1"}
        assert get_next_url(links) == get_next_url(links) == "http://api.test/page2"
        assert links == {"next": "http://api.test/page2", "self": "http://api.test/page1"}


class TestUpcomingMoviesPage:
    """Tests pour l'entite UpcomingMoviesPage."""

    def test_next_url_property(self):
        """next_url delegue a get_next_url."""
        page = UpcomingMoviesPage(total=3, links={"next": "u2"})
        assert page.next_url == "u2"

    def test_default_page_is_last_page(self):
        """Une page vide sans liens est une fin de resultats valide."""
        page = UpcomingMoviesPage()
        assert page.total == 0
        assert page.movies == ()
        assert page.next_url == ""

    def test_page_is_immutable(self):
        """Une page ne peut pas etre modifiee apres creation."""
        page = UpcomingMoviesPage(total=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            page.total = 2

    def test_movies_keep_order(self):
        """Les films conservent l'ordre fourni."""
        movies = (Movie(title="B"), Movie(title="A"), Movie(title="C"))
        page = UpcomingMoviesPage(total=3, movies=movies)
        assert [m.title for m in page.movies] == ["B", "A", "C"]


class TestSize:
    """Tests pour l'enum Size."""

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("thumbnail", Size.THUMBNAIL),
            ("profile", Size.PROFILE),
            ("original", Size.ORIGINAL),
            ("unknown", Size.UNKNOWN),
            ("detailed", Size.UNKNOWN),
        ],
    )
    def test_from_key(self, key, expected):
        """Les cles hors de l'ensemble connu deviennent UNKNOWN."""
        assert Size.from_key(key) is expected


class TestMovieAndStar:
    """Tests pour Movie et Star."""

    def test_movie_defaults(self):
        """Movie a des valeurs zero par defaut."""
        movie = Movie()
        assert movie.title == ""
        assert movie.year == 0
        assert movie.runtime_minutes == 0.0
        assert movie.release_dates == {}
        assert movie.posters == {}
        assert movie.cast == ()
        assert movie.links is None

    def test_star_characters(self):
        """Star conserve la liste des personnages."""
        star = Star(name="Anya Taylor-Joy", id="771450658", characters=("Furiosa",))
        assert star.characters == ("Furiosa",)


class TestUpcomingMovieSearch:
    """Tests pour la requete de pagination."""

    def test_defaults_let_server_decide(self):
        """Par defaut aucun champ n'est renseigne."""
        query = UpcomingMovieSearch()
        assert query.items_per_page == 0
        assert query.max_page == 0
        assert query.country == ""
        assert query.cancel is None

    def test_cancel_is_not_part_of_equality(self):
        """Deux requetes identiques restent egales quel que soit le signal."""
        assert UpcomingMovieSearch(items_per_page=5, cancel=asyncio.Event()) == (
            UpcomingMovieSearch(items_per_page=5)
        )
