"""
Fixtures pytest partagees pour les tests Marquee.

Ce module contient les fixtures communes utilisees dans les tests:
- Configuration client avec une cle de test
- Requete et URL de premiere page pointant vers l'API mockee
- Environnement isole (aucune cle API heritee du poste)
"""

import pytest

from marquee.adapters.api.url_builder import build_upcoming_movies_url
from marquee.core.client_config import ClientConfig
from marquee.core.entities.listing import UpcomingMovieSearch
from tests.fixtures.upcoming_responses import API_BASE

# Cadence acceleree pour les tests de pagination
FAST_INTERVAL = 0.01


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Supprime les cles API de l'environnement du poste."""
    monkeypatch.delenv("FANDANGO_API_KEY", raising=False)
    monkeypatch.delenv("MARQUEE_API_KEY", raising=False)


@pytest.fixture
def fast_interval() -> float:
    """Intervalle de pagination court pour garder les tests rapides."""
    return FAST_INTERVAL


@pytest.fixture
def client_config() -> ClientConfig:
    """ClientConfig avec une cle de test et la version par defaut."""
    return ClientConfig(api_key="test-key")


@pytest.fixture
def search_query() -> UpcomingMovieSearch:
    """Requete type: 10 films par page, depuis la page 1."""
    return UpcomingMovieSearch(items_per_page=10, max_page=1)


@pytest.fixture
def first_page_url(client_config: ClientConfig, search_query: UpcomingMovieSearch) -> str:
    """URL de la premiere page sur l'API mockee."""
    return build_upcoming_movies_url(client_config, search_query, base_url=API_BASE)
