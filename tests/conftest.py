"""
Fixtures pytest partagees pour les tests KinoMeta.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Mocks de la passerelle Kinopoisk et du client d'images
- Modeles Kinopoisk valides a partir des reponses de test
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from kinometa.adapters.api.gateway import KinopoiskGateway
from kinometa.adapters.api.image_fetcher import ImageFetcher
from kinometa.adapters.api.models import Film, Person, SeasonsResponse, Staff
from kinometa.config import Settings
from tests.fixtures.kinopoisk_responses import (
    FILM_BRAT_RESPONSE,
    PERSON_BODROV_RESPONSE,
    SEASONS_GOT_RESPONSE,
    SERIES_GOT_RESPONSE,
    STAFF_BRAT_RESPONSE,
)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Token renseigne, cache memoire, debit par defaut (5 requetes/seconde).
    """
    return Settings(
        api_token="test_token",
        cache_backend="memory",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def mock_gateway() -> AsyncMock:
    """
    Mock de KinopoiskGateway pour les tests des providers.

    Toutes les operations retournent None (absence de donnees) par defaut.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    gateway = AsyncMock(spec=KinopoiskGateway)
    gateway.fetch_film.return_value = None
    gateway.search_films.return_value = None
    gateway.fetch_staff.return_value = None
    gateway.fetch_person.return_value = None
    gateway.fetch_seasons.return_value = None
    gateway.fetch_images.return_value = None
    gateway.fetch_videos.return_value = None
    return gateway


@pytest.fixture
def mock_image_fetcher() -> MagicMock:
    """Mock de ImageFetcher (aucun telechargement reel)."""
    return AsyncMock(spec=ImageFetcher)


@pytest.fixture
def film_brat() -> Film:
    """Fiche Kinopoisk du film "Брат" (1997)."""
    return Film.model_validate(FILM_BRAT_RESPONSE)


@pytest.fixture
def series_got() -> Film:
    """Fiche Kinopoisk de la serie "Игра престолов"."""
    return Film.model_validate(SERIES_GOT_RESPONSE)


@pytest.fixture
def staff_brat() -> tuple[Staff, ...]:
    """Equipe du film "Брат"."""
    return tuple(Staff.model_validate(item) for item in STAFF_BRAT_RESPONSE)


@pytest.fixture
def person_bodrov() -> Person:
    """Fiche de Sergey Bodrov Jr."""
    return Person.model_validate(PERSON_BODROV_RESPONSE)


@pytest.fixture
def seasons_got() -> SeasonsResponse:
    """Saisons de "Игра престолов"."""
    return SeasonsResponse.model_validate(SEASONS_GOT_RESPONSE)
