"""
Tests pour SeriesProvider - metadonnees des series TV.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from kinometa.adapters.api.models import Film, SearchResponse
from kinometa.config import Settings
from kinometa.core.entities.lookup import SeriesInfo
from kinometa.core.entities.media import SeriesStatus
from kinometa.services.series_provider import SeriesProvider
from tests.fixtures.kinopoisk_responses import SEARCH_BRAT_RESPONSE


@pytest.fixture
def provider(
    mock_gateway: AsyncMock, test_settings: Settings, mock_image_fetcher: MagicMock
) -> SeriesProvider:
    return SeriesProvider(
        gateway=mock_gateway, settings=test_settings, image_fetcher=mock_image_fetcher
    )


class TestSeriesMetadata:
    """Tests pour get_metadata()."""

    @pytest.mark.asyncio
    async def test_series_fields(
        self, provider: SeriesProvider, mock_gateway: AsyncMock, series_got: Film
    ) -> None:
        mock_gateway.fetch_film.return_value = series_got

        result = await provider.get_metadata(
            SeriesInfo(name="Game of Thrones", provider_ids={"Kinopoisk": "464963"})
        )
        series = result.item

        assert result.has_metadata
        assert series.name == "Игра престолов"
        assert series.original_title == "Game of Thrones"
        assert series.production_year == 2011
        assert series.end_date == date(2019, 1, 1)
        assert series.status is SeriesStatus.ENDED
        assert series.community_rating == 9.0
        assert series.official_rating == "18+"
        assert series.genres == ["Фэнтези", "Драма"]
        assert series.production_locations == ["США", "Великобритания"]
        assert series.provider_ids == {"Kinopoisk": "464963", "Imdb": "tt0944947"}

    @pytest.mark.asyncio
    async def test_running_series(
        self, provider: SeriesProvider, mock_gateway: AsyncMock
    ) -> None:
        mock_gateway.fetch_film.return_value = Film(
            kinopoisk_id=5, name_ru="Идет", year=2020, completed=False
        )

        result = await provider.get_metadata(SeriesInfo(provider_ids={"Kinopoisk": "5"}))

        assert result.item.status is SeriesStatus.CONTINUING
        assert result.item.production_year == 2020
        assert result.item.end_date is None

    @pytest.mark.asyncio
    async def test_search_keeps_series_only(
        self, provider: SeriesProvider, mock_gateway: AsyncMock, series_got: Film
    ) -> None:
        """La recherche par nom ignore les films."""
        mock_gateway.search_films.return_value = SearchResponse.model_validate(
            SEARCH_BRAT_RESPONSE
        )
        mock_gateway.fetch_film.return_value = series_got

        await provider.get_metadata(SeriesInfo(name="Брат"))

        mock_gateway.fetch_film.assert_awaited_once_with(1227803)

    @pytest.mark.asyncio
    async def test_not_found(self, provider: SeriesProvider, mock_gateway: AsyncMock) -> None:
        result = await provider.get_metadata(SeriesInfo(name="Брат"))

        assert not result.has_metadata
        mock_gateway.fetch_film.assert_not_awaited()


class TestSeriesSearch:
    """Tests pour get_search_results()."""

    @pytest.mark.asyncio
    async def test_search_results(
        self, provider: SeriesProvider, mock_gateway: AsyncMock
    ) -> None:
        mock_gateway.search_films.return_value = SearchResponse.model_validate(
            SEARCH_BRAT_RESPONSE
        )

        results = await provider.get_search_results(SeriesInfo(name="Брат"))

        assert len(results) == 1
        assert results[0].name == "Брат за брата"
        assert results[0].production_year is None
        assert results[0].provider_ids == {"Kinopoisk": "1227803"}

    @pytest.mark.asyncio
    async def test_known_id_uses_start_year(
        self, provider: SeriesProvider, mock_gateway: AsyncMock, series_got: Film
    ) -> None:
        mock_gateway.fetch_film.return_value = series_got

        results = await provider.get_search_results(
            SeriesInfo(provider_ids={"Kinopoisk": "464963"})
        )

        assert results[0].production_year == 2011
