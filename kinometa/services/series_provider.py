"""
Provider de metadonnees des series TV.

Meme demarche que pour les films, avec les types de contenus series
(TV_SERIES, MINI_SERIES, TV_SHOW), l'annee de debut, l'annee de fin et le
statut de diffusion.
"""

from datetime import date

from loguru import logger

from kinometa.adapters.api.models import Film
from kinometa.core.entities.lookup import SeriesInfo
from kinometa.core.entities.media import (
    MetadataResult,
    RemoteSearchResult,
    Series,
    SeriesStatus,
)
from kinometa.services.base_provider import KinopoiskProvider
from kinometa.services.helpers import (
    build_people,
    capitalize_first_letter,
    extract_kinopoisk_id,
    parse_official_rating,
)
from kinometa.utils.constants import (
    IMDB_PROVIDER_ID,
    MAX_SEARCH_RESULTS,
    PROVIDER_ID,
    SERIES_TYPES,
)


class SeriesProvider(KinopoiskProvider):
    """Metadonnees des series TV depuis Kinopoisk."""

    async def get_metadata(self, info: SeriesInfo) -> MetadataResult[Series]:
        """
        Recupere les metadonnees completes d'une serie.

        Args:
            info: Serie a enrichir

        Returns:
            MetadataResult avec la serie et son equipe, vide si introuvable
        """
        result: MetadataResult[Series] = MetadataResult()

        kinopoisk_id = extract_kinopoisk_id(info.provider_ids, info.path, info.name)
        if not kinopoisk_id:
            kinopoisk_id = await self._find_by_name(info.name, info.year, SERIES_TYPES)

        if not kinopoisk_id:
            logger.debug(f"Aucun ID Kinopoisk trouve pour la serie {info.name}")
            return result

        film = await self._gateway.fetch_film(kinopoisk_id)
        if film is None:
            logger.debug(f"Serie introuvable pour l'ID Kinopoisk {kinopoisk_id}")
            return result

        result.item = self._to_series(film, kinopoisk_id, info.name)
        result.has_metadata = True

        staff = await self._gateway.fetch_staff(kinopoisk_id)
        if staff is not None:
            for person in build_people(staff, self.prefer_russian):
                result.add_person(person)

        return result

    async def get_search_results(self, info: SeriesInfo) -> list[RemoteSearchResult]:
        """Propose des candidats pour une recherche manuelle de serie."""
        kinopoisk_id = extract_kinopoisk_id(info.provider_ids, info.path, info.name)

        if kinopoisk_id:
            film = await self._gateway.fetch_film(kinopoisk_id)
            if film is None:
                return []
            return [
                self._search_result(
                    film.effective_id,
                    film.get_name(self.prefer_russian),
                    film.start_year or film.year,
                    film.poster_url_preview or film.poster_url,
                )
            ]

        response = await self._gateway.search_films(info.name)
        if response is None or not response.films:
            return []
        return self._search_results_from_items(response.films, SERIES_TYPES, MAX_SEARCH_RESULTS)

    def _to_series(self, film: Film, kinopoisk_id: int, fallback_name: str) -> Series:
        """Convertit une fiche Kinopoisk en Series."""
        series = Series(
            name=film.get_name(self.prefer_russian) or fallback_name,
            original_title=film.name_original or film.name_en,
            overview=film.description or film.short_description,
            tagline=film.slogan,
            production_year=film.start_year or film.year,
            end_date=date(film.end_year, 1, 1) if film.end_year else None,
            community_rating=film.rating_kinopoisk,
            status=SeriesStatus.ENDED if film.completed else SeriesStatus.CONTINUING,
            official_rating=parse_official_rating(film.rating_age_limits, film.rating_mpaa),
        )

        series.provider_ids[PROVIDER_ID] = str(kinopoisk_id)
        if film.imdb_id:
            series.provider_ids[IMDB_PROVIDER_ID] = film.imdb_id

        series.genres = [
            capitalize_first_letter(g.genre) for g in film.genres or () if g.genre
        ]
        series.production_locations = [c.country for c in film.countries or () if c.country]

        return series
