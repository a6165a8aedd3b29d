"""
Providers de metadonnees des saisons et episodes.

Les deux providers s'appuient sur la liste des saisons de la serie parente
(GET /v2.2/films/{id}/seasons), mise en cache par la passerelle: enrichir
tous les episodes d'une serie ne coute qu'un appel API.

La recherche manuelle n'est pas supportee (liste vide).
"""

from typing import Optional

from loguru import logger

from kinometa.adapters.api.gateway import KinopoiskGateway
from kinometa.adapters.api.models import Season as KinopoiskSeason
from kinometa.core.entities.lookup import EpisodeInfo, SeasonInfo
from kinometa.core.entities.media import (
    Episode,
    MetadataResult,
    RemoteSearchResult,
    Season,
)
from kinometa.services.base_provider import KinopoiskProvider
from kinometa.services.helpers import parse_date, parse_provider_id


async def find_season(
    gateway: KinopoiskGateway, series_id: int, season_number: int
) -> Optional[KinopoiskSeason]:
    """
    Cherche une saison dans la liste des saisons d'une serie.

    Returns:
        La saison, ou None si la liste ou la saison est introuvable
    """
    seasons = await gateway.fetch_seasons(series_id)
    if seasons is None or not seasons.items:
        logger.debug(f"Aucune saison trouvee pour la serie {series_id}")
        return None
    return next((s for s in seasons.items if s.number == season_number), None)


class SeasonProvider(KinopoiskProvider):
    """Metadonnees des saisons depuis Kinopoisk."""

    async def get_metadata(self, info: SeasonInfo) -> MetadataResult[Season]:
        """
        Recupere les metadonnees d'une saison.

        Le nom est "Сезон N", la date de premiere diffusion est celle du
        premier episode de la saison.
        """
        result: MetadataResult[Season] = MetadataResult()

        series_id = parse_provider_id(info.series_provider_ids)
        if not series_id or info.index_number is None:
            return result

        season = await find_season(self._gateway, series_id, info.index_number)
        if season is None:
            return result

        item = Season(name=f"Сезон {season.number}", index_number=season.number)

        episodes = sorted(season.episodes or (), key=lambda e: e.episode_number or 0)
        if episodes:
            premiere = parse_date(episodes[0].release_date)
            if premiere is not None:
                item.premiere_date = premiere
                item.production_year = premiere.year

        result.item = item
        result.has_metadata = True
        return result

    async def get_search_results(self, info: SeasonInfo) -> list[RemoteSearchResult]:
        """Recherche de saisons non supportee."""
        return []


class EpisodeProvider(KinopoiskProvider):
    """Metadonnees des episodes depuis Kinopoisk."""

    async def get_metadata(self, info: EpisodeInfo) -> MetadataResult[Episode]:
        """
        Recupere les metadonnees d'un episode.

        Necessite l'ID Kinopoisk de la serie, le numero de saison et le
        numero d'episode.
        """
        result: MetadataResult[Episode] = MetadataResult()

        series_id = parse_provider_id(info.series_provider_ids)
        if not series_id:
            logger.debug("Aucun ID Kinopoisk de serie pour l'episode")
            return result

        season_number = info.parent_index_number
        episode_number = info.index_number
        if season_number is None or episode_number is None:
            logger.debug("Numero de saison ou d'episode manquant")
            return result

        season = await find_season(self._gateway, series_id, season_number)
        if season is None or not season.episodes:
            logger.debug(f"Saison {season_number} introuvable")
            return result

        episode = next(
            (e for e in season.episodes if e.episode_number == episode_number), None
        )
        if episode is None:
            logger.debug(f"Episode {episode_number} introuvable dans la saison {season_number}")
            return result

        item = Episode(
            name=episode.get_name(self.prefer_russian),
            overview=episode.synopsis,
            index_number=episode.episode_number,
            parent_index_number=episode.season_number,
        )
        release_date = parse_date(episode.release_date)
        if release_date is not None:
            item.premiere_date = release_date
            item.production_year = release_date.year

        result.item = item
        result.has_metadata = True
        return result

    async def get_search_results(self, info: EpisodeInfo) -> list[RemoteSearchResult]:
        """Recherche d'episodes non supportee."""
        return []
