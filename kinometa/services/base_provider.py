"""
Base commune des providers Kinopoisk.

Tous les providers recoivent par injection la meme instance de passerelle,
la configuration et le client de telechargement d'images.
"""

from typing import Iterable, Optional

import httpx

from kinometa.adapters.api.gateway import KinopoiskGateway
from kinometa.adapters.api.image_fetcher import ImageFetcher
from kinometa.adapters.api.models import SearchItem
from kinometa.config import Settings
from kinometa.core.entities.media import RemoteSearchResult
from kinometa.services.helpers import matches_name
from kinometa.utils.constants import PROVIDER_ID, PROVIDER_NAME


class KinopoiskProvider:
    """
    Provider de base: dependances partagees et operations communes.

    Attributes:
        name: Nom du provider affiche par l'hote
    """

    name = PROVIDER_NAME

    def __init__(
        self,
        gateway: KinopoiskGateway,
        settings: Settings,
        image_fetcher: ImageFetcher,
    ) -> None:
        """
        Initialise le provider.

        Args:
            gateway: Passerelle API partagee (une instance par processus)
            settings: Configuration (relue a chaque appel)
            image_fetcher: Client de telechargement des images
        """
        self._gateway = gateway
        self._settings = settings
        self._image_fetcher = image_fetcher

    @property
    def prefer_russian(self) -> bool:
        """Preference de langue courante des metadonnees."""
        return self._settings.prefer_russian_metadata

    async def get_image_response(self, url: str) -> httpx.Response:
        """Telecharge une image (sans cache ni rate limiting)."""
        return await self._image_fetcher.get_image_response(url)

    async def _find_by_name(
        self, name: str, year: Optional[int], types: Iterable[str]
    ) -> int:
        """
        Cherche l'ID Kinopoisk d'un element par son nom.

        Retient le premier resultat du bon type dont l'annee correspond
        (si connue) et dont un des titres correspond au nom.

        Returns:
            L'ID trouve, ou 0
        """
        response = await self._gateway.search_films(name)
        if response is None or not response.films:
            return 0

        allowed = frozenset(types)
        for item in response.films:
            if item.type not in allowed:
                continue
            if year is not None and item.year != str(year):
                continue
            if any(
                matches_name(title, name)
                for title in (item.name_ru, item.name_en, item.name_original)
            ):
                return item.effective_id
        return 0

    def _search_result(
        self,
        kinopoisk_id: int,
        name: Optional[str],
        year: Optional[int],
        image_url: Optional[str],
    ) -> RemoteSearchResult:
        """Construit un candidat de recherche portant l'ID Kinopoisk."""
        return RemoteSearchResult(
            name=name,
            search_provider_name=self.name,
            production_year=year,
            image_url=image_url,
            provider_ids={PROVIDER_ID: str(kinopoisk_id)},
        )

    def _search_results_from_items(
        self, items: Iterable[SearchItem], types: Iterable[str], limit: int
    ) -> list[RemoteSearchResult]:
        """Convertit les resultats de recherche du bon type (au plus limit)."""
        allowed = frozenset(types)
        results: list[RemoteSearchResult] = []
        for item in items:
            if item.type not in allowed:
                continue
            results.append(
                self._search_result(
                    item.effective_id,
                    item.get_name(self.prefer_russian),
                    item.year_value,
                    item.poster_url_preview or item.poster_url,
                )
            )
            if len(results) >= limit:
                break
        return results
