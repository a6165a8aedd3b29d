"""
Providers d'images (films, series, personnes).

Les URLs sont tirees des fiches Kinopoisk (poster, couverture, logo) et,
pour les films et series, des premiers photogrammes (images STILL)
proposes comme fonds d'ecran. Le telechargement des images elles-memes
passe par ImageFetcher, hors cache et hors rate limiting.
"""

from typing import Optional

from kinometa.adapters.api.models import Film
from kinometa.core.entities.lookup import ItemInfo
from kinometa.core.entities.media import ImageType, RemoteImageInfo
from kinometa.services.base_provider import KinopoiskProvider
from kinometa.services.helpers import parse_provider_id
from kinometa.utils.constants import IMAGE_LANGUAGE, MAX_STILL_BACKDROPS

STILL_IMAGE_TYPE = "STILL"


class FilmImageProvider(KinopoiskProvider):
    """
    Images d'un film ou d'une serie.

    Types supportes: Primary (poster), Backdrop (couverture et
    photogrammes), Logo.
    """

    supported_images = (ImageType.PRIMARY, ImageType.BACKDROP, ImageType.LOGO)

    async def get_images(self, item: ItemInfo) -> list[RemoteImageInfo]:
        """
        Liste les images disponibles pour un element.

        Args:
            item: Element portant l'ID Kinopoisk dans ses IDs externes

        Returns:
            Liste des images (vide si l'ID est inconnu ou la fiche absente)
        """
        kinopoisk_id = parse_provider_id(item.provider_ids)
        if not kinopoisk_id:
            return []

        film = await self._gateway.fetch_film(kinopoisk_id)
        if film is None:
            return []

        images = self._film_images(film)

        stills = await self._gateway.fetch_images(kinopoisk_id, STILL_IMAGE_TYPE)
        if stills is not None and stills.items:
            for still in stills.items[:MAX_STILL_BACKDROPS]:
                if still.image_url:
                    images.append(
                        self._image(still.image_url, ImageType.BACKDROP, still.preview_url)
                    )

        return images

    def _film_images(self, film: Film) -> list[RemoteImageInfo]:
        """Poster, couverture et logo de la fiche."""
        images = []
        if film.poster_url:
            images.append(
                self._image(film.poster_url, ImageType.PRIMARY, film.poster_url_preview)
            )
        if film.cover_url:
            images.append(self._image(film.cover_url, ImageType.BACKDROP))
        if film.logo_url:
            images.append(self._image(film.logo_url, ImageType.LOGO))
        return images

    def _image(
        self, url: str, image_type: ImageType, thumbnail_url: Optional[str] = None
    ) -> RemoteImageInfo:
        return RemoteImageInfo(
            url=url,
            type=image_type,
            provider_name=self.name,
            thumbnail_url=thumbnail_url,
            language=IMAGE_LANGUAGE,
        )


class MovieImageProvider(FilmImageProvider):
    """Images des films."""


class SeriesImageProvider(FilmImageProvider):
    """Images des series TV."""


class PersonImageProvider(KinopoiskProvider):
    """Portrait d'une personne (type Primary uniquement)."""

    supported_images = (ImageType.PRIMARY,)

    async def get_images(self, item: ItemInfo) -> list[RemoteImageInfo]:
        """Retourne le portrait de la personne s'il existe."""
        person_id = parse_provider_id(item.provider_ids)
        if not person_id:
            return []

        person = await self._gateway.fetch_person(person_id)
        if person is None or not person.poster_url:
            return []

        return [
            RemoteImageInfo(
                url=person.poster_url,
                type=ImageType.PRIMARY,
                provider_name=self.name,
                language=IMAGE_LANGUAGE,
            )
        ]
