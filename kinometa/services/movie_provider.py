"""
Provider de metadonnees des films.

Determine l'ID Kinopoisk du film (IDs externes, motif kp-NNN dans le
chemin ou le nom, sinon recherche par titre), puis convertit la fiche
Kinopoisk en Movie et ajoute l'equipe (realisateurs, acteurs...).

Si la fiche n'est pas disponible, le resultat reste vide: aucune entite
partielle n'est renvoyee.
"""

from loguru import logger

from kinometa.adapters.api.models import Film
from kinometa.core.entities.lookup import MovieInfo
from kinometa.core.entities.media import MetadataResult, Movie, RemoteSearchResult
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
    MOVIE_TYPES,
    PROVIDER_ID,
)


class MovieProvider(KinopoiskProvider):
    """
    Metadonnees des films depuis Kinopoisk.

    Example:
        provider = container.movie_provider()
        result = await provider.get_metadata(MovieInfo(name="Брат", year=1997))
        if result.has_metadata:
            print(result.item.name, [p.name for p in result.people])
    """

    async def get_metadata(self, info: MovieInfo) -> MetadataResult[Movie]:
        """
        Recupere les metadonnees completes d'un film.

        Args:
            info: Film a enrichir

        Returns:
            MetadataResult avec le film et son equipe, vide si introuvable
        """
        result: MetadataResult[Movie] = MetadataResult()

        kinopoisk_id = extract_kinopoisk_id(info.provider_ids, info.path, info.name)
        if not kinopoisk_id:
            kinopoisk_id = await self._find_by_name(info.name, info.year, MOVIE_TYPES)

        if not kinopoisk_id:
            logger.debug(f"Aucun ID Kinopoisk trouve pour {info.name}")
            return result

        film = await self._gateway.fetch_film(kinopoisk_id)
        if film is None:
            logger.debug(f"Film introuvable pour l'ID Kinopoisk {kinopoisk_id}")
            return result

        result.item = self._to_movie(film, kinopoisk_id, info.name)
        result.has_metadata = True

        staff = await self._gateway.fetch_staff(kinopoisk_id)
        if staff is not None:
            for person in build_people(staff, self.prefer_russian):
                result.add_person(person)

        return result

    async def get_search_results(self, info: MovieInfo) -> list[RemoteSearchResult]:
        """
        Propose des candidats pour une recherche manuelle.

        Avec un ID connu: la fiche correspondante. Sinon: recherche par
        titre, limitee aux films et videos.
        """
        kinopoisk_id = extract_kinopoisk_id(info.provider_ids, info.path, info.name)

        if kinopoisk_id:
            film = await self._gateway.fetch_film(kinopoisk_id)
            if film is None:
                return []
            return [
                self._search_result(
                    film.effective_id,
                    film.get_name(self.prefer_russian),
                    film.year,
                    film.poster_url_preview or film.poster_url,
                )
            ]

        response = await self._gateway.search_films(info.name)
        if response is None or not response.films:
            return []
        return self._search_results_from_items(response.films, MOVIE_TYPES, MAX_SEARCH_RESULTS)

    def _to_movie(self, film: Film, kinopoisk_id: int, fallback_name: str) -> Movie:
        """Convertit une fiche Kinopoisk en Movie."""
        movie = Movie(
            name=film.get_name(self.prefer_russian) or fallback_name,
            original_title=film.name_original or film.name_en,
            overview=film.description or film.short_description,
            tagline=film.slogan,
            production_year=film.year,
            community_rating=film.rating_kinopoisk,
            critic_rating=film.rating_imdb * 10 if film.rating_imdb is not None else None,
            official_rating=parse_official_rating(film.rating_age_limits, film.rating_mpaa),
        )

        movie.provider_ids[PROVIDER_ID] = str(kinopoisk_id)
        if film.imdb_id:
            movie.provider_ids[IMDB_PROVIDER_ID] = film.imdb_id

        movie.genres = [
            capitalize_first_letter(g.genre) for g in film.genres or () if g.genre
        ]
        movie.production_locations = [c.country for c in film.countries or () if c.country]

        if film.film_length and film.film_length > 0:
            movie.runtime_minutes = film.film_length

        return movie
