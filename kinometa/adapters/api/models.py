"""
Modeles des reponses JSON de l'API Kinopoisk Unofficial.

Chaque modele reflete la forme JSON renvoyee par l'API:
- Tous les champs sont optionnels (l'API omet souvent des champs)
- Les champs inconnus sont ignores
- Les noms JSON sont en camelCase (nameRu, posterUrlPreview, ...)
- Les champs numeriques acceptent indifferemment 2020 ou "2020"

Les modeles sont immuables (frozen) une fois construits.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class KinopoiskModel(BaseModel):
    """Base commune: alias camelCase, champs inconnus ignores, immuable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


def _pick_name(
    prefer_russian: bool, name_ru: Optional[str], *fallbacks: Optional[str]
) -> Optional[str]:
    """Retourne le nom russe si prefere, sinon le premier fallback non vide."""
    if prefer_russian and name_ru:
        return name_ru
    for name in fallbacks:
        if name:
            return name
    return name_ru or None


class Country(KinopoiskModel):
    """Pays de production."""

    country: Optional[str] = None


class Genre(KinopoiskModel):
    """Genre (en russe, minuscule: "драма", "комедия")."""

    genre: Optional[str] = None


class Film(KinopoiskModel):
    """
    Fiche complete d'un film ou d'une serie (GET /v2.2/films/{id}).

    Attributes:
        kinopoisk_id: ID Kinopoisk (v2.2)
        film_id: ID Kinopoisk (anciennes versions de l'API)
        rating_kinopoisk: Note Kinopoisk sur 10
        rating_imdb: Note IMDb sur 10
        film_length: Duree en minutes
        rating_age_limits: Limite d'age ("age16", "age18")
        type: FILM, VIDEO, TV_SERIES, MINI_SERIES, TV_SHOW
        serial: True pour les series
        completed: True si la serie est terminee
    """

    kinopoisk_id: Optional[int] = None
    film_id: Optional[int] = None
    imdb_id: Optional[str] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    name_original: Optional[str] = None
    poster_url: Optional[str] = None
    poster_url_preview: Optional[str] = None
    cover_url: Optional[str] = None
    logo_url: Optional[str] = None
    rating_kinopoisk: Optional[float] = None
    rating_imdb: Optional[float] = None
    rating_kinopoisk_vote_count: Optional[int] = None
    rating_imdb_vote_count: Optional[int] = None
    year: Optional[int] = None
    film_length: Optional[int] = None
    slogan: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    type: Optional[str] = None
    rating_mpaa: Optional[str] = None
    rating_age_limits: Optional[str] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    serial: Optional[bool] = None
    completed: Optional[bool] = None
    countries: Optional[tuple[Country, ...]] = None
    genres: Optional[tuple[Genre, ...]] = None
    web_url: Optional[str] = None

    @property
    def effective_id(self) -> int:
        """ID Kinopoisk effectif (kinopoiskId, sinon filmId, sinon 0)."""
        return self.kinopoisk_id or self.film_id or 0

    def get_name(self, prefer_russian: bool) -> Optional[str]:
        """Meilleur titre disponible selon la preference de langue."""
        return _pick_name(prefer_russian, self.name_ru, self.name_original, self.name_en)


class SearchItem(KinopoiskModel):
    """
    Resultat de recherche par mot-cle.

    L'annee est une chaine cote API (ex: "2010" ou "2010-2015" pour les series),
    un nombre est accepte et converti.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    kinopoisk_id: Optional[int] = None
    film_id: Optional[int] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    name_original: Optional[str] = None
    type: Optional[str] = None
    year: Optional[str] = None
    poster_url: Optional[str] = None
    poster_url_preview: Optional[str] = None
    rating_kinopoisk: Optional[float] = None

    @property
    def effective_id(self) -> int:
        """ID Kinopoisk effectif (kinopoiskId, sinon filmId, sinon 0)."""
        return self.kinopoisk_id or self.film_id or 0

    @property
    def year_value(self) -> Optional[int]:
        """Annee sous forme d'entier, None si absente ou non numerique."""
        if self.year and self.year.isdigit():
            return int(self.year)
        return None

    def get_name(self, prefer_russian: bool) -> Optional[str]:
        """Meilleur titre disponible selon la preference de langue."""
        return _pick_name(prefer_russian, self.name_ru, self.name_original, self.name_en)


class SearchResponse(KinopoiskModel):
    """Reponse de GET /v2.1/films/search-by-keyword."""

    keyword: Optional[str] = None
    pages_count: Optional[int] = None
    search_films_count_result: Optional[int] = None
    films: Optional[tuple[SearchItem, ...]] = None


class Staff(KinopoiskModel):
    """
    Membre de l'equipe d'un film (GET /v1/staff?filmId={id}).

    Attributes:
        staff_id: ID de la personne (utilisable avec /v1/staff/{id})
        description: Role joue (acteurs) ou precision sur le poste
        profession_key: DIRECTOR, ACTOR, WRITER, PRODUCER, COMPOSER, ...
    """

    staff_id: Optional[int] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    description: Optional[str] = None
    poster_url: Optional[str] = None
    profession_text: Optional[str] = None
    profession_key: Optional[str] = None

    def get_name(self, prefer_russian: bool) -> Optional[str]:
        """Meilleur nom disponible selon la preference de langue."""
        return _pick_name(prefer_russian, self.name_ru, self.name_en)


class PersonFilm(KinopoiskModel):
    """Film reference dans la filmographie d'une personne."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    film_id: Optional[int] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    rating: Optional[str] = None
    profession_key: Optional[str] = None
    description: Optional[str] = None


class Person(KinopoiskModel):
    """
    Fiche complete d'une personne (GET /v1/staff/{id}).

    Attributes:
        growth: Taille en centimetres
        birthday: Date de naissance (YYYY-MM-DD)
        death: Date de deces (YYYY-MM-DD)
        facts: Anecdotes sur la personne
    """

    person_id: Optional[int] = None
    web_url: Optional[str] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    sex: Optional[str] = None
    poster_url: Optional[str] = None
    growth: Optional[int] = None
    birthday: Optional[str] = None
    death: Optional[str] = None
    age: Optional[int] = None
    birthplace: Optional[str] = None
    deathplace: Optional[str] = None
    profession: Optional[str] = None
    facts: Optional[tuple[str, ...]] = None
    films: Optional[tuple[PersonFilm, ...]] = None

    def get_name(self, prefer_russian: bool) -> Optional[str]:
        """Meilleur nom disponible selon la preference de langue."""
        return _pick_name(prefer_russian, self.name_ru, self.name_en)


class Episode(KinopoiskModel):
    """Episode d'une saison."""

    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    name_ru: Optional[str] = None
    name_en: Optional[str] = None
    synopsis: Optional[str] = None
    release_date: Optional[str] = None

    def get_name(self, prefer_russian: bool) -> Optional[str]:
        """Meilleur titre disponible selon la preference de langue."""
        return _pick_name(prefer_russian, self.name_ru, self.name_en)


class Season(KinopoiskModel):
    """Saison d'une serie avec ses episodes."""

    number: Optional[int] = None
    episodes: Optional[tuple[Episode, ...]] = None


class SeasonsResponse(KinopoiskModel):
    """Reponse de GET /v2.2/films/{id}/seasons."""

    total: Optional[int] = None
    items: Optional[tuple[Season, ...]] = None


class Image(KinopoiskModel):
    """Image (photogramme, poster, fan art...)."""

    image_url: Optional[str] = None
    preview_url: Optional[str] = None


class ImagesResponse(KinopoiskModel):
    """Reponse de GET /v2.2/films/{id}/images?type={type}."""

    total: Optional[int] = None
    total_pages: Optional[int] = None
    items: Optional[tuple[Image, ...]] = None


class Video(KinopoiskModel):
    """Bande-annonce ou video associee a un film."""

    url: Optional[str] = None
    name: Optional[str] = None
    site: Optional[str] = None


class VideosResponse(KinopoiskModel):
    """Reponse de GET /v2.2/films/{id}/videos."""

    total: Optional[int] = None
    items: Optional[tuple[Video, ...]] = None
