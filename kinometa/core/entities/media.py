"""
Entites du domaine hote (application de gestion de mediatheque).

Les providers transforment les reponses Kinopoisk en ces entites. Une
entite n'est jamais renvoyee partiellement remplie: soit le resultat
porte un item complet (has_metadata=True), soit il est vide.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class PersonKind(Enum):
    """Role d'une personne dans un film ou une serie."""

    ACTOR = "Actor"
    DIRECTOR = "Director"
    WRITER = "Writer"
    PRODUCER = "Producer"
    COMPOSER = "Composer"


class ImageType(Enum):
    """Emplacement d'une image dans la mediatheque."""

    PRIMARY = "Primary"
    BACKDROP = "Backdrop"
    LOGO = "Logo"


class SeriesStatus(Enum):
    """Statut de diffusion d'une serie."""

    CONTINUING = "Continuing"
    ENDED = "Ended"


@dataclass
class PersonInfo:
    """
    Personne rattachee a un film ou une serie.

    Attributes:
        name: Nom affiche
        type: Role (acteur, realisateur...)
        role: Personnage joue (acteurs) ou precision sur le poste
        image_url: URL du portrait
        provider_ids: IDs externes (cle "Kinopoisk" -> staffId)
    """

    name: str
    type: PersonKind
    role: Optional[str] = None
    image_url: Optional[str] = None
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class Movie:
    """
    Film enrichi depuis Kinopoisk.

    Attributes:
        critic_rating: Note IMDb ramenee sur 100
        runtime_minutes: Duree en minutes
        official_rating: Classification ("18+", "PG-13")
    """

    name: str = ""
    original_title: Optional[str] = None
    overview: Optional[str] = None
    tagline: Optional[str] = None
    production_year: Optional[int] = None
    community_rating: Optional[float] = None
    critic_rating: Optional[float] = None
    official_rating: Optional[str] = None
    runtime_minutes: Optional[int] = None
    genres: list[str] = field(default_factory=list)
    production_locations: list[str] = field(default_factory=list)
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class Series:
    """Serie TV enrichie depuis Kinopoisk."""

    name: str = ""
    original_title: Optional[str] = None
    overview: Optional[str] = None
    tagline: Optional[str] = None
    production_year: Optional[int] = None
    end_date: Optional[date] = None
    status: Optional[SeriesStatus] = None
    community_rating: Optional[float] = None
    official_rating: Optional[str] = None
    genres: list[str] = field(default_factory=list)
    production_locations: list[str] = field(default_factory=list)
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class Season:
    """Saison d'une serie."""

    name: str = ""
    index_number: Optional[int] = None
    premiere_date: Optional[date] = None
    production_year: Optional[int] = None


@dataclass
class Episode:
    """Episode d'une serie."""

    name: Optional[str] = None
    overview: Optional[str] = None
    index_number: Optional[int] = None
    parent_index_number: Optional[int] = None
    premiere_date: Optional[date] = None
    production_year: Optional[int] = None


@dataclass
class Person:
    """Fiche d'une personne (acteur, realisateur...)."""

    name: str = ""
    overview: Optional[str] = None
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    production_locations: list[str] = field(default_factory=list)
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class MetadataResult(Generic[T]):
    """
    Resultat d'une recherche de metadonnees.

    Attributes:
        item: Entite remplie, ou None si aucune donnee
        has_metadata: True si item est rempli
        people: Personnes associees (films et series)
    """

    item: Optional[T] = None
    has_metadata: bool = False
    people: list[PersonInfo] = field(default_factory=list)

    def add_person(self, person: PersonInfo) -> None:
        """Ajoute une personne au resultat."""
        self.people.append(person)


@dataclass
class RemoteSearchResult:
    """Candidat propose a l'utilisateur lors d'une recherche manuelle."""

    name: Optional[str]
    search_provider_name: str
    production_year: Optional[int] = None
    image_url: Optional[str] = None
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class RemoteImageInfo:
    """Image distante proposee pour un element de la mediatheque."""

    url: str
    type: ImageType
    provider_name: str
    thumbnail_url: Optional[str] = None
    language: Optional[str] = None
