"""
Informations de recherche fournies par l'application hote.

Decrivent l'element a enrichir tel que connu localement: nom, annee,
chemin du fichier et IDs externes deja associes.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MovieInfo:
    """Film a enrichir."""

    name: str = ""
    year: Optional[int] = None
    path: Optional[str] = None
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class SeriesInfo:
    """Serie a enrichir."""

    name: str = ""
    year: Optional[int] = None
    path: Optional[str] = None
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class SeasonInfo:
    """Saison a enrichir (index_number = numero de saison)."""

    index_number: Optional[int] = None
    series_provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class EpisodeInfo:
    """
    Episode a enrichir.

    Attributes:
        index_number: Numero d'episode
        parent_index_number: Numero de saison
        series_provider_ids: IDs externes de la serie parente
    """

    index_number: Optional[int] = None
    parent_index_number: Optional[int] = None
    series_provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class PersonLookupInfo:
    """Personne a enrichir."""

    name: str = ""
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class ItemInfo:
    """Element de la mediatheque pour lequel des images sont demandees."""

    name: str = ""
    provider_ids: dict[str, str] = field(default_factory=dict)
