"""
Entités de l'application hôte produites par les providers Kinopoisk.

Exports:
- Movie, Series, Season, Episode, Person: Entités enrichies
- PersonInfo, PersonKind: Personnes rattachées à un film/série
- MetadataResult: Résultat d'une recherche de métadonnées
- RemoteSearchResult, RemoteImageInfo, ImageType: Recherche et images
- MovieInfo, SeriesInfo, SeasonInfo, EpisodeInfo, PersonLookupInfo, ItemInfo:
  Informations de recherche fournies par l'hôte
"""

from kinometa.core.entities.lookup import (
    EpisodeInfo,
    ItemInfo,
    MovieInfo,
    PersonLookupInfo,
    SeasonInfo,
    SeriesInfo,
)
from kinometa.core.entities.media import (
    Episode,
    ImageType,
    MetadataResult,
    Movie,
    Person,
    PersonInfo,
    PersonKind,
    RemoteImageInfo,
    RemoteSearchResult,
    Season,
    Series,
    SeriesStatus,
)

__all__ = [
    "Episode",
    "EpisodeInfo",
    "ImageType",
    "ItemInfo",
    "MetadataResult",
    "Movie",
    "MovieInfo",
    "Person",
    "PersonInfo",
    "PersonKind",
    "PersonLookupInfo",
    "RemoteImageInfo",
    "RemoteSearchResult",
    "Season",
    "SeasonInfo",
    "Series",
    "SeriesInfo",
    "SeriesStatus",
]
