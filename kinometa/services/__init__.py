"""
Providers de metadonnees et d'images Kinopoisk.

Chaque provider recoit la passerelle partagee (KinopoiskGateway) et
convertit ses reponses typees en entites de l'application hote:
- MovieProvider, SeriesProvider: films et series (avec equipe)
- SeasonProvider, EpisodeProvider: saisons et episodes
- PersonProvider: personnes
- MovieImageProvider, SeriesImageProvider, PersonImageProvider: images

Une absence de donnees de la passerelle laisse le champ ou l'entite vide,
sans jamais faire echouer l'enrichissement.
"""

from kinometa.services.episode_provider import EpisodeProvider, SeasonProvider
from kinometa.services.image_providers import (
    MovieImageProvider,
    PersonImageProvider,
    SeriesImageProvider,
)
from kinometa.services.movie_provider import MovieProvider
from kinometa.services.person_provider import PersonProvider
from kinometa.services.series_provider import SeriesProvider

__all__ = [
    "EpisodeProvider",
    "MovieImageProvider",
    "MovieProvider",
    "PersonImageProvider",
    "PersonProvider",
    "SeasonProvider",
    "SeriesImageProvider",
    "SeriesProvider",
]
