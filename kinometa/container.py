"""
Container d'injection de dependances via dependency-injector.

Une seule passerelle Kinopoisk par processus, partagee par tous les
providers: le budget de debit et le cache sont donc communs a tous.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import DiskResponseCache, MemoryResponseCache
from .adapters.api.gateway import KinopoiskGateway
from .adapters.api.image_fetcher import ImageFetcher
from .config import Settings
from .services.episode_provider import EpisodeProvider, SeasonProvider
from .services.image_providers import (
    MovieImageProvider,
    PersonImageProvider,
    SeriesImageProvider,
)
from .services.movie_provider import MovieProvider
from .services.person_provider import PersonProvider
from .services.series_provider import SeriesProvider


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        gateway = container.gateway()
        movie_provider = container.movie_provider()
        result = await movie_provider.get_metadata(MovieInfo(name="Брат"))
        await gateway.close()
    """

    # Configuration - singleton charge une seule fois, relu a chaque requete
    config = providers.Singleton(Settings)

    # Cache des reponses - backend choisi par KINOMETA_CACHE_BACKEND
    response_cache = providers.Selector(
        config.provided.cache_backend,
        memory=providers.Singleton(MemoryResponseCache),
        disk=providers.Singleton(DiskResponseCache, cache_dir=config.provided.cache_dir),
    )

    # Passerelle API - Singleton partage par tous les providers
    gateway = providers.Singleton(
        KinopoiskGateway,
        settings=config,
        cache=response_cache,
    )

    # Telechargement des images - hors cache et rate limiting
    image_fetcher = providers.Singleton(
        ImageFetcher,
        timeout=config.provided.request_timeout,
    )

    # Providers - Factory, ils ne portent aucun etat propre
    movie_provider = providers.Factory(
        MovieProvider, gateway=gateway, settings=config, image_fetcher=image_fetcher
    )
    series_provider = providers.Factory(
        SeriesProvider, gateway=gateway, settings=config, image_fetcher=image_fetcher
    )
    season_provider = providers.Factory(
        SeasonProvider, gateway=gateway, settings=config, image_fetcher=image_fetcher
    )
    episode_provider = providers.Factory(
        EpisodeProvider, gateway=gateway, settings=config, image_fetcher=image_fetcher
    )
    person_provider = providers.Factory(
        PersonProvider, gateway=gateway, settings=config, image_fetcher=image_fetcher
    )
    movie_image_provider = providers.Factory(
        MovieImageProvider, gateway=gateway, settings=config, image_fetcher=image_fetcher
    )
    series_image_provider = providers.Factory(
        SeriesImageProvider, gateway=gateway, settings=config, image_fetcher=image_fetcher
    )
    person_image_provider = providers.Factory(
        PersonImageProvider, gateway=gateway, settings=config, image_fetcher=image_fetcher
    )
