"""
Acces a l'API Kinopoisk Unofficial.

Ce module fournit la passerelle unique vers l'API, partagee par tous les
providers de metadonnees et d'images:
- KinopoiskGateway: operations typees (film, recherche, equipe, personne,
  saisons, images, videos) avec cache, rate limiting et gestion d'erreurs
- ImageFetcher: telechargement brut des images (ni cache ni rate limiting)

Infrastructure partagee:
- MemoryResponseCache / DiskResponseCache: caches avec TTL
- RateLimiter: porte d'admission imposant un intervalle minimum entre envois
- RateLimitError / rate_limit_retrying: relance unique sur 429
"""

from kinometa.adapters.api.cache import DiskResponseCache, MemoryResponseCache
from kinometa.adapters.api.gateway import KinopoiskGateway, build_endpoint
from kinometa.adapters.api.image_fetcher import ImageFetcher
from kinometa.adapters.api.rate_limiter import RateLimiter
from kinometa.adapters.api.retry import RateLimitError, rate_limit_retrying

__all__ = [
    "DiskResponseCache",
    "ImageFetcher",
    "KinopoiskGateway",
    "MemoryResponseCache",
    "RateLimitError",
    "RateLimiter",
    "build_endpoint",
    "rate_limit_retrying",
]
