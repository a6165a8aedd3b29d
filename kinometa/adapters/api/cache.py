"""
Caches des reponses de l'API Kinopoisk avec TTL.

Deux implementations de IResponseCache:
- MemoryResponseCache: dictionnaire en memoire protege par un verrou,
  horloge injectable pour les tests
- DiskResponseCache: cache persistant via diskcache, conserve les reponses
  entre les redemarrages de l'application

Une entree n'est utilisable que tant que (maintenant - insertion) < TTL.
Les entrees expirees sont traitees comme absentes.
"""

import threading
import time
from pathlib import Path
from typing import Any, Callable, Optional

from diskcache import Cache

from kinometa.core.ports.cache import IResponseCache


class MemoryResponseCache(IResponseCache):
    """
    Cache en memoire avec expiration par entree.

    Les entrees expirees sont purgees paresseusement lors de la lecture.

    Example:
        cache = MemoryResponseCache()
        cache.put("kp_/v2.2/films/301", film, ttl=3600)
        film = cache.get("kp_/v2.2/films/301")
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """
        Initialise un cache vide.

        Args:
            clock: Source de temps en secondes (time.monotonic par defaut)
        """
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    def put(self, key: str, value: Any, ttl: float) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + ttl)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def close(self) -> None:
        self.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class DiskResponseCache(IResponseCache):
    """
    Cache persistant sur disque base sur diskcache.

    diskcache gere lui-meme l'expiration (parametre expire) et la
    concurrence entre threads et processus.

    Example:
        cache = DiskResponseCache(cache_dir=".cache/kinopoisk")
        cache.put("kp_/v1/staff/7836", person, ttl=3600)
        person = cache.get("kp_/v1/staff/7836")
        cache.close()
    """

    def __init__(self, cache_dir: str | Path = ".cache/kinopoisk") -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    def get(self, key: str) -> Optional[Any]:
        return self._cache.get(key)

    def put(self, key: str, value: Any, ttl: float) -> None:
        self._cache.set(key, value, expire=ttl)

    def clear(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        """Ferme la connexion au cache (diskcache tolere plusieurs appels)."""
        self._cache.close()
