"""
Passerelle d'acces a l'API Kinopoisk Unofficial.

Point de contact unique avec l'API pour tous les providers de metadonnees
et d'images. Une seule instance est partagee par processus (injectee par
le container).

Chaque operation construit un endpoint deterministe (chemin + parametres),
qui sert aussi de cle de cache, puis delegue a une routine commune:

1. Cache: une entree valide est retournee sans reseau ni attente
2. Token: sans token configure, absence de donnees sans appel reseau
3. Rate limiting: attente de l'intervalle minimum depuis le dernier envoi
4. Envoi: GET avec le header X-API-KEY
5. Interpretation du statut:
   - 429: attente fixe d'1s puis relance de toute la routine, une seule fois
   - 404: absence de donnees (ressource inexistante)
   - autre erreur HTTP, erreur reseau, JSON invalide: log + absence
6. Succes: validation du JSON en modele type, mise en cache, retour

Aucune operation ne leve d'exception pour un 404 ou une erreur transitoire:
None est le signal uniforme "pas de donnees". Seule l'annulation
(asyncio.CancelledError) remonte a l'appelant.

Usage:
    gateway = KinopoiskGateway(settings=Settings(), cache=MemoryResponseCache())
    film = await gateway.fetch_film(301)
    staff = await gateway.fetch_staff(301)
    await gateway.close()
"""

from typing import Any, Optional, TypeVar

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from kinometa.adapters.api.models import (
    Film,
    ImagesResponse,
    Person,
    SearchResponse,
    SeasonsResponse,
    Staff,
    VideosResponse,
)
from kinometa.adapters.api.rate_limiter import RateLimiter
from kinometa.adapters.api.retry import (
    MAX_ATTEMPTS,
    RATE_LIMIT_BACKOFF,
    RateLimitError,
    rate_limit_retrying,
)
from kinometa.config import Settings
from kinometa.core.ports.cache import IResponseCache

T = TypeVar("T")

_FILM = TypeAdapter(Optional[Film])
_SEARCH = TypeAdapter(Optional[SearchResponse])
_STAFF = TypeAdapter(Optional[tuple[Staff, ...]])
_PERSON = TypeAdapter(Optional[Person])
_SEASONS = TypeAdapter(Optional[SeasonsResponse])
_IMAGES = TypeAdapter(Optional[ImagesResponse])
_VIDEOS = TypeAdapter(Optional[VideosResponse])


def build_endpoint(path: str, **params: Any) -> str:
    """
    Construit un endpoint deterministe: chemin + parametres de requete encodes.

    Les parametres a None sont ignores. L'ordre des parametres est celui
    des arguments, l'endpoint obtenu est donc stable pour une meme requete.

    Args:
        path: Chemin absolu versionne (ex: "/v2.2/films/301")
        **params: Parametres de requete (ex: keyword="Брат")

    Returns:
        Endpoint relatif (ex: "/v2.1/films/search-by-keyword?keyword=...")

    Raises:
        ValueError: Si le chemin n'est pas absolu (erreur de programmation)
    """
    if not path.startswith("/"):
        raise ValueError(f"Endpoint path must be absolute, got {path!r}")
    query = httpx.QueryParams({k: v for k, v in params.items() if v is not None})
    return f"{path}?{query}" if query else path


class KinopoiskGateway:
    """
    Client API Kinopoisk avec cache, rate limiting et gestion d'erreurs.

    Sure en cas d'utilisation concurrente par plusieurs coroutines:
    le seul etat partage mutable (heure du dernier envoi) est protege
    par la porte d'admission du RateLimiter, et le cache est thread-safe.

    La configuration (token, TTL, debit, activation du rate limiting) est
    relue a chaque requete.

    Attributes:
        BASE_URL: URL de base de l'API Kinopoisk Unofficial
        API_KEY_HEADER: Header portant le token API
        CACHE_KEY_PREFIX: Prefixe des cles de cache

    Example:
        async with KinopoiskGateway(settings, cache) as gateway:
            results = await gateway.search_films("Брат")
            if results and results.films:
                film = await gateway.fetch_film(results.films[0].effective_id)
    """

    BASE_URL = "https://kinopoiskapiunofficial.tech/api"
    API_KEY_HEADER = "X-API-KEY"
    CACHE_KEY_PREFIX = "kp_"

    def __init__(
        self,
        settings: Settings,
        cache: IResponseCache,
        rate_limiter: Optional[RateLimiter] = None,
        rate_limit_backoff: float = RATE_LIMIT_BACKOFF,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        """
        Initialise la passerelle.

        Args:
            settings: Configuration relue a chaque requete
            cache: Cache des reponses (partage)
            rate_limiter: Porte d'admission (creee si non fournie)
            rate_limit_backoff: Delai avant relance sur 429, en secondes
            max_attempts: Nombre maximum de tentatives sur 429
        """
        self._settings = settings
        self._cache = cache
        self._rate_limiter = rate_limiter or RateLimiter()
        self._rate_limit_backoff = rate_limit_backoff
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Le token n'est pas fixe dans les headers du client: il est relu
        a chaque requete pour supporter la reconfiguration a chaud.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers={"Accept": "application/json"},
                timeout=self._settings.request_timeout,
            )
        return self._client

    @classmethod
    def cache_key(cls, endpoint: str) -> str:
        """Cle de cache associee a un endpoint."""
        return f"{cls.CACHE_KEY_PREFIX}{endpoint}"

    @property
    def rate_limiter(self) -> RateLimiter:
        """Porte d'admission partagee."""
        return self._rate_limiter

    async def _get(self, endpoint: str, adapter: TypeAdapter[Optional[T]]) -> Optional[T]:
        """
        Routine commune: tentative complete relancee une fois sur 429.

        La relance repasse par le cache: une valeur mise en cache par un
        autre appelant pendant le delai court-circuite l'appel reseau.
        """
        try:
            async for attempt in rate_limit_retrying(
                max_attempts=self._max_attempts, backoff=self._rate_limit_backoff
            ):
                with attempt:
                    result = await self._fetch_once(endpoint, adapter)
        except RateLimitError:
            logger.warning(f"Limite de debit Kinopoisk toujours atteinte, abandon: {endpoint}")
            return None
        return result

    async def _fetch_once(
        self, endpoint: str, adapter: TypeAdapter[Optional[T]]
    ) -> Optional[T]:
        """
        Une tentative: cache, token, rate limiting, envoi, interpretation.

        Raises:
            RateLimitError: Sur une reponse 429 (pour relance)
        """
        cache_key = self.cache_key(endpoint)

        # CACHE-FIRST: aucune attente ni appel reseau sur un hit
        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit: {endpoint}")
            return cached

        token = self._settings.api_token
        if not token:
            logger.warning("Token API Kinopoisk non configure")
            return None

        if self._settings.enable_rate_limiting:
            await self._rate_limiter.wait(self._settings.min_request_interval)

        client = self._get_client()
        logger.debug(f"Requete Kinopoisk: {endpoint}")
        try:
            response = await client.get(endpoint, headers={self.API_KEY_HEADER: token})
        except httpx.HTTPError as e:
            logger.error(f"Erreur HTTP sur {endpoint}: {e!r}")
            return None

        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            logger.warning(f"Limite de debit Kinopoisk depassee: {endpoint}")
            raise RateLimitError.from_response(endpoint, response)

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug(f"Ressource introuvable: {endpoint}")
            return None

        if not response.is_success:
            logger.error(
                f"Erreur API Kinopoisk {response.status_code} sur {endpoint}: {response.text}"
            )
            return None

        try:
            result = adapter.validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Reponse JSON invalide pour {endpoint}: {e}")
            return None

        if result is not None:
            self._cache.put(cache_key, result, self._settings.cache_ttl_seconds)

        return result

    async def fetch_film(self, film_id: int) -> Optional[Film]:
        """
        Recupere la fiche d'un film ou d'une serie.

        Args:
            film_id: ID Kinopoisk

        Returns:
            Film, ou None si introuvable ou indisponible
        """
        return await self._get(build_endpoint(f"/v2.2/films/{film_id}"), _FILM)

    async def search_films(self, keyword: str) -> Optional[SearchResponse]:
        """
        Recherche des films et series par mot-cle.

        Args:
            keyword: Texte libre (titre en russe ou en anglais)

        Returns:
            SearchResponse, ou None si indisponible
        """
        return await self._get(
            build_endpoint("/v2.1/films/search-by-keyword", keyword=keyword), _SEARCH
        )

    async def fetch_staff(self, film_id: int) -> Optional[tuple[Staff, ...]]:
        """
        Recupere l'equipe d'un film (realisateurs, acteurs, scenaristes...).

        Args:
            film_id: ID Kinopoisk du film

        Returns:
            Tuple de Staff, ou None si indisponible
        """
        return await self._get(build_endpoint("/v1/staff", filmId=film_id), _STAFF)

    async def fetch_person(self, person_id: int) -> Optional[Person]:
        """
        Recupere la fiche complete d'une personne.

        Args:
            person_id: ID de la personne (staffId)

        Returns:
            Person, ou None si introuvable ou indisponible
        """
        return await self._get(build_endpoint(f"/v1/staff/{person_id}"), _PERSON)

    async def fetch_seasons(self, series_id: int) -> Optional[SeasonsResponse]:
        """
        Recupere les saisons et episodes d'une serie.

        Args:
            series_id: ID Kinopoisk de la serie

        Returns:
            SeasonsResponse, ou None si introuvable ou indisponible
        """
        return await self._get(build_endpoint(f"/v2.2/films/{series_id}/seasons"), _SEASONS)

    async def fetch_images(self, film_id: int, type: str = "STILL") -> Optional[ImagesResponse]:
        """
        Recupere les images d'un film filtrees par type.

        Args:
            film_id: ID Kinopoisk du film
            type: STILL, SHOOTING, POSTER, FAN_ART, PROMO, CONCEPT,
                  WALLPAPER, COVER ou SCREENSHOT

        Returns:
            ImagesResponse, ou None si introuvable ou indisponible
        """
        return await self._get(
            build_endpoint(f"/v2.2/films/{film_id}/images", type=type), _IMAGES
        )

    async def fetch_videos(self, film_id: int) -> Optional[VideosResponse]:
        """
        Recupere les bandes-annonces et videos d'un film.

        Args:
            film_id: ID Kinopoisk du film

        Returns:
            VideosResponse, ou None si introuvable ou indisponible
        """
        return await self._get(build_endpoint(f"/v2.2/films/{film_id}/videos"), _VIDEOS)

    async def close(self) -> None:
        """
        Ferme le client HTTP et le cache.

        Peut etre appele plusieurs fois sans erreur, y compris apres une
        nouvelle utilisation de la passerelle: chaque appel libere le client
        ouvert depuis et le cache.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
        self._cache.close()

    async def __aenter__(self) -> "KinopoiskGateway":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
