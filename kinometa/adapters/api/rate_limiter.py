"""
Limiteur de debit partage par tous les appels a l'API Kinopoisk.

Un seul verrou asyncio (porte d'admission de capacite 1) serialise les
envois: l'appelant qui detient le verrou attend le reste de l'intervalle
minimum depuis le dernier envoi, note l'heure du nouvel envoi, puis
libere le verrou. Deux envois ne peuvent donc pas commencer a moins de
1 / max_requests_per_second secondes d'intervalle, quel que soit le
nombre d'appelants concurrents.

L'ordre de service des appelants en attente n'est pas garanti.
"""

import asyncio
import time
from typing import Awaitable, Callable, Optional


class RateLimiter:
    """
    Porte d'admission imposant un intervalle minimum entre deux envois.

    Le verrou est toujours libere (async with), y compris si l'appelant
    est annule pendant l'attente.

    Example:
        limiter = RateLimiter()
        await limiter.wait(min_interval=0.2)  # 5 requetes/seconde
        response = await client.get(...)
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialise le limiteur.

        Args:
            clock: Source de temps en secondes (monotone)
            sleep: Fonction d'attente asynchrone
        """
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._last_request_time: Optional[float] = None

    @property
    def last_request_time(self) -> Optional[float]:
        """Heure (horloge du limiteur) du dernier envoi admis."""
        return self._last_request_time

    @property
    def locked(self) -> bool:
        """True si un appelant detient actuellement la porte d'admission."""
        return self._lock.locked()

    async def wait(self, min_interval: float) -> None:
        """
        Attend que l'envoi suivant soit autorise, puis l'enregistre.

        Args:
            min_interval: Intervalle minimum entre deux envois, en secondes

        Raises:
            asyncio.CancelledError: Si l'appelant est annule pendant l'attente
                (le verrou est libere et l'heure du dernier envoi inchangee)
        """
        async with self._lock:
            if self._last_request_time is not None:
                elapsed = self._clock() - self._last_request_time
                if elapsed < min_interval:
                    await self._sleep(min_interval - elapsed)
            self._last_request_time = self._clock()
