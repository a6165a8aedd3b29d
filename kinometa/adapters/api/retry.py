"""
Relance bornee sur les erreurs 429 (Too Many Requests) de l'API Kinopoisk.

Une reponse 429 est convertie en RateLimitError. La tentative complete
(verification du cache et admission par le limiteur comprises) est
relancee une seule fois apres un delai fixe d'une seconde. Un second 429
est le resultat final: RateLimitError remonte a l'appelant, qui le traite
comme une absence de donnees.

Usage:
    async for attempt in rate_limit_retrying():
        with attempt:
            result = await fetch_once()
"""

from typing import Optional

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

# Une tentative initiale + une relance
MAX_ATTEMPTS = 2
# Delai fixe avant la relance, en secondes
RATE_LIMIT_BACKOFF = 1.0


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        endpoint: Endpoint concerne
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie ou illisible.
    """

    def __init__(self, endpoint: str, retry_after: Optional[int] = None) -> None:
        """
        Initialise l'erreur avec la valeur Retry-After optionnelle.

        Args:
            endpoint: Endpoint ayant recu le 429
            retry_after: Secondes a attendre avant de relancer (optionnel)
        """
        self.endpoint = endpoint
        self.retry_after = retry_after
        super().__init__(f"Rate limited on {endpoint}. Retry after: {retry_after}s")

    @classmethod
    def from_response(cls, endpoint: str, response: httpx.Response) -> "RateLimitError":
        """Construit l'erreur a partir d'une reponse 429 (header Retry-After)."""
        header = response.headers.get("Retry-After")
        retry_after = int(header) if header and header.isdigit() else None
        return cls(endpoint, retry_after)


def rate_limit_retrying(
    max_attempts: int = MAX_ATTEMPTS,
    backoff: float = RATE_LIMIT_BACKOFF,
) -> AsyncRetrying:
    """
    Boucle de relance bornee sur RateLimitError.

    Les autres exceptions (y compris asyncio.CancelledError) remontent
    immediatement sans relance.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 2)
        backoff: Delai fixe entre deux tentatives en secondes (defaut: 1)

    Returns:
        Iterateur asynchrone tenacity a utiliser avec `async for`
    """
    return AsyncRetrying(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_fixed(backoff),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )
