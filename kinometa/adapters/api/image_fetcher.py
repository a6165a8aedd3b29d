"""
Recuperation brute des images (posters, photogrammes, portraits).

Les URLs d'images proviennent des metadonnees Kinopoisk et pointent vers un
CDN hors du budget de debit de l'API: pas de cache, pas de rate limiting,
simple GET transmis tel quel a l'appelant.
"""

from typing import Optional

import httpx


class ImageFetcher:
    """
    Client HTTP pour le telechargement des images.

    Example:
        fetcher = ImageFetcher()
        response = await fetcher.get_image_response(film.poster_url)
        data = response.content
        await fetcher.close()
    """

    def __init__(self, timeout: float = 30.0) -> None:
        """
        Initialise le client.

        Args:
            timeout: Delai maximum d'une requete en secondes
        """
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)
        return self._client

    async def get_image_response(self, url: str) -> httpx.Response:
        """
        Telecharge une image.

        Args:
            url: URL absolue de l'image

        Returns:
            Reponse HTTP brute (le statut n'est pas verifie)

        Raises:
            httpx.HTTPError: Erreur reseau, propagee a l'appelant
        """
        return await self._get_client().get(url)

    async def close(self) -> None:
        """Ferme le client HTTP (idempotent)."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
