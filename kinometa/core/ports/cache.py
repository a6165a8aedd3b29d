"""
Port du cache des reponses API.

La passerelle Kinopoisk ne depend que de cette interface: le cache peut etre
remplace par un double de test qui compte les appels.

Contrat:
- get() ne suspend jamais (pas d'I/O asynchrone) et retourne None pour une
  cle absente ou expiree
- put() ecrase toute entree existante pour la meme cle (dernier ecrit gagne)
- Les implementations sont thread-safe
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IResponseCache(ABC):
    """Cache cle -> valeur avec duree de vie (TTL) par entree."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Args :
            key : Cle unique identifiant la requete (ex: "kp_/v2.2/films/301")

        Retourne :
            La valeur stockee, ou None si absente ou expiree
        """
        ...

    @abstractmethod
    def put(self, key: str, value: Any, ttl: float) -> None:
        """
        Stocke une valeur avec une duree de vie.

        Args :
            key : Cle unique identifiant la requete
            value : Valeur deserialisee a stocker
            ttl : Duree de vie en secondes
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Libere les ressources du cache (idempotent)."""
        ...
