"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

- IResponseCache : Cache des réponses API avec TTL par entrée
"""

from kinometa.core.ports.cache import IResponseCache

__all__ = ["IResponseCache"]
