"""
Provider de metadonnees des personnes (acteurs, realisateurs...).

L'API Kinopoisk n'offre pas de recherche de personnes: les personnes sont
identifiees via l'equipe des films (staffId), la recherche manuelle
renvoie donc une liste vide.
"""

from typing import Optional

from loguru import logger

from kinometa.adapters.api.models import Person as KinopoiskPerson
from kinometa.core.entities.lookup import PersonLookupInfo
from kinometa.core.entities.media import MetadataResult, Person, RemoteSearchResult
from kinometa.services.base_provider import KinopoiskProvider
from kinometa.services.helpers import parse_date, parse_provider_id
from kinometa.utils.constants import MAX_PERSON_FACTS, PROVIDER_ID


def build_person_overview(person: KinopoiskPerson) -> Optional[str]:
    """
    Compose la biographie d'une personne.

    Profession, taille, lieu de naissance, puis jusqu'a 5 faits.

    Returns:
        Le texte, ou None si aucune information disponible
    """
    parts: list[str] = []

    if person.profession:
        parts.append(person.profession)
    if person.growth and person.growth > 0:
        parts.append(f"Рост: {person.growth} см")
    if person.birthplace:
        parts.append(f"Место рождения: {person.birthplace}")
    if person.facts:
        parts.append("")
        parts.append("Факты:")
        parts.extend(f"• {fact}" for fact in person.facts[:MAX_PERSON_FACTS])

    return "\n".join(parts) if parts else None


class PersonProvider(KinopoiskProvider):
    """Metadonnees des personnes depuis Kinopoisk."""

    async def get_metadata(self, info: PersonLookupInfo) -> MetadataResult[Person]:
        """
        Recupere la fiche d'une personne a partir de son ID Kinopoisk.

        Args:
            info: Personne a enrichir (l'ID Kinopoisk doit etre connu)

        Returns:
            MetadataResult avec la personne, vide si introuvable
        """
        result: MetadataResult[Person] = MetadataResult()

        person_id = parse_provider_id(info.provider_ids)
        if not person_id:
            logger.debug(f"Aucun ID Kinopoisk pour la personne {info.name}")
            return result

        person = await self._gateway.fetch_person(person_id)
        if person is None:
            logger.debug(f"Personne introuvable pour l'ID Kinopoisk {person_id}")
            return result

        item = Person(
            name=person.get_name(self.prefer_russian) or info.name,
            overview=build_person_overview(person),
            birth_date=parse_date(person.birthday),
            death_date=parse_date(person.death),
            production_locations=[person.birthplace] if person.birthplace else [],
        )
        item.provider_ids[PROVIDER_ID] = str(person_id)

        result.item = item
        result.has_metadata = True
        return result

    async def get_search_results(self, info: PersonLookupInfo) -> list[RemoteSearchResult]:
        """Recherche de personnes non supportee par l'API."""
        return []
