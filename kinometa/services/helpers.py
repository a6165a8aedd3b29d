"""
Fonctions utilitaires partagees par les providers Kinopoisk.

- Extraction de l'ID Kinopoisk (IDs externes, chemin ou nom: "kp-12345")
- Comparaison souple des titres
- Classification des professions et des limites d'age
- Conversion des dates Kinopoisk
"""

import re
from datetime import date, datetime
from typing import Mapping, Optional

from kinometa.adapters.api.models import Staff
from kinometa.core.entities.media import PersonInfo
from kinometa.utils.constants import PROFESSION_MAPPING, PROVIDER_ID

# ID Kinopoisk dans un nom de fichier: kp-12345 ou kp12345
KINOPOISK_ID_PATTERN = re.compile(r"kp-?(\d+)", re.IGNORECASE)

# Limite d'age Kinopoisk: "age16", "age18"
AGE_LIMIT_PATTERN = re.compile(r"age(\d+)")


def parse_provider_id(provider_ids: Mapping[str, str]) -> int:
    """
    Lit l'ID Kinopoisk dans les IDs externes.

    Returns:
        L'ID, ou 0 si absent ou non numerique
    """
    value = provider_ids.get(PROVIDER_ID, "")
    return int(value) if value.isdecimal() else 0


def extract_kinopoisk_id(
    provider_ids: Mapping[str, str],
    path: Optional[str] = None,
    name: Optional[str] = None,
) -> int:
    """
    Determine l'ID Kinopoisk d'un element de la mediatheque.

    Ordre de priorite: IDs externes, puis motif kp-NNN dans le chemin,
    puis dans le nom.

    Args:
        provider_ids: IDs externes deja associes
        path: Chemin du fichier
        name: Nom de l'element

    Returns:
        L'ID Kinopoisk, ou 0 si introuvable
    """
    kinopoisk_id = parse_provider_id(provider_ids)
    if kinopoisk_id:
        return kinopoisk_id

    for text in (path, name):
        match = KINOPOISK_ID_PATTERN.search(text or "")
        if match:
            return int(match.group(1))

    return 0


def matches_name(candidate: Optional[str], query: Optional[str]) -> bool:
    """
    Compare un titre candidat a la requete, sans tenir compte de la casse.

    Correspond si les titres sont egaux ou si l'un contient l'autre.
    Un titre vide ne correspond jamais.
    """
    if not candidate or not query:
        return False
    candidate = candidate.casefold()
    query = query.casefold()
    return candidate == query or query in candidate or candidate in query


def capitalize_first_letter(text: str) -> str:
    """Met la premiere lettre en majuscule ("драма" -> "Драма")."""
    return text[:1].upper() + text[1:]


def parse_official_rating(
    age_limits: Optional[str], mpaa: Optional[str]
) -> Optional[str]:
    """
    Determine la classification officielle.

    La limite d'age Kinopoisk est prioritaire ("age18" -> "18+"), sinon la
    classification MPAA en majuscules ("pg13" -> "PG13").
    """
    if age_limits:
        match = AGE_LIMIT_PATTERN.search(age_limits)
        return f"{match.group(1)}+" if match else None
    if mpaa:
        return mpaa.upper()
    return None


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Convertit une date Kinopoisk (YYYY-MM-DD, eventuellement avec heure).

    Returns:
        La date, ou None si absente ou illisible
    """
    if not value:
        return None
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def build_people(staff: tuple[Staff, ...], prefer_russian: bool) -> list[PersonInfo]:
    """
    Convertit l'equipe Kinopoisk en personnes de l'application hote.

    Les professions sans equivalent (operateurs, monteurs, decorateurs...)
    sont ignorees.
    """
    people = []
    for member in staff:
        kind = PROFESSION_MAPPING.get((member.profession_key or "").upper())
        if kind is None:
            continue

        person = PersonInfo(
            name=member.get_name(prefer_russian) or "Unknown",
            type=kind,
            role=member.description,
            image_url=member.poster_url,
        )
        if member.staff_id:
            person.provider_ids[PROVIDER_ID] = str(member.staff_id)
        people.append(person)
    return people
