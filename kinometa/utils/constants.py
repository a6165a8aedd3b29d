"""
Constantes globales pour KinoMeta.

Ce module contient:
- L'identifiant et le nom du provider Kinopoisk dans l'application hote
- Les types de contenus Kinopoisk (films vs series)
- Le mapping des professions Kinopoisk vers les roles de l'hote
- Les limites appliquees par les providers
"""

from kinometa.core.entities.media import PersonKind

# Cle des IDs externes et nom affiche du provider
PROVIDER_ID = "Kinopoisk"
PROVIDER_NAME = "Kinopoisk"
# Cle des IDs IMDb dans l'application hote
IMDB_PROVIDER_ID = "Imdb"

# Langue des images Kinopoisk
IMAGE_LANGUAGE = "ru"

# Types de contenus renvoyes par la recherche par mot-cle
MOVIE_TYPES = frozenset({"FILM", "VIDEO"})
SERIES_TYPES = frozenset({"TV_SERIES", "MINI_SERIES", "TV_SHOW"})

# professionKey Kinopoisk -> role hote (les autres professions sont ignorees)
PROFESSION_MAPPING: dict[str, PersonKind] = {
    "DIRECTOR": PersonKind.DIRECTOR,
    "WRITER": PersonKind.WRITER,
    "SCREENWRITER": PersonKind.WRITER,
    "PRODUCER": PersonKind.PRODUCER,
    "PRODUCER_USSR": PersonKind.PRODUCER,
    "COMPOSER": PersonKind.COMPOSER,
    "ACTOR": PersonKind.ACTOR,
    "VOICE_DIRECTOR": PersonKind.ACTOR,
    "VOICE_MALE": PersonKind.ACTOR,
    "VOICE_FEMALE": PersonKind.ACTOR,
}

# Nombre maximum de resultats de recherche proposes
MAX_SEARCH_RESULTS = 10
# Nombre maximum de photogrammes ajoutes comme fonds d'ecran
MAX_STILL_BACKDROPS = 5
# Nombre maximum de faits repris dans la biographie d'une personne
MAX_PERSON_FACTS = 5
