"""KinoMeta - Enrichissement de metadonnees de mediatheque depuis Kinopoisk."""

__version__ = "0.1.0"
