"""
Tests unitaires pour les modeles des reponses Kinopoisk.

Ces tests verifient:
- Les alias camelCase et l'ignorance des champs inconnus
- La tolerance aux nombres transmis sous forme de chaine (et inversement)
- Le choix du nom selon la preference de langue
- L'immutabilite des modeles
"""

import pytest
from pydantic import ValidationError

from kinometa.adapters.api.models import (
    Episode,
    Film,
    Person,
    PersonFilm,
    SearchItem,
    Staff,
)
from tests.fixtures.kinopoisk_responses import FILM_BRAT_RESPONSE


class TestFilm:
    """Tests pour le modele Film."""

    def test_parses_camel_case_fields(self) -> None:
        film = Film.model_validate(FILM_BRAT_RESPONSE)
        assert film.kinopoisk_id == 41519
        assert film.poster_url_preview.endswith("kp_small/41519.jpg")
        assert film.rating_age_limits == "age18"
        assert film.countries[0].country == "Россия"

    def test_ignores_unknown_fields(self) -> None:
        film = Film.model_validate({"kinopoiskId": 1, "hasImax": True, "brandNew": "x"})
        assert film.kinopoisk_id == 1

    def test_missing_fields_are_none(self) -> None:
        film = Film.model_validate({})
        assert film.name_ru is None
        assert film.genres is None

    def test_numeric_strings_are_accepted(self) -> None:
        film = Film.model_validate_json('{"kinopoiskId": "301", "year": "1999", "ratingImdb": "8.7"}')
        assert film.kinopoisk_id == 301
        assert film.year == 1999
        assert film.rating_imdb == 8.7

    def test_non_numeric_year_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Film.model_validate({"year": "soon"})

    def test_effective_id_falls_back_to_film_id(self) -> None:
        assert Film(film_id=42).effective_id == 42
        assert Film(kinopoisk_id=7, film_id=42).effective_id == 7
        assert Film().effective_id == 0

    def test_models_are_frozen(self) -> None:
        film = Film(kinopoisk_id=1)
        with pytest.raises(ValidationError):
            film.name_ru = "Другое"

    def test_get_name_prefers_russian(self) -> None:
        film = Film(name_ru="Брат", name_original="Brat", name_en="Brother")
        assert film.get_name(prefer_russian=True) == "Брат"
        assert film.get_name(prefer_russian=False) == "Brat"

    def test_get_name_falls_back(self) -> None:
        assert Film(name_en="Brother").get_name(prefer_russian=True) == "Brother"
        assert Film(name_ru="Брат", name_original="").get_name(prefer_russian=False) == "Брат"
        assert Film().get_name(prefer_russian=True) is None


class TestSearchItem:
    """Tests pour le modele SearchItem."""

    def test_year_number_is_converted_to_string(self) -> None:
        item = SearchItem.model_validate({"filmId": 1, "year": 2010})
        assert item.year == "2010"
        assert item.year_value == 2010

    def test_year_range_has_no_integer_value(self) -> None:
        item = SearchItem.model_validate({"filmId": 1, "year": "2010-2015"})
        assert item.year_value is None

    def test_effective_id_uses_film_id(self) -> None:
        assert SearchItem.model_validate({"filmId": 41519}).effective_id == 41519


class TestPeople:
    """Tests pour Staff, Person et PersonFilm."""

    def test_staff_name_preference(self) -> None:
        staff = Staff(name_ru="Алексей Балабанов", name_en="Aleksey Balabanov")
        assert staff.get_name(prefer_russian=True) == "Алексей Балабанов"
        assert staff.get_name(prefer_russian=False) == "Aleksey Balabanov"

    def test_staff_empty_russian_name_falls_back(self) -> None:
        staff = Staff(name_ru="", name_en="Sergei Astakhov")
        assert staff.get_name(prefer_russian=True) == "Sergei Astakhov"

    def test_person_growth_string_is_converted(self) -> None:
        person = Person.model_validate({"personId": 1, "growth": "184"})
        assert person.growth == 184

    def test_person_facts_are_tuple(self) -> None:
        person = Person.model_validate({"facts": ["a", "b"]})
        assert person.facts == ("a", "b")

    def test_person_film_rating_number_is_converted(self) -> None:
        film = PersonFilm.model_validate({"filmId": 1, "rating": 8.3})
        assert film.rating == "8.3"


class TestEpisode:
    """Tests pour le modele Episode."""

    def test_get_name_prefers_english_when_asked(self) -> None:
        episode = Episode(name_ru="Зима близко", name_en="Winter Is Coming")
        assert episode.get_name(prefer_russian=False) == "Winter Is Coming"

    def test_get_name_without_english(self) -> None:
        episode = Episode(name_ru="Зима близко")
        assert episode.get_name(prefer_russian=False) == "Зима близко"
