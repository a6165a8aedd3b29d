"""
Reponses de l'API Kinopoisk Unofficial pour les tests.

Reponses realistes des endpoints films, recherche, equipe, personnes,
saisons, images et videos. Utilisees avec respx pour simuler les appels
httpx, ou validees en modeles pour les tests des providers.
"""

BASE_URL = "https://kinopoiskapiunofficial.tech/api"

# GET /v2.2/films/41519
FILM_BRAT_RESPONSE = {
    "kinopoiskId": 41519,
    "imdbId": "tt0118767",
    "nameRu": "Брат",
    "nameEn": None,
    "nameOriginal": "Brat",
    "posterUrl": "https://kinopoiskapiunofficial.tech/images/posters/kp/41519.jpg",
    "posterUrlPreview": "https://kinopoiskapiunofficial.tech/images/posters/kp_small/41519.jpg",
    "coverUrl": "https://avatars.mds.yandex.net/get-ott/41519/cover.jpg",
    "logoUrl": None,
    "ratingKinopoisk": 8.3,
    "ratingKinopoiskVoteCount": 520000,
    "ratingImdb": 7.8,
    "ratingImdbVoteCount": 30000,
    "webUrl": "https://www.kinopoisk.ru/film/41519/",
    "year": 1997,
    "filmLength": 100,
    "slogan": "Город - это сила",
    "description": "Демобилизовавшись, Данила Багров возвращается в родной городок...",
    "shortDescription": "Данила Багров едет в Петербург к брату",
    "type": "FILM",
    "ratingMpaa": "r",
    "ratingAgeLimits": "age18",
    "countries": [{"country": "Россия"}],
    "genres": [{"genre": "драма"}, {"genre": "криминал"}, {"genre": "боевик"}],
    "startYear": None,
    "endYear": None,
    "serial": False,
    "shortFilm": False,
    "completed": False,
    "hasImax": False,
    "has3D": False,
    "lastSync": "2024-01-10T10:00:00.000000",
}

# GET /v2.2/films/464963 (serie terminee)
SERIES_GOT_RESPONSE = {
    "kinopoiskId": 464963,
    "imdbId": "tt0944947",
    "nameRu": "Игра престолов",
    "nameEn": None,
    "nameOriginal": "Game of Thrones",
    "posterUrl": "https://kinopoiskapiunofficial.tech/images/posters/kp/464963.jpg",
    "posterUrlPreview": "https://kinopoiskapiunofficial.tech/images/posters/kp_small/464963.jpg",
    "ratingKinopoisk": 9.0,
    "ratingImdb": 9.2,
    "year": 2011,
    "filmLength": 55,
    "description": "К концу подходит время благоденствия...",
    "type": "TV_SERIES",
    "ratingMpaa": None,
    "ratingAgeLimits": "age18",
    "countries": [{"country": "США"}, {"country": "Великобритания"}],
    "genres": [{"genre": "фэнтези"}, {"genre": "драма"}],
    "startYear": 2011,
    "endYear": 2019,
    "serial": True,
    "completed": True,
}

# GET /v2.1/films/search-by-keyword?keyword=Брат
SEARCH_BRAT_RESPONSE = {
    "keyword": "Брат",
    "pagesCount": 1,
    "searchFilmsCountResult": 3,
    "films": [
        {
            "filmId": 41519,
            "nameRu": "Брат",
            "nameEn": "Brother",
            "type": "FILM",
            "year": "1997",
            "description": "Россия, 96 мин.",
            "rating": "8.3",
            "posterUrl": "https://kinopoiskapiunofficial.tech/images/posters/kp/41519.jpg",
            "posterUrlPreview": "https://kinopoiskapiunofficial.tech/images/posters/kp_small/41519.jpg",
        },
        {
            "filmId": 41520,
            "nameRu": "Брат 2",
            "nameEn": "Brother 2",
            "type": "FILM",
            "year": "2000",
            "posterUrlPreview": "https://kinopoiskapiunofficial.tech/images/posters/kp_small/41520.jpg",
        },
        {
            "filmId": 1227803,
            "nameRu": "Брат за брата",
            "type": "TV_SERIES",
            "year": "2010-2019",
        },
    ],
}

SEARCH_EMPTY_RESPONSE = {
    "keyword": "zzzzzz",
    "pagesCount": 0,
    "searchFilmsCountResult": 0,
    "films": [],
}

# GET /v1/staff?filmId=41519
STAFF_BRAT_RESPONSE = [
    {
        "staffId": 26268,
        "nameRu": "Алексей Балабанов",
        "nameEn": "Aleksey Balabanov",
        "description": None,
        "posterUrl": "https://kinopoiskapiunofficial.tech/images/actor_posters/kp/26268.jpg",
        "professionText": "Режиссеры",
        "professionKey": "DIRECTOR",
    },
    {
        "staffId": 9838,
        "nameRu": "Сергей Бодров мл.",
        "nameEn": "Sergey Bodrov Jr.",
        "description": "Данила Багров",
        "posterUrl": "https://kinopoiskapiunofficial.tech/images/actor_posters/kp/9838.jpg",
        "professionText": "Актеры",
        "professionKey": "ACTOR",
    },
    {
        "staffId": 5432,
        "nameRu": "",
        "nameEn": "Sergei Astakhov",
        "description": None,
        "professionText": "Операторы",
        "professionKey": "OPERATOR",
    },
    {
        "staffId": 7777,
        "nameRu": None,
        "nameEn": None,
        "professionText": "Композиторы",
        "professionKey": "COMPOSER",
    },
]

# GET /v1/staff/9838
PERSON_BODROV_RESPONSE = {
    "personId": 9838,
    "webUrl": "https://www.kinopoisk.ru/name/9838/",
    "nameRu": "Сергей Бодров мл.",
    "nameEn": "Sergey Bodrov Jr.",
    "sex": "MALE",
    "posterUrl": "https://kinopoiskapiunofficial.tech/images/actor_posters/kp/9838.jpg",
    "growth": "184",
    "birthday": "1971-12-27",
    "death": "2002-09-20",
    "age": 30,
    "birthplace": "Москва, СССР",
    "deathplace": "Кармадонское ущелье, Северная Осетия, Россия",
    "profession": "Актер, Режиссер, Сценарист",
    "facts": [
        "Окончил исторический факультет МГУ.",
        "Вел программу «Взгляд».",
        "Погиб при сходе ледника Колка.",
        "Снимался у Балабанова в дилогии «Брат».",
        "Сын режиссера Сергея Бодрова.",
        "Лауреат премии «Ника».",
    ],
    "films": [
        {
            "filmId": 41519,
            "nameRu": "Брат",
            "nameEn": "Brother",
            "rating": 8.3,
            "general": False,
            "description": "Данила Багров",
            "professionKey": "ACTOR",
        }
    ],
}

# GET /v2.2/films/464963/seasons
SEASONS_GOT_RESPONSE = {
    "total": 2,
    "items": [
        {
            "number": 1,
            "episodes": [
                {
                    "seasonNumber": 1,
                    "episodeNumber": 2,
                    "nameRu": "Королевский тракт",
                    "nameEn": "The Kingsroad",
                    "synopsis": None,
                    "releaseDate": "2011-04-24",
                },
                {
                    "seasonNumber": 1,
                    "episodeNumber": 1,
                    "nameRu": "Зима близко",
                    "nameEn": "Winter Is Coming",
                    "synopsis": "Лорд Старк получает приглашение короля...",
                    "releaseDate": "2011-04-17",
                },
            ],
        },
        {
            "number": 2,
            "episodes": [
                {
                    "seasonNumber": 2,
                    "episodeNumber": 1,
                    "nameRu": None,
                    "nameEn": "The North Remembers",
                    "synopsis": None,
                    "releaseDate": None,
                },
            ],
        },
    ],
}

# GET /v2.2/films/41519/images?type=STILL
IMAGES_STILL_RESPONSE = {
    "total": 7,
    "totalPages": 1,
    "items": [
        {
            "imageUrl": f"https://avatars.mds.yandex.net/get-kinopoisk-image/still_{i}.jpg",
            "previewUrl": f"https://avatars.mds.yandex.net/get-kinopoisk-image/still_{i}_small.jpg",
        }
        for i in range(7)
    ],
}

# GET /v2.2/films/41519/videos
VIDEOS_BRAT_RESPONSE = {
    "total": 1,
    "items": [
        {
            "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "name": "Трейлер",
            "site": "YOUTUBE",
        }
    ],
}
