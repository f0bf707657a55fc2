"""
Mock upcoming movies API responses for testing.

Realistic payloads of the lists/movies/upcoming endpoint, used with respx
to mock httpx calls in tests.
"""

API_BASE = "http://api.test/api/public"
PAGE_2_URL = "http://api.test/api/public/v1.0/lists/movies/upcoming.json?page_limit=10&page=2&country=us"
PAGE_3_URL = "http://api.test/api/public/v1.0/lists/movies/upcoming.json?page_limit=10&page=3&country=us"

MOVIE_FURIOSA = {
    "id": "771572135",
    "title": "Furiosa: A Mad Max Saga",
    "year": 2024,
    "mpaa_rating": "R",
    "runtime": 148,
    "critics_consensus": "",
    "release_dates": {"theater": "2024-05-24"},
    "ratings": {"critics_score": -1, "audience_score": 96, "audience_rating": "Upright"},
    "synopsis": "As the world fell, young Furiosa is snatched from the Green Place.",
    "posters": {
        "thumbnail": "http://content.example/furiosa_mob.jpg",
        "profile": "http://content.example/furiosa_pro.jpg",
        "detailed": "http://content.example/furiosa_det.jpg",
        "original": "http://content.example/furiosa_ori.jpg",
    },
    "abridged_cast": [
        {"name": "Anya Taylor-Joy", "id": "771450658", "characters": ["Furiosa"]},
        {"name": "Chris Hemsworth", "id": "770794440", "characters": ["Dementus"]},
    ],
    "alternate_ids": {"imdb": "12037194"},
    "links": {
        "self": "http://api.test/api/public/v1.0/movies/771572135.json",
        "alternate": "http://www.rottentomatoes.com/m/furiosa_a_mad_max_saga/",
        "cast": "http://api.test/api/public/v1.0/movies/771572135/cast.json",
    },
}

MOVIE_GARFIELD = {
    "id": "771610543",
    "title": "The Garfield Movie",
    "year": 2024,
    "mpaa_rating": "PG",
    "runtime": 101.5,
    "release_dates": {"theater": "2024-05-24", "dvd": "2024-08-13"},
    "ratings": {"critics_score": 38},
    "synopsis": "Garfield is about to have a wild outdoor adventure.",
    "posters": {"thumbnail": "http://content.example/garfield_mob.jpg"},
    "abridged_cast": [
        {"name": "Chris Pratt", "id": "162667740", "characters": ["Garfield"]},
    ],
    "links": {"self": "http://api.test/api/public/v1.0/movies/771610543.json"},
}

MOVIE_IF = {
    "id": "771578431",
    "title": "IF",
    "year": 2024,
    "mpaa_rating": "PG",
    "runtime": 104,
    "release_dates": {"theater": "2024-05-17"},
    "ratings": {},
    "synopsis": "A girl discovers she can see everyone's imaginary friends.",
    "posters": {},
    "abridged_cast": [],
    "links": {},
}

LINK_TEMPLATE = (
    "http://api.test/api/public/v1.0/lists/movies/upcoming.json"
    "?page_limit={results-per-page}&page={page-number}&country={country-code}"
)

# GET /v1.0/lists/movies/upcoming/json?apikey=...&page_limit=10&page=1
UPCOMING_PAGE_1 = {
    "total": 25,
    "movies": [MOVIE_FURIOSA, MOVIE_GARFIELD],
    "links": {
        "self": "http://api.test/api/public/v1.0/lists/movies/upcoming.json?page_limit=10&page=1&country=us",
        "next": PAGE_2_URL,
    },
    "link_template": LINK_TEMPLATE,
}

# Last page: no "next" link
UPCOMING_PAGE_2_LAST = {
    "total": 25,
    "movies": [MOVIE_IF],
    "links": {},
    "link_template": LINK_TEMPLATE,
}

# Intermediate page pointing to page 3
UPCOMING_PAGE_2 = {
    "total": 25,
    "movies": [MOVIE_IF],
    "links": {"next": PAGE_3_URL},
    "link_template": LINK_TEMPLATE,
}

UPCOMING_PAGE_3_LAST = {
    "total": 25,
    "movies": [],
    "link_template": LINK_TEMPLATE,
}

UPCOMING_EMPTY = {"total": 0, "movies": [], "links": None, "link_template": ""}
