from __future__ import annotations

import pytest

from moviebuddy.catalog.index import Catalog, load_catalog

MOVIE_RECORDS = [
    {"_id": 603, "title": "The Matrix", "genre": "Action, Sci-Fi", "actors": "Keanu Reeves, Laurence Fishburne"},
    {"_id": 13, "title": "Forrest Gump", "genre": "Comedy, Drama", "actors": "Tom Hanks, Robin Wright"},
    {"_id": 680, "title": "Pulp Fiction", "genre": "Crime, Thriller", "actors": "John Travolta, Uma Thurman"},
    {"_id": 862, "title": "toy story", "genre": "Animation, Comedy", "actors": "Tom Hanks, Tim Allen"},
]

USER_RECORDS = [
    {"_id": 3, "name": "carol"},
    {"_id": 1, "name": "alice"},
    {"_id": 2, "name": "bob"},
    {"_id": 4, "name": "Dave"},
]


@pytest.fixture
def catalog() -> Catalog:
    return load_catalog(MOVIE_RECORDS, USER_RECORDS)
