import pytest

from moviebuddy.catalog.entities import Movie, RatingStore, User
from moviebuddy.catalog.errors import UnknownEntity
from moviebuddy.catalog.index import build_index
from moviebuddy.query.ratings import record_rating
from moviebuddy.query.similarity import shared_movies, similarity


def _rate(catalog, user_id, ratings):
    for movie_id, rating in ratings.items():
        record_rating(catalog, user_id, movie_id, rating)


def test_identical_overlap_scores_one(catalog):
    _rate(catalog, 1, {603: 5, 13: 3})
    _rate(catalog, 2, {603: 5, 13: 3})

    assert similarity(catalog, 1, 2) == pytest.approx(1.0)
    assert [m.id for m in shared_movies(catalog, 1, 2)] == [13, 603]


def test_single_difference_of_four(catalog):
    _rate(catalog, 1, {603: 5})
    _rate(catalog, 2, {603: 1})

    assert similarity(catalog, 1, 2) == pytest.approx(0.2)


def test_only_shared_movies_contribute(catalog):
    _rate(catalog, 1, {603: 5, 13: 1, 680: 2})
    _rate(catalog, 2, {603: 2, 13: 5, 862: 4})

    # sqrt(3*3 + 4*4) == 5
    assert similarity(catalog, 1, 2) == pytest.approx(1 / 6)
    assert similarity(catalog, 2, 1) == pytest.approx(1 / 6)


def test_disjoint_stores_share_nothing_but_score_one(catalog):
    _rate(catalog, 1, {603: 5})
    _rate(catalog, 2, {13: 1})

    assert shared_movies(catalog, 1, 2) == []
    assert similarity(catalog, 1, 2) == 1.0


def test_self_comparison(catalog):
    _rate(catalog, 1, {603: 5, 680: 2})

    assert similarity(catalog, 1, 1) == 0.0
    assert [m.id for m in shared_movies(catalog, 1, 1)] == [603, 680]


def test_user_without_store(catalog):
    _rate(catalog, 1, {603: 5})

    assert similarity(catalog, 1, 3) == 0.0
    assert similarity(catalog, 3, 4) == 0.0
    assert shared_movies(catalog, 1, 3) == []
    assert shared_movies(catalog, 3, 3) == []


@pytest.mark.parametrize("ids", [(1, 99), (99, 1)])
def test_unknown_user(catalog, ids):
    with pytest.raises(UnknownEntity):
        similarity(catalog, *ids)
    with pytest.raises(UnknownEntity):
        shared_movies(catalog, *ids)


class _CountingStore(RatingStore):
    __slots__ = ("lookups",)

    def __init__(self, rates):
        super().__init__(rates)
        self.lookups = 0

    def __getitem__(self, movie):
        self.lookups += 1
        return super().__getitem__(movie)


def test_overlap_scan_walks_the_smaller_store():
    movies = [Movie(id=i) for i in range(300)]
    catalog = build_index(movies, [User(id=1, name="many"), User(id=2, name="one")])
    big = _CountingStore({m: 3 for m in movies})
    catalog.find_user_by_id(1).rates = big
    record_rating(catalog, 2, 7, 1)

    assert similarity(catalog, 1, 2) == pytest.approx(1 / 3)
    assert big.lookups <= 2

    big.lookups = 0
    assert similarity(catalog, 2, 1) == pytest.approx(1 / 3)
    assert big.lookups <= 2
