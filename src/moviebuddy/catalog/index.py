from __future__ import annotations

import logging
from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from moviebuddy.catalog.entities import Movie, User
from moviebuddy.catalog.errors import UnknownEntity

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _entity_id(entity: Any) -> int:
    return entity.id


class SortedIndex(Generic[T]):
    """
    Items sorted once by an integer key, looked up by binary search.

    Shared by movies and users; the key defaults to the entity `id`.
    """

    def __init__(self, items: Iterable[T], key: Callable[[T], int] = _entity_id) -> None:
        self._key = key
        self._items: tuple[T, ...] = tuple(sorted(items, key=key))
        for prev, cur in zip(self._items, self._items[1:]):
            if key(prev) == key(cur):
                raise ValueError(f"duplicate id in catalog: {key(cur)}")

    def find(self, key: int) -> T | None:
        i = bisect_left(self._items, key, key=self._key)
        if i < len(self._items) and self._key(self._items[i]) == key:
            return self._items[i]
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i: int) -> T:
        return self._items[i]


@dataclass(frozen=True)
class Catalog:
    """Identifier-sorted movies and users; read-only apart from user rating stores."""

    movies: SortedIndex[Movie]
    users: SortedIndex[User]

    def find_movie_by_id(self, movie_id: int) -> Movie | None:
        return self.movies.find(movie_id)

    def find_user_by_id(self, user_id: int) -> User | None:
        return self.users.find(user_id)

    def require_movie(self, movie_id: int) -> Movie:
        movie = self.find_movie_by_id(movie_id)
        if movie is None:
            raise UnknownEntity("movie", movie_id)
        return movie

    def require_user(self, user_id: int) -> User:
        user = self.find_user_by_id(user_id)
        if user is None:
            raise UnknownEntity("user", user_id)
        return user


def build_index(movies: Iterable[Movie], users: Iterable[User]) -> Catalog:
    catalog = Catalog(movies=SortedIndex(movies), users=SortedIndex(users))
    logger.info("catalog indexed: movies=%d users=%d", len(catalog.movies), len(catalog.users))
    return catalog


def _movie_from_record(rec: Mapping[str, Any]) -> Movie:
    return Movie(
        id=int(rec["_id"]),
        title=str(rec.get("title") or ""),
        genre=str(rec.get("genre") or ""),
        actors=str(rec.get("actors") or ""),
    )


def _user_from_record(rec: Mapping[str, Any]) -> User:
    return User(id=int(rec["_id"]), name=str(rec.get("name") or ""))


def load_catalog(
    movie_records: Sequence[Mapping[str, Any]],
    user_records: Sequence[Mapping[str, Any]],
) -> Catalog:
    """
    Build a catalog from already-parsed records.

    Records use the dataset field names: `_id`, `title`, `genre`, `actors` for
    movies and `_id`, `name` for users.
    """
    movies = [_movie_from_record(r) for r in movie_records]
    users = [_user_from_record(r) for r in user_records]
    return build_index(movies, users)
