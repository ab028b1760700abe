from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, order=True)
class Movie:
    id: int
    title: str = field(default="", compare=False)
    genre: str = field(default="", compare=False)
    actors: str = field(default="", compare=False)


class RatingStore(Mapping[Movie, int]):
    """
    Immutable mapping movie -> rating for one user.

    Writes go through `with_rating`, which returns a new store; the old one is
    never touched, so a reader holding a reference always sees a complete map.
    """

    __slots__ = ("_rates",)

    def __init__(self, rates: Mapping[Movie, int] | None = None) -> None:
        self._rates = MappingProxyType(dict(rates or {}))

    def with_rating(self, movie: Movie, rating: int) -> RatingStore:
        rates = dict(self._rates)
        rates[movie] = rating
        return RatingStore(rates)

    def __getitem__(self, movie: Movie) -> int:
        return self._rates[movie]

    def __iter__(self) -> Iterator[Movie]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"RatingStore({dict(self._rates)!r})"


@dataclass(order=True, unsafe_hash=True)
class User:
    id: int
    name: str = field(default="", compare=False)
    # None until the first rating; distinct from an empty store
    rates: RatingStore | None = field(default=None, compare=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, compare=False, repr=False)

    def rate(self, movie: Movie, rating: int) -> None:
        with self._lock:
            current = self.rates if self.rates is not None else RatingStore()
            self.rates = current.with_rating(movie, rating)
