from __future__ import annotations

import re
from itertools import islice
from typing import Literal

from moviebuddy.catalog.entities import Movie, User
from moviebuddy.catalog.errors import InvalidPattern
from moviebuddy.catalog.index import Catalog

Kind = Literal["movies", "users"]

SEARCHABLE_FIELDS: dict[str, tuple[str, ...]] = {
    "movies": ("title", "genre", "actors"),
    "users": ("name",),
}


def compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern.lower())
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e


def search(
    catalog: Catalog,
    kind: Kind,
    field: str,
    pattern: str,
    limit: int,
    *,
    fold_fields: bool = False,
) -> list[Movie] | list[User]:
    """
    Entities of `kind` whose `field` contains a match for `pattern`.

    Only the pattern is lower-cased; the field is matched as stored unless
    `fold_fields` is set. Results keep catalog order and are capped at `limit`.
    """
    fields = SEARCHABLE_FIELDS.get(kind)
    if fields is None:
        raise ValueError(f"unknown collection: {kind!r}")
    if field not in fields:
        raise ValueError(f"cannot search {kind} by {field!r}; expected one of {list(fields)}")

    compiled = compile_pattern(pattern)
    if limit <= 0:
        return []

    collection = catalog.movies if kind == "movies" else catalog.users

    def _matches(entity: Movie | User) -> bool:
        text = getattr(entity, field)
        if fold_fields:
            text = text.lower()
        return compiled.search(text) is not None

    return list(islice(filter(_matches, collection), limit))
