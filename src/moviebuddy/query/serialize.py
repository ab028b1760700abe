from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from moviebuddy.catalog.entities import Movie, User


def _public_fields(entity: Movie | User) -> dict[str, Any]:
    if isinstance(entity, Movie):
        return {"_id": entity.id, "title": entity.title, "genre": entity.genre, "actors": entity.actors}
    if isinstance(entity, User):
        return {"_id": entity.id, "name": entity.name}
    raise TypeError(f"cannot serialize {type(entity).__name__}")


def serialize(entity: Movie | User) -> str:
    return json.dumps(_public_fields(entity), ensure_ascii=False)


def serialize_list(entities: Iterable[Movie | User]) -> str:
    return "[" + ",".join(serialize(e) for e in entities) + "]"
