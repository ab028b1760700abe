from __future__ import annotations

import argparse
import sys
from pathlib import Path

from moviebuddy.catalog.errors import UnknownEntity
from moviebuddy.config.logging import configure_logging
from moviebuddy.config.settings import settings
from moviebuddy.data.loader import load_catalog_from_files
from moviebuddy.query.ratings import record_rating
from moviebuddy.query.search import search
from moviebuddy.query.serialize import serialize, serialize_list
from moviebuddy.query.similarity import shared_movies, similarity


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="moviebuddy", description="Query the movie catalog without the HTTP server")
    p.add_argument("--movies", type=Path, default=settings.movies_path, help="Path to movies.json")
    p.add_argument("--users", type=Path, default=settings.users_path, help="Path to users.json")
    p.add_argument("--log-level", default="WARNING")
    sub = p.add_subparsers(dest="command", required=True)

    movie = sub.add_parser("movie", help="Look up a movie by id")
    movie.add_argument("id", type=int)

    user = sub.add_parser("user", help="Look up a user by id")
    user.add_argument("id", type=int)

    find = sub.add_parser("search", help="Regex search over one text field")
    find.add_argument("kind", choices=["movies", "users"])
    find.add_argument("field", help="title/genre/actors for movies, name for users")
    find.add_argument("pattern")
    find.add_argument("--limit", type=int, default=10)
    find.add_argument("--fold-fields", action="store_true", default=settings.search_fold_fields)

    for name, help_ in (("share", "Movies both users rated"), ("distance", "Similarity of two users' ratings")):
        pair = sub.add_parser(name, help=help_)
        pair.add_argument("user_id1", type=int)
        pair.add_argument("user_id2", type=int)
        pair.add_argument(
            "--rate",
            action="append",
            default=[],
            metavar="USER:MOVIE:RATING",
            help="Record a rating before querying (repeatable); ratings are not persisted",
        )

    return p


def _parse_rate(spec: str) -> tuple[int, int, int]:
    try:
        user_id, movie_id, rating = (int(part) for part in spec.split(":"))
    except ValueError as e:
        raise ValueError(f"--rate expects USER:MOVIE:RATING, got {spec!r}") from e
    return user_id, movie_id, rating


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)
    catalog = load_catalog_from_files(args.movies, args.users)

    try:
        for spec in getattr(args, "rate", []):
            user_id, movie_id, rating = _parse_rate(spec)
            record_rating(catalog, user_id, movie_id, rating)

        if args.command == "movie":
            movie = catalog.find_movie_by_id(args.id)
            out = serialize(movie) if movie is not None else ""
        elif args.command == "user":
            user = catalog.find_user_by_id(args.id)
            out = serialize(user) if user is not None else ""
        elif args.command == "search":
            found = search(catalog, args.kind, args.field, args.pattern, args.limit, fold_fields=args.fold_fields)
            out = serialize_list(found)
        elif args.command == "share":
            out = serialize_list(shared_movies(catalog, args.user_id1, args.user_id2))
        else:
            out = str(similarity(catalog, args.user_id1, args.user_id2))
    except (UnknownEntity, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
