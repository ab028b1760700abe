from __future__ import annotations

import logging

from moviebuddy.catalog.index import Catalog

logger = logging.getLogger(__name__)


def record_rating(catalog: Catalog, user_id: int, movie_id: int, rating: int) -> None:
    """Store `rating` for the movie on the user's rating store, replacing any earlier one."""
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise TypeError(f"rating must be an int, got {rating!r}")
    user = catalog.require_user(user_id)
    movie = catalog.require_movie(movie_id)
    user.rate(movie, rating)
    logger.debug("user %d rated movie %d: %d", user_id, movie_id, rating)
