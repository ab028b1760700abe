from __future__ import annotations

import numpy as np

from moviebuddy.catalog.entities import Movie
from moviebuddy.catalog.index import Catalog


def shared_movies(catalog: Catalog, user_id1: int, user_id2: int) -> list[Movie]:
    """Movies rated by both users, ordered by id. Empty if either user never rated anything."""
    user1 = catalog.require_user(user_id1)
    user2 = catalog.require_user(user_id2)

    rates1, rates2 = user1.rates, user2.rates
    if rates1 is None or rates2 is None:
        return []
    return sorted(rates1.keys() & rates2.keys())


def similarity(catalog: Catalog, user_id1: int, user_id2: int) -> float:
    """
    1 / (1 + euclidean distance) between the ratings the two users share.

    Comparing a user with itself, or with a user that never rated anything,
    gives 0.0. Two users with rating stores but no movie in common get 1.0,
    since the distance over an empty overlap is zero.
    """
    user1 = catalog.require_user(user_id1)
    user2 = catalog.require_user(user_id2)

    # one reference read each; concurrent writers swap in new stores
    rates1, rates2 = user1.rates, user2.rates
    if user1 is user2 or rates1 is None or rates2 is None:
        return 0.0

    # walk the smaller store; squared differences are symmetric
    small, large = (rates1, rates2) if len(rates1) <= len(rates2) else (rates2, rates1)
    diffs = np.array(
        [rate - large[movie] for movie, rate in small.items() if movie in large],
        dtype=np.float64,
    )
    sum_of_squares = float(np.sum(diffs * diffs))
    return 1.0 / (1.0 + float(np.sqrt(sum_of_squares)))
