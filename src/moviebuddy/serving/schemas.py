"""Pydantic schemas for the HTTP transport."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RatingRequest(BaseModel):
    """Body of `POST /rates`. Ids and rate may arrive as JSON strings or numbers."""

    userId: int = Field(..., description="User `_id` from users.json")
    movieId: int = Field(..., description="Movie `_id` from movies.json")
    rate: int = Field(..., description="Integer rating; replaces any earlier rating of the movie")


class HealthResponse(BaseModel):
    status: str
    movies: int
    users: int
