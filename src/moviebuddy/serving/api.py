from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Literal

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from moviebuddy.catalog.errors import InvalidPattern, UnknownEntity
from moviebuddy.catalog.index import Catalog
from moviebuddy.config.logging import configure_logging
from moviebuddy.config.settings import Settings, settings
from moviebuddy.data.loader import load_catalog_from_settings
from moviebuddy.query.ratings import record_rating
from moviebuddy.query.search import Kind, search
from moviebuddy.query.serialize import serialize, serialize_list
from moviebuddy.query.similarity import shared_movies, similarity
from moviebuddy.serving.schemas import HealthResponse, RatingRequest

logger = logging.getLogger(__name__)

MovieField = Literal["title", "actors", "genre"]


def _catalog(request: Request) -> Catalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=503, detail="Catalog not loaded")
    return catalog


def _unknown(exc: UnknownEntity) -> HTTPException:
    logger.info("rejected request: %s", exc)
    return HTTPException(status_code=404, detail=str(exc))


def create_app(cfg: Settings | None = None, catalog: Catalog | None = None) -> FastAPI:
    """
    Build the HTTP app. The catalog is loaded from `cfg` at startup unless one
    is passed in; a load failure aborts startup.
    """
    cfg = cfg or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # entry points configure logging first; only fill in when nobody has
        if not logging.getLogger().handlers:
            configure_logging(cfg.log_level)
        app.state.catalog = catalog if catalog is not None else load_catalog_from_settings(cfg)
        logger.info("serving catalog from %s", cfg.data_dir)
        yield

    app = FastAPI(title="moviebuddy", version="1.0.0", lifespan=lifespan)

    def _search(request: Request, kind: Kind, field: str, pattern: str, limit: int) -> str:
        try:
            found = search(_catalog(request), kind, field, pattern, limit, fold_fields=cfg.search_fold_fields)
        except InvalidPattern as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        return serialize_list(found)

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request):
        catalog_ = _catalog(request)
        return {"status": "ok", "movies": len(catalog_.movies), "users": len(catalog_.users)}

    @app.get("/movies", response_class=PlainTextResponse)
    def list_movies(request: Request) -> str:
        return serialize_list(_catalog(request).movies)

    @app.get("/movies/{movie_id}", response_class=PlainTextResponse)
    def get_movie(request: Request, movie_id: int) -> str:
        movie = _catalog(request).find_movie_by_id(movie_id)
        return serialize(movie) if movie is not None else ""

    @app.get("/movies/search/{field}/{pattern}/{limit}", response_class=PlainTextResponse)
    def search_movies(request: Request, field: MovieField, pattern: str, limit: int) -> str:
        return _search(request, "movies", field, pattern, limit)

    @app.get("/users", response_class=PlainTextResponse)
    def list_users(request: Request) -> str:
        return serialize_list(_catalog(request).users)

    @app.get("/users/{user_id}", response_class=PlainTextResponse)
    def get_user(request: Request, user_id: int) -> str:
        user = _catalog(request).find_user_by_id(user_id)
        return serialize(user) if user is not None else ""

    @app.get("/users/search/{pattern}/{limit}", response_class=PlainTextResponse)
    def search_users(request: Request, pattern: str, limit: int) -> str:
        return _search(request, "users", "name", pattern, limit)

    @app.post("/rates", status_code=201)
    def rate(request: Request, req: RatingRequest) -> Response:
        try:
            record_rating(_catalog(request), req.userId, req.movieId, req.rate)
        except UnknownEntity as e:
            raise _unknown(e) from e
        return Response(status_code=201)

    @app.get("/users/share/{user_id1}/{user_id2}", response_class=PlainTextResponse)
    def share(request: Request, user_id1: int, user_id2: int) -> str:
        try:
            return serialize_list(shared_movies(_catalog(request), user_id1, user_id2))
        except UnknownEntity as e:
            raise _unknown(e) from e

    @app.get("/users/distance/{user_id1}/{user_id2}", response_class=PlainTextResponse)
    def distance(request: Request, user_id1: int, user_id2: int) -> str:
        try:
            return str(similarity(_catalog(request), user_id1, user_id2))
        except UnknownEntity as e:
            raise _unknown(e) from e

    return app


app = create_app()
