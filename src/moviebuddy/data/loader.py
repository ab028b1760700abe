from __future__ import annotations

import logging
from pathlib import Path

from moviebuddy.catalog.index import Catalog, load_catalog
from moviebuddy.config.settings import Settings
from moviebuddy.data.preprocess import load_raw_catalog, preprocess, to_records

logger = logging.getLogger(__name__)


def load_catalog_from_files(movies_path: str | Path, users_path: str | Path) -> Catalog:
    """Read, clean and index both datasets. Any failure here is fatal to startup."""
    movies_raw, users_raw = load_raw_catalog(Path(movies_path), Path(users_path))
    data = preprocess(movies_raw, users_raw)
    logger.info("loaded %s (%d movies) and %s (%d users)", movies_path, len(data.movies), users_path, len(data.users))
    return load_catalog(to_records(data.movies), to_records(data.users))


def load_catalog_from_settings(cfg: Settings) -> Catalog:
    return load_catalog_from_files(cfg.movies_path, cfg.users_path)
