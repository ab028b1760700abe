from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Service configuration.

    Values can be overridden via environment variables using the `MOVIEBUDDY_` prefix.
    For example:
      - MOVIEBUDDY_DATA_DIR=/srv/moviebuddy/db
      - MOVIEBUDDY_PORT=8080
    """

    model_config = SettingsConfigDict(env_prefix="MOVIEBUDDY_")

    # Where movies.json / users.json live
    data_dir: str = "db"
    movies_file: str = "movies.json"
    users_file: str = "users.json"

    host: str = "localhost"
    port: int = 3000

    log_level: str = "INFO"

    # Also lower-case the searched field, not only the pattern
    search_fold_fields: bool = False

    @property
    def movies_path(self) -> Path:
        return Path(self.data_dir) / self.movies_file

    @property
    def users_path(self) -> Path:
        return Path(self.data_dir) / self.users_file


settings = Settings()
