from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

MOVIE_COLUMNS = ["_id", "title", "genre", "actors"]
USER_COLUMNS = ["_id", "name"]


@dataclass(frozen=True)
class PreprocessedData:
    movies: pd.DataFrame
    users: pd.DataFrame


def _read_json(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"catalog data file not found: {path}")
    # .jsonl holds one object per line, anything else a single JSON array
    return pd.read_json(path, lines=path.suffix == ".jsonl", dtype=False)


def load_raw_catalog(movies_path: Path, users_path: Path) -> tuple[pd.DataFrame, pd.DataFrame]:
    return _read_json(Path(movies_path)), _read_json(Path(users_path))


def _clean(df: pd.DataFrame, columns: list[str], what: str) -> pd.DataFrame:
    if df.empty and len(df.columns) == 0:
        return pd.DataFrame(columns=columns)

    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"{what} data missing required columns: {missing}")

    df = df.dropna(subset=["_id"]).copy()
    df["_id"] = df["_id"].astype(int)
    for col in columns[1:]:
        df[col] = df[col].fillna("").astype(str)

    dupes = df["_id"][df["_id"].duplicated()]
    if not dupes.empty:
        raise ValueError(f"duplicate {what} ids: {sorted(set(dupes.tolist()))}")
    return df[columns]


def preprocess(movies: pd.DataFrame, users: pd.DataFrame) -> PreprocessedData:
    return PreprocessedData(
        movies=_clean(movies, MOVIE_COLUMNS, "movie"),
        users=_clean(users, USER_COLUMNS, "user"),
    )


def to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    return [
        {k: (int(v) if k == "_id" else v) for k, v in row.items()}
        for row in df.to_dict(orient="records")
    ]
