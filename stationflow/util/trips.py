# stationflow/util/trips.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

import pandas as pd
from tqdm import tqdm

from stationflow.traffic.types import TripRecord, normalize_station_id
from stationflow.util.console import done, step, warn

# logical column -> accepted headers (Bluebikes first, Bike Share Toronto second)
COLUMN_ALIASES = {
    "start_station_id": ("start_station_id", "Start Station Id"),
    "end_station_id": ("end_station_id", "End Station Id"),
    "started_at": ("started_at", "Start Time"),
    "ended_at": ("ended_at", "End Time"),
}


@dataclass
class TripLoadResult:
    trips: List[TripRecord]
    skipped: int


def _resolve_columns(df: pd.DataFrame) -> dict:
    colmap = {c.strip(): c for c in df.columns}
    resolved = {}
    for logical, aliases in COLUMN_ALIASES.items():
        col = next((colmap[a] for a in aliases if a in colmap), None)
        if col is None:
            raise ValueError(f"Trips CSV missing column for {logical!r} (tried {aliases})")
        resolved[logical] = col
    return resolved


def trips_from_frame(df: pd.DataFrame, *, progress: bool = True) -> TripLoadResult:
    """
    Convert a raw trips DataFrame into TripRecords.

    Rows with an unparseable timestamp or a missing station id are skipped
    and counted, never fatal.
    """
    cols = _resolve_columns(df)

    started = pd.to_datetime(df[cols["started_at"]], errors="coerce")
    ended = pd.to_datetime(df[cols["ended_at"]], errors="coerce")

    rows = zip(
        df[cols["start_station_id"]].tolist(),
        df[cols["end_station_id"]].tolist(),
        started.tolist(),
        ended.tolist(),
    )
    if progress:
        rows = tqdm(rows, total=len(df), desc="Reading trips")

    trips: List[TripRecord] = []
    skipped = 0
    for s0, s1, t0, t1 in rows:
        s0 = normalize_station_id(s0)
        s1 = normalize_station_id(s1)
        if s0 is None or s1 is None or pd.isna(t0) or pd.isna(t1):
            skipped += 1
            continue
        trips.append(
            TripRecord(
                start_station_id=s0,
                end_station_id=s1,
                started_at=t0.to_pydatetime(),
                ended_at=t1.to_pydatetime(),
            )
        )

    return TripLoadResult(trips=trips, skipped=skipped)


def load_trips(trips_csv: str | Path, *, progress: bool = True) -> TripLoadResult:
    step(f"Loading trips from {trips_csv}…")
    df = pd.read_csv(trips_csv, dtype=str, encoding="utf-8-sig")

    result = trips_from_frame(df, progress=progress)

    if result.skipped:
        warn(f"Skipped {result.skipped} malformed trip rows")
    done(f"Loaded {len(result.trips):,} trips")
    return result
