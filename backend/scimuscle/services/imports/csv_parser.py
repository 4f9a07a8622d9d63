"""Workout CSV exports (Hevy) parsed with pandas."""

from __future__ import annotations

import calendar
import io
import logging
from datetime import datetime

import pandas as pd

from scimuscle.models.workout import SetType
from scimuscle.services._shared.normalization import normalize_id
from scimuscle.services.imports.dto import CsvFormat, ParseCsvResult, ParsedSet, ParsedWorkout

log = logging.getLogger(__name__)

# Hevy export format: "21 Dec 2025, 14:29"
HEVY_DATE_FORMAT = "%d %b %Y, %H:%M"
HEVY_COLUMNS = ("title", "start_time", "exercise_title", "set_type", "weight_kg", "reps", "rpe")

_EPOCH = datetime(1970, 1, 1)

_SET_TYPES = {
    "warmup": SetType.WARMUP,
    "failure": SetType.FAILURE,
    "dropset": SetType.DROP,
    "drop": SetType.DROP,
}


def detect_csv_format(text: str) -> CsvFormat:
    """Guess the exporting app from the header line."""
    header = text.split("\n", 1)[0].lower()
    if "exercise_title" in header and "start_time" in header:
        return "hevy"
    if "exercise name" in header and "workout name" in header:
        return "strong"
    return "unknown"


def map_set_type(value: str | None) -> SetType:
    return _SET_TYPES.get((value or "").strip().lower(), SetType.NORMAL)


def parse_hevy_date(value: str) -> datetime:
    """Parse a Hevy timestamp; unparseable values map to the Unix epoch."""
    parsed = pd.to_datetime(value, format=HEVY_DATE_FORMAT, errors="coerce")
    if pd.isna(parsed):
        return _EPOCH
    return parsed.to_pydatetime()


def workout_id_for(date: datetime) -> str:
    millis = calendar.timegm(date.timetuple()) * 1000
    return f"workout_{millis}"


def _read_frame(text: str) -> pd.DataFrame:
    if len(text.strip().splitlines()) < 2:
        return pd.DataFrame(columns=list(HEVY_COLUMNS))
    frame = pd.read_csv(
        io.StringIO(text.strip()), dtype=str, keep_default_na=False, index_col=False
    )
    frame.columns = [str(c).strip() for c in frame.columns]
    for column in HEVY_COLUMNS:
        if column not in frame.columns:
            frame[column] = ""
    return frame.apply(lambda col: col.str.strip())


def _parse_hevy(frame: pd.DataFrame) -> list[ParsedWorkout]:
    frame = frame[frame["start_time"] != ""]
    frame = frame.assign(
        weight_kg=pd.to_numeric(frame["weight_kg"], errors="coerce").fillna(0.0),
        reps=pd.to_numeric(frame["reps"], errors="coerce").fillna(0),
        rpe=pd.to_numeric(frame["rpe"], errors="coerce"),
    )

    workouts: list[ParsedWorkout] = []
    for start_time, group in frame.groupby("start_time", sort=False):
        rows = group[group["exercise_title"] != ""]
        if rows.empty:
            continue
        sets = tuple(
            ParsedSet(
                exercise_id=normalize_id(row.exercise_title),
                original_name=row.exercise_title,
                set_type=map_set_type(row.set_type),
                weight=float(row.weight_kg),
                reps=int(row.reps),
                rpe=None if pd.isna(row.rpe) else float(row.rpe),
            )
            for row in rows.itertuples(index=False)
        )
        date = parse_hevy_date(str(start_time))
        workouts.append(
            ParsedWorkout(id=workout_id_for(date), date=date, title=rows.iloc[0]["title"], sets=sets)
        )
    return workouts


def parse_csv(text: str) -> ParseCsvResult:
    """
    Parse a workout export.

    Rows are grouped into workouts by ``start_time``; rows without an
    exercise title are skipped. Only the Hevy format is understood, other
    formats yield no workouts.

    :param text: Raw CSV contents.
    :returns: Workouts sorted newest first, plus the detected format.
    """
    fmt = detect_csv_format(text)
    workouts: list[ParsedWorkout] = []
    if fmt == "hevy":
        workouts = _parse_hevy(_read_frame(text))
    workouts.sort(key=lambda w: w.date, reverse=True)
    log.debug("imports.parsed", extra={"format": fmt, "count": len(workouts)})
    return ParseCsvResult(workouts=workouts, format=fmt)


def extract_exercise_ids(workouts: list[ParsedWorkout]) -> set[str]:
    """Distinct exercise IDs referenced by ``workouts``."""
    return {s.exercise_id for w in workouts for s in w.sets}


__all__ = ["detect_csv_format", "parse_csv", "extract_exercise_ids", "map_set_type"]
