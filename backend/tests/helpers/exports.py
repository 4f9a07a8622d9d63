"""Sample workout exports used by parser and API tests."""

from __future__ import annotations

HEVY_HEADER = (
    '"title","start_time","end_time","description","exercise_title","superset_id",'
    '"exercise_notes","set_index","set_type","weight_kg","reps","distance_km",'
    '"duration_seconds","rpe"'
)


def hevy_row(
    title: str,
    start_time: str,
    exercise: str,
    set_type: str = "normal",
    weight: str = "",
    reps: str = "",
    rpe: str = "",
    set_index: int = 0,
) -> str:
    """Render one Hevy CSV row with every column quoted."""

    values = [
        title,
        start_time,
        start_time,
        "",
        exercise,
        "",
        "",
        str(set_index),
        set_type,
        weight,
        reps,
        "",
        "",
        rpe,
    ]
    return ",".join(f'"{v}"' for v in values)


# Older workout first; parsers must return the newest first.
HEVY_CSV = "\n".join(
    [
        HEVY_HEADER,
        hevy_row("Leg Day", "19 Dec 2025, 09:00", "Squat (Barbell)", "failure", "140", "3"),
        hevy_row("Leg Day", "19 Dec 2025, 09:00", "", "normal", "0", "0", set_index=1),
        hevy_row("Push Day", "21 Dec 2025, 14:29", "Bench Press (Barbell)", "warmup", "60", "10"),
        hevy_row(
            "Push Day",
            "21 Dec 2025, 14:29",
            "Bench Press (Barbell)",
            "normal",
            "100",
            "5",
            "8.5",
            set_index=1,
        ),
        hevy_row(
            "Push Day", "21 Dec 2025, 14:29", "Lateral raise Domar", "dropset", "10", "12", set_index=2
        ),
    ]
)

STRONG_CSV = "Date,Workout Name,Exercise Name,Set Order,Weight,Reps\n2025-12-21,Push,Bench Press,1,100,5\n"
