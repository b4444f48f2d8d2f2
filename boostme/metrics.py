from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import pandas as pd


def _score(item):
    try:
        return float(item.get("score"))
    except (TypeError, ValueError):
        return None


def _round_half_up(value, places="0.1"):
    return float(Decimal(str(value)).quantize(Decimal(places), rounding=ROUND_HALF_UP))


def compute_stats(logs, missions_completed=0):
    total = len(logs)
    # Records with an unreadable score still count as check-ins.
    scores = [score for score in (_score(item) for item in logs) if score is not None]
    avg = _round_half_up(sum(scores) / len(scores)) if scores else 0
    return {
        "totalCheckIns": total,
        "avgConfidence": avg,
        "totalMissionsCompleted": int(missions_completed or 0),
    }


def mission_progress(missions):
    total = len(missions)
    completed = sum(1 for item in missions if item.get("completed"))
    percent = _round_half_up((completed / total) * 100) if total > 0 else 0
    return completed, total, percent


def confidence_frame(logs):
    """Oldest-first frame of date/score/mood for the journey chart."""
    frame = pd.DataFrame(logs, columns=["date", "score", "mood"])
    if frame.empty:
        return frame
    frame["date"] = pd.to_datetime(frame["date"], errors="coerce")
    frame["score"] = pd.to_numeric(frame["score"], errors="coerce")
    frame = frame.dropna(subset=["date", "score"])
    frame = frame.drop_duplicates(subset=["date"], keep="first")
    return frame.sort_values("date").reset_index(drop=True)
