from boostme.metrics import compute_stats, confidence_frame, mission_progress


def test_compute_stats_empty():
    assert compute_stats([]) == {"totalCheckIns": 0, "avgConfidence": 0, "totalMissionsCompleted": 0}


def test_compute_stats_rounds_average():
    logs = [{"score": 7}, {"score": 8}, {"score": 8}]
    stats = compute_stats(logs, missions_completed=4)
    assert stats["totalCheckIns"] == 3
    assert stats["avgConfidence"] == 7.7
    assert stats["totalMissionsCompleted"] == 4


def test_mission_progress():
    missions = [{"completed": True}, {"completed": False}, {"completed": False}]
    assert mission_progress(missions) == (1, 3, 33.3)
    assert mission_progress([]) == (0, 0, 0)


def test_confidence_frame_sorted_oldest_first_and_deduped():
    logs = [
        {"date": "2024-05-03", "score": 6, "mood": "tired"},
        {"date": "2024-05-01", "score": 4, "mood": "sad"},
        {"date": "2024-05-03", "score": 9, "mood": "confident"},
    ]
    frame = confidence_frame(logs)
    assert list(frame["score"]) == [4, 6]
    assert frame["date"].iloc[0].strftime("%Y-%m-%d") == "2024-05-01"


def test_confidence_frame_empty():
    assert confidence_frame([]).empty


def test_compute_stats_keeps_stored_counter():
    stats = compute_stats([{"score": 10}, {"score": 4}], missions_completed=2)
    assert stats == {"totalCheckIns": 2, "avgConfidence": 7.0, "totalMissionsCompleted": 2}


def test_compute_stats_rounds_halves_up():
    logs = [{"score": 6}, {"score": 6}, {"score": 6}, {"score": 7}]
    assert compute_stats(logs)["avgConfidence"] == 6.3


def test_compute_stats_skips_unreadable_scores():
    logs = [{"score": 8}, {"score": "high"}, {"mood": "sad"}, {"score": 5}]
    stats = compute_stats(logs)
    assert stats["totalCheckIns"] == 4
    assert stats["avgConfidence"] == 6.5

    assert compute_stats([{"score": None}])["avgConfidence"] == 0
