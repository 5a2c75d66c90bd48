# tests/test_run_log.py
import csv

from core.run_log import CSVRunLog, RUN_FIELDS


def _finish(engine, place, reason_cell):
    place(engine, [reason_cell], food=(0, 0), direction=(1, 0))
    return engine.tick().snapshot

def test_rows_appended_with_single_header(tmp_path, engine, place):
    path = tmp_path / "runs" / "log.csv"
    log = CSVRunLog(str(path))
    log.log_run(_finish(engine, place, (9, 5)))
    log.close()

    engine.initialize()
    log = CSVRunLog(str(path))
    log.log_run(_finish(engine, place, (9, 2)))
    log.close()

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == RUN_FIELDS
    assert [r["reason"] for r in rows] == ["wall", "wall"]
    assert rows[0]["score"] == "0"
    assert rows[0]["wrap"] == "0"

def test_run_numbers_continue_across_sessions(tmp_path, engine, place):
    path = str(tmp_path / "log.csv")
    for row in range(3):
        log = CSVRunLog(path)
        engine.initialize()
        log.log_run(_finish(engine, place, (9, row)))
        log.close()

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["run"] for r in rows] == ["1", "2", "3"]
