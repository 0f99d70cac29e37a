import csv

from core.interfaces import RoundResult
from core.round_log import RoundLogger, ConsoleRoundLogger

def _rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))

def test_rounds_append_with_single_header(tmp_path):
    path = tmp_path / "logs" / "rounds.csv"
    log = RoundLogger(str(path))
    log.log_round(RoundResult(0, 4, "wall", 40), elapsed=12.5)
    log.close()

    log = RoundLogger(str(path))
    log.log_round(RoundResult(1, 0, "self", 3))
    log.close()

    rows = _rows(path)
    assert [r["round"] for r in rows] == ["0", "1"]
    assert rows[0]["score"] == "4"
    assert rows[0]["reason"] == "wall"
    assert rows[0]["elapsed"] == "12.500"
    assert rows[1]["elapsed"] == ""

def test_verbose_prints_summary(tmp_path, capsys):
    log = RoundLogger(str(tmp_path / "r.csv"), verbose=True)
    log.log_round(RoundResult(2, 9, "self", 77))
    log.close()
    assert "[round 2] score=9 reason=self ticks=77" in capsys.readouterr().out

def test_console_logger(capsys):
    ConsoleRoundLogger().log_round(RoundResult(0, 1, "wall", 5))
    assert "score=1" in capsys.readouterr().out

def test_rows_are_on_disk_before_close(tmp_path):
    path = tmp_path / "rounds.csv"
    log = RoundLogger(str(path))
    log.log_round(RoundResult(0, 2, "wall", 21))
    rows = _rows(path)
    log.close()
    assert len(rows) == 1
    assert rows[0]["ticks"] == "21"
