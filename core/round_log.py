from __future__ import annotations
import csv, os
from typing import Optional

from .interfaces import RoundResult

FIELDS = ["round", "score", "reason", "ticks", "elapsed"]

class RoundLogger:
    """Append-only CSV log of finished rounds (one row per failure)."""
    def __init__(self, path: str, verbose: bool = False):
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)
        self.path = path
        self.verbose = verbose
        self._file = open(path, "a", newline="")
        self._writer = csv.DictWriter(self._file, fieldnames=FIELDS, extrasaction="ignore")
        if self._file.tell() == 0:
            self._writer.writeheader()

    def log_round(self, result: RoundResult, elapsed: Optional[float] = None) -> None:
        self._writer.writerow({
            "round": result.round_index,
            "score": result.score,
            "reason": result.reason,
            "ticks": result.ticks,
            "elapsed": "" if elapsed is None else f"{elapsed:.3f}",
        })
        if self.verbose:
            print(f"[round {result.round_index}] score={result.score} reason={result.reason} ticks={result.ticks}")
        self.flush()

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()

class ConsoleRoundLogger:
    """Round summaries printed to stdout only."""
    def log_round(self, result: RoundResult, elapsed: Optional[float] = None) -> None:
        print(f"[round {result.round_index}] score={result.score} reason={result.reason} ticks={result.ticks}")

    def close(self) -> None:
        pass
