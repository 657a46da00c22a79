from __future__ import annotations
import sys, time
from dataclasses import dataclass, field


@dataclass
class RunContext:
    """
    Per-attempt bookkeeping for progress messages and timing stats.
    A fresh one is built for every attempt; nothing here outlives a run.
    """
    verbose: bool = False
    stats: bool = False
    attempt: int = 1
    rounds: int = 0
    fetched: int = 0
    kept: int = 0
    started_at: float = field(default_factory=time.perf_counter)

    def record_round(self, fetched: int, kept: int) -> None:
        self.rounds += 1
        self.fetched += fetched
        self.kept += kept
        self.log(f"\nRound {self.rounds}: kept {kept}/{fetched} record(s), {self.kept} so far.")

    def elapsed(self) -> float:
        return time.perf_counter() - self.started_at

    def log(self, message: str) -> None:
        if self.verbose:
            print(message, file=sys.stderr)
