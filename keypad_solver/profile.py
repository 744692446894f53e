# keypad_solver/profile.py
# Simple profiling helpers for optimizer runs.
# Enough to see how long each chain depth takes.

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator


@dataclass
class PhaseTimer:
    name: str
    start: float = field(default_factory=time.perf_counter)
    elapsed: float = 0.0

    def stop(self) -> None:
        self.elapsed = time.perf_counter() - self.start


class Profiler:
    def __init__(self) -> None:
        self.phases: Dict[str, PhaseTimer] = {}

    def start(self, name: str) -> None:
        self.phases[name] = PhaseTimer(name=name)

    def stop(self, name: str) -> None:
        if name in self.phases:
            self.phases[name].stop()

    @contextmanager
    def phase(self, name: str) -> Iterator[PhaseTimer]:
        self.start(name)
        try:
            yield self.phases[name]
        finally:
            self.stop(name)

    def total(self) -> float:
        return sum(pt.elapsed for pt in self.phases.values())

    def report(self) -> str:
        lines = ["--- Keypad optimizer profile ---"]
        for name, pt in self.phases.items():
            lines.append(f"{name:20s}: {pt.elapsed:8.4f} s")
        lines.append(f"{'TOTAL':20s}: {self.total():8.4f} s")
        return "\n".join(lines)
