"""Helpers for collecting instrumentation data during dungeon generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass
class GenerationMetrics:
    """Counters recorded while a chain is being built."""

    placement_attempts: int = 0
    collisions: int = 0
    rooms_placed: int = 0
    budget_exhausted: bool = False
    total_time: float = 0.0

    def record_attempt(self, collided: bool) -> None:
        self.placement_attempts += 1
        if collided:
            self.collisions += 1
        else:
            self.rooms_placed += 1

    @property
    def collision_rate(self) -> float:
        return self.collisions / self.placement_attempts if self.placement_attempts else 0.0

    def snapshot(self) -> Dict[str, float | int | bool]:
        return {
            "placement_attempts": self.placement_attempts,
            "collisions": self.collisions,
            "collision_rate": self.collision_rate,
            "rooms_placed": self.rooms_placed,
            "budget_exhausted": self.budget_exhausted,
            "total_time": self.total_time,
        }
