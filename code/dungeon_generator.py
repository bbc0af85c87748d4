"""DungeonGenerator wires configuration, sampling and the chain builder together."""

from __future__ import annotations

from time import perf_counter
from typing import List, Optional

from chain_builder import RoomChainBuilder
from dungeon_config import DungeonConfig
from dungeon_models import Room
from metrics import GenerationMetrics
from sampling import IntSampler, RandomSampler


class DungeonGenerator:
    """Manages the overall process of generating a dungeon floor layout."""

    def __init__(self, config: DungeonConfig, sampler: Optional[IntSampler] = None) -> None:
        self.config = config
        self.sampler = sampler if sampler is not None else RandomSampler(config.random_seed)
        self.metrics = GenerationMetrics() if config.collect_metrics else None
        self.rooms: List[Room] = []

    def generate(self) -> List[Room]:
        """Builds the room chain, ordered from the entrance to the exit."""
        builder = RoomChainBuilder(self.config, self.sampler, self.metrics)
        start = perf_counter()
        try:
            self.rooms = builder.build(anchor=self.config.origin)
        finally:
            if self.metrics is not None:
                self.metrics.total_time += perf_counter() - start
        return self.rooms


def generate_dungeon(
    config: Optional[DungeonConfig] = None,
    sampler: Optional[IntSampler] = None,
) -> List[Room]:
    """Generate a dungeon with the default parameters unless overridden."""
    return DungeonGenerator(config if config is not None else DungeonConfig(), sampler).generate()
