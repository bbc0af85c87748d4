"""Grows the linear chain of rooms one placement at a time."""

from __future__ import annotations

from typing import Iterable, List, Optional

from chain_finalizer import finalize_chain
from dungeon_config import DungeonConfig
from dungeon_geometry import Direction, Point
from dungeon_models import Room
from metrics import GenerationMetrics
from room_builder import RoomCandidate, build_room_candidate
from sampling import IntSampler
from spatial_index import SpatialIndex


class RoomChainBuilder:
    """Place rooms door to door until the target is met or placement gives up.

    Every rejected candidate costs one unit of the retry budget at the current
    anchor. A successful placement refills the budget for the next anchor.
    Once the budget drops below zero the chain is closed with whatever rooms
    exist, so callers must not assume ``target_rooms`` rooms come back.
    """

    def __init__(
        self,
        config: DungeonConfig,
        sampler: IntSampler,
        metrics: Optional[GenerationMetrics] = None,
    ) -> None:
        self.config = config
        self.sampler = sampler
        self.metrics = metrics

    def build(
        self,
        rooms: Iterable[Room] = (),
        anchor: Optional[Point] = None,
        incoming: Optional[Direction] = None,
    ) -> List[Room]:
        """Grow a chain and return it finalized.

        ``rooms`` pre-seeds the chain; seeded rooms count toward the target and
        block placements like any other room.
        """
        chain = self.grow(rooms, anchor, incoming)
        return finalize_chain(chain)

    def grow(
        self,
        rooms: Iterable[Room] = (),
        anchor: Optional[Point] = None,
        incoming: Optional[Direction] = None,
    ) -> List[Room]:
        """Run the placement loop without finalizing the result."""
        target = self.config.target_rooms
        chain: List[Room] = list(rooms)
        index = SpatialIndex(chain)
        anchor = anchor if anchor is not None else self.config.origin
        retries = self.config.retry_budget

        if self.config.verbose:
            print(f"Attempting to place {target} rooms starting at {anchor.to_tuple()}...")

        for _ in range(self.config.max_placement_attempts):
            if len(chain) >= target or retries < 0:
                break
            candidate = build_room_candidate(anchor, incoming, self.config, self.sampler)
            collided = not index.is_area_clear(candidate.interior)
            if self.metrics is not None:
                self.metrics.record_attempt(collided)
            if collided:
                retries -= 1
                continue

            chain.append(candidate.room)
            index.add_room(candidate.room)
            anchor, incoming = self._advance(candidate)
            retries = self.config.retry_budget

        if retries < 0 and self.metrics is not None:
            self.metrics.budget_exhausted = True
        if self.config.verbose:
            print(f"Placed {len(chain)} of {target} rooms.")
        return chain

    @staticmethod
    def _advance(candidate: RoomCandidate) -> tuple[Point, Direction]:
        return candidate.next_anchor(), candidate.next_incoming()
