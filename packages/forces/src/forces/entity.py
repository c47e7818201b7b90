"""
Entity: a contact chip the simulation positions.

Position and velocity are carried by the caller between simulation
runs; everything else about the geometry is recomputed.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from regions import membership_key

EntityId = Union[str, int]


@dataclass
class Entity:
    id: EntityId
    label: str = ''
    regions: FrozenSet[str] = frozenset()
    weight: float = 1.0
    position: Optional[Tuple[float, float]] = None
    velocity: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self):
        self.regions = frozenset(self.regions)
        if self.position is not None:
            self.position = (float(self.position[0]), float(self.position[1]))
        self.velocity = (float(self.velocity[0]), float(self.velocity[1]))

    @property
    def key(self) -> str:
        """Membership key; peers share the same key."""
        return membership_key(self.regions)

    @property
    def is_placed(self) -> bool:
        return bool(self.regions)

    def reset_motion(self) -> None:
        self.position = None
        self.velocity = (0.0, 0.0)


def assign_regions(
    entities: List[Entity],
    entity_id: EntityId,
    regions: Iterable[str],
) -> Entity:
    """
    Drop handler: give `entity_id` a new membership set.

    Position and velocity are reset so the next simulate() seeds the
    entity inside its new boundary. An empty `regions` leaves the
    entity untouched (the drop missed every circle).
    """
    names = frozenset(regions)
    for entity in entities:
        if entity.id == entity_id:
            if names:
                entity.regions = names
                entity.reset_motion()
            return entity
    raise KeyError(f"Unknown entity: {entity_id}")
