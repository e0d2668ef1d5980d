"""In-memory entity store with change-tracked heading fields.

Stands in for the embedding environment: it owns entity records, the shared
change clock, and one change observer per reconciliation phase. Outside code
edits fields through :meth:`HeadingWorld.set`; the engine reads and writes the
same cells during reconciliation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from heading2d.domain.angle import AngleValue
from heading2d.domain.conversions import angle_to_heading, angle_to_rotation
from heading2d.domain.heading import VectorHeading
from heading2d.domain.position import Position
from heading2d.domain.transform import Transform
from heading2d.simulation.reconcile import ReconcilePhase
from heading2d.simulation.tracking import ChangeClock, Observer, Tracked

FieldName = Literal["angle", "heading", "position", "transform"]


@dataclass
class EntityRecord:
    """Optional heading-related fields of one entity."""

    entity_id: int
    angle: Tracked[AngleValue] | None = None
    heading: Tracked[VectorHeading] | None = None
    position: Tracked[Position] | None = None
    transform: Tracked[Transform] | None = None

    def get(self, name: FieldName) -> AngleValue | VectorHeading | Position | Transform:
        """Current value of field *name*; raises KeyError if it is absent."""
        return self._cell(name).value

    def _cell(self, name: FieldName) -> Tracked:  # type: ignore[type-arg]
        cell = getattr(self, name)
        if cell is None:
            raise KeyError(f"entity {self.entity_id} has no {name}")
        return cell


@dataclass
class HeadingWorld:
    """Entity records plus the change clock and per-phase observers."""

    clock: ChangeClock = field(default_factory=ChangeClock)
    entities: dict[int, EntityRecord] = field(default_factory=dict)
    cycle: int = 0
    observers: dict[ReconcilePhase, Observer] = field(init=False)
    _next_id: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.observers = {phase: Observer(self.clock) for phase in ReconcilePhase}

    def spawn(
        self,
        *,
        angle: AngleValue | None = None,
        heading: VectorHeading | None = None,
        position: Position | None = None,
        transform: Transform | None = None,
    ) -> EntityRecord:
        """Create an entity holding exactly the given fields."""
        record = EntityRecord(
            entity_id=self._next_id,
            angle=self._track(angle),
            heading=self._track(heading),
            position=self._track(position),
            transform=self._track(transform),
        )
        self.entities[record.entity_id] = record
        self._next_id += 1
        return record

    def spawn_bundle(
        self,
        *,
        angle: AngleValue = AngleValue.NORTH,
        position: Position | None = None,
    ) -> EntityRecord:
        """Create an entity with every field present and mutually consistent."""
        position = position if position is not None else Position()
        return self.spawn(
            angle=angle,
            heading=angle_to_heading(angle),
            position=position,
            transform=Transform(
                translation=(position.x, position.y, 0.0),
                rotation=angle_to_rotation(angle),
            ),
        )

    def entity(self, entity_id: int) -> EntityRecord:
        return self.entities[entity_id]

    def set(
        self,
        entity_id: int,
        name: FieldName,
        value: AngleValue | VectorHeading | Position | Transform,
    ) -> None:
        """Write one field from outside code, marking it changed."""
        self.entity(entity_id)._cell(name).set(value)

    def _track(self, value: object) -> Tracked | None:  # type: ignore[type-arg]
        if value is None:
            return None
        return Tracked(value, self.clock)
