"""Tests for the in-memory entity store."""

from __future__ import annotations

import pytest

from heading2d.domain.angle import AngleValue
from heading2d.domain.conversions import angle_to_heading, angle_to_rotation, rotations_equal
from heading2d.domain.heading import VectorHeading
from heading2d.domain.position import Position
from heading2d.simulation.reconcile import ReconcilePhase
from heading2d.simulation.world import HeadingWorld


class TestSpawn:
    def test_ids_increment(self) -> None:
        world = HeadingWorld()
        first = world.spawn(angle=AngleValue(0))
        second = world.spawn(angle=AngleValue(0))
        assert (first.entity_id, second.entity_id) == (0, 1)
        assert world.entity(1) is second

    def test_only_given_fields_present(self) -> None:
        record = HeadingWorld().spawn(heading=VectorHeading.EAST)
        assert record.angle is None
        assert record.position is None
        assert record.transform is None
        assert record.get("heading") == VectorHeading.EAST

    def test_missing_field_raises_key_error(self) -> None:
        record = HeadingWorld().spawn(angle=AngleValue(0))
        with pytest.raises(KeyError, match="entity 0 has no transform"):
            record.get("transform")

    def test_bundle_is_consistent(self) -> None:
        world = HeadingWorld()
        record = world.spawn_bundle(angle=AngleValue(1234), position=Position(2.0, 3.0))
        assert record.get("angle") == AngleValue(1234)
        assert record.get("heading") == angle_to_heading(AngleValue(1234))
        transform = record.get("transform")
        assert transform.translation == (2.0, 3.0, 0.0)
        assert rotations_equal(transform.rotation, angle_to_rotation(AngleValue(1234)))

    def test_bundle_defaults(self) -> None:
        record = HeadingWorld().spawn_bundle()
        assert record.get("angle") == AngleValue.NORTH
        assert record.get("position") == Position()


class TestChangeTracking:
    def test_one_observer_per_phase(self) -> None:
        world = HeadingWorld()
        assert set(world.observers) == set(ReconcilePhase)
        assert all(o.clock is world.clock for o in world.observers.values())

    def test_set_marks_field_changed(self) -> None:
        world = HeadingWorld()
        record = world.spawn(angle=AngleValue(0))
        observer = world.observers[ReconcilePhase.SYNC_ANGLE_HEADING]
        observer.finish()
        assert not observer.is_changed(record.angle)
        world.set(record.entity_id, "angle", AngleValue(100))
        assert observer.is_changed(record.angle)
        assert record.get("angle") == AngleValue(100)

    def test_set_missing_field_raises(self) -> None:
        world = HeadingWorld()
        record = world.spawn(angle=AngleValue(0))
        with pytest.raises(KeyError):
            world.set(record.entity_id, "heading", VectorHeading.NORTH)
