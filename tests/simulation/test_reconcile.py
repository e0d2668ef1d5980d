"""Tests for the pure reconciliation rules."""

from __future__ import annotations

import logging

import pytest
from scipy.spatial.transform import Rotation

from heading2d.domain.angle import AngleValue
from heading2d.domain.conversions import angle_to_rotation, rotation_to_angle, rotations_equal
from heading2d.domain.heading import VectorHeading
from heading2d.domain.position import Position
from heading2d.domain.vector import Vec2
from heading2d.simulation.reconcile import (
    SyncWrite,
    sync_angle_and_heading,
    sync_angle_with_rotation,
    sync_heading_with_rotation,
    sync_position_with_translation,
)


def test_sync_write_counts() -> None:
    assert SyncWrite().writes == 0
    assert SyncWrite(primary=1).writes == 1
    assert SyncWrite(primary=1, secondary=2).writes == 2


class TestAngleAndHeading:
    def test_changed_angle_overwrites_heading(self) -> None:
        result = sync_angle_and_heading(
            AngleValue(0),
            VectorHeading(Vec2(1.0, 1.0)),
            angle_changed=True,
            heading_changed=False,
        )
        assert result.primary is None
        assert result.secondary == VectorHeading.NORTH

    def test_changed_heading_overwrites_angle(self) -> None:
        result = sync_angle_and_heading(
            AngleValue(0), VectorHeading.EAST, angle_changed=False, heading_changed=True
        )
        assert result.primary == AngleValue.EAST
        assert result.secondary is None

    def test_angle_wins_when_both_changed(self) -> None:
        result = sync_angle_and_heading(
            AngleValue.SOUTH, VectorHeading.EAST, angle_changed=True, heading_changed=True
        )
        assert result.primary is None
        assert result.secondary is not None
        assert result.secondary.y == pytest.approx(-1.0)

    def test_nothing_changed_writes_nothing(self) -> None:
        result = sync_angle_and_heading(
            AngleValue(0), VectorHeading.EAST, angle_changed=False, heading_changed=False
        )
        assert result == SyncWrite()

    def test_equal_derived_value_is_not_written(self) -> None:
        result = sync_angle_and_heading(
            AngleValue.NORTH, VectorHeading.NORTH, angle_changed=True, heading_changed=False
        )
        assert result.writes == 0
        assert not result.degenerate

    def test_neutral_heading_leaves_angle(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="heading2d.simulation.reconcile"):
            result = sync_angle_and_heading(
                AngleValue(900),
                VectorHeading.NEUTRAL,
                angle_changed=False,
                heading_changed=True,
            )
        assert result.writes == 0
        assert result.degenerate
        assert "has no heading" in caplog.text


class TestAngleAndRotation:
    def test_changed_angle_overwrites_rotation(self) -> None:
        result = sync_angle_with_rotation(
            AngleValue.EAST, Rotation.identity(), angle_changed=True, rotation_changed=True
        )
        assert result.primary is None
        assert result.secondary is not None
        assert rotations_equal(result.secondary, angle_to_rotation(AngleValue.EAST))

    def test_changed_rotation_overwrites_angle(self) -> None:
        rotation = angle_to_rotation(AngleValue(1000))
        result = sync_angle_with_rotation(
            AngleValue.NORTH, rotation, angle_changed=False, rotation_changed=True
        )
        assert result.secondary is None
        assert result.primary == rotation_to_angle(rotation)
        assert result.primary.distance(AngleValue(1000)) <= AngleValue(5)

    def test_matching_rotation_is_not_rewritten(self) -> None:
        result = sync_angle_with_rotation(
            AngleValue(450),
            angle_to_rotation(AngleValue(450)),
            angle_changed=True,
            rotation_changed=False,
        )
        assert result.writes == 0

    def test_vertical_rotation_leaves_angle(self) -> None:
        result = sync_angle_with_rotation(
            AngleValue(450),
            Rotation.from_rotvec([1.5707963267948966, 0.0, 0.0]),
            angle_changed=False,
            rotation_changed=True,
        )
        assert result.writes == 0
        assert result.degenerate


class TestHeadingAndRotation:
    def test_changed_heading_overwrites_rotation(self) -> None:
        result = sync_heading_with_rotation(
            VectorHeading.WEST, Rotation.identity(), heading_changed=True, rotation_changed=False
        )
        assert result.secondary is not None
        assert rotation_to_angle(result.secondary).distance(AngleValue.WEST) <= AngleValue(5)

    def test_neutral_heading_leaves_rotation(self) -> None:
        result = sync_heading_with_rotation(
            VectorHeading.NEUTRAL,
            Rotation.identity(),
            heading_changed=True,
            rotation_changed=False,
        )
        assert result.writes == 0
        assert result.degenerate

    def test_changed_rotation_overwrites_neutral_heading(self) -> None:
        result = sync_heading_with_rotation(
            VectorHeading.NEUTRAL,
            angle_to_rotation(AngleValue.SOUTH),
            heading_changed=False,
            rotation_changed=True,
        )
        assert result.primary is not None
        assert result.primary.y == pytest.approx(-1.0)


class TestPositionAndTranslation:
    def test_position_wins(self) -> None:
        result = sync_position_with_translation(
            Position(3.0, 4.0), (0.0, 0.0), position_changed=True, translation_changed=True
        )
        assert result.primary is None
        assert result.secondary == (3.0, 4.0)

    def test_changed_translation_moves_position(self) -> None:
        result = sync_position_with_translation(
            Position(), (5.0, -1.0), position_changed=False, translation_changed=True
        )
        assert result.primary == Position(5.0, -1.0)

    def test_equal_values_are_not_rewritten(self) -> None:
        result = sync_position_with_translation(
            Position(5.0, -1.0), (5.0, -1.0), position_changed=True, translation_changed=False
        )
        assert result.writes == 0
