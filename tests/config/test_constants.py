import math

from heading2d.config.constants import (
    DECI_DEGREES_PER_DEGREE,
    DEGENERATE_EPSILON,
    FLUSH_THRESHOLD,
    FULL_CIRCLE,
    HALF_CIRCLE,
    HEADING_ROTATION_AXIS,
    NORTH_REFERENCE,
)


def test_full_circle_is_tenths_of_a_degree() -> None:
    assert FULL_CIRCLE == 360 * DECI_DEGREES_PER_DEGREE
    assert isinstance(FULL_CIRCLE, int)


def test_half_circle_is_half_of_full() -> None:
    assert HALF_CIRCLE * 2 == FULL_CIRCLE


def test_degenerate_epsilon_is_small_positive_float() -> None:
    assert isinstance(DEGENERATE_EPSILON, float)
    assert 0.0 < DEGENERATE_EPSILON < 1e-6


def test_reference_vectors_are_unit_length() -> None:
    assert math.isclose(math.hypot(*NORTH_REFERENCE), 1.0)
    assert math.isclose(math.hypot(*HEADING_ROTATION_AXIS), 1.0)


def test_north_reference_lies_in_plane() -> None:
    assert NORTH_REFERENCE[2] == 0.0


def test_rotation_axis_is_perpendicular_to_plane() -> None:
    assert HEADING_ROTATION_AXIS[:2] == (0.0, 0.0)


def test_flush_threshold_is_positive() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD > 0
