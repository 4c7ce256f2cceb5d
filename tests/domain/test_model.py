"""Tests for mars_robots.domain.model module."""

from __future__ import annotations

import dataclasses

import pytest

from mars_robots.domain.model import (
    Coordinate,
    GridBounds,
    Orientation,
    Position,
    RobotSpec,
)


class TestGridBounds:
    def test_lower_left_defaults_to_origin(self) -> None:
        bounds = GridBounds(upper_right=Coordinate(5, 3))
        assert bounds.lower_left == Coordinate(0, 0)

    @pytest.mark.parametrize("point", [(0, 0), (5, 3), (5, 0), (0, 3), (2, 1)])
    def test_corners_and_interior_are_inclusive(self, point: tuple[int, int]) -> None:
        assert GridBounds(upper_right=Coordinate(5, 3)).contains(Coordinate(*point))

    @pytest.mark.parametrize("point", [(-1, 0), (0, -1), (6, 3), (5, 4)])
    def test_points_outside_are_rejected(self, point: tuple[int, int]) -> None:
        assert not GridBounds(upper_right=Coordinate(5, 3)).contains(Coordinate(*point))

    def test_width_and_height_count_grid_points(self) -> None:
        bounds = GridBounds(upper_right=Coordinate(5, 3))
        assert bounds.width == 6
        assert bounds.height == 4

    def test_zero_sized_grid_has_single_point(self) -> None:
        bounds = GridBounds(upper_right=Coordinate(0, 0))
        assert bounds.contains(Coordinate(0, 0))
        assert not bounds.contains(Coordinate(1, 0))


class TestValues:
    def test_coordinate_equality_is_structural(self) -> None:
        assert Coordinate(1, 2) == Coordinate(1, 2)
        assert len({Coordinate(1, 2), Coordinate(1, 2)}) == 1

    def test_position_is_immutable(self) -> None:
        position = Position(Coordinate(1, 2), Orientation.NORTH)
        with pytest.raises(dataclasses.FrozenInstanceError):
            position.orientation = Orientation.SOUTH  # type: ignore[misc]

    def test_position_str(self) -> None:
        assert str(Position(Coordinate(1, 2), Orientation.EAST)) == "1 2 E"

    def test_robot_spec_defaults_to_no_instructions(self) -> None:
        spec = RobotSpec(start=Position(Coordinate(0, 0), Orientation.NORTH))
        assert spec.instructions == ()

    def test_orientation_turned_wraps_both_ways(self) -> None:
        assert Orientation.WEST.turned(1) is Orientation.NORTH
        assert Orientation.NORTH.turned(-1) is Orientation.WEST
        assert Orientation.EAST.turned(6) is Orientation.WEST
