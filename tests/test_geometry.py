"""Tests for points, directions and wall flags."""

import dataclasses

import pytest

from mazemap.core.geometry import Direction, Point, Walls, adjacent_point


class TestDirection:
    """Tests for direction lookups."""

    @pytest.mark.parametrize(
        "direction,delta",
        [
            (Direction.NORTH, (0, 1)),
            (Direction.EAST, (1, 0)),
            (Direction.SOUTH, (0, -1)),
            (Direction.WEST, (-1, 0)),
        ],
    )
    def test_delta(self, direction, delta):
        """North is up and east is right, with y increasing upward."""
        assert direction.delta == delta

    def test_opposite_pairs(self):
        """Opposites pair north with south and east with west."""
        assert Direction.NORTH.opposite is Direction.SOUTH
        assert Direction.SOUTH.opposite is Direction.NORTH
        assert Direction.EAST.opposite is Direction.WEST
        assert Direction.WEST.opposite is Direction.EAST

    def test_opposite_deltas_cancel(self):
        """Moving one way then back returns to the same offset."""
        for direction in Direction:
            dx, dy = direction.delta
            ox, oy = direction.opposite.delta
            assert (dx + ox, dy + oy) == (0, 0)

    def test_wall_flags_are_distinct(self):
        """Each direction owns one bit of the wall set."""
        flags = [direction.wall for direction in Direction]
        assert len(set(flags)) == 4
        combined = Walls.NONE
        for flag in flags:
            combined |= flag
        assert combined.value == 0xF

    def test_exactly_four_directions(self):
        """The enumeration is closed with no 'none' member."""
        assert [d.value for d in Direction] == ["north", "east", "south", "west"]


class TestPoint:
    """Tests for point values."""

    def test_equality_is_componentwise(self):
        """Points with equal coordinates compare equal and hash alike."""
        assert Point(2, 3) == Point(2, 3)
        assert Point(2, 3) != Point(3, 2)
        assert len({Point(1, 1), Point(1, 1)}) == 1

    def test_point_is_immutable(self):
        """Points can't be changed in place."""
        pt = Point(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pt.x = 5


class TestAdjacentPoint:
    """Tests for adjacent_point."""

    def test_east_of_one_one(self):
        """Moving east from (1, 1) gives (2, 1)."""
        assert adjacent_point(Point(1, 1), Direction.EAST) == Point(2, 1)

    def test_every_direction(self):
        """Each direction offsets by its unit vector."""
        origin = Point(5, 5)
        assert adjacent_point(origin, Direction.NORTH) == Point(5, 6)
        assert adjacent_point(origin, Direction.SOUTH) == Point(5, 4)
        assert adjacent_point(origin, Direction.WEST) == Point(4, 5)
        assert adjacent_point(origin, Direction.EAST) == Point(6, 5)

    def test_no_bounds_checking(self):
        """Points off the grid are returned as-is."""
        assert adjacent_point(Point(0, 0), Direction.SOUTH) == Point(0, -1)
        assert adjacent_point(Point(0, 0), Direction.WEST) == Point(-1, 0)

    def test_matches_point_move(self):
        """adjacent_point and Point.move agree."""
        pt = Point(3, -2)
        for direction in Direction:
            assert adjacent_point(pt, direction) == pt.move(direction)
