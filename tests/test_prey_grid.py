"""
Test suite for the prey grid topology.

Tests cover:
- Moore neighborhood sizes at corners, edges and interior
- Symmetry of neighbor links
- Growing and shrinking rows and columns
- Localized relinking after structural edits
- Minimum-size and empty-grid edge cases
"""

import random

import pygame
import pytest

from predprey.core.prey_grid import PreyGrid


def links(prey, other):
    return any(n is other for n in prey.neighbors)


def assert_consistent(grid):
    """Equal row lengths, correct neighborhoods, symmetric links."""
    assert all(len(row) == grid.cols for row in grid.cells)
    for r in range(grid.rows):
        for c in range(grid.cols):
            prey = grid.cell(r, c)
            expected = grid.neighbors_of(r, c)
            assert len(prey.neighbors) == len(expected)
            assert all(any(n is e for n in prey.neighbors) for e in expected)
            for neighbor in prey.neighbors:
                assert links(neighbor, prey)


class TestNeighborhood:
    """Test Moore neighborhood construction."""

    def test_one_by_one_has_no_neighbors(self):
        grid = PreyGrid(1, 1)
        assert grid.cell(0, 0).neighbors == []

    @pytest.mark.parametrize("rows,cols", [(2, 2), (3, 4), (5, 5), (2, 7)])
    def test_neighbor_counts(self, rows, cols):
        grid = PreyGrid(rows, cols)
        corners = {(0, 0), (0, cols - 1), (rows - 1, 0), (rows - 1, cols - 1)}

        for r in range(rows):
            for c in range(cols):
                count = len(grid.cell(r, c).neighbors)
                if (r, c) in corners:
                    assert count == 3
                elif r in (0, rows - 1) or c in (0, cols - 1):
                    assert count == 5
                else:
                    assert count == 8

    def test_total_link_count_matches_moore_graph(self):
        rows, cols = 4, 6
        grid = PreyGrid(rows, cols)
        total = sum(len(p.neighbors) for p in grid)
        # Each undirected edge counted twice
        edges = rows * (cols - 1) + cols * (rows - 1) + 2 * (rows - 1) * (cols - 1)
        assert total == 2 * edges

    def test_links_are_symmetric(self):
        assert_consistent(PreyGrid(4, 5))

    def test_single_row_is_a_chain(self):
        grid = PreyGrid(1, 4)
        assert [len(p.neighbors) for p in grid] == [1, 2, 2, 1]

    def test_neighbors_exclude_self(self):
        grid = PreyGrid(3, 3)
        centre = grid.cell(1, 1)
        assert not links(centre, centre)

    def test_rebuild_neighbors_is_deterministic(self):
        grid = PreyGrid(3, 3)
        before = list(grid.cell(1, 1).neighbors)
        grid.rebuild_neighbors(1, 1)
        after = grid.cell(1, 1).neighbors
        assert len(before) == len(after)
        assert all(a is b for a, b in zip(before, after))


class TestGrowShrink:
    """Test structural edits of the grid."""

    def test_grow_row(self):
        grid = PreyGrid(3, 4)
        new_row = grid.grow_row()

        assert grid.rows == 4
        assert len(new_row) == 4
        for prey in new_row:
            assert prey.position == pygame.Vector3(0, 0, 0)
            assert prey.velocity == pygame.Vector3(0, 0, 0)
        assert_consistent(grid)

    def test_grow_column(self):
        grid = PreyGrid(3, 4)
        new_column = grid.grow_column()

        assert grid.cols == 5
        assert len(new_column) == 3
        assert_consistent(grid)

    def test_shrink_row(self):
        grid = PreyGrid(4, 3)
        removed = grid.shrink_row()

        assert grid.rows == 3
        assert len(removed) == 3
        for prey in grid:
            assert not any(n is r for n in prey.neighbors for r in removed)
        assert_consistent(grid)

    def test_shrink_column(self):
        grid = PreyGrid(3, 4)
        removed = grid.shrink_column()

        assert grid.cols == 3
        assert len(removed) == 3
        for prey in grid:
            assert not any(n is r for n in prey.neighbors for r in removed)
        assert_consistent(grid)

    def test_shrink_row_at_minimum_is_noop(self):
        grid = PreyGrid(1, 3)
        cells = list(grid)

        assert grid.shrink_row() == []
        assert grid.rows == 1
        assert all(a is b for a, b in zip(cells, grid))

    def test_shrink_column_at_minimum_is_noop(self):
        grid = PreyGrid(3, 1)

        assert grid.shrink_column() == []
        assert grid.cols == 1
        assert grid.rows == 3

    def test_grow_from_single_cell(self):
        grid = PreyGrid(1, 1)
        grid.grow_row()
        grid.grow_column()

        assert (grid.rows, grid.cols) == (2, 2)
        assert all(len(p.neighbors) == 3 for p in grid)

    def test_grow_row_on_empty_grid_uses_width(self):
        grid = PreyGrid()
        grid.grow_row(width=3)

        assert (grid.rows, grid.cols) == (1, 3)
        assert_consistent(grid)

    def test_mixed_sequence_stays_consistent(self):
        grid = PreyGrid(2, 2)
        for op in ["grow_row", "grow_column", "grow_column", "shrink_row",
                   "grow_row", "shrink_column", "grow_row", "shrink_row"]:
            getattr(grid, op)()
            assert_consistent(grid)
        assert (grid.rows, grid.cols) == (3, 3)


class TestLocalizedRelinking:
    """Only rows/columns next to the edit get new neighbor lists."""

    def test_grow_row_leaves_distant_rows_alone(self):
        grid = PreyGrid(5, 4)
        untouched = [grid.cell(r, c).neighbors for r in range(3) for c in range(4)]

        grid.grow_row()

        after = [grid.cell(r, c).neighbors for r in range(3) for c in range(4)]
        assert all(a is b for a, b in zip(untouched, after))

    def test_grow_column_leaves_distant_columns_alone(self):
        grid = PreyGrid(4, 5)
        untouched = [grid.cell(r, c).neighbors for r in range(4) for c in range(3)]

        grid.grow_column()

        after = [grid.cell(r, c).neighbors for r in range(4) for c in range(3)]
        assert all(a is b for a, b in zip(untouched, after))

    def test_shrink_row_only_relinks_new_last_row(self):
        grid = PreyGrid(5, 4)
        untouched = [grid.cell(r, c).neighbors for r in range(3) for c in range(4)]
        last_row = [grid.cell(3, c).neighbors for c in range(4)]

        grid.shrink_row()

        after = [grid.cell(r, c).neighbors for r in range(3) for c in range(4)]
        assert all(a is b for a, b in zip(untouched, after))
        assert all(a is not grid.cell(3, c).neighbors for c, a in enumerate(last_row))


class TestBuildAndAccess:
    """Test initial layout and accessors."""

    def test_build_layout(self):
        rng = random.Random(7)
        grid = PreyGrid.build(3, 4, spacing=8.0, boundary_size=1000.0, rng=rng)

        assert (grid.rows, grid.cols) == (3, 4)
        assert len(grid) == 12
        offset = (1000.0 - 3 * 8.0) / 2
        for i in range(3):
            for j in range(4):
                prey = grid.cell(i, j)
                assert abs(prey.position.x - (offset + i * 8.0)) <= 2.0
                assert abs(prey.position.y - 500.0) <= 2.0
                assert abs(prey.position.z - (offset + j * 8.0)) <= 2.0
                assert all(abs(v) <= 5.0 for v in prey.velocity)
        assert_consistent(grid)

    def test_build_is_reproducible(self):
        a = PreyGrid.build(2, 2, 8.0, 1000.0, random.Random(3))
        b = PreyGrid.build(2, 2, 8.0, 1000.0, random.Random(3))
        assert [p.position for p in a] == [p.position for p in b]

    def test_iteration_is_row_major(self):
        grid = PreyGrid(2, 3)
        expected = [grid.cell(r, c) for r in range(2) for c in range(3)]
        assert all(a is b for a, b in zip(grid, expected))

    def test_random_cell_empty_grid(self):
        assert PreyGrid().random_cell(random.Random(0)) is None

    def test_random_cell_returns_member(self):
        grid = PreyGrid(3, 3)
        rng = random.Random(0)
        for _ in range(20):
            picked = grid.random_cell(rng)
            assert any(picked is p for p in grid)
