"""
Rectangular prey grid with 8-connected neighbor links.
"""

import random
from typing import Iterator, List, Optional, Tuple

import pygame

from .agents.prey import Prey


class PreyGrid:
    """
    Rows x cols container of Prey.

    Every prey is linked to the cells around it (Moore neighborhood).
    Growing or shrinking only relinks the rows/columns whose neighborhood
    actually changed, so resizing costs the length of one row or column
    rather than the whole grid.
    """

    def __init__(self, rows: int = 0, cols: int = 0):
        """
        Initialize a grid of prey at the origin.

        Args:
            rows: Number of rows
            cols: Number of columns
        """
        self.cells: List[List[Prey]] = [[Prey() for _ in range(cols)] for _ in range(rows)]
        self.rebuild_all()

    @classmethod
    def build(cls, rows: int, cols: int, spacing: float, boundary_size: float,
              rng=random) -> "PreyGrid":
        """
        Lay out a grid centered in the boundary cube.

        Prey sit on the horizontal mid-plane, spaced `spacing` apart with a
        little positional noise and a random initial velocity.

        Args:
            rows: Number of rows
            cols: Number of columns
            spacing: Distance between neighboring cells
            boundary_size: Edge length of the boundary cube
            rng: Random number source

        Returns:
            Fully linked PreyGrid
        """
        grid = cls()
        noise = spacing * 0.5
        center_offset = (boundary_size - rows * spacing) / 2

        for i in range(rows):
            row = []
            for j in range(cols):
                prey = Prey(pygame.Vector3(
                    center_offset + i * spacing + (rng.random() - 0.5) * noise,
                    boundary_size / 2 + (rng.random() - 0.5) * noise,
                    center_offset + j * spacing + (rng.random() - 0.5) * noise,
                ))
                prey.velocity = pygame.Vector3(
                    (rng.random() - 0.5) * 10,
                    (rng.random() - 0.5) * 10,
                    (rng.random() - 0.5) * 10,
                )
                row.append(prey)
            grid.cells.append(row)

        grid.rebuild_all()
        return grid

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def __len__(self) -> int:
        return self.rows * self.cols

    def __iter__(self) -> Iterator[Prey]:
        """Iterate over prey in row-major order."""
        for row in self.cells:
            yield from row

    def cell(self, row: int, col: int) -> Prey:
        return self.cells[row][col]

    def random_cell(self, rng=random) -> Optional[Prey]:
        """
        Pick a uniformly random prey.

        Args:
            rng: Random number source

        Returns:
            A prey, or None if the grid is empty
        """
        if self.rows == 0 or self.cols == 0:
            return None
        return self.cells[rng.randrange(self.rows)][rng.randrange(self.cols)]

    def neighbor_coords(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get the in-bounds cells around (row, col).

        Args:
            row: Row index
            col: Column index

        Returns:
            List of (row, col) pairs, the cell itself excluded
        """
        coords = []
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if 0 <= nr < self.rows and 0 <= nc < self.cols:
                    coords.append((nr, nc))
        return coords

    def neighbors_of(self, row: int, col: int) -> List[Prey]:
        """Get the prey around (row, col) for the current grid shape."""
        return [self.cells[r][c] for r, c in self.neighbor_coords(row, col)]

    def rebuild_neighbors(self, row: int, col: int) -> None:
        """Overwrite the neighbor list of cell (row, col)."""
        self.cells[row][col].neighbors = self.neighbors_of(row, col)

    def rebuild_all(self) -> None:
        """Relink every cell."""
        for row in range(self.rows):
            for col in range(self.cols):
                self.rebuild_neighbors(row, col)

    def _rebuild_row(self, row: int) -> None:
        for col in range(self.cols):
            self.rebuild_neighbors(row, col)

    def _rebuild_column(self, col: int) -> None:
        for row in range(self.rows):
            self.rebuild_neighbors(row, col)

    def grow_row(self, width: Optional[int] = None) -> List[Prey]:
        """
        Append a row of fresh prey at the origin.

        Relinks the new row and the row before it.

        Args:
            width: Row length to use when the grid has no rows yet

        Returns:
            The newly created prey
        """
        length = self.cols if self.cells or width is None else width
        new_row = [Prey() for _ in range(length)]
        self.cells.append(new_row)

        last = self.rows - 1
        self._rebuild_row(last)
        if last > 0:
            self._rebuild_row(last - 1)
        return new_row

    def shrink_row(self) -> List[Prey]:
        """
        Remove the last row, keeping at least one.

        Returns:
            The removed prey (empty if nothing was removed)
        """
        if self.rows <= 1:
            return []

        removed = self.cells.pop()
        self._rebuild_row(self.rows - 1)
        return removed

    def grow_column(self) -> List[Prey]:
        """
        Append a column of fresh prey at the origin.

        Relinks the new column and the column before it.

        Returns:
            The newly created prey
        """
        new_column = []
        for row in self.cells:
            prey = Prey()
            row.append(prey)
            new_column.append(prey)

        last = self.cols - 1
        self._rebuild_column(last)
        if last > 0:
            self._rebuild_column(last - 1)
        return new_column

    def shrink_column(self) -> List[Prey]:
        """
        Remove the last column, keeping at least one.

        Returns:
            The removed prey (empty if nothing was removed)
        """
        if self.cols <= 1:
            return []

        removed = [row.pop() for row in self.cells]
        self._rebuild_column(self.cols - 1)
        return removed
