"""
Eller's algorithm.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridmaze.generation.base import MazeAlgorithm, MazeGenerator

if TYPE_CHECKING:
    from gridmaze.core.random_stream import RandomStream
    from gridmaze.generation.base import CellGrid


class EllerGenerator(MazeGenerator):
    """
    Eller's algorithm for efficient row-by-row maze generation.

    Generates mazes one row at a time keeping only the set membership of the
    current row, which makes it suitable for very large or streamed mazes.

    Algorithm:
    1. Process rows from top to bottom
    2. Assign each cell to a set (initially unique sets)
    3. Randomly join adjacent cells in different sets (merge sets)
    4. Create vertical connections ensuring each set has >= 1 passage down
    5. Continue sets to next row; cells with no passage from above get new sets
    6. In the last row, join every pair of adjacent cells in different sets

    Characteristics:
    - Memory efficient: O(width) set bookkeeping
    - Fast: O(n) where n = number of cells
    - Balanced mixture of horizontal/vertical passages

    Reference: Eller (1982), "An Efficient Method for Generating Mazes"
    """

    algorithm = MazeAlgorithm.ELLER

    def _carve(self, grid: CellGrid, rng: RandomStream) -> None:
        current_row_sets = list(range(grid.cols))
        next_set_id = grid.cols

        for row_idx in range(grid.rows):
            row_cells = grid.cells[row_idx]
            last_row = row_idx == grid.rows - 1

            # Step 1: Randomly connect adjacent cells in same row (merge sets)
            for col in range(grid.cols - 1):
                should_join = last_row or rng.next_bool()
                if current_row_sets[col] != current_row_sets[col + 1] and should_join:
                    row_cells[col].link(row_cells[col + 1])

                    old_set = current_row_sets[col + 1]
                    new_set = current_row_sets[col]
                    current_row_sets = [new_set if s == old_set else s for s in current_row_sets]

            if last_row:
                break

            # Step 2: Create vertical connections
            sets_in_row: dict[int, list[int]] = {}
            for col in range(grid.cols):
                sets_in_row.setdefault(current_row_sets[col], []).append(col)

            next_row_sets = [-1] * grid.cols
            for set_id, cols_in_set in sets_in_row.items():
                num_connections = rng.next_int(1, len(cols_in_set))
                for col in rng.sample(cols_in_set, num_connections):
                    row_cells[col].link(grid.cells[row_idx + 1][col])
                    next_row_sets[col] = set_id

            # Step 3: Cells without a passage from above start new sets
            for col in range(grid.cols):
                if next_row_sets[col] == -1:
                    next_row_sets[col] = next_set_id
                    next_set_id += 1

            current_row_sets = next_row_sets
