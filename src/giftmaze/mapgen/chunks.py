# src/giftmaze/mapgen/chunks.py
# Connected regions of open cells under the six-way neighbor relation.

from typing import Iterator, List, Optional

from ..grid import Cell, Grid


def _collect(grid: Grid, start: Cell) -> List[Cell]:
    # Recursive-DFS preorder, offsets tried in NEIGHBOR_OFFSETS order. Kept
    # on an explicit stack of neighbor iterators so large grids don't hit the
    # recursion limit.
    start.seen = True
    chunk: List[Cell] = [start]
    stack: List[Iterator[Cell]] = [grid.neighbors(start)]
    while stack:
        for n in stack[-1]:
            if not n.is_wall and not n.seen:
                n.seen = True
                chunk.append(n)
                stack.append(grid.neighbors(n))
                break
        else:
            stack.pop()
    return chunk


def find_chunks(grid: Grid, hall: Optional[List[Cell]] = None) -> List[List[Cell]]:
    """
    Partition the open cells into connected components.

    Components come out in the row-major order of their first cell. The
    `seen` markers are cleared again before returning.
    """
    if hall is None:
        hall = grid.open_cells()
    chunks: List[List[Cell]] = []
    try:
        for cell in hall:
            if cell.is_wall or cell.seen:
                continue
            chunks.append(_collect(grid, cell))
    finally:
        for cell in grid.cells():
            cell.seen = False
    return chunks


def count_regions(grid: Grid) -> int:
    return len(find_chunks(grid))
