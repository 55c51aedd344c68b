# tests/test_placement.py
import pytest

from giftmaze.errors import NoOpenCells, RetryLimitExceeded
from giftmaze.grid import Grid
from giftmaze.mapgen.generator import generate_grid
from giftmaze.mapgen.placement import PickStats, random_open_cell
from giftmaze.rng import PMRandom


class Scripted:
    def __init__(self, values, rest=0.0):
        self.values = list(values)
        self.rest = rest

    def random(self):
        return self.values.pop(0) if self.values else self.rest

    def biased_bool(self, threshold=0.5):
        return self.random() > threshold


def line_grid(walls):
    # 1×N row; walls is a string of '.'/'#'
    g = Grid.empty(1, len(walls))
    for x, ch in enumerate(walls):
        g.get(0, x).is_wall = (ch == "#")
    return g

def test_first_accepted_candidate_wins_and_passes_counted():
    g = line_grid(".#..")
    stats = PickStats()
    # pass 1 rejects all three open cells, pass 2 accepts the second
    cell = random_open_cell(g, Scripted([0.1, 0.1, 0.1, 0.1, 0.999]), stats=stats)
    assert cell.pos == (0, 2)
    assert stats.passes == 2
    assert stats.draws == 5

def test_walls_never_drawn_for():
    g = line_grid("#.")
    cell = random_open_cell(g, Scripted([0.9999]), threshold=0.998)
    assert cell.pos == (0, 1)

def test_cap_raises_retry_limit():
    g = line_grid("...")
    with pytest.raises(RetryLimitExceeded) as ei:
        random_open_cell(g, Scripted([], rest=0.0), max_passes=4)
    assert ei.value.passes == 4

def test_cap_is_per_call_not_cumulative():
    g = line_grid("..")
    stats = PickStats()
    for _ in range(3):
        random_open_cell(g, Scripted([0.0, 0.0, 0.9999]), max_passes=2, stats=stats)
    assert stats.passes == 6

def test_empty_hall_raises():
    with pytest.raises(NoOpenCells):
        random_open_cell(line_grid("###"), Scripted([0.9999]))

def test_always_returns_open_cell():
    for seed in range(1, 11):
        rng = PMRandom(seed)
        g = generate_grid(5, 5, rng)
        if not g.open_cells():
            continue
        stats = PickStats()
        for _ in range(5):
            assert not random_open_cell(g, rng, stats=stats).is_wall
        assert stats.passes >= 5

def test_low_threshold_favours_early_cells():
    g = line_grid("....")
    rng = PMRandom(5)
    picks = [random_open_cell(g, rng, threshold=0.0).pos for _ in range(50)]
    # u > 0.0 is true for every draw except an exact zero
    assert picks.count((0, 0)) >= 49
