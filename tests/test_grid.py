from giftmaze.grid import NEIGHBOR_OFFSETS, Grid

def test_neighbor_offsets_exact():
    assert NEIGHBOR_OFFSETS == ((-1, -1), (-1, 0), (0, -1), (0, 1), (1, 0), (1, 1))
    assert (-1, 1) not in NEIGHBOR_OFFSETS
    assert (1, -1) not in NEIGHBOR_OFFSETS

def test_corner_neighbors_are_in_bounds_subset():
    g = Grid.empty(4, 4)
    got = {n.pos for n in g.neighbors(g.get(0, 0))}
    assert got == {(0, 1), (1, 0), (1, 1)}

def test_inner_neighbors_skip_anti_diagonal():
    g = Grid.empty(3, 3)
    got = [n.pos for n in g.neighbors(g.get(1, 1))]
    assert got == [(0, 0), (0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]

def test_get_is_total():
    g = Grid.empty(2, 3)
    assert g.get(-1, 0) is None
    assert g.get(0, -1) is None
    assert g.get(2, 0) is None
    assert g.get(0, 3) is None
    assert g.get(1, 2) is g.get(1, 2)
    assert g.get(1, 2).pos == (1, 2)

def test_open_cells_row_major():
    g = Grid.empty(2, 2)
    g.get(0, 1).is_wall = True
    assert [c.pos for c in g.open_cells()] == [(0, 0), (1, 0), (1, 1)]
    assert len(g.cells()) == 4
    assert g.as_wall_matrix() == [[False, True], [False, False]]

def test_same_place_compares_coordinates():
    a, b = Grid.empty(2, 2), Grid.empty(2, 2)
    assert a.get(1, 1).same_place(b.get(1, 1))
    assert not a.get(1, 1).same_place(a.get(0, 1))
    assert not a.get(1, 1).same_place(None)
