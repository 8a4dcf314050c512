import pytest

from covpath.grid import Grid


def test_build_ignores_out_of_bounds_blocks():
    g = Grid.build(3, 3, [(0, 0), (5, 5), (-1, 0), (2, 3)])
    assert g.blocked[0][0]
    assert g.num_blocked == 1
    assert not g.is_valid(0, 0)
    assert not g.is_valid(5, 5)
    assert not g.is_valid(-1, 0)
    assert g.is_valid(1, 1)
    assert g.is_valid(2, 2)
    assert not g.is_valid(3, 0)


def test_duplicate_blocks_count_once():
    g = Grid.build(1, 2, [(0, 0), (0, 0)])
    assert g.num_blocked == 1
    assert g.has_free_cells()
    assert list(g.free_cells()) == [(0, 1)]


def test_non_positive_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid.build(0, 3, [])
    with pytest.raises(ValueError):
        Grid.build(3, -1, [])


def test_fully_blocked_grid_has_no_free_cells():
    g = Grid.build(2, 2, [(0, 0), (0, 1), (1, 0), (1, 1)])
    assert not g.has_free_cells()
    assert list(g.free_cells()) == []


def test_free_cells_are_row_major():
    g = Grid.build(2, 3, [(0, 1), (1, 2)])
    assert list(g.free_cells()) == [(0, 0), (0, 2), (1, 0), (1, 1)]


def test_neighbors_follow_search_order_and_skip_blocked():
    g = Grid.build(3, 3, [(0, 1)])
    # down, up, right, left
    assert g.neighbors((1, 1)) == [(2, 1), (1, 2), (1, 0)]
    assert g.neighbors((0, 0)) == [(1, 0)]


def test_save_then_load_keeps_layout(tmp_path):
    g = Grid.build(3, 4, [(0, 3), (2, 0), (1, 1)])
    path = tmp_path / "sub" / "g.txt"
    g.save(str(path))
    assert path.read_text().splitlines()[0] == "GRID 3 4"
    g2 = Grid.load(str(path))
    assert (g2.rows, g2.cols) == (3, 4)
    assert g2.blocked == g.blocked
    assert g2.num_blocked == 3


def test_load_legacy_headerless_format(tmp_path):
    path = tmp_path / "legacy.txt"
    path.write_text("010\n000\n")
    g = Grid.load(str(path))
    assert (g.rows, g.cols) == (2, 3)
    assert g.blocked[0][1]
    assert g.num_blocked == 1


@pytest.mark.parametrize("body", ["GRID 2 2\n00\n", "GRID 2 2\n00\n0x\n", "GRID 2\n00\n00\n", ""])
def test_load_rejects_malformed_files(tmp_path, body):
    path = tmp_path / "bad.txt"
    path.write_text(body)
    with pytest.raises(ValueError):
        Grid.load(str(path))


def test_random_is_reproducible_with_seed():
    a = Grid.random(6, 5, p_blocked=0.3, seed=11)
    b = Grid.random(6, 5, p_blocked=0.3, seed=11)
    assert a.blocked == b.blocked
    assert (a.rows, a.cols) == (6, 5)
