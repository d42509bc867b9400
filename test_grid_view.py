# test_grid_view.py
"""
Tests for GridView text rendering, JSON snapshots and plotting.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from grid_view import GridView, plot_grid
from layout_engine import LayoutEngine
from node_module import Node


def make_engine():
    engine = LayoutEngine(3, 3)
    engine.add_item("a", 0, 0, 1, 2)
    engine.add_item("b", 1, 2, 2, 1)
    return engine


def test_view_is_detached():
    engine = make_engine()
    view = engine.view()

    engine.move_item("a", 2, 0)

    assert view.items.get("a") == Node("a", 0, 0, 1, 2)
    assert list(view.iter_rows())[0] == ("a", None, None)


def test_dimensions_and_rows():
    view = make_engine().view()

    assert view.rows() == 3
    assert view.cols() == 3
    assert list(view.iter_rows()) == [
        ("a", None, None),
        ("a", None, None),
        (None, "b", "b"),
    ]


def test_get_nodes_sorted():
    view = make_engine().view()
    assert [n.id for n in view.get_nodes()] == ["a", "b"]


def test_get_grid_formatted():
    view = make_engine().view()

    expected = (
        "   0  1  2 \n"
        "00[a][ ][ ]\n"
        "01[a][ ][ ]\n"
        "02[ ][b][b]\n"
    )
    assert view.get_grid_formatted(1) == expected


def test_get_grid_formatted_cell_space():
    view = LayoutEngine(1, 2).view()
    assert view.get_grid_formatted(3) == "   0  1 \n00[   ][   ]\n"


def test_print_grid(capsys):
    make_engine().view().print_grid()
    out = capsys.readouterr().out
    assert "00[a][ ][ ]" in out


def test_json_round_trip():
    engine = make_engine()
    engine.add_item("c", 0, 0, 3, 1)
    view = engine.view()

    restored = GridView.from_json(view.to_json())

    assert restored.grid == view.grid
    assert restored.get_nodes() == view.get_nodes()
    assert restored.to_dict() == view.to_dict()


def test_save_and_load(tmp_path):
    view = make_engine().view()
    filename = tmp_path / "snapshot.json"

    view.save(filename)
    restored = GridView.load(filename)

    assert restored.to_dict() == view.to_dict()
    engine = LayoutEngine.from_view(restored)
    assert engine.get_item("b") == Node("b", 1, 2, 2, 1)


def test_from_dict_rejects_mismatched_item_key():
    data = make_engine().view().to_dict()
    data['items']['a']['id'] = "z"

    with pytest.raises(ValueError):
        GridView.from_dict(data)


def test_plot_grid_draws_each_node():
    view = make_engine().view()

    ax = plot_grid(view)

    assert len(ax.patches) == 2
    assert ax.get_ylim() == (3.0, 0.0)
    plt.close('all')


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
