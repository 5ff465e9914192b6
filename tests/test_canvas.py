import pytest

from volrender.canvas import (
    VIEW_MARGIN,
    canvas_to_transfer,
    edge_segments,
    fill_polygon,
    node_positions,
    remove_node_at,
)
from volrender.transfer_function import Node, TransferFunction
from volrender.utilities import Margin


@pytest.fixture
def function():
    return TransferFunction.default()


def test_view_margin_matches_editor_layout():
    assert canvas_to_transfer(25, 10, VIEW_MARGIN, 100, 50) == (0.0, 1.0)
    assert canvas_to_transfer(125, 60, VIEW_MARGIN, 100, 50) == (1.0, 0.0)


def test_node_positions_round_trip(function):
    positions = node_positions(function, 200.0, 80.0)
    assert len(positions) == len(function)
    for (x, y), node in zip(positions, function.nodes):
        intensity, opacity = canvas_to_transfer(x, y, Margin(), 200.0, 80.0)
        assert intensity == pytest.approx(node.intensity)
        assert opacity == pytest.approx(node.opacity)


def test_node_positions_empty():
    assert node_positions(TransferFunction(), 100.0, 100.0) == []


def test_edges_connect_consecutive_nodes(function):
    edges = edge_segments(function, 100.0, 50.0)
    assert len(edges) == len(function) - 1
    for (_, end), (start, _) in zip(edges, edges[1:]):
        assert end == start


def test_edges_are_whole_pixels():
    function = TransferFunction()
    function.add_point(0.0, 1.0, (0, 0, 0), (0, 0, 0), (0, 0, 0))
    function.add_point(0.55, 0.0, (0, 0, 0), (0, 0, 0), (0, 0, 0))
    edges = edge_segments(function, 10.0, 10.0)
    assert edges == [((0, 0), (5, 10))]


def test_single_node_has_no_edges():
    function = TransferFunction()
    function.add_point(0.5, 0.5, (0, 0, 0), (0, 0, 0), (0, 0, 0))
    assert edge_segments(function, 100.0, 100.0) == []


def test_fill_polygon_closes_on_bottom(function):
    polygon = fill_polygon(function, 100.0, 50.0)
    assert len(polygon) == len(function) + 2
    assert polygon[0][1] == 50
    assert polygon[-1][1] == 50
    assert polygon[0][0] == polygon[1][0]
    assert polygon[-1][0] == polygon[-2][0]
    points = [p for edge in edge_segments(function, 100.0, 50.0) for p in edge]
    assert set(polygon[1:-1]) == set(points)


def test_fill_polygon_empty():
    assert fill_polygon(TransferFunction(), 100.0, 50.0) == []


def test_canvas_to_transfer_corners():
    margin = Margin(left=25, right=15, top=10, bottom=15)
    assert canvas_to_transfer(25, 10, margin, 100, 50) == (0.0, 1.0)
    assert canvas_to_transfer(125, 60, margin, 100, 50) == (1.0, 0.0)


def test_canvas_to_transfer_zero_area():
    with pytest.raises(ValueError):
        canvas_to_transfer(0, 0, Margin(), 0, 10)


def test_remove_first_and_last_refused(function):
    first, last = function.node(0), function.node(len(function) - 1)
    assert remove_node_at(function, first) is False
    assert remove_node_at(function, last) is False
    assert len(function) == 4


def test_remove_middle_node(function):
    middle = function.node(1)
    assert remove_node_at(function, middle) is True
    assert len(function) == 3
    assert function.node_index(middle) == -1
    assert [n.id for n in function.nodes] == [0, 1, 2]


def test_remove_foreign_node_raises(function):
    with pytest.raises(ValueError):
        remove_node_at(function, Node(0.5, 0.5))
    assert len(function) == 4