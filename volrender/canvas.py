"""Geometry of the transfer function editor canvas.

Nodes are drawn at ``(intensity * width, (1 - opacity) * height)``, so
intensity runs left to right and opacity bottom to top. Edges and the
filled polygon use whole-pixel points; node markers keep fractional
positions.
"""

from __future__ import annotations

from volrender.transfer_function import Node, TransferFunction
from volrender.utilities import Margin

Point = tuple[float, float]
PixelPoint = tuple[int, int]

VIEW_MARGIN = Margin(left=25, right=15, top=10, bottom=15)


def _pixel(node: Node, width: float, height: float) -> PixelPoint:
    return (int(node.intensity * width), int((1.0 - node.opacity) * height))


def node_positions(function: TransferFunction, width: float, height: float) -> list[Point]:
    """Centres of the node markers, in canvas coordinates."""
    return [
        (node.intensity * width, (1.0 - node.opacity) * height)
        for node in function.nodes
    ]


def edge_segments(
    function: TransferFunction, width: float, height: float
) -> list[tuple[PixelPoint, PixelPoint]]:
    """Line segments joining each node to the next, in pixel coordinates."""
    points = [_pixel(node, width, height) for node in function.nodes]
    return list(zip(points, points[1:]))


def fill_polygon(function: TransferFunction, width: float, height: float) -> list[PixelPoint]:
    """Outline of the area below the transfer function curve.

    The outline starts on the bottom edge under the first node, follows the
    nodes and ends on the bottom edge under the last node. It is empty when
    the function has no nodes.
    """
    points = [_pixel(node, width, height) for node in function.nodes]
    if not points:
        return []
    bottom = int(height)
    return [(points[0][0], bottom), *points, (points[-1][0], bottom)]


def canvas_to_transfer(
    x: float, y: float, margin: Margin, width: float, height: float
) -> tuple[float, float]:
    """Convert a view position to ``(intensity, opacity)``.

    ``margin`` is the space between the view and the canvas, and ``width``
    and ``height`` are the size of the canvas itself.
    """
    if width == 0 or height == 0:
        raise ValueError("canvas has no area")
    intensity = (x - margin.left) / width
    opacity = 1.0 - (y - margin.top) / height
    return (intensity, opacity)


def remove_node_at(function: TransferFunction, node: Node) -> bool:
    """Remove ``node`` unless it is the first or the last node.

    Returns True when the node was removed. A node that does not belong to
    ``function`` raises ValueError.
    """
    index = function.node_index(node)
    if index == 0 or index == len(function) - 1:
        return False
    function.remove_node(node)
    return True