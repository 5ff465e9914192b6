"""Transfer function: intensity-ordered nodes that map density to material."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Rgb = tuple[int, int, int]
Handler = Callable[..., object]

GRAY: Rgb = (160, 160, 164)
BLACK: Rgb = (0, 0, 0)


class TransferFunctionEvent(enum.Enum):
    """Notifications sent by a :class:`TransferFunction`."""

    CHANGED = "changed"
    SELECTION_CHANGED = "selection_changed"


@dataclass(eq=False)
class Node:
    """A point of the transfer function with its material properties.

    ``min_x`` and ``max_x`` bound where the node may move; they are kept
    up to date by the transfer function that owns the node, as is ``id``,
    the node's position in that function.
    """

    intensity: float = 0.0
    opacity: float = 0.0
    diffuse: Rgb = GRAY
    specular: Rgb = GRAY
    emission: Rgb = BLACK
    roughness: float = 1.0
    min_x: float = 0.0
    max_x: float = 1.0
    id: int = 0


class TransferFunction:
    """An ordered list of nodes plus global shading settings.

    Nodes are kept sorted by intensity. Handlers connected to ``CHANGED``
    are called without arguments; handlers connected to
    ``SELECTION_CHANGED`` receive the selected node, or None.
    """

    def __init__(self, name: str = "Default") -> None:
        self.name = name
        self.nodes: list[Node] = []
        self.selected_node: Node | None = None
        self.dirty = False
        self._density_scale = 5.0
        self._shading_type = 1
        self._gradient_factor = 0.0
        self._handlers: dict[TransferFunctionEvent, list[Handler]] = {
            event: [] for event in TransferFunctionEvent
        }
        self._blocked = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    # Notifications

    def connect(self, event: TransferFunctionEvent | str, handler: Handler) -> None:
        """Call ``handler`` whenever ``event`` is sent."""
        self._handlers[TransferFunctionEvent(event)].append(handler)

    @property
    def signals_blocked(self) -> bool:
        """True while notifications are suppressed."""
        return self._blocked > 0

    @contextmanager
    def _quiet(self) -> Iterator[None]:
        self._blocked += 1
        try:
            yield
        finally:
            self._blocked -= 1

    def _emit(self, event: TransferFunctionEvent, *args: object) -> None:
        if self.signals_blocked:
            return
        for handler in list(self._handlers[event]):
            handler(*args)

    # Nodes

    def add_node(self, node: Node) -> None:
        """Insert ``node`` in intensity order and select it."""
        self.nodes.append(node)
        self.nodes.sort(key=lambda n: n.intensity)
        self._renumber()
        self.update_node_ranges()

        for candidate in self.nodes:
            if candidate.intensity == node.intensity:
                self.set_selected_node(candidate)

        self._emit(TransferFunctionEvent.CHANGED)

        if not self.signals_blocked:
            logger.info("Inserted node")

    def add_point(
        self,
        intensity: float,
        opacity: float,
        diffuse: Rgb,
        specular: Rgb,
        emission: Rgb,
        roughness: float = 1.0,
    ) -> Node:
        """Create a node from its properties, insert it and return it."""
        node = Node(intensity, opacity, diffuse, specular, emission, roughness)
        self.add_node(node)
        return node

    def remove_node(self, node: Node | None) -> None:
        """Remove ``node`` and select the node before it.

        Passing None does nothing; a node that is not part of this function
        raises ValueError.
        """
        if node is None:
            return
        index = self.node_index(node)
        if index < 0:
            raise ValueError("node is not part of this transfer function")

        del self.nodes[index]
        self._renumber()
        self.update_node_ranges()
        self.select_index(max(0, index - 1))
        self._emit(TransferFunctionEvent.CHANGED)
        logger.info("Removed node")

    def _renumber(self) -> None:
        for position, node in enumerate(self.nodes):
            node.id = position

    def update_node_ranges(self) -> None:
        """Recompute how far each node may move.

        The first node is pinned to 0, the last to 1; every other node may
        move between the intensities of its neighbours.
        """
        last = len(self.nodes) - 1
        for position, node in enumerate(self.nodes):
            if position == 0:
                node.min_x = node.max_x = 0.0
            elif position == last:
                node.min_x = node.max_x = 1.0
            else:
                node.min_x = self.nodes[position - 1].intensity
                node.max_x = self.nodes[position + 1].intensity

    def node(self, index: int) -> Node:
        """The node at ``index``."""
        return self.nodes[index]

    def node_index(self, node: Node | None) -> int:
        """Position of ``node`` in this function, -1 when it is absent or None."""
        if node is None:
            return -1
        return next((i for i, n in enumerate(self.nodes) if n is node), -1)

    def node_changed(self, node: Node) -> None:
        """Tell the function that ``node`` was edited."""
        self.update_node_ranges()
        self._emit(TransferFunctionEvent.CHANGED)
        self.dirty = True

    # Selection

    def set_selected_node(self, node: Node | None) -> None:
        """Select ``node``, or clear the selection with None."""
        self.selected_node = node
        self._emit(TransferFunctionEvent.SELECTION_CHANGED, node)

    def select_index(self, index: int) -> None:
        """Select the node at ``index``, clamped to the valid range."""
        if not self.nodes:
            self.selected_node = None
        else:
            self.selected_node = self.nodes[min(len(self.nodes) - 1, max(0, index))]
        self._emit(TransferFunctionEvent.SELECTION_CHANGED, self.selected_node)

    def select_first_node(self) -> None:
        """Select the first node, if there is one."""
        if self.nodes:
            self.set_selected_node(self.nodes[0])

    def select_last_node(self) -> None:
        """Select the last node, if there is one."""
        if self.nodes:
            self.set_selected_node(self.nodes[-1])

    def _step_selection(self, step: int) -> None:
        index = self.node_index(self.selected_node)
        if index < 0:
            return
        new_index = min(len(self.nodes) - 1, max(0, index + step))
        self.set_selected_node(self.nodes[new_index])

    def select_previous_node(self) -> None:
        """Move the selection one node down, stopping at the first."""
        self._step_selection(-1)

    def select_next_node(self) -> None:
        """Move the selection one node up, stopping at the last."""
        self._step_selection(1)

    # Settings

    @property
    def density_scale(self) -> float:
        """Scale applied to the volume density."""
        return self._density_scale

    @density_scale.setter
    def density_scale(self, value: float) -> None:
        if value != self._density_scale:
            self._density_scale = value
            self._emit(TransferFunctionEvent.CHANGED)

    @property
    def shading_type(self) -> int:
        """Shading mode used by the renderer."""
        return self._shading_type

    @shading_type.setter
    def shading_type(self, value: int) -> None:
        if value != self._shading_type:
            self._shading_type = value
            self._emit(TransferFunctionEvent.CHANGED)

    @property
    def gradient_factor(self) -> float:
        """Weight of the gradient in hybrid shading."""
        return self._gradient_factor

    @gradient_factor.setter
    def gradient_factor(self, value: float) -> None:
        if value != self._gradient_factor:
            self._gradient_factor = value
            self._emit(TransferFunctionEvent.CHANGED)

    @classmethod
    def default(cls) -> TransferFunction:
        """The transfer function used when no preset is loaded."""
        function = cls("Default")
        for intensity, opacity in ((0.0, 0.0), (0.3, 0.0), (0.7, 1.0), (1.0, 1.0)):
            function.add_point(intensity, opacity, GRAY, (10, 10, 10), BLACK, 1.0)
        function.density_scale = 100.0
        function.shading_type = 2
        function.gradient_factor = 10.0
        return function


transfer_function = TransferFunction()