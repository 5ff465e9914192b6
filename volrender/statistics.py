"""A tree of rendering statistics, grouped under top-level items."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from volrender.status import Event, Status

COLUMN_NAMES = ("Property", "Value", "Unit")

DEFAULT_GROUPS = (
    ("Performance", "application-monitor"),
    ("Volume", "grid"),
    ("Memory", "memory"),
    ("Camera", "camera"),
    ("Graphics Card", "graphic-card"),
)


@dataclass(eq=False)
class StatisticItem:
    """One row of the tree: a property with its value, unit and icon."""

    prop: str
    value: str = ""
    unit: str = ""
    icon: str = ""
    children: list[StatisticItem] = field(default_factory=list)
    expanded: bool = False
    parent: StatisticItem | None = field(default=None, repr=False)

    def walk(self) -> Iterator[StatisticItem]:
        """Yield this item and all its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


class StatisticsTree:
    """Statistics grouped by name, updated as rendering progresses."""

    def __init__(self) -> None:
        self.items: list[StatisticItem] = []
        for name, icon in DEFAULT_GROUPS:
            self.add_item(None, name, "", "", icon)

    def walk(self) -> Iterator[StatisticItem]:
        """Yield every item in the tree, depth first."""
        for item in self.items:
            yield from item.walk()

    def attach(self, status: Status) -> None:
        """Follow render begin/end and statistic changes sent by ``status``."""
        status.connect(Event.RENDER_BEGIN, self.on_render_begin)
        status.connect(Event.RENDER_END, self.on_render_end)
        status.connect(Event.STATISTIC_CHANGED, self.update_statistic)

    def add_item(
        self,
        parent: StatisticItem | None,
        prop: str,
        value: str = "",
        unit: str = "",
        icon: str = "",
    ) -> StatisticItem:
        """Add an item under ``parent``, or at the top level when it is None."""
        item = StatisticItem(prop, value, unit, icon, parent=parent)
        if parent is None:
            self.items.append(item)
        else:
            parent.children.append(item)
        return item

    def update_statistic(
        self, group: str, name: str, value: str, unit: str = "", icon: str = ""
    ) -> None:
        """Set the value and unit of ``name`` in ``group``, creating either if needed."""
        group_item = self.find_item(group)
        if group_item is None:
            group_item = self.add_item(None, group)
            self.add_item(group_item, name, value, unit, icon)
            return

        matches = [child for child in group_item.children if child.prop == name]
        for child in matches:
            child.value = value
            child.unit = unit
        if not matches:
            self.add_item(group_item, name, value, unit, icon)

    def find_item(self, name: str) -> StatisticItem | None:
        """Return the first item, at any depth, whose property is ``name``."""
        return next((item for item in self.walk() if item.prop == name), None)

    def remove_children(self, name: str) -> None:
        """Drop all children of the item named ``name``, if there is one."""
        item = self.find_item(name)
        if item is not None:
            item.children.clear()

    def expand_all(self, expand: bool) -> None:
        """Expand or collapse every item."""
        for item in self.walk():
            item.expanded = expand

    def on_render_begin(self) -> None:
        """Expand the whole tree."""
        self.expand_all(True)

    def on_render_end(self) -> None:
        """Collapse the tree and clear the default groups."""
        self.expand_all(False)
        for name, _icon in DEFAULT_GROUPS:
            self.remove_children(name)