from volrender.statistics import StatisticsTree
from volrender.status import Status


def test_default_groups():
    tree = StatisticsTree()
    assert [item.prop for item in tree.items] == [
        "Performance",
        "Volume",
        "Memory",
        "Camera",
        "Graphics Card",
    ]
    assert tree.find_item("Memory").icon == "memory"
    assert all(item.children == [] for item in tree.items)


def test_update_adds_child_to_existing_group():
    tree = StatisticsTree()
    tree.update_statistic("Camera", "Aperture Size", "0.01", "m")
    camera = tree.find_item("Camera")
    assert [(c.prop, c.value, c.unit) for c in camera.children] == [
        ("Aperture Size", "0.01", "m")
    ]
    assert camera.children[0].parent is camera


def test_update_replaces_value_of_existing_child():
    tree = StatisticsTree()
    tree.update_statistic("Performance", "FPS", "10", "fps")
    tree.update_statistic("Performance", "FPS", "20", "Hz")
    children = tree.find_item("Performance").children
    assert len(children) == 1
    assert (children[0].value, children[0].unit) == ("20", "Hz")


def test_update_creates_missing_group():
    tree = StatisticsTree()
    tree.update_statistic("Variance", "N buffer", "0.00", "MB", "grid")
    group = tree.items[-1]
    assert group.prop == "Variance"
    assert group.value == ""
    assert [(c.prop, c.icon) for c in group.children] == [("N buffer", "grid")]


def test_find_item_is_recursive_and_returns_none_when_missing():
    tree = StatisticsTree()
    tree.update_statistic("Volume", "Spacing", "1", "m")
    assert tree.find_item("Spacing").parent is tree.find_item("Volume")
    assert tree.find_item("Nothing") is None


def test_remove_children():
    tree = StatisticsTree()
    tree.update_statistic("Memory", "Total", "5", "MB")
    tree.remove_children("Memory")
    assert tree.find_item("Memory").children == []
    assert tree.find_item("Total") is None


def test_remove_children_of_missing_item_leaves_tree_unchanged():
    tree = StatisticsTree()
    before = [item.prop for item in tree.walk()]
    tree.remove_children("Missing")
    assert [item.prop for item in tree.walk()] == before


def test_expand_all_sets_every_item():
    tree = StatisticsTree()
    tree.update_statistic("Camera", "Zoom", "2")
    tree.expand_all(True)
    assert all(item.expanded for item in tree.walk())
    tree.expand_all(False)
    assert not any(item.expanded for item in tree.walk())


def test_render_end_clears_default_groups_only():
    tree = StatisticsTree()
    tree.update_statistic("Camera", "Zoom", "2")
    tree.update_statistic("Variance", "N buffer", "0.00", "MB")
    tree.on_render_begin()
    tree.on_render_end()
    assert tree.find_item("Camera").children == []
    assert [c.prop for c in tree.find_item("Variance").children] == ["N buffer"]
    assert not any(item.expanded for item in tree.walk())


def test_attach_follows_status_events():
    status = Status()
    tree = StatisticsTree()
    tree.attach(status)
    status.set_statistic_changed("Performance", "FPS", "30", "fps")
    assert tree.find_item("FPS").value == "30"
    status.set_render_begin()
    assert all(item.expanded for item in tree.walk())
    status.set_render_end()
    assert tree.find_item("FPS") is None