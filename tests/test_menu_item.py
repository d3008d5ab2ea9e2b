import pytest

from hexscene.menu_item import Color, MenuItem


def test_location_returns_coordinates():
    item = MenuItem("Exit", 0.65, 0.3, vao_id=7)
    assert item.location() == (0.65, 0.3)
    assert item.vao_id == 7


def test_color_follows_selection():
    item = MenuItem("Options", 0.65, 0.55)
    item.set_color(True, 255, 10, 20)
    item.set_color(False, 30, 40, 50)
    assert item.color == Color(30, 40, 50)
    item.selected = True
    assert item.color == Color(255, 10, 20)


def test_set_color_only_touches_one_state():
    item = MenuItem("Load", 0.65, 0.8)
    before = item.unselected_color
    item.set_color(True, 1, 2, 3)
    assert item.unselected_color == before
    assert item.selected_color == Color(1, 2, 3)


def test_color_channel_out_of_range():
    item = MenuItem("Load", 0.65, 0.8)
    with pytest.raises(ValueError):
        item.set_color(False, -1, 0, 0)
    with pytest.raises(ValueError):
        Color(0, 70000, 0)