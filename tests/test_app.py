import math

import pytest

from hexscene.app import (
    DEFAULT_CAMERA_MOVE_SPEED,
    EMPTY_APP_CLEAR_COLOR,
    MENU_ACTIVE_CLEAR_COLOR,
    MENU_INACTIVE_CLEAR_COLOR,
    App,
    CubeTestApp,
    EmptyApp,
    GameMenu,
    advance_rotation,
)
from hexscene.renderer import SHADER_PROGRAM_MENU, Renderer, Vector3


def test_rotation_ignores_non_positive_delta():
    assert advance_rotation(45.0, 90.0, 0.0) == 45.0
    assert advance_rotation(45.0, 90.0, -5.0) == 45.0


def test_rotation_advances_by_speed_in_seconds():
    assert advance_rotation(0.0, 90.0, 1000.0) == pytest.approx(90.0)


def test_rotation_wraps_past_full_turn():
    result = advance_rotation(350.0, 20.0, 1000.0)
    assert result == pytest.approx(10.0)
    assert 0.0 <= result <= 360.0


def test_rotation_clamps_negative_to_zero():
    assert advance_rotation(5.0, -90.0, 1000.0) == 0.0


def test_menu_selection_wraps_both_ways():
    menu = GameMenu()
    for label in ("Load 3D Model", "Options", "Exit"):
        menu.add_item(label, 0.65, 0.8, 0)
    assert menu.selected_number == 1
    assert menu.select(True) == 2
    assert menu.select(True) == 3
    assert menu.select(True) == 1
    assert menu.select(False) == 3
    assert [item.selected for item in menu.items] == [False, False, True]


def test_empty_menu_has_no_selection():
    menu = GameMenu()
    assert menu.select(True) == 0
    assert menu.selected_item is None
    assert not menu.initialized


def test_set_menu_active_changes_clear_color():
    app = App()
    app.set_menu_active(True)
    assert app.is_menu_active()
    assert app.renderer.clear_color == MENU_ACTIVE_CLEAR_COLOR
    app.set_menu_active(False)
    assert not app.is_menu_active()
    assert app.renderer.clear_color == MENU_INACTIVE_CLEAR_COLOR


def test_app_select_helpers_move_menu():
    app = App()
    app.menu.add_item("a", 0.0, 0.0, 0)
    app.menu.add_item("b", 0.0, 0.0, 0)
    assert app.select_next_menu_item() == 2
    assert app.select_prev_menu_item() == 1


def test_active_menu_renders_each_item():
    renderer = Renderer()
    app = App(renderer)
    shader = renderer.shader_program_id(SHADER_PROGRAM_MENU)
    uv = [0.01, 1.0, 0.99, 1.0, 0.01, 0.75, 0.99, 0.75]
    for label in ("one", "two"):
        vao = renderer.allocate_menu_item(0.65, 0.8, 0.2, uv, shader)
        app.menu.add_item(label, 0.65, 0.8, vao)
    app.menu.shader_program_id = shader
    assert app.render() == []
    app.set_menu_active(True)
    calls = app.render()
    assert [call.vao_id for call in calls] == [item.vao_id for item in app.menu.items]


def test_menu_cleanup_frees_geometry():
    renderer = Renderer()
    menu = GameMenu()
    shader = renderer.shader_program_id(SHADER_PROGRAM_MENU)
    vao = renderer.allocate_menu_item(0.65, 0.8, 0.2, [0.0] * 8, shader)
    menu.add_item("x", 0.65, 0.8, vao)
    menu.cleanup_graphics(renderer)
    assert vao not in renderer.objects
    assert menu.items == []


def test_empty_app_initialize_sets_clear_color():
    app = EmptyApp()
    app.initialize()
    assert app.renderer.clear_color == EMPTY_APP_CLEAR_COLOR


def test_cube_app_update_accumulates_rotation():
    app = CubeTestApp()
    app.rotation_speed = 90.0
    app.update(500.0)
    app.update(500.0)
    assert app.object_rotation == pytest.approx(90.0)
    assert app.current_delta_time == 500.0
    assert app.model_transform.rotation_y == pytest.approx(math.radians(90.0))


def test_cube_app_mouse_move_moves_object():
    app = CubeTestApp()
    app.on_mouse_move(4.0, 2.0)
    expected = Vector3(-4.0 * DEFAULT_CAMERA_MOVE_SPEED, 0.0, -2.0 * DEFAULT_CAMERA_MOVE_SPEED)
    assert app.object_position.x == pytest.approx(expected.x)
    assert app.object_position.y == 0.0
    assert app.object_position.z == pytest.approx(expected.z)


def test_cube_app_ignores_large_mouse_jumps():
    app = CubeTestApp()
    app.on_mouse_move(150.0, 1.0)
    assert app.object_position == Vector3()