"""Application shell: menu handling, per-frame updates and object movement."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from hexscene.menu_item import MenuItem
from hexscene.renderer import (
    DEFAULT_FRAMEBUFFER_HEIGHT,
    DEFAULT_FRAMEBUFFER_WIDTH,
    DrawCall,
    Renderer,
    Vector3,
)

log = logging.getLogger(__name__)

DEFAULT_ROTATION_SPEED = 90.0  # degrees per second
DEFAULT_CAMERA_MOVE_SPEED = 0.025
MOUSE_DELTA_LIMIT = 100.0
KEY_MOD_SHIFT = 0x0001

MENU_ACTIVE_CLEAR_COLOR = (0.88, 0.88, 0.88)
MENU_INACTIVE_CLEAR_COLOR = (0.15, 0.75, 0.75)
EMPTY_APP_CLEAR_COLOR = (0.25, 0.0, 0.75)


def advance_rotation(rotation: float, speed: float, delta_time: float) -> float:
    """Advance an angle in degrees by ``speed`` deg/s over ``delta_time`` milliseconds.

    Non-positive time steps leave the angle unchanged; the result is kept in 0..360.
    """
    if delta_time <= 0.0:
        return rotation
    rotation += speed * (delta_time / 1000.0)
    while rotation > 360.0:
        rotation -= 360.0
    if rotation < 0.0:
        rotation = 0.0
    return rotation


@dataclass(frozen=True)
class Transform:
    """A model transformation: rotation around Y (radians), translation and uniform scale."""

    rotation_y: float = 0.0
    position: Vector3 = Vector3()
    scale: float = 1.0


class GameMenu:
    """An ordered list of menu items with one selected item."""

    def __init__(self):
        self.items: list[MenuItem] = []
        self.active = False
        self.shader_program_id = 0
        self.texture_object_id = 0
        self._selected = -1

    @property
    def initialized(self) -> bool:
        return bool(self.items)

    @property
    def selected_number(self) -> int:
        """One-based number of the selected item, 0 when the menu is empty."""
        return self._selected + 1

    @property
    def selected_item(self) -> MenuItem | None:
        return self.items[self._selected] if self.items else None

    def add_item(self, label: str, x: float, y: float, vao_id: int) -> MenuItem:
        item = MenuItem(label, x, y, vao_id)
        self.items.append(item)
        if self._selected < 0:
            self._selected = 0
            item.selected = True
        return item

    def select(self, forward: bool = True) -> int:
        """Move the selection one item forward or back, wrapping at the ends."""
        if not self.items:
            return 0
        self.items[self._selected].selected = False
        step = 1 if forward else -1
        self._selected = (self._selected + step) % len(self.items)
        self.items[self._selected].selected = True
        return self.selected_number

    def render(self, renderer: Renderer) -> list[DrawCall]:
        calls = []
        for item in self.items:
            color = item.color
            rgb = (color.red / 255.0, color.green / 255.0, color.blue / 255.0)
            calls.append(
                renderer.render_menu_item(self.shader_program_id, self.texture_object_id, item.vao_id, rgb)
            )
        return calls

    def cleanup_graphics(self, renderer: Renderer) -> None:
        """Free the geometry of every item and empty the menu."""
        for item in self.items:
            if item.vao_id in renderer.objects:
                renderer.free_object(item.vao_id)
        self.items.clear()
        self._selected = -1


class App:
    """Base application holding a renderer and a menu."""

    clear_color = MENU_INACTIVE_CLEAR_COLOR

    def __init__(
        self,
        renderer: Renderer | None = None,
        width: int = DEFAULT_FRAMEBUFFER_WIDTH,
        height: int = DEFAULT_FRAMEBUFFER_HEIGHT,
    ):
        self.renderer = renderer if renderer is not None else Renderer(width, height)
        self.menu = GameMenu()
        self.close_requested = False

    def initialize(self) -> None:
        self.renderer.set_clear_color(*self.clear_color)

    def is_menu_active(self) -> bool:
        return self.menu.active

    def set_menu_active(self, active: bool) -> None:
        self.menu.active = active
        if active:
            self.renderer.set_clear_color(*MENU_ACTIVE_CLEAR_COLOR)
            log.info("menu is active, selected option is #%d", self.menu.selected_number)
        else:
            self.renderer.set_clear_color(*MENU_INACTIVE_CLEAR_COLOR)
            log.info("menu is not active")

    def select_next_menu_item(self) -> int:
        number = self.menu.select(True)
        log.info("selected option is #%d", number)
        return number

    def select_prev_menu_item(self) -> int:
        number = self.menu.select(False)
        log.info("selected option is #%d", number)
        return number

    def execute_menu_action(self) -> None:
        log.info("execute menu action #%d", self.menu.selected_number)

    def request_close(self) -> None:
        self.close_requested = True

    def update(self, delta_time: float) -> None:
        """Advance the application state by ``delta_time`` milliseconds."""

    def render(self) -> list[DrawCall]:
        if self.menu.initialized and self.menu.active:
            return self.menu.render(self.renderer)
        return []

    def on_mouse_move(self, delta_x: float, delta_y: float) -> None:
        """React to mouse motion."""

    def on_f2(self, mods: int) -> None:
        """React to the F2 key."""

    def on_f3(self, mods: int) -> None:
        """React to the F3 key."""


class EmptyApp(App):
    """An application that draws nothing but its menu."""

    clear_color = EMPTY_APP_CLEAR_COLOR


class CubeTestApp(App):
    """A spinning test object that the mouse moves across the ground plane."""

    clear_color = MENU_INACTIVE_CLEAR_COLOR

    def __init__(self, renderer: Renderer | None = None, **kwargs):
        super().__init__(renderer, **kwargs)
        self.current_delta_time = 0.0
        self.object_rotation = 0.0
        self.object_position = Vector3()
        self.rotation_speed = DEFAULT_ROTATION_SPEED

    @property
    def model_transform(self) -> Transform:
        return Transform(math.radians(self.object_rotation), self.object_position, 0.5)

    def update(self, delta_time: float) -> None:
        if delta_time <= 0.0:
            return
        self.current_delta_time = delta_time
        self.object_rotation = advance_rotation(self.object_rotation, self.rotation_speed, delta_time)

    def on_mouse_move(self, delta_x: float, delta_y: float) -> None:
        if delta_x < MOUSE_DELTA_LIMIT and delta_y < MOUSE_DELTA_LIMIT:
            self.object_position += Vector3(
                -delta_x * DEFAULT_CAMERA_MOVE_SPEED, 0.0, -delta_y * DEFAULT_CAMERA_MOVE_SPEED
            )