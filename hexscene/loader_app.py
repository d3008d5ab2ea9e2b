"""Model viewer: a menu to pick a model file, and a spinning view of the loaded model."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Callable

from hexscene.app import (
    DEFAULT_CAMERA_MOVE_SPEED,
    DEFAULT_ROTATION_SPEED,
    KEY_MOD_SHIFT,
    MENU_INACTIVE_CLEAR_COLOR,
    MOUSE_DELTA_LIMIT,
    App,
    Transform,
    advance_rotation,
)
from hexscene.model import Model3D, ModelError
from hexscene.model import load_model as read_model
from hexscene.renderer import SHADER_PROGRAM_MENU, DrawCall, Renderer, RendererError, Vector3

log = logging.getLogger(__name__)

MENU_OPTIONS = ("Load 3D Model", "Options", "Exit")
MENU_LOAD_MODEL = 1
MENU_OPTIONS_ITEM = 2
MENU_EXIT = 3

MENU_START_X = 0.65
MENU_START_Y = 0.8
MENU_ITEM_HEIGHT = 0.2
MENU_DELTA_Y = 0.25
MENU_UV_STEP = 0.25
# Top-left, top-right, bottom-left, bottom-right (u, v) pairs of the first item.
MENU_FIRST_UV = (0.01, 1.0, 0.99, 1.0, 0.01, 0.75, 0.99, 0.75)
# The texture holds an unused row before the "Exit" label, so it is skipped.
MENU_SKIP_ROW_AFTER = 1

WHITE = (1.0, 1.0, 1.0)

FileChooser = Callable[[], "str | Path | None"]


def _shift_uv(uv: list[float], step: float) -> list[float]:
    """Move every V coordinate down by ``step``."""
    return [value - step if index % 2 else value for index, value in enumerate(uv)]


class ModelViewerApp(App):
    """Loads a model chosen from the menu and shows it turning around the Y axis."""

    clear_color = MENU_INACTIVE_CLEAR_COLOR

    def __init__(
        self,
        renderer: Renderer | None = None,
        menu_texture_file=None,
        file_chooser: FileChooser | None = None,
        **kwargs,
    ):
        super().__init__(renderer, **kwargs)
        self.menu_texture_file = Path(menu_texture_file) if menu_texture_file is not None else None
        self.file_chooser = file_chooser
        self.model: Model3D | None = None
        self.current_delta_time = 0.0
        self.object_rotation = 0.0
        self.object_position = Vector3()
        self.rotation_speed = DEFAULT_ROTATION_SPEED

    def initialize(self) -> None:
        super().initialize()
        if self.menu_texture_file is not None:
            self.initialize_menu()

    def initialize_menu(self) -> None:
        """Load the menu texture and create one textured quad per menu option."""
        if self.menu_texture_file is None or not self.menu_texture_file.is_file():
            raise FileNotFoundError(f"unable to find menu texture: {self.menu_texture_file}")
        renderer = self.renderer
        menu = self.menu
        shader_id = renderer.shader_program_id(SHADER_PROGRAM_MENU)
        menu.shader_program_id = shader_id
        menu.texture_object_id = renderer.load_texture(self.menu_texture_file)

        uv = list(MENU_FIRST_UV)
        y = MENU_START_Y
        for index, label in enumerate(MENU_OPTIONS):
            try:
                vao_id = renderer.allocate_menu_item(MENU_START_X, y, MENU_ITEM_HEIGHT, uv, shader_id)
            except (RendererError, ValueError):
                menu.cleanup_graphics(renderer)
                raise
            menu.add_item(label, MENU_START_X, y, vao_id)
            y -= MENU_DELTA_Y
            uv = _shift_uv(uv, MENU_UV_STEP)
            if index == MENU_SKIP_ROW_AFTER:
                uv = _shift_uv(uv, MENU_UV_STEP)

    def load_model(self, filename) -> Model3D:
        """Replace the current model with one read from ``filename`` and stored in the renderer."""
        self.unload_model()
        model = read_model(filename, self.renderer)
        if not model.geometry_loaded:
            raise ModelError("unable to read model geometry")
        if model.graphics_memory_object_id == 0:
            raise ModelError("unable to save geometry to graphics memory")
        self.model = model
        return model

    def unload_model(self) -> None:
        """Free the current model's geometry and texture, if any."""
        model = self.model
        if model is None:
            return
        if model.graphics_memory_object_id in self.renderer.objects:
            self.renderer.free_object(model.graphics_memory_object_id)
        if model.texture_object_id > 0 and model.texture_object_id in self.renderer.textures:
            self.renderer.delete_texture(model.texture_object_id)
        self.model = None

    def on_f2(self, mods: int) -> None:
        """Show the menu, ask for a model file and load it; hide the menu on success."""
        self.set_menu_active(True)
        if self.file_chooser is None:
            return
        filename = self.file_chooser()
        if not filename:
            return
        log.info("filename to load: %s", filename)
        try:
            self.load_model(filename)
        except ModelError as exc:
            log.error("unable to load 3D model: %s", exc)
        else:
            self.set_menu_active(False)

    def execute_menu_action(self) -> None:
        option = self.menu.selected_number
        if option == MENU_LOAD_MODEL:
            self.on_f2(0)
        elif option == MENU_OPTIONS_ITEM:
            log.info("menu option not implemented")
        elif option == MENU_EXIT:
            self.request_close()

    def on_f3(self, mods: int) -> None:
        """Zoom the camera in, or out when shift is held."""
        self.renderer.zoom_camera(-1.0 if mods & KEY_MOD_SHIFT else 1.0)

    def on_mouse_move(self, delta_x: float, delta_y: float) -> None:
        if delta_x < MOUSE_DELTA_LIMIT and delta_y < MOUSE_DELTA_LIMIT:
            self.object_position += Vector3(
                -delta_x * DEFAULT_CAMERA_MOVE_SPEED, 0.0, -delta_y * DEFAULT_CAMERA_MOVE_SPEED
            )

    def update(self, delta_time: float) -> None:
        if delta_time <= 0.0:
            return
        self.current_delta_time = delta_time
        self.object_rotation = advance_rotation(self.object_rotation, self.rotation_speed, delta_time)

    @property
    def model_transform(self) -> Transform:
        return Transform(math.radians(self.object_rotation), self.object_position)

    def render(self) -> list[DrawCall]:
        if self.menu.initialized and self.menu.active:
            return self.menu.render(self.renderer)
        model = self.model
        if model is not None and model.geometry_loaded and model.graphics_memory_object_id > 0:
            return [self.renderer.render_object(
                model.shader_program_id,
                model.graphics_memory_object_id,
                model.texture_object_id,
                model.num_faces,
                WHITE,
                self.model_transform,
            )]
        return []