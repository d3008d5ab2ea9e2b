"""Simple geometric figures: a flat hexagon cell and a pyramid."""

from __future__ import annotations

import math
from pathlib import Path

from hexscene.app import App, Transform, advance_rotation, DEFAULT_ROTATION_SPEED, EMPTY_APP_CLEAR_COLOR
from hexscene.renderer import (
    SHADER_PROGRAM_COLOR_OBJECT,
    SHADER_PROGRAM_TEXTURED_OBJECT,
    DrawCall,
    Mesh,
    Renderer,
    Vector3,
)

HEXAGON_CELL_SIZE = 3.0
HEXAGON_TRIANGLES = ((0, 2, 1), (5, 2, 0), (5, 3, 2), (5, 4, 3))
PYRAMID_OFFSET = Vector3(3.0, 0.0, 0.0)
WHITE = (1.0, 1.0, 1.0)


def hex_corner(center: Vector3, index: int, cell_size: float, pointy: bool = True) -> Vector3:
    """Corner ``index`` of a hexagon on the XZ plane around ``center``."""
    angle = math.radians(60.0 * index - (30.0 if pointy else 0.0))
    return Vector3(
        center.x + cell_size * math.cos(angle),
        center.y,
        center.z + cell_size * math.sin(angle),
    )


def hexagon_geometry(center: Vector3 = Vector3(), cell_size: float = HEXAGON_CELL_SIZE) -> Mesh:
    """A flat hexagon split into four triangles, facing up."""
    corners = [tuple(hex_corner(center, index, cell_size)) for index in range(1, 7)]
    return Mesh(
        vertices=corners,
        vertex_indices=list(HEXAGON_TRIANGLES),
        normals=[(0.0, 1.0, 0.0)],
        normal_indices=[(0, 0, 0)] * len(HEXAGON_TRIANGLES),
        uv_coords=[(0.0, 0.0)] * len(corners),
        uv_indices=list(HEXAGON_TRIANGLES),
    )


def pyramid_geometry() -> Mesh:
    """A square-based pyramid with one flat normal per face."""
    height, half_x, half_z = 2.25, 0.75, 1.0
    vertices = [
        (0.0, height, 0.0),
        (-half_x, 0.0, half_z),
        (half_x, 0.0, half_z),
        (-half_x, 0.0, -half_z),
        (half_x, 0.0, -half_z),
    ]
    uvs = [(0.5, 0.11), (0.25, 0.99), (0.75, 0.99), (0.11, 0.40), (0.99, 0.40)]
    faces = [(0, 1, 2), (0, 2, 4), (0, 4, 3), (0, 3, 1), (1, 3, 2), (2, 3, 4)]
    normals = []
    for a, b, c in faces:
        v1, v2, v3 = (Vector3(*vertices[i]) for i in (a, b, c))
        normals.append(tuple((v2 - v1).cross(v3 - v1).normalized()))
    return Mesh(
        vertices=vertices,
        vertex_indices=faces,
        normals=normals,
        normal_indices=[(i, i, i) for i in range(len(faces))],
        uv_coords=uvs,
        uv_indices=faces,
    )


class GeometricFiguresApp(App):
    """Draws a hexagon with the colour shader and a pyramid beside it with the texture shader."""

    clear_color = EMPTY_APP_CLEAR_COLOR

    def __init__(self, renderer: Renderer | None = None, texture_file=None, **kwargs):
        super().__init__(renderer, **kwargs)
        self.texture_file = Path(texture_file) if texture_file is not None else None
        self.current_delta_time = 0.0
        self.object_rotation = 0.0
        self.object_position = Vector3(-1.5, 0.0, 0.0)
        self.rotation_speed = DEFAULT_ROTATION_SPEED
        self.color_shader_id = 0
        self.textured_shader_id = 0
        self.texture_id = 0
        self.hexagon_vao = 0
        self.hexagon_faces = 0
        self.pyramid_vao = 0
        self.pyramid_faces = 0
        self.render_polygon_mode = 0
        self.initialized = False

    def initialize(self) -> None:
        """Look up shaders, load the texture and store both figures' geometry."""
        super().initialize()
        renderer = self.renderer
        self.color_shader_id = renderer.shader_program_id(SHADER_PROGRAM_COLOR_OBJECT)
        self.textured_shader_id = renderer.shader_program_id(SHADER_PROGRAM_TEXTURED_OBJECT)
        if self.texture_file is not None:
            self.texture_id = renderer.load_texture(self.texture_file)

        hexagon = hexagon_geometry(Vector3(), HEXAGON_CELL_SIZE)
        self.hexagon_vao = renderer.allocate_object(self.color_shader_id, hexagon)
        self.hexagon_faces = hexagon.num_faces

        pyramid = pyramid_geometry()
        self.pyramid_vao = renderer.allocate_object(self.color_shader_id, pyramid)
        self.pyramid_faces = pyramid.num_faces

        renderer.set_wireframe_mode()
        self.render_polygon_mode = 0
        self.initialized = True

    def update(self, delta_time: float) -> None:
        if delta_time <= 0.0:
            return
        self.current_delta_time = delta_time
        self.object_rotation = advance_rotation(self.object_rotation, self.rotation_speed, delta_time)

    def render(self) -> list[DrawCall]:
        if self.menu.initialized and self.menu.active:
            return self.menu.render(self.renderer)
        calls = []
        if self.hexagon_vao and self.hexagon_faces > 0:
            calls.append(self.renderer.render_object(
                self.color_shader_id, self.hexagon_vao, 0, self.hexagon_faces, WHITE,
                Transform(0.0, self.object_position),
            ))
            if self.pyramid_vao and self.pyramid_faces > 0:
                calls.append(self.renderer.render_object(
                    self.textured_shader_id, self.pyramid_vao, self.texture_id, self.pyramid_faces, WHITE,
                    Transform(0.0, self.object_position + PYRAMID_OFFSET),
                ))
        return calls

    def on_f3(self, mods: int) -> None:
        """Toggle between filled and wireframe polygons."""
        if self.render_polygon_mode == 0:
            self.renderer.set_fill_mode()
            self.render_polygon_mode = 1
        else:
            self.renderer.set_wireframe_mode()
            self.render_polygon_mode = 0

    def close(self) -> None:
        """Release the texture and geometry held in the renderer."""
        if self.texture_id:
            self.renderer.delete_texture(self.texture_id)
            self.texture_id = 0
        for attr in ("hexagon_vao", "pyramid_vao"):
            vao = getattr(self, attr)
            if vao:
                self.renderer.free_object(vao)
                setattr(self, attr, 0)
        self.hexagon_faces = 0
        self.pyramid_faces = 0
        self.initialized = False