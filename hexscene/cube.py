"""A textured cube built from shared corners with duplicated UV seams."""

from __future__ import annotations

import logging
import math
from pathlib import Path

from hexscene.app import App, Transform
from hexscene.renderer import (
    SHADER_PROGRAM_TEXTURED_OBJECT,
    DrawCall,
    Mesh,
    Renderer,
    RendererError,
    Vector3,
)

log = logging.getLogger(__name__)

DEFAULT_CUBE_SIZE = 2.0
CUBE_CLEAR_COLOR = (0.55, 0.60, 0.25)
CUBE_ROTATION_Y_DEGREES = 125.0
WHITE = (1.0, 1.0, 1.0)

# Two triangles per side: front, right, left, top, bottom, back.
CUBE_TRIANGLES = (
    (0, 2, 1), (1, 2, 3),
    (1, 3, 5), (5, 3, 7),
    (4, 6, 0), (0, 6, 2),
    (4, 0, 5), (5, 0, 1),
    (2, 6, 3), (3, 6, 7),
    (5, 7, 4), (4, 7, 6),
)

CUBE_NORMALS = (
    (0.0, 0.0, 1.0),
    (1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, -1.0),
)

# Texture layout is an unfolded cross; corners shared in 3D are duplicated in UV space.
CUBE_UVS = (
    (0.25, 0.33), (0.50, 0.33), (0.25, 0.66), (0.50, 0.66),
    (0.25, 0.00), (0.50, 0.00), (0.25, 0.66), (0.50, 0.66),
    (0.00, 0.33), (0.00, 0.66), (0.75, 0.33), (0.75, 0.66),
    (1.00, 0.33), (1.00, 0.66),
)

CUBE_UV_TRIANGLES = (
    (0, 2, 1), (1, 2, 3),
    (1, 3, 10), (10, 3, 11),
    (8, 9, 0), (0, 9, 2),
    (4, 0, 5), (5, 0, 1),
    (2, 6, 3), (3, 6, 7),
    (10, 11, 12), (12, 11, 13),
)


def cube_geometry(size: float = DEFAULT_CUBE_SIZE) -> Mesh:
    """A cube of edge ``size`` standing on the XZ plane, centred on the Y axis."""
    if size <= 0:
        raise ValueError("cube size must be positive")
    half = size / 2.0
    vertices = [
        (x, y, z)
        for z in (half, -half)
        for y in (size, 0.0)
        for x in (-half, half)
    ]
    return Mesh(
        vertices=vertices,
        vertex_indices=list(CUBE_TRIANGLES),
        normals=list(CUBE_NORMALS),
        normal_indices=[(side, side, side) for side in range(6) for _ in range(2)],
        uv_coords=list(CUBE_UVS),
        uv_indices=list(CUBE_UV_TRIANGLES),
    )


class MyCubeApp(App):
    """Shows one textured cube turned around the Y axis."""

    clear_color = CUBE_CLEAR_COLOR

    def __init__(self, renderer: Renderer | None = None, texture_file=None, **kwargs):
        super().__init__(renderer, **kwargs)
        self.texture_file = Path(texture_file) if texture_file is not None else None
        self.shader_program_id = 0
        self.vao_id = 0
        self.texture_id = 0
        self.num_faces = 0

    def initialize(self) -> None:
        """Store the cube geometry and, if it was stored, load its texture."""
        super().initialize()
        try:
            self.shader_program_id = self.renderer.shader_program_id(SHADER_PROGRAM_TEXTURED_OBJECT)
        except RendererError:
            log.error("unable to load shader for object")
            self.shader_program_id = 0
            return

        mesh = cube_geometry(DEFAULT_CUBE_SIZE)
        try:
            self.vao_id = self.renderer.allocate_object(self.shader_program_id, mesh)
        except RendererError as exc:
            log.error("unable to save geometry to graphics memory: %s", exc)
            self.vao_id = 0
            self.num_faces = 0
            return
        self.num_faces = mesh.num_faces

        self.texture_id = 0
        if self.texture_file is None:
            return
        if not self.texture_file.is_file():
            log.error("unable to find resource: %s", self.texture_file)
            return
        try:
            self.texture_id = self.renderer.load_texture(self.texture_file)
        except (OSError, RendererError, ValueError) as exc:
            log.error("unable to load texture for cube: %s", exc)
            self.texture_id = 0

    @property
    def model_transform(self) -> Transform:
        return Transform(math.radians(CUBE_ROTATION_Y_DEGREES), Vector3())

    def render(self) -> list[DrawCall]:
        if self.menu.initialized and self.menu.active:
            return []
        if self.num_faces > 0 and self.vao_id > 0 and self.shader_program_id > 0:
            return [self.renderer.render_object(
                self.shader_program_id,
                self.vao_id,
                self.texture_id,
                self.num_faces,
                WHITE,
                self.model_transform,
            )]
        return []

    def close(self) -> None:
        """Release the texture and the geometry held in the renderer."""
        if self.texture_id > 0:
            self.renderer.delete_texture(self.texture_id)
            self.texture_id = 0
        if self.vao_id > 0:
            self.renderer.free_object(self.vao_id)
            self.vao_id = 0
        self.num_faces = 0