"""In-memory scene renderer: shader programs, geometry, textures and draw calls."""

from __future__ import annotations

import itertools
import math
import struct
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Sequence

MIN_CAMERA_DISTANCE = 5.0
MAX_CAMERA_DISTANCE = 1000.0
MOVE_CAMERA_DELTA = 1.5
DEFAULT_CAMERA_DISTANCE = 10.0
DEFAULT_FRAMEBUFFER_WIDTH = 800
DEFAULT_FRAMEBUFFER_HEIGHT = 600
MAX_VERTEX_COUNT = 65535

SHADER_PROGRAM_COLOR_OBJECT = "color_object"
SHADER_PROGRAM_TEXTURED_OBJECT = "textured_object"
SHADER_PROGRAM_MENU = "menu"
KNOWN_SHADER_PROGRAMS = (
    SHADER_PROGRAM_COLOR_OBJECT,
    SHADER_PROGRAM_TEXTURED_OBJECT,
    SHADER_PROGRAM_MENU,
)


class RendererError(Exception):
    """Raised when a graphics resource is missing or malformed."""


@dataclass(frozen=True)
class Vector3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    @property
    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Return the unit vector in the same direction."""
        length = self.length
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self * (1.0 / length)


Triangle = tuple[int, int, int]


@dataclass
class Mesh:
    """Multi-indexed triangle geometry: separate index triples for positions, normals and UVs."""

    vertices: Sequence[Iterable[float]]
    vertex_indices: Sequence[Triangle]
    normals: Sequence[Iterable[float]] = field(default_factory=list)
    normal_indices: Sequence[Triangle] = field(default_factory=list)
    uv_coords: Sequence[Iterable[float]] = field(default_factory=list)
    uv_indices: Sequence[Triangle] = field(default_factory=list)

    @property
    def num_faces(self) -> int:
        return len(self.vertex_indices)


class PrimitiveMode(Enum):
    POINTS = 0
    LINES = 1
    LINE_STRIP = 2
    LINE_LOOP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


class BlendMode(Enum):
    ZERO = 0
    ONE = 1
    SRC_COLOR = 2
    ONE_MINUS_SRC_COLOR = 3
    DST_COLOR = 4
    ONE_MINUS_DST_COLOR = 5
    SRC_ALPHA = 6
    ONE_MINUS_SRC_ALPHA = 7
    DST_ALPHA = 8
    ONE_MINUS_DST_ALPHA = 9
    CONSTANT_COLOR = 10
    ONE_MINUS_CONSTANT_COLOR = 11
    CONSTANT_ALPHA = 12
    ONE_MINUS_CONSTANT_ALPHA = 13


class PolygonMode(Enum):
    FILL = "fill"
    LINE = "line"


@dataclass
class RenderGeometry:
    """Flattened per-corner geometry held for one vertex array object."""

    shader_id: int
    vertices: list[tuple[float, ...]]
    normals: list[tuple[float, ...]]
    uv_coords: list[tuple[float, ...]]

    @property
    def num_triangles(self) -> int:
        return len(self.vertices) // 3


@dataclass(frozen=True)
class Texture:
    width: int
    height: int
    channels: int
    data: bytes


@dataclass(frozen=True)
class DrawCall:
    shader_id: int
    vao_id: int
    texture_id: int
    num_faces: int
    color: tuple[float, ...]
    model_matrix: Any = None
    mode: PrimitiveMode = PrimitiveMode.TRIANGLES
    indexed: bool = False


def _expand_corners(values, indices, size, what, num_faces, required=False):
    if not values or not indices:
        if required:
            raise RendererError(f"mesh has no {what} data")
        return [(0.0,) * size] * (num_faces * 3)
    if len(indices) < num_faces:
        raise RendererError(f"fewer {what} index triples than faces")
    corners = []
    for triangle in indices[:num_faces]:
        if len(triangle) != 3:
            raise RendererError(f"{what} index group must hold three indices")
        for index in triangle:
            if not 0 <= index < len(values):
                raise RendererError(f"{what} index {index} out of range")
            value = tuple(float(component) for component in values[index])
            if len(value) != size:
                raise RendererError(f"{what} must have {size} components")
            corners.append(value)
    return corners


def _read_tga(data: bytes) -> tuple[int, int, bytes]:
    """Decode an uncompressed true-colour TGA image into RGBA rows, bottom row first."""
    if len(data) < 18:
        raise RendererError("truncated TGA header")
    id_length, colormap_type, image_type = data[0], data[1], data[2]
    width, height, bits_per_pixel, descriptor = struct.unpack_from("<HHBB", data, 12)
    if colormap_type != 0 or image_type != 2:
        raise RendererError("only uncompressed true-colour TGA images are supported")
    if bits_per_pixel not in (24, 32):
        raise RendererError(f"unsupported TGA pixel depth: {bits_per_pixel}")
    channels = bits_per_pixel // 8
    row_size = width * channels
    start = 18 + id_length
    raw = data[start:start + row_size * height]
    if len(raw) < row_size * height:
        raise RendererError("truncated TGA pixel data")
    rows = [raw[offset:offset + row_size] for offset in range(0, len(raw), row_size)] if row_size else []
    if descriptor & 0x20:
        rows.reverse()
    out = bytearray()
    for row in rows:
        for pixel in struct.iter_unpack(f"{channels}B", row):
            blue, green, red = pixel[:3]
            alpha = pixel[3] if channels == 4 else 255
            out += bytes((red, green, blue, alpha))
    return width, height, bytes(out)


class Renderer:
    """Keeps graphics resources and records draw calls made against them."""

    def __init__(self, width: int = DEFAULT_FRAMEBUFFER_WIDTH, height: int = DEFAULT_FRAMEBUFFER_HEIGHT):
        self.framebuffer_width = width
        self.framebuffer_height = height
        self.camera_distance = DEFAULT_CAMERA_DISTANCE
        self.clear_color = (0.0, 0.0, 0.0)
        self.polygon_mode = PolygonMode.FILL
        self.blending = False
        self.blend_factors = (BlendMode.ONE, BlendMode.ZERO)
        self.objects: dict[int, RenderGeometry] = {}
        self.textures: dict[int, Texture] = {}
        self.draw_calls: list[DrawCall] = []
        self._shader_ids = itertools.count(1)
        self._vao_ids = itertools.count(1)
        self._texture_ids = itertools.count(1)
        self._shaders: dict[str, int] = {}
        for name in KNOWN_SHADER_PROGRAMS:
            self.create_shader_program(name)

    @property
    def aspect_ratio(self) -> float:
        return self.framebuffer_width / self.framebuffer_height

    def create_shader_program(self, name: str) -> int:
        """Register a shader program under a name and return its id."""
        if name in self._shaders:
            raise RendererError(f"shader program {name!r} already exists")
        shader_id = next(self._shader_ids)
        self._shaders[name] = shader_id
        return shader_id

    def shader_program_id(self, name: str) -> int:
        try:
            return self._shaders[name]
        except KeyError:
            raise RendererError(f"unknown shader program {name!r}") from None

    def _require_shader(self, shader_id: int) -> None:
        if shader_id not in self._shaders.values():
            raise RendererError(f"unknown shader program id {shader_id}")

    def _require_object(self, vao_id: int) -> RenderGeometry:
        try:
            return self.objects[vao_id]
        except KeyError:
            raise RendererError(f"unknown vertex array object {vao_id}") from None

    def allocate_object(self, shader_id: int, mesh: Mesh) -> int:
        """Expand a multi-indexed mesh into per-corner geometry and return its vertex array id."""
        self._require_shader(shader_id)
        if mesh.num_faces == 0:
            raise RendererError("mesh has no faces")
        if len(mesh.vertices) > MAX_VERTEX_COUNT:
            raise RendererError(f"mesh cannot have more than {MAX_VERTEX_COUNT} vertices")
        faces = mesh.num_faces
        geometry = RenderGeometry(
            shader_id=shader_id,
            vertices=_expand_corners(mesh.vertices, mesh.vertex_indices, 3, "vertex", faces, required=True),
            normals=_expand_corners(mesh.normals, mesh.normal_indices, 3, "normal", faces),
            uv_coords=_expand_corners(mesh.uv_coords, mesh.uv_indices, 2, "uv", faces),
        )
        vao_id = next(self._vao_ids)
        self.objects[vao_id] = geometry
        return vao_id

    def free_object(self, vao_id: int) -> None:
        self._require_object(vao_id)
        del self.objects[vao_id]

    def allocate_menu_item(self, top_x, top_y, height, uv_coords, shader_id) -> int:
        """Create a quad spanning -top_x..top_x horizontally and top_y down by height."""
        self._require_shader(shader_id)
        uv = [float(value) for value in uv_coords]
        if len(uv) != 8:
            raise ValueError("menu item needs eight UV values: top-left, top-right, bottom-left, bottom-right")
        if height <= 0:
            raise ValueError("menu item height must be positive")
        top_left = (-top_x, top_y, 0.0)
        top_right = (top_x, top_y, 0.0)
        bottom_left = (-top_x, top_y - height, 0.0)
        bottom_right = (top_x, top_y - height, 0.0)
        uv_tl, uv_tr, uv_bl, uv_br = (tuple(uv[i:i + 2]) for i in (0, 2, 4, 6))
        vertices = [top_left, bottom_left, top_right, top_right, bottom_left, bottom_right]
        uvs = [uv_tl, uv_bl, uv_tr, uv_tr, uv_bl, uv_br]
        vao_id = next(self._vao_ids)
        self.objects[vao_id] = RenderGeometry(shader_id, vertices, [(0.0, 0.0, 1.0)] * 6, uvs)
        return vao_id

    def create_texture(self, data: bytes, width: int, height: int) -> int:
        if width <= 0 or height <= 0:
            raise ValueError("texture dimensions must be positive")
        data = bytes(data)
        pixels = width * height
        if len(data) not in (pixels * 3, pixels * 4):
            raise ValueError("texture data size does not match its dimensions")
        texture_id = next(self._texture_ids)
        self.textures[texture_id] = Texture(width, height, len(data) // pixels, data)
        return texture_id

    def load_texture(self, filename) -> int:
        """Read an uncompressed TGA file and create an RGBA texture from it."""
        width, height, pixels = _read_tga(Path(filename).read_bytes())
        return self.create_texture(pixels, width, height)

    def delete_texture(self, texture_id: int) -> None:
        if texture_id not in self.textures:
            raise RendererError(f"unknown texture {texture_id}")
        del self.textures[texture_id]

    def render_object(
        self,
        shader_id,
        vao_id,
        texture_id,
        num_faces,
        color=(1.0, 1.0, 1.0),
        model_matrix=None,
        mode=PrimitiveMode.TRIANGLES,
        indexed=False,
    ) -> DrawCall:
        self._require_shader(shader_id)
        self._require_object(vao_id)
        if texture_id and texture_id not in self.textures:
            raise RendererError(f"unknown texture {texture_id}")
        if num_faces < 0:
            raise ValueError("number of faces cannot be negative")
        call = DrawCall(shader_id, vao_id, texture_id, num_faces, tuple(color), model_matrix, mode, indexed)
        self.draw_calls.append(call)
        return call

    def render_menu_item(self, shader_id, texture_id, vao_id, color) -> DrawCall:
        return self.render_object(shader_id, vao_id, texture_id, 2, color)

    def zoom_camera(self, direction: float) -> float:
        """Move the camera along its view axis, kept within the allowed distance range."""
        distance = self.camera_distance + direction * MOVE_CAMERA_DELTA
        self.camera_distance = min(max(distance, MIN_CAMERA_DISTANCE), MAX_CAMERA_DISTANCE)
        return self.camera_distance

    def set_clear_color(self, r, g, b) -> None:
        self.clear_color = (float(r), float(g), float(b))

    def set_wireframe_mode(self) -> None:
        self.polygon_mode = PolygonMode.LINE

    def set_fill_mode(self) -> None:
        self.polygon_mode = PolygonMode.FILL

    def set_blending_mode(self, source: BlendMode, destination: BlendMode) -> None:
        self.blend_factors = (BlendMode(source), BlendMode(destination))