"""Base class for 3D models and the loader that picks a format by file extension."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from hexscene.renderer import (
    SHADER_PROGRAM_COLOR_OBJECT,
    SHADER_PROGRAM_TEXTURED_OBJECT,
    Mesh,
    Renderer,
    RendererError,
    Vector3,
)


class ModelError(Exception):
    """Raised when a model file cannot be read or its geometry cannot be used."""


class Model3D(ABC):
    """Triangle geometry with per-corner indices into vertices, normals and UVs."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Drop all geometry, materials and graphics identifiers."""
        self.vertices: list[tuple[float, ...]] = []
        self.normals: list[tuple[float, ...]] = []
        self.uv_coords: list[tuple[float, ...]] = []
        self.vertex_indices: list[tuple[int, int, int]] = []
        self.normal_indices: list[tuple[int, int, int]] = []
        self.uv_indices: list[tuple[int, int, int]] = []
        self.material_names: list[str] = []
        self.material_filenames: dict[str, str] = {}
        self.material_colors: dict[str, Vector3] = {}
        self.texture_filename: str | None = None
        self.source_path: Path | None = None
        self.geometry_loaded = False
        self.has_normals = False
        self.has_uvs = False
        self.has_textures = False
        self.graphics_memory_object_id = 0
        self.shader_program_id = 0
        self.texture_object_id = 0

    @abstractmethod
    def load_from_file(self, filename) -> None:
        """Read geometry from a file, raising ModelError when it cannot be used."""

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_normals(self) -> int:
        return len(self.normals)

    @property
    def num_uv_coords(self) -> int:
        return len(self.uv_coords)

    @property
    def num_faces(self) -> int:
        return len(self.vertex_indices)

    @property
    def texture_path(self) -> Path | None:
        """The texture file, resolved against the model file's directory."""
        if not self.texture_filename:
            return None
        path = Path(self.texture_filename)
        if not path.is_absolute() and self.source_path is not None:
            path = self.source_path.parent / path
        return path

    @property
    def mesh(self) -> Mesh:
        return Mesh(
            vertices=self.vertices,
            vertex_indices=self.vertex_indices,
            normals=self.normals,
            normal_indices=self.normal_indices,
            uv_coords=self.uv_coords,
            uv_indices=self.uv_indices,
        )

    def _compute_face_normals(self) -> None:
        """Give every triangle its own flat normal."""
        normals = []
        for a, b, c in self.vertex_indices:
            va, vb, vc = (Vector3(*self.vertices[index]) for index in (a, b, c))
            normal = (vb - va).cross(vc - va)
            try:
                normal = normal.normalized()
            except ValueError:
                pass
            normals.append(tuple(normal))
        self.normals = normals
        self.normal_indices = [(i, i, i) for i in range(len(normals))]

    def _upload(self, renderer: Renderer) -> None:
        """Pick a shader, load the texture if any, and store the geometry in the renderer."""
        try:
            shader_id = renderer.shader_program_id(SHADER_PROGRAM_COLOR_OBJECT)
            self.texture_object_id = 0
            if self.has_uvs and self.has_textures and self.texture_path is not None:
                try:
                    texture_id = renderer.load_texture(self.texture_path)
                except (OSError, RendererError, ValueError):
                    pass
                else:
                    self.texture_object_id = texture_id
                    shader_id = renderer.shader_program_id(SHADER_PROGRAM_TEXTURED_OBJECT)
            self.shader_program_id = shader_id
            self.graphics_memory_object_id = renderer.allocate_object(shader_id, self.mesh)
        except RendererError as exc:
            if self.texture_object_id:
                renderer.delete_texture(self.texture_object_id)
                self.texture_object_id = 0
            self.graphics_memory_object_id = 0
            raise ModelError(f"unable to save geometry to graphics memory: {exc}") from exc


def _model_class(extension: str) -> type[Model3D]:
    from hexscene.obj_model import ObjModel

    loaders: dict[str, type[Model3D]] = {"obj": ObjModel}
    try:
        return loaders[extension]
    except KeyError:
        raise ModelError(f"unsupported model format: {extension!r}") from None


def load_model(filename, renderer: Renderer | None = None) -> Model3D:
    """Load a model of the type given by the file extension, uploading it if a renderer is given."""
    path = Path(filename)
    if not path.suffix:
        raise ModelError(f"cannot determine the file type of {str(path)!r}")
    model = _model_class(path.suffix[1:].lower())()
    model.load_from_file(path)
    if renderer is not None:
        model._upload(renderer)
    return model