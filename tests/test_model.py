import struct

import pytest

from hexscene.model import Model3D, ModelError, load_model
from hexscene.obj_model import ObjModel
from hexscene.renderer import (
    SHADER_PROGRAM_COLOR_OBJECT,
    SHADER_PROGRAM_TEXTURED_OBJECT,
    Renderer,
)

TRIANGLE = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"

TEXTURED = (
    "mtllib scene.mtl\n"
    "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
    "vt 0 0\nvt 1 0\nvt 0 1\n"
    "f 1/1 2/2 3/3\n"
)


def _tga_pixel() -> bytes:
    header = struct.pack("<BBB5sHHHHBB", 0, 0, 2, b"\0" * 5, 0, 0, 1, 1, 24, 0)
    return header + bytes((10, 20, 30))


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_model_without_renderer(tmp_path):
    model = load_model(_write(tmp_path, "tri.obj", TRIANGLE))
    assert isinstance(model, ObjModel)
    assert model.geometry_loaded
    assert model.num_faces == 1
    assert model.graphics_memory_object_id == 0


def test_extension_is_case_insensitive(tmp_path):
    model = load_model(_write(tmp_path, "TRI.OBJ", TRIANGLE))
    assert model.num_vertices == 3


def test_missing_extension_rejected(tmp_path):
    with pytest.raises(ModelError):
        load_model(_write(tmp_path, "noextension", TRIANGLE))


def test_unsupported_format_rejected(tmp_path):
    with pytest.raises(ModelError):
        load_model(_write(tmp_path, "tri.stl", TRIANGLE))


def test_upload_uses_color_shader(tmp_path):
    renderer = Renderer()
    model = load_model(_write(tmp_path, "tri.obj", TRIANGLE), renderer)
    assert model.shader_program_id == renderer.shader_program_id(SHADER_PROGRAM_COLOR_OBJECT)
    assert model.graphics_memory_object_id in renderer.objects
    assert renderer.objects[model.graphics_memory_object_id].num_triangles == model.num_faces
    assert model.texture_object_id == 0


def test_upload_with_texture(tmp_path):
    (tmp_path / "grass.tga").write_bytes(_tga_pixel())
    _write(tmp_path, "scene.mtl", "newmtl grass\nmap_Kd grass.tga\n")
    renderer = Renderer()
    model = load_model(_write(tmp_path, "tex.obj", TEXTURED), renderer)
    assert model.has_textures and model.has_uvs
    assert model.texture_path == tmp_path / "grass.tga"
    assert model.shader_program_id == renderer.shader_program_id(SHADER_PROGRAM_TEXTURED_OBJECT)
    assert model.texture_object_id in renderer.textures


def test_missing_texture_falls_back_to_color_shader(tmp_path):
    _write(tmp_path, "scene.mtl", "newmtl grass\nmap_Kd absent.tga\n")
    renderer = Renderer()
    model = load_model(_write(tmp_path, "tex.obj", TEXTURED), renderer)
    assert model.texture_object_id == 0
    assert model.shader_program_id == renderer.shader_program_id(SHADER_PROGRAM_COLOR_OBJECT)
    assert renderer.textures == {}


def test_upload_without_faces_fails(tmp_path):
    renderer = Renderer()
    with pytest.raises(ModelError):
        load_model(_write(tmp_path, "empty.obj", "v 0 0 0\n"), renderer)
    assert renderer.objects == {}


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Model3D()


def test_mesh_matches_model(tmp_path):
    model = load_model(_write(tmp_path, "tri.obj", TRIANGLE))
    mesh = model.mesh
    assert mesh.num_faces == model.num_faces
    assert list(mesh.vertices) == model.vertices