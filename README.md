# hexscene

Building blocks for small interactive 3D scenes. The package needs no
graphics library. Its renderer keeps resources in memory and records every
draw as a `DrawCall`, so you can build, inspect and test a scene without a
window.

## Modules

- `hexscene.renderer` provides `Vector3`, an immutable vector with `+`, `-`,
  scalar `*`, `dot`, `cross`, `length` and `normalized()`. It also provides
  `Mesh`, which is triangle geometry with separate index triples for
  positions, normals and UVs, and `Renderer`, described below.
- `hexscene.obj_model`: `ObjModel` reads Wavefront `.obj` files together with
  their `.mtl` material libraries.
- `hexscene.model` provides the `Model3D` base class and `load_model`.
- `hexscene.figures` provides hexagon corner math (`hex_corner`), a flat
  hexagon (`hexagon_geometry`), a pyramid (`pyramid_geometry`) and
  `GeometricFiguresApp`.
- `hexscene.cube`: `cube_geometry(size)` and `MyCubeApp`.
- `hexscene.app` provides `advance_rotation`, `GameMenu`, `App`, `EmptyApp`
  and `CubeTestApp`.
- `hexscene.loader_app`: `ModelViewerApp`.
- `hexscene.menu_item`: `Color` and `MenuItem`.
- `hexscene.aabb`: `AABB2D`, a box given by four corners, with
  `from_bounds(min_x, min_z, max_x, max_z)` and `points_inside(points)`.
  `points_inside` is true when any of the first six points shares an X or a Y
  value with a corner.
- `hexscene.linked_node`: `ListNode` is a node of a circular doubly linked
  list. It supports `link_after`, `unlink`, iteration over data and `len()`.

## The renderer

`Renderer(width=800, height=600)` starts with three shader programs already
registered: `"color_object"`, `"textured_object"` and `"menu"`.

- `shader_program_id(name)` returns the id of a registered shader program.
- `allocate_object(shader_id, mesh)` expands a `Mesh` into per-corner geometry
  and returns a vertex array id. It raises `RendererError` in these cases:
  - the shader is unknown;
  - the mesh has no faces;
  - the mesh has more than 65535 vertices;
  - an index is out of range.
- `free_object(vao_id)` releases geometry.
- `allocate_menu_item(top_x, top_y, height, uv_coords, shader_id)` creates a
  menu quad.
- `create_texture(data, width, height)` accepts 3- or 4-byte pixels.
- `load_texture(filename)` reads uncompressed 24/32-bit TGA files only.
- `delete_texture(texture_id)` releases a texture.
- `render_object(...)` appends a `DrawCall` to `renderer.draw_calls` and
  returns it.
- `zoom_camera(direction)` moves `camera_distance` by `1.5 * direction`. The
  result is kept between 5 and 1000.
- `set_clear_color`, `set_wireframe_mode` and `set_fill_mode` set the
  corresponding renderer state.

## Loading a model

```python
from hexscene.renderer import Renderer
from hexscene.model import load_model

renderer = Renderer()
model = load_model("models/crate.obj", renderer)
print(model.num_vertices, model.num_faces, model.graphics_memory_object_id)
```

`load_model` chooses a loader from the file extension, and only `.obj` is
supported. Any other extension, or a path with none, raises
`hexscene.model.ModelError`.

When you pass a renderer, the model is stored in it with the colour shader.
The textured shader is used instead when all of these hold:

- the model has UVs;
- a material names a texture;
- that texture loads.

To parse an OBJ file without a renderer:

```python
from hexscene.obj_model import ObjModel

model = ObjModel()
model.load_from_file("models/crate.obj")
```

The OBJ reader makes two passes over the file. The first counts entries and
the second fills them in.

- It accepts these statements:
  - `v` and `vn` with three values;
  - `vt` with two or three values;
  - `f` with three or four `v/vt/vn` groups;
  - `mtllib`.
- A quad is split into two triangles.
- Files with 65535 or more vertices, normals or UVs are rejected.
- Indices out of range raise `ModelError`.
- When a file has no normals, each triangle gets a flat face normal.
- A `mtllib` path is resolved against the OBJ file's directory. The material
  library supplies material names, `Kd` colours and `map_Kd` texture names.

## Hexagon geometry

```python
from hexscene.renderer import Vector3
from hexscene.figures import hex_corner, hexagon_geometry

center = Vector3(0.0, 0.0, 0.0)
first_corner = hex_corner(center, 1, 3.0, False)
mesh = hexagon_geometry(center, 3.0)  # six corners, four triangles, normal facing up
```

`hex_corner(center, index, cell_size, pointy=True)` places corner `index` on
the XZ plane at 60 degree steps. When `pointy` is true, the steps are offset
by -30 degrees.

## Running a scene headlessly

```python
from hexscene.cube import MyCubeApp

app = MyCubeApp()
app.initialize()
calls = app.render()   # list of DrawCall
app.close()
```

An app's `update(delta_time)` takes milliseconds. `CubeTestApp`,
`GeometricFiguresApp` and `ModelViewerApp` advance their rotation by the
rotation speed, which is 90 degrees per second by default, and wrap the angle
at 360 (see `advance_rotation`).

In `CubeTestApp` and `ModelViewerApp`, `on_mouse_move` moves the object
across the XZ plane, but only when both deltas are below 100. In
`GeometricFiguresApp`, `on_f3` toggles between fill and wireframe modes.

`ModelViewerApp` accepts two optional arguments:

- `menu_texture_file`, a TGA image for its "Load 3D Model", "Options" and
  "Exit" menu;
- `file_chooser`, a callable that returns a path.

`execute_menu_action` behaves as follows:

- **Load 3D Model** asks the chooser for a path and loads that model.
- **Options** only logs a message.
- **Exit** sets `close_requested`.

## What it does not do

The package opens no window and draws no pixels on a GPU. It has no main loop
and no keyboard or mouse handling of its own. Your code calls the apps'
`update`, `render` and `on_*` methods.

There is no file dialog, so `ModelViewerApp` relies on the `file_chooser` you
pass it. The package has no command-line entry point.