"""Vectors, meshes, OBJ/MTL loading, hexagon, pyramid and cube geometry, menus and a recording renderer for small 3D scenes."""

__version__ = "0.1.0"

__all__ = [
    "aabb",
    "app",
    "cube",
    "figures",
    "linked_node",
    "loader_app",
    "menu_item",
    "model",
    "obj_model",
    "renderer",
]