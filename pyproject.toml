[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexscene"
version = "0.1.0"
description = "Headless building blocks for small 3D scenes: vectors and meshes, OBJ/MTL loading, hexagon, pyramid and cube geometry, menus and a renderer that records draw calls."
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "obj", "mtl", "mesh", "hexagon", "geometry", "renderer", "menu", "tga"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hexscene"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
