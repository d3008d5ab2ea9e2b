"""Wavefront OBJ models with MTL material libraries."""

from __future__ import annotations

from pathlib import Path

from hexscene.model import Model3D, ModelError
from hexscene.renderer import MAX_VERTEX_COUNT, Vector3


def _parse_floats(args, line_number: int) -> tuple[float, ...]:
    try:
        return tuple(float(arg) for arg in args)
    except ValueError:
        raise ModelError(f"line {line_number}: invalid number in {' '.join(args)!r}") from None


def _parse_index(text: str, count: int, what: str, line_number: int) -> int:
    if not text:
        return 0
    try:
        value = int(text)
    except ValueError:
        raise ModelError(f"line {line_number}: invalid {what} index {text!r}") from None
    if not 1 <= value <= count:
        raise ModelError(f"line {line_number}: {what} index {value} out of range")
    return value - 1


def _color_channel(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        return 0.0
    return value if 0.0 <= value <= 1.0 else 0.0


class ObjModel(Model3D):
    """A model read from an OBJ file in two passes: count, then fill."""

    def reset(self) -> None:
        super().reset()
        self._expected_vertices = 0
        self._expected_normals = 0
        self._expected_uvs = 0
        self._expected_faces = 0

    def load_from_file(self, filename) -> None:
        self.reset()
        path = Path(filename)
        try:
            lines = path.read_text(encoding="utf-8", errors="replace").splitlines()
        except OSError as exc:
            raise ModelError(f"cannot read {str(path)!r}: {exc}") from exc
        self.source_path = path

        for number, line in enumerate(lines, start=1):
            self.parse_line(line, True, number)

        largest = max(self._expected_vertices, self._expected_normals, self._expected_uvs)
        if largest >= MAX_VERTEX_COUNT:
            raise ModelError(
                f"object cannot have {MAX_VERTEX_COUNT} or more vertices, normals or UV coordinates"
            )

        for number, line in enumerate(lines, start=1):
            self.parse_line(line, False, number)

        self.has_normals = bool(self.normals)
        self.has_uvs = bool(self.uv_coords)
        if not self.has_normals:
            self._compute_face_normals()
        self.geometry_loaded = True

    def parse_line(self, line: str, count_only: bool, line_number: int) -> bool:
        """Handle one line; return whether it held a recognised statement."""
        tokens = line.split()
        if not tokens:
            return False
        keyword, args = tokens[0], tokens[1:]

        if keyword in ("v", "vn"):
            if len(args) != 3:
                return False
            values = _parse_floats(args, line_number)
            if keyword == "v":
                if count_only:
                    self._expected_vertices += 1
                else:
                    self.vertices.append(values)
            elif count_only:
                self._expected_normals += 1
            else:
                self.normals.append(values)
            return True

        if keyword == "vt":
            if len(args) not in (2, 3):
                return False
            values = _parse_floats(args, line_number)[:2]
            if count_only:
                self._expected_uvs += 1
            else:
                self.uv_coords.append(values)
            return True

        if keyword == "f":
            if len(args) not in (3, 4):
                return False
            if count_only:
                self._expected_faces += len(args) - 2
            else:
                self._add_face(args, line_number)
            return True

        if keyword == "mtllib":
            if not args:
                return False
            if not count_only:
                self._load_materials(args[0], line_number)
            return True

        return False

    def _add_face(self, groups, line_number: int) -> None:
        corners = [self._parse_group(group, line_number) for group in groups]
        triangles = [(0, 1, 2)]
        if len(corners) == 4:
            triangles.append((0, 2, 3))
        for triangle in triangles:
            picked = [corners[i] for i in triangle]
            self.vertex_indices.append(tuple(corner[0] for corner in picked))
            self.uv_indices.append(tuple(corner[1] for corner in picked))
            self.normal_indices.append(tuple(corner[2] for corner in picked))

    def _parse_group(self, group: str, line_number: int) -> tuple[int, int, int]:
        parts = group.split("/")
        if len(parts) > 3 or not parts[0]:
            raise ModelError(f"line {line_number}: malformed face group {group!r}")
        parts += [""] * (3 - len(parts))
        return (
            _parse_index(parts[0], self._expected_vertices, "vertex", line_number),
            _parse_index(parts[1], self._expected_uvs, "uv", line_number),
            _parse_index(parts[2], self._expected_normals, "normal", line_number),
        )

    def _load_materials(self, name: str, line_number: int) -> None:
        path = Path(name)
        if not path.is_absolute() and self.source_path is not None:
            path = self.source_path.parent / path
        try:
            found = self.read_mtllib(path)
        except OSError as exc:
            raise ModelError(f"line {line_number}: cannot read material library {name!r}") from exc
        if not found:
            raise ModelError(f"line {line_number}: material library {name!r} defines no materials")
        texture = next(
            (self.material_filenames[m] for m in self.material_names if m in self.material_filenames),
            None,
        )
        if texture:
            self.texture_filename = texture
            self.has_textures = True

    def read_mtllib(self, filename) -> bool:
        """Read material names, diffuse colours and diffuse texture files; True if any material."""
        self.material_names = []
        self.material_filenames = {}
        self.material_colors = {}
        current: str | None = None
        with open(filename, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                tokens = line.split()
                if not tokens:
                    continue
                keyword = tokens[0]
                if keyword == "newmtl" and len(tokens) >= 2:
                    current = tokens[1]
                    self.material_names.append(current)
                elif keyword == "map_Kd" and len(tokens) >= 2 and current:
                    self.material_filenames.setdefault(current, tokens[1])
                elif keyword == "Kd" and len(tokens) >= 4 and current:
                    color = Vector3(*(_color_channel(token) for token in tokens[1:4]))
                    self.material_colors.setdefault(current, color)
        return bool(self.material_names)