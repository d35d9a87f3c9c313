"""Reading triangle meshes from Wavefront OBJ files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from raytracer.triangle import Triangle
from raytracer.vector import Normal, Vertex

logger = logging.getLogger(__name__)


def _parse_index(text: str) -> int:
    """Convert a 1-based OBJ index to a 0-based one."""
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"invalid OBJ index: {text!r}")
    value = int(digits)
    if value == 0:
        raise ValueError("OBJ indices are 1-based; got 0")
    return value - 1


@dataclass
class Face:
    """A triangular face as 0-based indices."""

    vertex_indices: tuple[int, int, int]
    texture_indices: tuple[int, int, int]
    normal_indices: tuple[int, int, int]


@dataclass
class ObjModel:
    """Vertices, texture coordinates, normals and faces of an OBJ file."""

    vertices: list[Vertex] = field(default_factory=list)
    texture_coords: list[tuple[float, float]] = field(default_factory=list)
    normals: list[Normal] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)

    def parse_line(self, line: str) -> None:
        """Add the contents of one OBJ line; unknown statements are ignored."""
        parts = line.split()
        if not parts:
            return
        keyword = parts[0]
        if keyword == "v":
            self._parse_vertex(parts)
        elif keyword == "vt":
            self._parse_texture_coord(parts)
        elif keyword == "vn":
            self._parse_normal(parts)
        elif keyword == "f":
            self._parse_face(parts)

    def _parse_vertex(self, parts: list[str]) -> None:
        if len(parts) >= 4:
            self.vertices.append(Vertex(float(parts[1]), float(parts[2]), float(parts[3])))

    def _parse_texture_coord(self, parts: list[str]) -> None:
        if len(parts) >= 3:
            self.texture_coords.append((float(parts[1]), float(parts[2])))

    def _parse_normal(self, parts: list[str]) -> None:
        if len(parts) >= 4:
            self.normals.append(Normal(float(parts[1]), float(parts[2]), float(parts[3])))

    def _parse_face(self, parts: list[str]) -> None:
        if len(parts) != 4:
            logger.warning("Only triangular faces are supported. Skipping face: %s", parts)
            return

        vertex_indices = []
        texture_indices = []
        normal_indices = []
        for corner in parts[1:]:
            fields = corner.split("/")
            vertex_indices.append(_parse_index(fields[0]))
            texture_indices.append(
                _parse_index(fields[1]) if len(fields) > 1 and fields[1] else 0
            )
            normal_indices.append(
                _parse_index(fields[2]) if len(fields) > 2 and fields[2] else 0
            )

        self.faces.append(
            Face(tuple(vertex_indices), tuple(texture_indices), tuple(normal_indices))
        )

    def to_triangles(self) -> list[Triangle]:
        """Return one triangle per face.

        The first corner's normal serves for the whole face; without normals
        in the file the face normal is computed from the vertices.
        """
        triangles = []
        for face in self.faces:
            v0, v1, v2 = (self.vertices[index] for index in face.vertex_indices)
            if self.normals:
                normal = self.normals[face.normal_indices[0]]
            else:
                normal = (v1 - v0).cross(v2 - v0).normalize()
            triangles.append(Triangle(v0, v1, v2, normal))
        return triangles


def parse_obj(lines: Iterable[str]) -> ObjModel:
    """Build a model from OBJ text lines."""
    model = ObjModel()
    for line in lines:
        model.parse_line(line)
    return model


def _decoded_lines(handle) -> Iterator[str]:
    for raw in handle:
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            continue


def read_obj_file(path: str | os.PathLike) -> ObjModel:
    """Read an OBJ file; lines that are not valid UTF-8 are skipped."""
    with open(path, "rb") as handle:
        return parse_obj(_decoded_lines(handle))