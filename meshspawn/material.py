"""Wavefront OBJ mesh loading into a flat triangle vertex array."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Sequence

from .vec3 import Vec3


@dataclass
class Vertex:
    """A triangle corner with its texture coordinate."""

    position: Vec3
    tex_coordinate: tuple[float, float]


class ObjFormatError(ValueError):
    """The OBJ data cannot be read by this loader."""


class Material:
    """Mesh data: positions, texture coordinates, normals and triangle indices."""

    def __init__(self):
        self.vertex_array: list[Vertex] = []
        self.indices: list[int] = []
        self.vertices: list[Vec3] = []
        self.uvs: list[tuple[float, float]] = []
        self.normals: list[Vec3] = []

    def load_obj(self, path: str | os.PathLike) -> list[Vertex]:
        """Read an OBJ file; see :meth:`parse_obj`."""
        with open(path, encoding="utf-8") as handle:
            return self.parse_obj(handle)

    def parse_obj(self, lines: Iterable[str]) -> list[Vertex]:
        """Parse OBJ lines and append one vertex per face corner.

        Faces must be triangles written as ``v/vt/vn`` triples. Returns the
        full vertex array.
        """
        start = len(self.indices)
        uv_indices: list[int] = []
        for number, line in enumerate(lines, 1):
            tokens = line.split()
            if not tokens:
                continue
            header, args = tokens[0], tokens[1:]
            if header == "v":
                self.vertices.append(Vec3(*_floats(args, 3, number)))
            elif header == "vt":
                u, v = _floats(args, 2, number)
                self.uvs.append((u, v))
            elif header == "vn":
                self.normals.append(Vec3(*_floats(args, 3, number)))
            elif header == "f":
                for vertex_index, uv_index in _face(args, number):
                    self.indices.append(vertex_index)
                    uv_indices.append(uv_index)
        try:
            self.vertex_array.extend(
                Vertex(_copy(self.vertices[v]), self.uvs[t])
                for v, t in zip(self.indices[start:], uv_indices)
            )
        except IndexError as exc:
            raise ObjFormatError("face refers to a missing vertex or texture coordinate") from exc
        return self.vertex_array

    def load_element(self, vertices: Sequence[Vec3], indices: Sequence[int]) -> None:
        """Replace the positions and indices with the given ones."""
        self.indices = list(indices)
        self.vertices = list(vertices)


def _copy(v: Vec3) -> Vec3:
    return Vec3(v.x, v.y, v.z)


def _floats(args: list[str], count: int, number: int) -> list[float]:
    if len(args) < count:
        raise ObjFormatError(f"line {number}: expected {count} numbers")
    try:
        return [float(arg) for arg in args[:count]]
    except ValueError as exc:
        raise ObjFormatError(f"line {number}: bad number") from exc


def _face(args: list[str], number: int) -> list[tuple[int, int]]:
    if len(args) < 3:
        raise ObjFormatError(f"line {number}: face needs three corners")
    corners = []
    for corner in args[:3]:
        parts = corner.split("/")
        if len(parts) != 3:
            raise ObjFormatError(f"line {number}: face corners must be v/vt/vn")
        try:
            vertex_index, uv_index, _ = (int(part) for part in parts)
        except ValueError as exc:
            raise ObjFormatError(f"line {number}: bad face index") from exc
        if vertex_index < 1 or uv_index < 1:
            raise ObjFormatError(f"line {number}: face indices start at 1")
        corners.append((vertex_index - 1, uv_index - 1))
    return corners