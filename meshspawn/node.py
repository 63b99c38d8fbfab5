"""Mesh nodes linked into triangles on the horizontal plane."""

from __future__ import annotations

import logging
import math

from .vec3 import Vec3

logger = logging.getLogger(__name__)


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def vector_intersection_2d(zero_t: Vec3, vec_t: Vec3, zero_u: Vec3, vec_u: Vec3) -> tuple[float, float]:
    """Parameters ``(t, u)`` where two lines in the x/z plane cross.

    The lines are ``zero_t + t * vec_t`` and ``zero_u + u * vec_u``. Parallel
    lines give infinite or NaN parameters.
    """
    h = vec_t.x * vec_u.z - vec_t.z * vec_u.x
    dx = zero_u.x - zero_t.x
    dz = zero_u.z - zero_t.z
    t = _divide(dx * vec_u.z - dz * vec_u.x, h)
    u = _divide(dx * vec_t.z - dz * vec_t.x, h)
    return t, u


class Node:
    """A mesh vertex with up to two linked neighbours."""

    def __init__(self, pos: Vec3 | None = None, node_id: int = 0):
        self.pos = Vec3() if pos is None else Vec3(pos.x, pos.y, pos.z)
        self.id = node_id
        self.surrounded = False
        self.a: Node | None = None
        self.b: Node | None = None
        self.clone_b: Node | None = None
        self.clone_f: Node | None = None
        self.connections: list[int] = []

    def set_position(self, x: float, y: float, z: float) -> None:
        self.pos.x, self.pos.y, self.pos.z = x, y, z

    def distance_to(self, other: Node) -> float:
        return math.dist(
            (self.pos.x, self.pos.y, self.pos.z),
            (other.pos.x, other.pos.y, other.pos.z),
        )

    def set_vert(self, other: Node) -> None:
        """Link ``other`` as a neighbour and record the connection."""
        if self.a is None:
            self.a = other
        elif self.b is None:
            self.b = other
        else:
            logger.warning("node %d is full", self.id)
        if other.id in self.connections:
            logger.warning("node %d connected to node %d twice", self.id, other.id)
        self.connections.append(other.id)

    def get_connection_vertex(self, other: Node) -> Node | None:
        """Choose which linked neighbour ``other`` should connect to."""
        if self.a is None:
            raise ValueError(f"node {self.id} has no linked vertex")
        t, u = vector_intersection_2d(
            self.a.pos, other.pos - self.a.pos, self.a.pos, self.pos - self.a.pos
        )
        logger.debug("connection vertex t=%s u=%s", t, u)
        return self.a if u < 1.0001 else self.b

    @staticmethod
    def check_within(vertex: Node | None, point: Node) -> bool:
        """Whether ``point`` lies inside the wedge of ``vertex`` or its clones."""
        if vertex is None:
            return False
        if vertex.a is None or vertex.b is None:
            logger.error("check_within called with unlinked node %d", vertex.id)
            return False
        t, u = vector_intersection_2d(
            vertex.pos,
            point.pos - vertex.pos,
            vertex.a.pos,
            vertex.b.pos - vertex.a.pos,
        )
        logger.debug("check_within t=%s u=%s", t, u)
        if t >= 1 and 0 <= u <= 1:
            return True
        return Node.check_within(vertex.clone_f, point) or Node.check_within(vertex.clone_b, point)

    def check_surrounded(self) -> None:
        """Mark the node surrounded when every neighbour holds it in place."""
        nodes: list[Node] = []
        self._collect_surroundings(nodes, self)
        if all(self._is_holding(node) for node in nodes):
            self.surrounded = True

    def _collect_surroundings(self, nodes: list[Node], node: Node | None) -> None:
        if node is None or self.id not in node.connections:
            return
        if any(seen is node for seen in nodes):
            return
        nodes.append(node)
        for linked in (node.a, node.b, node.clone_f, node.clone_b):
            self._collect_surroundings(nodes, linked)

    def _is_holding(self, node: Node | None) -> bool:
        if node is None:
            return False
        if any(c_id not in self.connections for c_id in node.connections):
            return True
        return self._is_holding(node.clone_f) or self._is_holding(node.clone_b)

    def __str__(self) -> str:
        return f"Node(id={self.id}, x={self.pos.x:g}, y={self.pos.y:g}, z={self.pos.z:g})"