"""Point quadtree and octree indexes over mesh nodes."""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .node import Node
from .vec3 import Vec3

logger = logging.getLogger(__name__)

Point = tuple[float, ...]


@dataclass
class _Cell:
    lo: Point
    hi: Point
    indices: list[int] = field(default_factory=list)
    children: list[_Cell] = field(default_factory=list)


class _OrthoTree:
    """Region tree over a fixed set of points, splitting each cell in every dimension."""

    def __init__(self, points: Sequence[Point], max_depth: int, max_elements: int):
        self._points = list(points)
        self._max_depth = max_depth
        self._max_elements = max_elements
        columns = list(zip(*self._points))
        lo = tuple(map(min, columns))
        hi = tuple(map(max, columns))
        self._root = _Cell(lo, hi, list(range(len(self._points))))
        self._split(self._root, 0)

    def _split(self, cell: _Cell, depth: int) -> None:
        if depth >= self._max_depth or len(cell.indices) <= self._max_elements:
            return
        center = tuple((l + h) / 2 for l, h in zip(cell.lo, cell.hi))
        buckets: dict[tuple[bool, ...], list[int]] = {}
        for index in cell.indices:
            key = tuple(c >= m for c, m in zip(self._points[index], center))
            buckets.setdefault(key, []).append(index)
        for key, members in buckets.items():
            lo = tuple(m if upper else l for upper, l, m in zip(key, cell.lo, center))
            hi = tuple(h if upper else m for upper, h, m in zip(key, cell.hi, center))
            child = _Cell(lo, hi, members)
            self._split(child, depth + 1)
            cell.children.append(child)
        cell.indices = []

    def range_search(self, lo: Point, hi: Point) -> list[int]:
        found: list[int] = []
        stack = [self._root]
        while stack:
            cell = stack.pop()
            if any(ch < ql for ch, ql in zip(cell.hi, lo)) or any(cl > qh for cl, qh in zip(cell.lo, hi)):
                continue
            stack.extend(cell.children)
            found.extend(
                index
                for index in cell.indices
                if all(ql <= c <= qh for c, ql, qh in zip(self._points[index], lo, hi))
            )
        return sorted(found)

    def nearest(self, query: Point, k: int) -> list[int]:
        if k <= 0:
            return []
        counter = itertools.count()
        heap: list[tuple] = [(self._box_distance(self._root, query), 0, next(counter), self._root)]
        result: list[int] = []
        while heap and len(result) < k:
            _, kind, _, payload = heapq.heappop(heap)
            if kind == 1:
                result.append(payload)
                continue
            for child in payload.children:
                heapq.heappush(heap, (self._box_distance(child, query), 0, next(counter), child))
            for index in payload.indices:
                heapq.heappush(heap, (math.dist(query, self._points[index]), 1, index, index))
        return result

    @staticmethod
    def _box_distance(cell: _Cell, query: Point) -> float:
        return math.sqrt(
            sum(max(l - q, 0.0, q - h) ** 2 for q, l, h in zip(query, cell.lo, cell.hi))
        )


def _xz(pos: Vec3) -> Point:
    return (pos.x, pos.z)


def _xyz(pos: Vec3) -> Point:
    return (pos.x, pos.y, pos.z)


class _NodeTreeManager:
    """Shared storage and searching; public managers expose it under their own names."""

    def __init__(self, coords: Callable[[Vec3], Point]):
        self._coords = coords
        self.nodes: list[Node] = []
        self._tree: _OrthoTree | None = None

    def _add_node(self, node: Node) -> None:
        self.nodes.append(node)

    def _add_point(self, x: float, y: float, z: float) -> Node:
        node = Node(Vec3(x, y, z), len(self.nodes))
        self.nodes.append(node)
        return node

    def _build(self, max_depth: int, max_elements_per_node: int) -> None:
        if not self.nodes:
            logger.warning("No nodes to build the tree with")
            return
        points = [self._coords(node.pos) for node in self.nodes]
        self._tree = _OrthoTree(points, max_depth, max_elements_per_node)
        logger.info("Tree built with %d nodes", len(self.nodes))

    def _search_box(self, min_corner: Node, max_corner: Node) -> tuple[Point, Point]:
        return self._coords(min_corner.pos), self._coords(max_corner.pos)

    def _range_search(self, min_corner: Node, max_corner: Node) -> list[int]:
        if self._tree is None:
            logger.warning("Tree not built yet")
            return []
        lo, hi = self._search_box(min_corner, max_corner)
        return self._tree.range_search(lo, hi)

    def _find_nearest_neighbors(self, query: Node, k: int) -> list[int]:
        if self._tree is None:
            logger.warning("Tree not built yet")
            return []
        return self._tree.nearest(self._coords(query.pos), k)

    def _format_search_results(self, indices: Sequence[int], search_type: str) -> str:
        lines = [f"{search_type} found {len(indices)} nodes:"]
        lines.extend(f"  Index {index}: {self.nodes[index]}" for index in indices)
        return "\n".join(lines) + "\n"

    def _clear(self) -> None:
        self.nodes.clear()
        self._tree = None


class NodeQuadManager(_NodeTreeManager):
    """Nodes indexed by a quadtree over their x and z coordinates."""

    def __init__(self):
        super().__init__(_xz)
        self.vertices: list[Vec3] = []

    def add_node(self, node: Node) -> None:
        """Append an existing node without recording a vertex."""
        self._add_node(node)

    def add_point(self, x: float, y: float, z: float) -> Node:
        """Create a node numbered by its position in the list and record its vertex."""
        node = self._add_point(x, y, z)
        self.vertices.append(Vec3(x, y, z))
        return node

    def build_quadtree(self, max_depth: int = 10, max_elements_per_node: int = 10) -> None:
        self._build(max_depth, max_elements_per_node)

    def _search_box(self, min_corner: Node, max_corner: Node) -> tuple[Point, Point]:
        first = self._coords(min_corner.pos)
        second = self._coords(max_corner.pos)
        return tuple(map(min, first, second)), tuple(map(max, first, second))

    def range_search(self, min_corner: Node, max_corner: Node) -> list[int]:
        """Indices of indexed nodes inside the x/z box spanned by the two corners, in any order."""
        return self._range_search(min_corner, max_corner)

    def find_nearest_neighbors(self, query: Node, k: int) -> list[int]:
        """Indices of the ``k`` indexed nodes closest to ``query`` in x/z, nearest first."""
        return self._find_nearest_neighbors(query, k)

    def get_node(self, index: int) -> Node:
        return self.nodes[index]

    def format_search_results(self, indices: Sequence[int], search_type: str) -> str:
        return self._format_search_results(indices, search_type)

    def clear(self) -> None:
        """Drop the nodes and the tree; recorded vertices are kept."""
        self._clear()


class NodeOctreeManager(_NodeTreeManager):
    """Nodes indexed by an octree over all three coordinates."""

    def __init__(self):
        super().__init__(_xyz)

    def add_node(self, node: Node) -> None:
        self._add_node(node)

    def add_point(self, x: float, y: float, z: float) -> Node:
        """Create a node numbered by its position in the list."""
        return self._add_point(x, y, z)

    def build_octree(self, max_depth: int = 10, max_elements_per_node: int = 10) -> None:
        self._build(max_depth, max_elements_per_node)

    def range_search(self, min_corner: Node, max_corner: Node) -> list[int]:
        """Indices of indexed nodes inside the box from ``min_corner`` to ``max_corner``."""
        return self._range_search(min_corner, max_corner)

    def find_nearest_neighbors(self, query: Node, k: int) -> list[int]:
        """Indices of the ``k`` indexed nodes closest to ``query``, nearest first."""
        return self._find_nearest_neighbors(query, k)

    def get_node(self, index: int) -> Node:
        return self.nodes[index]

    def format_search_results(self, indices: Sequence[int], search_type: str) -> str:
        return self._format_search_results(indices, search_type)

    def clear(self) -> None:
        self._clear()