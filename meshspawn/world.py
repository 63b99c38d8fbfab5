"""A growing triangle mesh that spawns new nodes outward from existing ones."""

from __future__ import annotations

import logging
import random

from .node import Node
from .spatial import NodeQuadManager
from .vec3 import normalize, perpendicular

logger = logging.getLogger(__name__)


class World:
    """The land mesh: indexed nodes and the triangle index list."""

    spawn_range = 20.0
    spawn_distance = 50.0

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self.manager = NodeQuadManager()
        self.indices: list[int] = [0, 1, 2]
        for x, y, z in ((100, 0, 100), (100, 0, 0), (0, 0, 0)):
            self.manager.add_point(x, y, z)
        nodes = self.manager.nodes
        for node in nodes:
            for other in nodes:
                if other is not node:
                    node.set_vert(other)
        self.manager.build_quadtree()
        self._spawn_index = len(nodes) - 1
        logger.info("world initialised")

    def do_spawn(self) -> Node | None:
        """Spawn from the next node in turn, cycling backwards through the mesh."""
        new_node = self.spawn_node(self.manager.nodes[self._spawn_index])
        self._spawn_index -= 1
        if self._spawn_index < 0:
            self._spawn_index = len(self.manager.nodes) - 1
        return new_node

    def spawn_node(self, node: Node) -> Node | None:
        """Add a node beyond ``node`` and a triangle joining them; return it."""
        if node.a is None or node.b is None:
            raise ValueError(f"node {node.id} is not linked to two vertices")
        spawn_dir = normalize((node.pos - node.a.pos) + (node.pos - node.b.pos))
        origin = node.pos + spawn_dir * self.spawn_distance
        offset = spawn_dir * self.spawn_range + perpendicular(spawn_dir) * self.spawn_range
        spawn_point = Node(origin + offset * self._rng.uniform(-1.0, 1.0), 0)

        top = Node(spawn_point.pos + offset * 8, 0)
        bottom = Node(spawn_point.pos - offset * 8, 0)
        found = self.manager.range_search(bottom, top)
        logger.debug("%d nodes near spawn point %s", len(found), spawn_point)

        new_node = self.manager.add_point(spawn_point.pos.x, spawn_point.pos.y, spawn_point.pos.z)
        other_vertex = node.get_connection_vertex(new_node)
        new_node.set_vert(node)
        new_node.set_vert(other_vertex)
        self.indices.extend((new_node.id, new_node.a.id, new_node.b.id))
        logger.info("new triangle %d | %d | %d", *self.indices[-3:])
        return new_node