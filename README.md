# meshspawn

A small simulation library that grows a triangle mesh outward from a seed
triangle. Each spawn places a new vertex beyond an existing one, at a random
offset, and joins it to two vertices to form a new triangle. The library also
provides a free-flying camera that produces view and projection matrices, a
keyboard input model that drives the camera and the spawning, and a Wavefront
OBJ loader that flattens a mesh into a triangle vertex array.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Modules

- `meshspawn.vec3`: `Vec3`, a mutable dataclass with `+`, `-` and
  multiplication by a scalar, plus `normalize`, `perpendicular` and
  `magnitude`. `normalize` raises `ValueError` for a zero-length vector.
- `meshspawn.node`: `Node`, a mesh vertex that links to up to two neighbours
  (`a` and `b`) through `set_vert` and records the ids it is connected to. It
  also has `distance_to`, `get_connection_vertex`, `check_within` and
  `check_surrounded`. `vector_intersection_2d` returns the `(t, u)`
  parameters where two lines in the x/z plane cross. For parallel lines the
  parameters are infinite or NaN.
- `meshspawn.spatial`: `NodeQuadManager` indexes nodes by their x and z
  coordinates. `NodeOctreeManager` indexes them by x, y and z. Both keep a
  `nodes` list and offer the following:
  - `add_node` and `add_point`. `add_point` creates a node whose id is its
    position in the list.
  - Tree building, with `build_quadtree` or `build_octree`. Each accepts
    `max_depth` and `max_elements_per_node`, both defaulting to 10.
  - `range_search`, which returns matching indices in ascending order.
  - `find_nearest_neighbors`, which returns indices nearest first.
  - `get_node`, `format_search_results` and `clear`.

  The tree covers only the nodes present when it was built. Searching before
  any build returns an empty list. `NodeQuadManager.range_search` accepts its
  two corners in either order. `NodeQuadManager` also records a `vertices`
  list of the positions that were added with `add_point`.
- `meshspawn.camera`: `Camera`, which holds a `position`, a `look` direction
  and two 4x4 numpy matrices, `perspective` and `view`. It provides
  `translate`, `move_look` and `set_view`. `move_look` ignores a zero
  vector. The module also has the matrix helpers `perspective(fov, aspect,
  near, far)` and `look_at(eye, center, up)`. Both produce right-handed
  matrices for column vectors.
- `meshspawn.input`: `Key`, `EventType`, `Event` and `Input`. `Input` tracks
  which keys are down. Its `was_pressed` method reports a press once.
  `translate_cam` turns the held keys into a camera movement. `look_cam`
  turns the arrow keys into a new look direction, with pitch clamped to ±89°.
  `do_spawn` reports a fresh Ctrl press.
- `meshspawn.material`: `Vertex`, `Material` and `ObjFormatError`, for
  loading triangulated OBJ meshes.
- `meshspawn.world`: `World`, the growing mesh. It has a `manager` (a
  `NodeQuadManager`) and an `indices` list with three entries per triangle.
  `spawn_node` and `do_spawn` add a node and return it. `do_spawn` walks
  backwards through the nodes and wraps around at the start. Pass a
  `random.Random` to `World` to make spawning reproducible.
- `meshspawn.game`: `Game`, which combines a camera, an input model and a
  world, and advances them one frame per `update` call.

## Example

```python
import random

from meshspawn.game import Game
from meshspawn.input import Event, EventType, Key

game = Game(random.Random(1))

# Ctrl goes down: the world spawns one new vertex and triangle.
game.update([Event(EventType.KEY_DOWN, Key.CTRL)])
# Ctrl comes up; nothing more is spawned.
quit_requested = game.update([Event(EventType.KEY_UP, Key.CTRL)])

world = game.world
print(len(world.manager.nodes), "vertices")   # 4
print(world.indices)          # triangle index list, three per triangle
print(game.cam.view)          # 4x4 view matrix
```

Each `Game.update` call processes the events you pass in and then does the
following:

- moves the camera with W/A/S/D, Space and Shift;
- turns the camera with the arrow keys;
- spawns a vertex when Ctrl has gone down since the last spawn;
- returns whether a quit event has arrived.

A press and a release of the same key within one `update` call do not count
as a press. Send them in separate frames.

## Loading geometry

```python
from meshspawn.material import Material

sky = Material()
sky.load_obj("sphere.obj")
for vertex in sky.vertex_array:
    print(vertex.position, vertex.tex_coordinate)
```

`parse_obj` does the same work on any iterable of lines. The loader reads the
`v`, `vt` and `vn` records and ignores other records. Each face must have at
least three corners written as `v/vt/vn`. Only the first three corners are
used. A malformed line, or a face that refers to a missing vertex or texture
coordinate, raises `ObjFormatError`.

## What this package does not do

The package contains no renderer, window, shaders or texture loading, and it
has no command to run. It produces the mesh, the camera matrices and the OBJ
vertex data. Drawing them, and turning real window events into `Event`
values, is up to the program that uses it.

## Running the tests

```
pytest
```