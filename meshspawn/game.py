"""Per-frame game state: camera, input and world."""

from __future__ import annotations

import math
import random
from typing import Iterable

from .camera import Camera
from .input import Event, Input
from .world import World


class Game:
    """Ties input handling to camera movement and mesh growth."""

    def __init__(self, rng: random.Random | None = None):
        self.cam = Camera(math.radians(85.0), 800.0 / 600.0, 0.1, 10000.0)
        self.input = Input()
        self.world = World(rng)

    def update(self, events: Iterable[Event] = ()) -> bool:
        """Advance one frame; return whether the game should quit."""
        quit_requested = self.input.handle_inputs(events)
        self.cam.translate(self.input.translate_cam(self.cam.look))
        self.cam.move_look(self.input.look_cam())
        self.cam.set_view()
        if self.input.do_spawn():
            self.world.do_spawn()
        return quit_requested