"""Keyboard state tracking and camera motion derived from it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Iterable

import numpy as np

_UP = np.array([0.0, 1.0, 0.0])
_STEP = 4.0
_CURSOR_STEP = 15
_SENSITIVITY = 0.1
_PITCH_LIMIT = 89.0


class Key(IntEnum):
    """Key codes the game reacts to."""

    SPACE = 32
    A = 97
    W = 119
    S = 115
    D = 100
    CTRL = 1073742048
    SHIFT = 1073742049
    LEFT = 1073741904
    RIGHT = 1073741903
    UP = 1073741906
    DOWN = 1073741905


class EventType(Enum):
    QUIT = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()
    MOUSE_MOTION = auto()


@dataclass(frozen=True)
class Event:
    """A window event; ``key`` is set for keyboard events."""

    type: EventType
    key: int | None = None


class Input:
    """Current and previous key states plus accumulated look angles."""

    def __init__(self):
        self.quit = False
        self.yaw = 0.0
        self.pitch = 0.0
        self._current: dict[int, bool] = {}
        self._past: dict[int, bool] = {}
        self._x_motion = 0
        self._y_motion = 0

    def handle_inputs(self, events: Iterable[Event]) -> bool:
        """Process pending events; return whether a quit was requested."""
        for event in events:
            self.handle_event(event)
        return self.quit

    def handle_event(self, event: Event) -> None:
        if event.type is EventType.QUIT:
            self.quit = True
        elif event.type in (EventType.KEY_DOWN, EventType.KEY_UP):
            key = int(event.key)
            self._past[key] = self._current.get(key, False)
            self._current[key] = event.type is EventType.KEY_DOWN

    def was_pressed(self, key: int) -> bool:
        """True once per press: the key is down now and was not before."""
        key = int(key)
        if not self._past.get(key, False) and self._current.get(key, False):
            self._past[key] = True
            return True
        return False

    def is_pressed(self, key: int) -> bool:
        return self._current.get(int(key), False)

    def do_spawn(self) -> bool:
        return self.was_pressed(Key.CTRL)

    def translate_cam(self, look) -> np.ndarray:
        """Camera movement for the held keys; arrow keys queue a look change."""
        self._x_motion = 0
        self._y_motion = 0
        forward = np.asarray(look, dtype=float).reshape(3)
        cross = np.cross(_UP, forward)
        with np.errstate(invalid="ignore", divide="ignore"):
            left = cross / np.linalg.norm(cross) * _STEP
        delta = np.zeros(3)
        if self.is_pressed(Key.A):
            delta += left
        if self.is_pressed(Key.D):
            delta -= left
        if self.is_pressed(Key.S):
            delta -= forward
        if self.is_pressed(Key.W):
            delta += forward
        if self.is_pressed(Key.SPACE):
            delta += _UP
        if self.is_pressed(Key.SHIFT):
            delta -= _UP
        if self.is_pressed(Key.LEFT):
            self._x_motion -= _CURSOR_STEP
        if self.is_pressed(Key.RIGHT):
            self._x_motion += _CURSOR_STEP
        if self.is_pressed(Key.UP):
            self._y_motion -= _CURSOR_STEP
        if self.is_pressed(Key.DOWN):
            self._y_motion += _CURSOR_STEP
        return delta

    def look_cam(self) -> np.ndarray:
        """New unit look direction, or a zero vector when nothing changed."""
        if self._x_motion == 0 and self._y_motion == 0:
            return np.zeros(3)
        self.yaw += self._x_motion * _SENSITIVITY
        self.pitch -= self._y_motion * _SENSITIVITY
        self.pitch = min(max(self.pitch, -_PITCH_LIMIT), _PITCH_LIMIT)
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = np.array(
            [math.cos(yaw) * math.cos(pitch), math.sin(pitch), math.sin(yaw) * math.cos(pitch)]
        )
        self._x_motion = 0
        self._y_motion = 0
        return direction / np.linalg.norm(direction)