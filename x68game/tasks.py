"""Periodic task flags driven by a millisecond clock, plus the current scene."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

PERIODS = (8, 16, 32, 96, 496)
_MASK = 0xFFFFFFFF


class Scene(IntEnum):
    """Game scenes; most come as start / run / end triples."""

    INIT = 0
    TITLE_S = 1
    TITLE = 2
    TITLE_E = 3
    DEMO_S = 4
    DEMO = 5
    DEMO_E = 6
    START_S = 7
    START = 8
    START_E = 9
    GAME1_S = 10
    GAME1 = 11
    GAME1_E = 12
    GAME2_S = 13
    GAME2 = 14
    GAME2_E = 15
    GAME3_S = 16
    GAME3 = 17
    GAME3_E = 18
    GAME4_S = 19
    GAME4 = 20
    GAME4_E = 21
    GAME_OVER_S = 22
    GAME_OVER = 23
    GAME_OVER_E = 24
    NEXT_STAGE_S = 25
    NEXT_STAGE = 26
    NEXT_STAGE_E = 27
    HI_SCORE_S = 28
    HI_SCORE = 29
    HI_SCORE_E = 30
    OPTION_S = 31
    OPTION = 32
    OPTION_E = 33
    DEBUG_S = 34
    DEBUG = 35
    DEBUG_E = 36
    EXIT = 37


@dataclass(frozen=True)
class TaskFlags:
    """Which periodic tasks are due, and the scene at the time of the snapshot."""

    every_8ms: bool = False
    every_16ms: bool = False
    every_32ms: bool = False
    every_96ms: bool = False
    every_496ms: bool = False
    scene: Scene = Scene.INIT


class TaskManager:
    """Raises a flag for each period once its time has elapsed since it last fired."""

    def __init__(self, clock: Callable[[], int]) -> None:
        self._clock = clock
        self._last = dict.fromkeys(PERIODS, 0)
        self._due = dict.fromkeys(PERIODS, False)
        self._scene = Scene.INIT

    def reset(self) -> None:
        """Start timing from now, with every task due and the scene at INIT."""
        now = self._clock()
        self._last = {period: (now + i) & _MASK for i, period in enumerate(PERIODS)}
        self._due = dict.fromkeys(PERIODS, True)
        self._scene = Scene.INIT

    def tick(self) -> bool:
        """Mark tasks whose period has elapsed; return True if any became due."""
        now = self._clock() & _MASK
        fired = False
        for period in PERIODS:
            if not self._due[period] and ((now - self._last[period]) & _MASK) >= period:
                self._last[period] = now
                self._due[period] = True
                fired = True
        return fired

    def snapshot(self) -> TaskFlags:
        """Current flags and scene."""
        return TaskFlags(*(self._due[period] for period in PERIODS), scene=self._scene)

    def consume(self) -> bool:
        """Clear every due flag; return True if any was set."""
        had_any = any(self._due.values())
        self._due = dict.fromkeys(PERIODS, False)
        return had_any

    def set_scene(self, scene: Scene | int) -> None:
        """Switch to another scene."""
        self._scene = Scene(scene)