"""Game helpers for X68000-style titles: bit packing, integer math, tasks, mouse, sprites, BG planes and MML."""

__version__ = "1.0.0"
__all__ = ["bits", "tasks", "mouse", "fixed", "sprites", "bgplane", "mml"]