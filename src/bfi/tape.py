from __future__ import annotations

from typing import List, Optional

import numpy as np

from .errors import make_tape_bounds_error

# Full range of a 16-bit offset.
TAPE_CAPACITY = 65536


class Tape:
    """Zero-initialized byte cells with a bounds-checked data pointer."""

    def __init__(self):
        self.capacity = TAPE_CAPACITY
        self.reset()

    def reset(self):
        self.cells = np.zeros(self.capacity, dtype=np.uint8)
        self.pointer = 0

    def move(self, delta: int, *, position: int = -1) -> int:
        target = self.pointer + delta
        if target < 0 or target >= self.capacity:
            raise make_tape_bounds_error(position=position, pointer=target, capacity=self.capacity)
        self.pointer = target
        return target

    def read(self) -> int:
        return int(self.cells[self.pointer])

    def write(self, value: int) -> None:
        self.cells[self.pointer] = np.uint8(value & 0xFF)

    def increment(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) + 1) & 0xFF

    def decrement(self) -> None:
        self.cells[self.pointer] = (int(self.cells[self.pointer]) - 1) & 0xFF

    def snapshot(self, start: int = 0, stop: Optional[int] = None) -> List[int]:
        return [int(b) for b in self.cells[start:stop]]

    def used_extent(self) -> int:
        """One past the highest non-zero cell (0 for a blank tape)."""
        nz = np.flatnonzero(self.cells)
        return int(nz[-1]) + 1 if nz.size else 0
