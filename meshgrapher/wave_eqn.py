"""Finite-difference solver for the two-dimensional wave equation."""

from __future__ import annotations

import numpy as np

X_SIZE = 256
Y_SIZE = 256

PROP_SPEED = 0.25
DAMPING_FACTOR = 0.995

DISTURBANCE_PROB = 0.02
DISTURBANCE_SIZE = 80.0


class WaveEquationData:
    """Displacement field on a fixed grid, stepped one timestep at a time.

    The boundary is held at zero. Each step may drop a random square
    disturbance onto the field.
    """

    def __init__(self, rng=None) -> None:
        self.u_0 = np.zeros((X_SIZE, Y_SIZE), dtype=np.float32)
        self._u_1 = np.zeros_like(self.u_0)
        self._u_2 = np.zeros_like(self.u_0)
        self.k = PROP_SPEED
        self._rng = rng if rng is not None else np.random.default_rng()

    def update(self) -> None:
        """Advance the field by one timestep."""
        self.add_random_disturbance()

        self._u_2 = self._u_1
        self._u_1 = self.u_0.copy()

        u1 = self._u_1
        centre = u1[1:-1, 1:-1]
        laplacian = u1[:-2, 1:-1] + u1[2:, 1:-1] + u1[1:-1, :-2] + u1[1:-1, 2:] - 4.0 * centre
        step = self.k * laplacian + 2.0 * centre - self._u_2[1:-1, 1:-1]
        self.u_0[1:-1, 1:-1] = step * DAMPING_FACTOR

    def add_random_disturbance(self) -> None:
        """With a small probability, raise a 4x4 block of the field."""
        if self._rng.random() < DISTURBANCE_PROB:
            x = int(self._rng.integers(5, X_SIZE - 5))
            y = int(self._rng.integers(5, Y_SIZE - 5))
            self.u_0[x - 2 : x + 2, y - 2 : y + 2] = DISTURBANCE_SIZE