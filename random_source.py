#random_source.py

import numpy as np
from errors import InvalidArgumentError

class RandomUnitVectorSource:
    """Draws uniformly distributed 2D unit vectors from a seedable numpy generator."""
    def __init__(self, seed=None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def reseed(self, seed):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def __call__(self):
        # Pick a point inside the unit disk, then push it out to the circle.
        # Rejecting the corners of the square keeps the angle uniform.
        while True:
            point = self.rng.uniform(-1.0, 1.0, size=2)
            length = np.hypot(point[0], point[1])
            if 0.0 < length <= 1.0:
                return point / length

    def __repr__(self):
        return f"{__class__.__name__}(seed={self.seed})"

class FixedUnitVectorSource:
    """Replays a fixed sequence of vectors. Used to build reproducible fields."""
    def __init__(self, vectors, seed=None):
        self.vectors = [np.asarray(v, dtype=float) for v in vectors]
        self.seed = seed
        self.position = 0

    def __call__(self):
        if self.position >= len(self.vectors):
            raise InvalidArgumentError(f"Fixed source exhausted after {len(self.vectors)} vectors.")
        vector = self.vectors[self.position]
        self.position += 1
        return vector

    def __len__(self):
        return len(self.vectors)

def lattice_fixture(size, overrides, default=(1.0, 0.0)):
    """
    Returns the vectors a field of the given size will request, in population
    order (i outer, j inner), taking overrides[(i, j)] where one is given.
    """
    return [overrides.get((i, j), default) for i in range(size + 1) for j in range(size + 1)]
