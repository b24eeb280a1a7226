#gradient_field.py

import numbers
import numpy as np
import constants as C
from errors import InvalidArgumentError, OutOfBoundsError, FieldNotPopulatedError
import logger as log

class GradientField:
    """
    A square lattice of pseudorandom unit gradients, one per integer point.

    A field of side N covers the box [0, N] x [0, N] and therefore stores
    (N+1) x (N+1) vectors, indexed [i, j] for box coordinate (i, j).
    """
    def __init__(self, size):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral):
            raise InvalidArgumentError(f"Field size should be an integer, not {type(size).__name__}.")
        if size < C.MIN_BOX_SIDE_LENGTH:
            raise InvalidArgumentError(f"Field size should be at least {C.MIN_BOX_SIDE_LENGTH}. Got {size} instead.")
        self.size = int(size)
        self.seed = None
        self._gradients = np.zeros((self.size + 1, self.size + 1, C.GRADIENT_DIMENSIONS), dtype=float)
        self._populated = False

    def populate(self, source):
        """
        Draws one unit vector per lattice point from `source`, a zero-argument
        callable. Every call replaces the whole lattice, so populating twice
        gives a different field.
        """
        gradients = np.empty_like(self._gradients)
        for i in range(self.size + 1):
            for j in range(self.size + 1):
                vector = np.asarray(source(), dtype=float)
                if vector.shape != (C.GRADIENT_DIMENSIONS,):
                    raise InvalidArgumentError(f"Expected a 2D vector from the source, got shape {vector.shape}.")
                length = np.hypot(vector[0], vector[1])
                if abs(length - 1.0) > C.UNIT_LENGTH_TOLERANCE:
                    raise InvalidArgumentError(f"Gradient at ({i}, {j}) has length {length}, expected a unit vector.")
                gradients[i, j] = vector

        # Once drawn, the lattice is read-only and can be shared between readers.
        gradients.flags.writeable = False
        self._gradients = gradients
        self.seed = getattr(source, "seed", None)
        self._populated = True
        log.log(f"Gradient field populated with {self.lattice_points} lattice points.")
        return self

    def gradient_at(self, i, j):
        if not self._populated:
            raise FieldNotPopulatedError("The gradient field must be populated before lookups.")
        for name, index in (("i", i), ("j", j)):
            if isinstance(index, bool) or not isinstance(index, numbers.Integral):
                raise OutOfBoundsError(f"Lattice index {name}={index!r} is not an integer.")
            if index < 0 or index > self.size:
                raise OutOfBoundsError(f"Lattice index {name}={index} is outside [0, {self.size}].")
        return self._gradients[i, j]

    @property
    def is_populated(self):
        return self._populated

    @property
    def lattice_points(self):
        "Number of gradients stored in the lattice"
        return (self.size + 1) ** 2

    @property
    def gradients(self):
        "Read-only view of the whole lattice, shape (size+1, size+1, 2)"
        if not self._populated:
            raise FieldNotPopulatedError("The gradient field has not been populated yet.")
        return self._gradients

    def __repr__(self):
        return f"{__class__.__name__}(size={self.size}, populated={self._populated}, seed={self.seed})"
