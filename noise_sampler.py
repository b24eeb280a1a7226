#noise_sampler.py

import math
from errors import OutOfBoundsError

# Values are expected in the nominal range but are never clamped to it.
# With unit gradients |dot(g, d)| <= |d| <= sqrt(2), which bounds any result.
NOMINAL_RANGE = (-1.0, 1.0)
THEORETICAL_BOUND = math.sqrt(2.0)

def lerp(a, b, x):
    "Linear interpolation."
    return a + x * (b - a)

def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

def corner_influence(field, gx, gy, x, y):
    """Dot product of the gradient at lattice point (gx, gy) with the distance vector to (x, y)."""
    g = field.gradient_at(gx, gy)
    return float(g[0] * (x - gx) + g[1] * (y - gy))

def _check_bounds(field, x, y):
    size = field.size
    for name, value in (("x", x), ("y", y)):
        if math.isnan(value) or value < 0 or value > size:
            raise OutOfBoundsError(f"Noise coordinate {name}={value} is outside [0, {size}].")
    # The top-right corner would need lattice points at size + 1 on both axes.
    if x == size and y == size:
        raise OutOfBoundsError(f"Noise coordinates ({x}, {y}) hit the excluded corner of the box.")

def _cell_origin(value, size):
    """Lower lattice index of the cell holding `value`. A point on the far edge belongs to the last cell."""
    index = math.floor(value)
    if index == size:
        index = size - 1
    return int(index)

def evaluate(field, x, y, smooth=False):
    """
    Computes the gradient noise at box coordinates (x, y).

    Args:
        field: a populated GradientField.
        x, y: box coordinates in [0, field.size]. The point (size, size) is excluded.
        smooth: pass the interpolation weights through the fade curve.
    Returns:
        float, nominally in [-1, 1].
    Raises:
        OutOfBoundsError: if the coordinates are outside the box.
        FieldNotPopulatedError: if the field has no gradients yet.
    """
    x, y = float(x), float(y)
    _check_bounds(field, x, y)

    # Start by finding the enclosing cell on the lattice.
    x0 = _cell_origin(x, field.size)
    x1 = x0 + 1
    y0 = _cell_origin(y, field.size)
    y1 = y0 + 1

    # Corner influences, nXY with X the offset along x and Y along y.
    n00 = corner_influence(field, x0, y0, x, y)
    n10 = corner_influence(field, x1, y0, x, y)
    n01 = corner_influence(field, x0, y1, x, y)
    n11 = corner_influence(field, x1, y1, x, y)

    # Interpolation weights
    sx = x - x0
    sy = y - y0
    if smooth:
        sx, sy = fade(sx), fade(sy)

    # Along x on both rows, then along y between the rows.
    ix0 = lerp(n00, n10, sx)
    ix1 = lerp(n01, n11, sx)
    return lerp(ix0, ix1, sy)

class NoiseSampler:
    """Stateless evaluator. Holds only the interpolation mode, never the field."""
    def __init__(self, smooth=False):
        self.smooth = smooth

    def evaluate(self, field, x, y):
        return evaluate(field, x, y, smooth=self.smooth)

    def __call__(self, field, x, y):
        return self.evaluate(field, x, y)

    def __repr__(self):
        return f"{__class__.__name__}(smooth={self.smooth})"
