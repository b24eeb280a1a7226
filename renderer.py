import math
import pygame
import numpy as np
import constants as C
from coordinates import box_to_world
from errors import InvalidArgumentError
from noise_sampler import NoiseSampler
import logger as log

def sample_points(size, step):
    """The sweep 0, step, 2*step, ... strictly below `size`."""
    if not step > 0:
        raise InvalidArgumentError(f"Sample step should be a positive number, not {step}.")
    count = math.ceil(size / step)
    points = np.arange(count) * step
    return points[points < size]

def to_unit_interval(value):
    "Maps a noise value from [-1, 1] to [0, 1]."
    return (value + 1) / 2

def sample_color(field, i, j, sampler=None):
    """RGB color of the sample at box coordinates (i, j)."""
    sampler = sampler or NoiseSampler()
    channels = np.array([
        C.PREVIEW_RED_CHANNEL,
        to_unit_interval(sampler.evaluate(field, i, j)),
        to_unit_interval(sampler.evaluate(field, j, i)),
    ])
    # Clip for display only, the noise itself is never clamped.
    return np.clip(np.round(channels * C.COLOR_CHANNEL_MAX), 0, C.COLOR_CHANNEL_MAX).astype(np.uint8)

class NoiseRenderer:
    def __init__(self, field, step=C.SAMPLE_STEP_SIZE, smooth=False):
        self.field = field
        self.step = step
        self.sampler = NoiseSampler(smooth=smooth)
        self.points = sample_points(field.size, step)
        # Full-resolution texture, one texel per sample point.
        self.texture = None
        # The texture scaled for the current zoom level.
        self.scaled_texture = None
        log.log(f"Renderer initialized with {len(self.points)}x{len(self.points)} samples (step {step}).")

    def compute_colors(self, progress=None):
        """
        Samples every point of the sweep and returns the colors as a uint8
        array of shape (n, n, 3), indexed [x, y] in box coordinates.
        `progress(done, total)` is called as sample columns complete.
        """
        n = len(self.points)
        colors = np.zeros((n, n, 3), dtype=np.uint8)
        for ix, i in enumerate(self.points):
            for iy, j in enumerate(self.points):
                colors[ix, iy] = sample_color(self.field, i, j, self.sampler)
            if progress and ((ix + 1) % C.UI_LOADING_BAR_UPDATE_INTERVAL == 0 or ix + 1 == n):
                progress(ix + 1, n)
        return colors

    def generate(self, progress=None):
        """Builds the texture for the current field and drops any scaled copy."""
        log.log("Sampling the gradient field...")
        colors = self.compute_colors(progress)
        self.texture = pygame.surfarray.make_surface(colors)
        self.scaled_texture = None
        log.log(f"Sampling complete. {colors.shape[0] * colors.shape[1]:,} samples colored.")
        return self.texture

    def set_smooth(self, smooth):
        self.sampler.smooth = smooth
        self.texture = None
        self.scaled_texture = None
        log.log(f"Event: Fade smoothing {'enabled' if smooth else 'disabled'}.")

    def draw(self, screen, camera):
        """Draws the texture over the box, rescaling it only when the zoom changed."""
        if self.texture is None:
            return
        if camera.zoom_changed or self.scaled_texture is None:
            side = camera.scale(self.field.size)
            if side < 1: return
            self.scaled_texture = pygame.transform.scale(self.texture, (side, side))
            camera.zoom_changed = False

        # The texture's upper left texel is the box origin.
        world_x, world_y = box_to_world(0, 0, self.field.size)
        screen.blit(self.scaled_texture, camera.world_to_screen(world_x, world_y))
