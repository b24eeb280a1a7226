#camera.py

import pygame
import constants as C
import logger as log

class Camera:
    """Projects world coordinates (origin at the box center, y up) onto the screen."""
    def __init__(self, box_size):
        self.box_size = box_size
        self.x = 0.0
        self.y = 0.0
        self.zoom = C.CAMERA_DEFAULT_ZOOM
        self.zoom_changed = True
        log.log(f"Camera initialized at world coordinates ({self.x:.1f}, {self.y:.1f}) with zoom {self.zoom:.2f}")

    def world_to_screen(self, world_x, world_y):
        screen_x = (world_x - self.x) * self.zoom + C.SCREEN_WIDTH / 2
        screen_y = (self.y - world_y) * self.zoom + C.SCREEN_HEIGHT / 2
        return int(round(screen_x)), int(round(screen_y))

    def screen_to_world(self, screen_x, screen_y):
        """Converts a point from screen coordinates to world coordinates."""
        world_x = (screen_x - C.SCREEN_WIDTH / 2) / self.zoom + self.x
        world_y = self.y - (screen_y - C.SCREEN_HEIGHT / 2) / self.zoom
        return world_x, world_y

    def scale(self, value):
        return int(round(value * self.zoom))

    def pan(self, dx, dy):
        """Pans the camera by a screen offset and keeps the box center within reach."""
        self.x += dx / self.zoom
        self.y -= dy / self.zoom

        half_box = self.box_size / 2
        self.x = max(-half_box, min(half_box, self.x))
        self.y = max(-half_box, min(half_box, self.y))

    def zoom_in(self):
        """Zooms in, clamping to a maximum zoom level."""
        self.zoom *= (1 + C.CAMERA_ZOOM_SPEED)
        self.zoom = min(self.zoom, C.CAMERA_MAX_ZOOM) # Clamp to max zoom
        self.zoom_changed = True

    def zoom_out(self):
        """Zooms out, clamping to a minimum zoom level."""
        self.zoom *= (1 - C.CAMERA_ZOOM_SPEED)
        self.zoom = max(self.zoom, C.CAMERA_MIN_ZOOM) # Clamp to min zoom
        self.zoom_changed = True

    def draw_box_border(self, screen):
        # The upper left corner of the box is (-size/2, size/2) in world coordinates.
        half_box = self.box_size / 2
        start_x, start_y = self.world_to_screen(-half_box, half_box)
        side = self.scale(self.box_size)
        border_rect = pygame.Rect(start_x, start_y, side, side)
        pygame.draw.rect(screen, C.COLOR_WHITE, border_rect, C.BOX_BORDER_WIDTH_PIXELS)
