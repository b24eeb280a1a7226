#coordinates.py

# World coordinates: box centered at the origin, y-axis up.
# Box coordinates: origin at the upper left corner, y-axis down, range [0, size].

def world_to_box(world_x, world_y, size):
    return world_x + size / 2, size / 2 - world_y

def box_to_world(box_x, box_y, size):
    return box_x - size / 2, size / 2 - box_y

class BoxFrame:
    """The two frames of a box of a given side, bound together."""
    def __init__(self, size):
        self.size = size

    @property
    def center(self):
        "Center of the box in box coordinates"
        return self.size / 2, self.size / 2

    def world_to_box(self, world_x, world_y):
        return world_to_box(world_x, world_y, self.size)

    def box_to_world(self, box_x, box_y):
        return box_to_world(box_x, box_y, self.size)

    def contains(self, box_x, box_y):
        """Checks if a point in box coordinates lies inside the box, edges included."""
        return 0 <= box_x <= self.size and 0 <= box_y <= self.size

    def __repr__(self):
        return f"{__class__.__name__}(size={self.size})"
