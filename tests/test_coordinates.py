import numpy as np
import pytest

from coordinates import BoxFrame, world_to_box, box_to_world


class TestCoordinateMapping:
    size = 8

    def test_known_points(self):
        assert world_to_box(0, 0, self.size) == (4, 4)
        assert box_to_world(0, 0, self.size) == (-4, 4)
        assert box_to_world(self.size, self.size, self.size) == (4, -4)
        # y points down in the box and up in the world
        assert world_to_box(-4, 4, self.size) == (0, 0)

    @pytest.mark.parametrize("size", [1, 2, 7, 64])
    def test_inverse_law(self, size):
        rng = np.random.default_rng(size)
        for wx, wy in rng.uniform(-1000.0, 1000.0, size=(100, 2)):
            bx, by = world_to_box(wx, wy, size)
            assert np.allclose(box_to_world(bx, by, size), (wx, wy))
            assert np.allclose(world_to_box(*box_to_world(wx, wy, size), size), (wx, wy))


class TestBoxFrame:
    frame = BoxFrame(4)

    def test_center(self):
        assert self.frame.center == (2, 2)
        assert self.frame.box_to_world(*self.frame.center) == (0, 0)

    def test_methods_match_functions(self):
        assert self.frame.world_to_box(1.5, -0.5) == world_to_box(1.5, -0.5, 4)
        assert self.frame.box_to_world(1.5, -0.5) == box_to_world(1.5, -0.5, 4)

    def test_contains(self):
        assert self.frame.contains(0, 0)
        assert self.frame.contains(4, 4)
        assert not self.frame.contains(-0.1, 2)
        assert not self.frame.contains(2, 4.1)
