import numpy as np
import pytest

from errors import InvalidArgumentError
from gradient_field import GradientField
from noise_sampler import evaluate
from random_source import RandomUnitVectorSource, FixedUnitVectorSource, lattice_fixture
from renderer import NoiseRenderer, sample_points, sample_color, to_unit_interval


def test_sample_points():
    assert np.allclose(sample_points(2, 0.5), [0.0, 0.5, 1.0, 1.5])
    assert np.allclose(sample_points(1, 0.3), [0.0, 0.3, 0.6, 0.9])
    assert len(sample_points(8, 0.05)) == 160
    assert np.all(sample_points(8, 0.05) < 8)


@pytest.mark.parametrize("step", [0, -0.5])
def test_sample_points_rejects_bad_step(step):
    with pytest.raises(InvalidArgumentError):
        sample_points(2, step)


def test_to_unit_interval():
    assert to_unit_interval(-1.0) == 0.0
    assert to_unit_interval(0.0) == 0.5
    assert to_unit_interval(1.0) == 1.0


def test_sample_color():
    overrides = {(0, 0): (1.0, 0.0), (0, 1): (0.0, 1.0), (1, 0): (0.0, 1.0), (1, 1): (1.0, 0.0)}
    field = GradientField(2).populate(FixedUnitVectorSource(lattice_fixture(2, overrides)))
    color = sample_color(field, 0.25, 0.75)
    assert color.dtype == np.uint8
    assert color[0] == 255
    assert color[1] == round(to_unit_interval(evaluate(field, 0.25, 0.75)) * 255)
    assert color[2] == round(to_unit_interval(evaluate(field, 0.75, 0.25)) * 255)


class TestNoiseRenderer:
    field = GradientField(2).populate(RandomUnitVectorSource(4))

    def test_compute_colors(self):
        renderer = NoiseRenderer(self.field, step=0.25)
        colors = renderer.compute_colors()
        assert colors.shape == (8, 8, 3)
        assert colors.dtype == np.uint8
        assert np.all(colors[..., 0] == 255)
        assert np.array_equal(colors[3, 5], sample_color(self.field, 0.75, 1.25))

    def test_progress_reports_completion(self):
        calls = []
        renderer = NoiseRenderer(self.field, step=0.5)
        renderer.compute_colors(lambda done, total: calls.append((done, total)))
        assert calls[-1] == (4, 4)

    def test_smooth_changes_colors(self):
        renderer = NoiseRenderer(self.field, step=0.25)
        linear = renderer.compute_colors()
        renderer.set_smooth(True)
        assert renderer.sampler.smooth
        assert renderer.texture is None
        assert not np.array_equal(linear, renderer.compute_colors())
