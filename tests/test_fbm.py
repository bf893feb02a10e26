import numpy as np
import pytest

from terrain.config import ContourMapConfig
from terrain.engine import LookupNoiseSource
from terrain.fbm import fbm, height_at


class TestFbm:
    def test_single_octave_returns_raw_sample(self, value_source):
        assert fbm(value_source, 1.3, 2.7, octaves=1) == value_source.sample(1.3, 2.7)

    def test_constant_noise_is_preserved(self):
        source = LookupNoiseSource(np.full((4, 4), 0.7))
        for octaves in (1, 3, 8):
            for persistence in (0.2, 0.4, 0.9):
                assert fbm(
                    source, 0.5, 0.5, octaves=octaves, persistence=persistence
                ) == pytest.approx(0.7)

    def test_octave_frequencies(self, recording_source):
        fbm(recording_source, 1.5, -2.0, octaves=3, lacunarity=2.0)
        assert recording_source.calls == [(1.5, -2.0), (3.0, -4.0), (6.0, -8.0)]

    def test_amplitude_weighting(self):
        class OctaveSource(LookupNoiseSource):
            """Returns 1.0 for the first octave and 0.0 afterwards."""

            def sample(self, x, y):
                return 1.0 if x == 1.0 else 0.0

        source = OctaveSource(np.zeros((1, 1)))
        # Amplitudes 0.5, 0.2, 0.08 -> 0.5 / 0.78
        value = fbm(source, 1.0, 1.0, octaves=3, lacunarity=2.0, persistence=0.4)
        assert value == pytest.approx(0.5 / 0.78)

    def test_output_in_unit_range(self, value_source):
        rng = np.random.default_rng(0)
        for x, y in rng.uniform(-50, 50, size=(200, 2)):
            assert 0.0 <= fbm(value_source, x, y) <= 1.0

    def test_is_pure(self, value_source):
        first = fbm(value_source, 4.2, 0.3, octaves=5)
        fbm(value_source, 100.0, 100.0, octaves=2)
        assert fbm(value_source, 4.2, 0.3, octaves=5) == first

    def test_zero_octaves_raises(self, value_source):
        with pytest.raises(ValueError):
            fbm(value_source, 0.0, 0.0, octaves=0)


class TestHeightAt:
    def test_without_warp_samples_final_field(self, value_source):
        config = ContourMapConfig(warp_amount=0.0)
        expected = fbm(value_source, 100 * 0.004, 200 * 0.002, 3, 2.0, 0.4)
        assert height_at(value_source, 100, 200, config) == expected

    def test_warp_channels_use_different_offsets(self, recording_source):
        config = ContourMapConfig(octaves=1)
        height_at(recording_source, 100.0, 200.0, config)

        warp_x, warp_y, final = recording_source.calls
        assert warp_x == pytest.approx((100.0 * 0.003 + 5.2, 200.0 * 0.0015 + 1.3))
        assert warp_y == pytest.approx((100.0 * 0.003 + 9.8, 200.0 * 0.0015 + 2.7))
        # A constant 0.5 noise means zero displacement.
        assert final == pytest.approx((100.0 * 0.004, 200.0 * 0.002))

    def test_warp_displaces_sample_point(self):
        config = ContourMapConfig(octaves=1, warp_amount=70.0)
        calls = []

        class HighSource(LookupNoiseSource):
            def sample(self, x, y):
                calls.append((x, y))
                return 1.0

        height_at(HighSource(np.zeros((1, 1))), 10.0, 20.0, config)
        # Noise 1.0 pushes both coordinates by +warp_amount.
        assert calls[-1] == pytest.approx((80.0 * 0.004, 90.0 * 0.002))
