from unittest.mock import patch

import numpy as np
import pytest

from terrain.engine import (
    LookupNoiseSource,
    NoiseSource,
    PerlinNoiseSource,
    ValueNoiseSource,
    create_noise_source,
)
from terrain.engine.noise_source import seeded_rng

COORDS = [(x * 0.37, y * 0.53) for x in range(-5, 15) for y in range(-3, 12)]


@pytest.mark.parametrize("source_cls", [PerlinNoiseSource, ValueNoiseSource])
class TestSeededSources:
    def test_values_in_unit_range(self, source_cls):
        source = source_cls(seed=123)
        values = [source.sample(x, y) for x, y in COORDS]
        assert min(values) >= 0.0
        assert max(values) <= 1.0

    def test_same_seed_is_deterministic(self, source_cls):
        a = source_cls(seed=99)
        b = source_cls(seed=99)
        assert [a.sample(x, y) for x, y in COORDS] == [
            b.sample(x, y) for x, y in COORDS
        ]

    def test_different_seeds_differ(self, source_cls):
        a = source_cls(seed=1)
        b = source_cls(seed=2)
        assert [a.sample(x, y) for x, y in COORDS] != [
            b.sample(x, y) for x, y in COORDS
        ]

    def test_with_seed_returns_new_source(self, source_cls):
        source = source_cls(seed=5)
        reseeded = source.with_seed(6)

        assert isinstance(reseeded, source_cls)
        assert reseeded is not source
        assert reseeded.seed == 6
        assert source.seed == 5

    def test_with_seed_matches_fresh_source(self, source_cls):
        reseeded = source_cls(seed=5).with_seed(11)
        fresh = source_cls(seed=11)
        assert reseeded.sample(3.3, 7.7) == fresh.sample(3.3, 7.7)

    def test_is_continuous(self, source_cls):
        source = source_cls(seed=3)
        assert source.sample(2.5, 4.25) == pytest.approx(
            source.sample(2.5 + 1e-7, 4.25), abs=1e-4
        )


class TestValueNoiseSource:
    def test_lattice_points_hit_table_values(self):
        source = ValueNoiseSource(seed=8)
        # At integer coordinates the smoothstep weights are 0.
        assert source.sample(3.0, 4.0) == source._lattice(3, 4)

    def test_wraps_every_256_units(self):
        source = ValueNoiseSource(seed=8)
        assert source.sample(1.25, 2.5) == pytest.approx(
            source.sample(257.25, 2.5)
        )

    def test_negative_coordinates(self):
        source = ValueNoiseSource(seed=8)
        assert 0.0 <= source.sample(-12.6, -0.4) <= 1.0


class TestLookupNoiseSource:
    def test_returns_table_entries(self):
        table = np.array([[0.1, 0.2], [0.3, 0.4]])
        source = LookupNoiseSource(table)

        assert source.sample(0.0, 0.0) == 0.1
        assert source.sample(1.9, 0.2) == 0.2
        assert source.sample(0.5, 1.5) == 0.3

    def test_wraps_coordinates(self):
        table = np.array([[0.1, 0.2], [0.3, 0.4]])
        source = LookupNoiseSource(table)

        assert source.sample(3.0, 2.0) == 0.2
        assert source.sample(-1.0, -1.0) == 0.4

    def test_seed_does_not_change_output(self):
        source = LookupNoiseSource(np.array([[0.25, 0.75]]), seed=1)
        reseeded = source.with_seed(2)

        assert reseeded.seed == 2
        assert reseeded.sample(1.0, 0.0) == source.sample(1.0, 0.0)

    @pytest.mark.parametrize(
        "table", [np.array([0.1, 0.2]), np.zeros((0, 3)), np.array([[1.5]])]
    )
    def test_invalid_table_raises(self, table):
        with pytest.raises(ValueError):
            LookupNoiseSource(table)


def test_create_noise_source():
    source = create_noise_source("value", seed=4)
    assert isinstance(source, ValueNoiseSource)
    assert isinstance(source, NoiseSource)
    assert source.seed == 4

    assert isinstance(create_noise_source("perlin"), PerlinNoiseSource)


def test_create_noise_source_unknown_name():
    with pytest.raises(ValueError):
        create_noise_source("simplex")


class TestPerlinSeeding:
    def test_seed_moves_lattice_offset(self):
        with patch("noise.pnoise2", return_value=0.0) as mock_pnoise2:
            PerlinNoiseSource(seed=1).sample(0.0, 0.0)
            PerlinNoiseSource(seed=2).sample(0.0, 0.0)

        first, second = mock_pnoise2.call_args_list
        assert first.args != second.args
        assert first.kwargs["base"] == 0
        assert second.kwargs["base"] == 0

    def test_offsets_within_lattice_period(self):
        for seed in (-(2**31), -1, 0, 1, 2**40):
            source = PerlinNoiseSource(seed=seed)
            assert 0.0 <= source.x_offset < 256.0
            assert 0.0 <= source.y_offset < 256.0


class TestSeededRng:
    def test_negative_seeds_are_accepted(self):
        assert 0.0 <= seeded_rng(-5).random() < 1.0

    def test_sign_is_significant(self):
        assert seeded_rng(-7).random() != seeded_rng(7).random()

    def test_deterministic(self):
        assert seeded_rng(-7).random() == seeded_rng(-7).random()
