from __future__ import annotations

import pytest

import gradienthash.dimensions
from gradienthash.errors import InvalidConfigurationError

dimensions = [
    (1, (1, 0)),
    (2, (2, 1)),
    (3, (2, 2)),
    (4, (2, 3)),
    (5, (3, 3)),
    (6, (3, 3)),
    (7, (3, 3)),
    (8, (3, 4)),
    (10, (4, 4)),
    (11, (4, 4)),
    (12, (4, 4)),
    (26, (6, 6)),
    (32, (6, 7)),
    (64, (8, 9)),
]


@pytest.mark.parametrize("bit_resolution, expected", dimensions)
def test_compute_dimensions(bit_resolution, expected):
    assert gradienthash.dimensions.compute_dimensions(bit_resolution) == expected


@pytest.mark.parametrize("bit_resolution", range(3, 300))
def test_compute_dimensions_nearly_square(bit_resolution):
    width, height = gradienthash.dimensions.compute_dimensions(bit_resolution)
    assert abs(width - height) <= 1


@pytest.mark.parametrize("bit_resolution", [0, -1, -64])
def test_compute_dimensions_invalid(bit_resolution):
    with pytest.raises(InvalidConfigurationError):
        gradienthash.dimensions.compute_dimensions(bit_resolution)


@pytest.mark.parametrize("bit_resolution", [8.0, 8.5, "8", False, True])
def test_compute_dimensions_not_int(bit_resolution):
    with pytest.raises(InvalidConfigurationError):
        gradienthash.dimensions.compute_dimensions(bit_resolution)
