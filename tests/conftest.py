from __future__ import annotations

import random

import pytest
from PIL import Image

import gradienthash


@pytest.fixture
def sample_luma():
    # luma[x][y] for a 3x4 grid, the dimensions a bit resolution of 8 resolves to
    yield [
        [10, 20, 5, 5],
        [15, 10, 5, 30],
        [15, 40, 0, 31],
    ]


@pytest.fixture
def random_luma():
    def make(width: int, height: int, seed: int = 0) -> list[list[int]]:
        rand = random.Random(seed)
        return [[rand.randint(0, 255) for _ in range(height)] for _ in range(width)]

    yield make


@pytest.fixture
def luma_image():
    def make(luma: list[list[int]]) -> Image.Image:
        image = Image.new("L", (len(luma), len(luma[0])))
        for x, column in enumerate(luma):
            for y, value in enumerate(column):
                image.putpixel((x, y), value)
        return image

    yield make


@pytest.fixture(params=list(gradienthash.Precision))
def precision(request):
    yield request.param
