from __future__ import annotations

import pytest
from PIL import Image

import gradienthash.luma
from gradienthash import DifferenceHash, Precision
from gradienthash.errors import InvalidInputError


def test_luma_grid_same_size(sample_luma, luma_image):
    assert gradienthash.luma.luma_grid(luma_image(sample_luma), 3, 4) == sample_luma


def test_luma_grid_dimensions():
    image = Image.new("RGB", (64, 48), (0, 0, 0))
    luma = gradienthash.luma.luma_grid(image, 6, 7)
    assert len(luma) == 6
    assert all(len(column) == 7 for column in luma)
    assert {value for column in luma for value in column} == {0}


def test_luma_grid_color_conversion():
    image = Image.new("RGB", (2, 2), (255, 255, 255))
    assert gradienthash.luma.luma_grid(image, 2, 2) == [[255, 255], [255, 255]]


def test_luma_grid_error(monkeypatch):
    def broken_resize(*args, **kwargs):
        raise OSError("truncated image")

    image = Image.new("L", (8, 8))
    monkeypatch.setattr(image, "resize", broken_resize)
    with pytest.raises(InvalidInputError):
        gradienthash.luma.luma_grid(image, 3, 4)


def test_hash_flat_image(precision):
    hasher = DifferenceHash(64, precision)
    fp = hasher.hash(Image.new("RGB", (100, 80), (0, 0, 0)))
    assert fp.hash_value == 1 << (hasher.config.key_resolution - 1)


def test_hash_mirrored_image():
    image = Image.new("L", (64, 64))
    for x in range(64):
        for y in range(64):
            image.putpixel((x, y), x * 4)

    hasher = DifferenceHash(64, Precision.Triple)
    fp = hasher.hash(image)
    mirrored = hasher.hash(image.transpose(Image.Transpose.FLIP_LEFT_RIGHT))

    assert fp == hasher.hash(image)
    assert fp != mirrored
