"""Gradient based perceptual hashing"""

# Copyright 2024 gradienthash Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from enum import Enum, auto

from PIL import Image

from gradienthash.dimensions import compute_dimensions
from gradienthash.errors import InvalidConfigurationError, InvalidInputError
from gradienthash.fingerprint import Fingerprint
from gradienthash.identity import algorithm_id
from gradienthash.luma import luma_grid

logger = logging.getLogger(__name__)


class Precision(Enum):
    """Gradient directions contributing to the hash.

    Member names feed into the algorithm id; renaming one makes every stored
    hash incompatible.
    """

    Simple = auto()  # left to right
    Double = auto()  # and top to bottom
    Triple = auto()  # and top-left to bottom-right


@dataclasses.dataclass(frozen=True)
class HashConfig:
    bit_resolution: int
    precision: Precision
    width: int
    height: int
    algorithm_id: int

    @classmethod
    def create(cls, bit_resolution: int, precision: Precision, kind: str) -> HashConfig:
        if not isinstance(precision, Precision):
            raise InvalidConfigurationError(f"unknown precision {precision!r}", kind)

        width, height = compute_dimensions(bit_resolution)
        if width < 2 or height < 2:
            raise InvalidConfigurationError(
                f"bit resolution {bit_resolution} resolves to a {width}x{height} grid, both sides must be at least 2",
                kind,
            )

        return cls(
            bit_resolution=int(bit_resolution),
            precision=precision,
            width=width,
            height=height,
            algorithm_id=algorithm_id(kind, width, height, precision.name),
        )

    @property
    def key_resolution(self) -> int:
        """Number of bits in every hash of this configuration, sentinel included"""
        bits = (self.width - 1) * self.height
        if self.precision is not Precision.Simple:
            bits += self.width * (self.height - 1)
        if self.precision is Precision.Triple:
            bits += (self.width - 1) * (self.height - 1)
        return bits + 1


class DifferenceHash:
    """
    Hash images by tracking the luminance gradient between neighbouring pixels.

    Cheap to compute and robust against a wide range of colour transformations.
    bit_resolution is only an approximation of the final hash length, see
    HashConfig.key_resolution for the exact value.
    """

    def __init__(self, bit_resolution: int, precision: Precision = Precision.Simple) -> None:
        kind = f"{type(self).__module__}.{type(self).__qualname__}"
        self.config = HashConfig.create(bit_resolution, precision, kind)
        logger.debug(
            "%s: %dx%d grid, %s precision, %d bits, algorithm id %d",
            kind,
            self.config.width,
            self.config.height,
            self.config.precision.name,
            self.config.key_resolution,
            self.config.algorithm_id,
        )

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def precision(self) -> Precision:
        return self.config.precision

    @property
    def algorithm_id(self) -> int:
        return self.config.algorithm_id

    def hash(self, image: Image.Image) -> Fingerprint:
        return self.hash_luma(luma_grid(image, self.width, self.height))

    def hash_luma(self, luma: Sequence[Sequence[int]]) -> Fingerprint:
        """Hash a luma grid indexed luma[x][y] of exactly width x height samples"""
        width, height = self.width, self.height
        try:
            luma = list(luma)
            heights = [len(column) for column in luma]
        except TypeError as e:
            raise InvalidInputError(
                f"expected a {width}x{height} luma grid, got {type(luma).__name__}", "DifferenceHash"
            ) from e

        if len(heights) != width or any(h != height for h in heights):
            raise InvalidInputError(
                f"expected a {width}x{height} luma grid, got {len(heights)} columns of heights {sorted(set(heights))}",
                "DifferenceHash",
            )

        # comparisons on array types return their own bool; int() keeps result unbounded
        result = 1

        # left to right, flat or brighter is 0
        for x in range(1, width):
            for y in range(height):
                result = (result << 1) | int(luma[x][y] < luma[x - 1][y])

        if self.precision is not Precision.Simple:
            # top to bottom, darker is 1
            for x in range(width):
                for y in range(1, height):
                    result = (result << 1) | int(luma[x][y] < luma[x][y - 1])

        if self.precision is Precision.Triple:
            for x in range(1, width):
                for y in range(1, height):
                    result = (result << 1) | int(luma[x][y] < luma[x - 1][y - 1])

        return Fingerprint(result, self.algorithm_id)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bit_resolution={self.config.bit_resolution}, "
            f"precision=Precision.{self.precision.name})"
        )
