"""Translate a requested hash length into the dimensions of the sampling grid"""

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

import logging
import math
import numbers

from gradienthash.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


def compute_dimensions(bit_resolution: int) -> tuple[int, int]:
    """
    Pick the grid closest to a square whose left to right gradient yields
    roughly bit_resolution bits.

    A d x d grid yields (d - 1) * d bits, so the achievable lengths grow in
    uneven steps. The three grids around d x d are compared and the nearest one
    wins, with ties going to the longer hash.

    Returns
    -------
    tuple[int, int]
        (width, height) of the grid
    """
    if isinstance(bit_resolution, bool) or not isinstance(bit_resolution, numbers.Integral):
        raise InvalidConfigurationError(f"bit resolution must be an integer, got {bit_resolution!r}", "dimensions")
    bit_resolution = int(bit_resolution)
    if bit_resolution < 1:
        raise InvalidConfigurationError(f"bit resolution must be at least 1, got {bit_resolution}", "dimensions")

    # half rounds up; sqrt of an integer never lands on .5 anyway
    dimension = math.floor(math.sqrt(bit_resolution + 1) + 0.5)

    lower_bound = (dimension - 1) * (dimension - 1) + 1
    normal_bound = (dimension - 1) * dimension + 1
    higher_bound = (dimension - 1) * (dimension + 1) + 1

    width = height = dimension
    if lower_bound >= bit_resolution:
        height -= 1
    elif higher_bound < bit_resolution:
        width += 1
        height += 1
    elif normal_bound < bit_resolution or (normal_bound - bit_resolution) > (higher_bound - bit_resolution):
        height += 1

    logger.debug("bit resolution %d resolved to a %dx%d grid", bit_resolution, width, height)
    return width, height
