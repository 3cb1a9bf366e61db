"""Produce luma grids from Pillow images"""

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

from PIL import Image

from gradienthash.errors import InvalidInputError

logger = logging.getLogger(__name__)


def luma_grid(image: Image.Image, width: int, height: int) -> list[list[int]]:
    """
    Scale image to width x height and return its greyscale values as columns.

    The result is indexed luma[x][y]. Pillow's "L" mode uses the ITU-R 601-2
    luma transform.
    """
    try:
        scaled = image.resize((width, height), Image.Resampling.LANCZOS).convert("L")
    except Exception as e:
        logger.exception("luma_grid error resizing to %dx%d", width, height)
        raise InvalidInputError(f"image could not be scaled to {width}x{height}: {e}", "luma") from e

    return [[scaled.getpixel((x, y)) for y in range(height)] for x in range(width)]
