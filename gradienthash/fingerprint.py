"""The value produced by hashing an image"""

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
import operator


@dataclasses.dataclass(frozen=True)
class Fingerprint:
    """A hash together with the id of the algorithm configuration that produced it.

    hash_value starts with a sentinel 1 bit so leading zero gradient bits
    survive the conversion to int. Two fingerprints should only be compared
    when their algorithm ids are equal.
    """

    hash_value: int
    algorithm_id: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "hash_value", operator.index(self.hash_value))
        object.__setattr__(self, "algorithm_id", operator.index(self.algorithm_id))

    def bit_length(self) -> int:
        return self.hash_value.bit_length()

    def bit(self, index: int) -> int:
        """Bit at index, counted from the least significant bit"""
        if index < 0 or index >= self.bit_length():
            raise IndexError(f"bit index {index} out of range for a {self.bit_length()} bit hash")
        return (self.hash_value >> index) & 1

    def is_comparable(self, other: Fingerprint) -> bool:
        return self.algorithm_id == other.algorithm_id

    def __int__(self) -> int:
        return self.hash_value

    def __index__(self) -> int:
        return self.hash_value

    def __str__(self) -> str:
        return f"{self.hash_value:b} ({self.algorithm_id})"
