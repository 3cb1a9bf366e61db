"""Stable identifiers for hash algorithm configurations"""

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

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193

# Bump whenever the bit layout of a hash changes so old and new hashes never compare
ALGORITHM_VERSION = 2


def fnv1a_32(data: bytes) -> int:
    result = FNV_OFFSET_BASIS
    for byte in data:
        result ^= byte
        result = (result * FNV_PRIME) & 0xFFFFFFFF
    return result


def algorithm_id(kind: str, width: int, height: int, precision: str) -> int:
    """
    Derive the identity of an algorithm configuration.

    kind should be the fully qualified name of the hashing algorithm. The
    result depends only on its arguments and ALGORITHM_VERSION; Python's
    builtin hash() is salted per process and is not used.
    """
    key = f"{kind}:{ALGORITHM_VERSION}:{width}:{height}:{precision}"
    return fnv1a_32(key.encode("utf-8"))
