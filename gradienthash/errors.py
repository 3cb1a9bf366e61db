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


class HashError(Exception):
    """Base class exception for hash computation.

    Attributes:
        desc -- description of the error
        source -- the name of the component producing the error
    """

    kind = "general"

    def __init__(self, desc: str = "Unknown", source: str = "gradienthash") -> None:
        super().__init__(desc)
        self.desc = desc
        self.source = source

    def __str__(self) -> str:
        return f"{self.source} encountered a {self.kind} error. {self.desc}"


class InvalidConfigurationError(HashError, ValueError):
    """The requested resolution or precision cannot produce a usable hash"""

    kind = "configuration"


class InvalidInputError(HashError, ValueError):
    """The image or luma grid does not match the hasher configuration"""

    kind = "input"
