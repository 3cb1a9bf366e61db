from __future__ import annotations

from gradienthash.differencehash import DifferenceHash, HashConfig, Precision
from gradienthash.dimensions import compute_dimensions
from gradienthash.errors import HashError, InvalidConfigurationError, InvalidInputError
from gradienthash.fingerprint import Fingerprint
from gradienthash.luma import luma_grid

__all__ = [
    "DifferenceHash",
    "Fingerprint",
    "HashConfig",
    "HashError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "Precision",
    "compute_dimensions",
    "luma_grid",
]
