"""fnvfold: FNV-1 and FNV-1a hashes at any bit length from 16 to 1024."""

from __future__ import annotations

from ._errors import FnvError, UnsupportedLengthError
from ._hash import (
    HashInput,
    accumulate_fnv1,
    accumulate_fnv1a,
    fnv1,
    fnv1_int,
    fnv1a,
    fnv1a_int,
    hash_bytes,
    to_signed_bytes,
    xor_fold,
)
from ._params import (
    CANONICAL_SIZES,
    MAX_LENGTH,
    MIN_LENGTH,
    canonical_size,
    select_parameters,
)
from ._types import FnvParameters

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CANONICAL_SIZES",
    "FnvError",
    "FnvParameters",
    "HashInput",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "UnsupportedLengthError",
    "accumulate_fnv1",
    "accumulate_fnv1a",
    "canonical_size",
    "fnv1",
    "fnv1_int",
    "fnv1a",
    "fnv1a_int",
    "hash_bytes",
    "select_parameters",
    "to_signed_bytes",
    "xor_fold",
]
