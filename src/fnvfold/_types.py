"""Data structures for fnvfold."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class FnvParameters:
    basis: int        # offset basis at the canonical size
    prime: int        # FNV prime at the canonical size
    modulus: int      # 2**size
    size: int         # canonical size in bits
    fold_needed: bool # requested length < size
