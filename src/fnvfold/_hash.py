"""FNV-1 / FNV-1a hashing at arbitrary bit lengths with XOR-folding.

Digests are computed at the smallest canonical FNV size covering the
requested length (see ``_params``) and then XOR-folded down to exactly that
many bits, as described in the FNV IETF draft (draft-eastlake-fnv, section 3).
"""

from __future__ import annotations

from collections.abc import Iterable

from ._params import select_parameters

HashInput = bytes | bytearray | memoryview | str | Iterable[int]

_BYTE_MASK: int = 0xFF


def _as_bytes(data: HashInput) -> bytes | bytearray:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, memoryview):
        return data.tobytes()
    if isinstance(data, (bytes, bytearray)):
        return data
    return bytes(data)


def _accumulate(
    data: HashInput, basis: int, prime: int, modulus: int, mix_first: bool,
) -> int:
    digest = basis
    for byte in _as_bytes(data):
        if mix_first:
            digest ^= byte & _BYTE_MASK
            digest = (digest * prime) % modulus
        else:
            digest = (digest * prime) % modulus
            digest ^= byte & _BYTE_MASK
    return digest


def accumulate_fnv1(data: HashInput, basis: int, prime: int, modulus: int) -> int:
    """FNV-1 without folding: multiply, then XOR each byte."""
    return _accumulate(data, basis, prime, modulus, mix_first=False)


def accumulate_fnv1a(data: HashInput, basis: int, prime: int, modulus: int) -> int:
    """FNV-1a without folding: XOR each byte, then multiply."""
    return _accumulate(data, basis, prime, modulus, mix_first=True)


def xor_fold(digest: int, bits: int) -> int:
    """XOR-fold ``digest`` down to ``bits`` bits.

    The bits above ``bits`` are shifted down and XORed into the low part
    instead of being truncated away.
    """
    mask = (1 << bits) - 1
    return (digest ^ (digest >> bits)) & mask


def to_signed_bytes(value: int) -> bytes:
    """Big-endian two's-complement encoding of a non-negative int.

    Uses the minimal signed length, so a leading zero byte is added whenever
    the top bit of the most significant byte is set. ``0`` encodes as a
    single zero byte.
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return value.to_bytes(value.bit_length() // 8 + 1, "big")


def _digest(data: HashInput, length: int, mix_first: bool) -> int:
    params = select_parameters(length)
    digest = _accumulate(
        data, params.basis, params.prime, params.modulus, mix_first,
    )
    if params.fold_needed:
        digest = xor_fold(digest, length)
    return digest


def fnv1_int(data: HashInput, length: int) -> int:
    """FNV-1 hash of ``data`` folded to ``length`` bits, as an int."""
    return _digest(data, length, mix_first=False)


def fnv1a_int(data: HashInput, length: int) -> int:
    """FNV-1a hash of ``data`` folded to ``length`` bits, as an int."""
    return _digest(data, length, mix_first=True)


def fnv1(data: HashInput, length: int) -> bytes:
    """Compute the FNV-1 hash of ``data`` at ``length`` bits.

    Lengths other than 32, 64, 128, 256, 512 and 1024 are XOR-folded from
    the next canonical size up. When ``length`` is not a multiple of 8 the
    top byte carries ``8 - length % 8`` leading zero bits.

    The result uses the signed encoding of :func:`to_signed_bytes`, so it may
    be one byte longer than ``ceil(length / 8)``.

    Args:
        data: Bytes to hash. ``str`` is hashed as its UTF-8 encoding.
        length: Digest length in bits, 16 to 1024 inclusive.

    Raises:
        UnsupportedLengthError: ``length`` is outside [16, 1024].
    """
    return to_signed_bytes(fnv1_int(data, length))


def fnv1a(data: HashInput, length: int) -> bytes:
    """Compute the FNV-1a hash of ``data`` at ``length`` bits.

    Same contract as :func:`fnv1`; only the per-byte order differs.
    """
    return to_signed_bytes(fnv1a_int(data, length))


_VARIANTS = {
    "fnv1": fnv1,
    "fnv1a": fnv1a,
}


def hash_bytes(data: HashInput, length: int, variant: str = "fnv1a") -> bytes:
    """Hash ``data`` with the FNV variant named by ``variant``."""
    try:
        func = _VARIANTS[variant]
    except KeyError:
        options = ", ".join(_VARIANTS)
        raise ValueError(
            f"Unknown FNV variant {variant!r}, expected one of: {options}"
        ) from None
    return func(data, length)
