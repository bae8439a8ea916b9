"""FNV constants per canonical size and length -> parameter selection."""

from __future__ import annotations

from ._errors import UnsupportedLengthError
from ._types import FnvParameters

MIN_LENGTH: int = 16
MAX_LENGTH: int = 1024

FNV_32_PRIME: int = 16777619
FNV_64_PRIME: int = 1099511628211
FNV_128_PRIME: int = 309485009821345068724781371
FNV_256_PRIME: int = 374144419156711147060143317175368453031918731002211
FNV_512_PRIME: int = int(
    "35835915874844867368919076489095108449946327955754392558399825"
    "615420669938882575126094039892345713852759"
)
FNV_1024_PRIME: int = int(
    "50164565101131186554345988110352789550307653454047907443030175"
    "23831112055108147451509157692220295382716162651878526895249385292291816524375"
    "083746691371804094271873160484737966720260389217684476157468082573"
)

FNV_32_BASIS: int = 2166136261
FNV_64_BASIS: int = 14695981039346656037
FNV_128_BASIS: int = 144066263297769815596495629667062367629
FNV_256_BASIS: int = int(
    "10002925795805258090707096862062570483709279601424119394522528"
    "4501741471925557"
)
FNV_512_BASIS: int = int(
    "96593031294966694980094354007163104660904187456726378961083743"
    "29434462657994582932197716438449813051892206539805784495328239340083876191928"
    "701583869517785"
)
FNV_1024_BASIS: int = int(
    "14197795064947621068722070641403218320880622795441933960878474"
    "91461758272325229673230371772215086409652120235554936562817466910857181476047"
    "10150761480297559698040773201576924585630032153049571501574036444603635505054"
    "12711285966361610267868082893823963790439336411086884584107735010676915"
)

# (size, basis, prime, modulus), ascending by size
_TABLE: tuple[tuple[int, int, int, int], ...] = (
    (32, FNV_32_BASIS, FNV_32_PRIME, 1 << 32),
    (64, FNV_64_BASIS, FNV_64_PRIME, 1 << 64),
    (128, FNV_128_BASIS, FNV_128_PRIME, 1 << 128),
    (256, FNV_256_BASIS, FNV_256_PRIME, 1 << 256),
    (512, FNV_512_BASIS, FNV_512_PRIME, 1 << 512),
    (1024, FNV_1024_BASIS, FNV_1024_PRIME, 1 << 1024),
)

CANONICAL_SIZES: tuple[int, ...] = tuple(row[0] for row in _TABLE)


def select_parameters(length: int) -> FnvParameters:
    """Return basis, prime and modulus for the size that covers ``length``.

    The smallest canonical size at or above ``length`` is chosen. Folding is
    needed only when ``length`` is strictly below that size.

    Args:
        length: Requested digest length in bits, 16 to 1024 inclusive.

    Raises:
        UnsupportedLengthError: ``length`` is outside the supported range.
        TypeError: ``length`` is not an int.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f"length must be an int, got {type(length).__name__}")
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise UnsupportedLengthError(length)

    for size, basis, prime, modulus in _TABLE:
        if length <= size:
            break
    return FnvParameters(
        basis=basis,
        prime=prime,
        modulus=modulus,
        size=size,
        fold_needed=length < size,
    )


def canonical_size(length: int) -> int:
    """Smallest canonical FNV size (in bits) that covers ``length``."""
    return select_parameters(length).size
