"""Reference vectors for "asdfasdfasdfasdf".

Canonical sizes from https://nqv.github.io/fnv/; 19 and 1019 bits are the
XOR-folded values.
"""

import pytest

from fnvfold import fnv1, fnv1a


def _signed(hex_digits: str) -> bytes:
    """Expected encoding: big-endian with room for a sign bit."""
    value = int(hex_digits, 16)
    return value.to_bytes(value.bit_length() // 8 + 1, "big")


FNV1_VECTORS = {
    32: "8d968dbd",
    64: "9699ecfed4303f9d",
    128: "b24f15c98fa3cdab34062052dd618045",
    256: (
        "247bd2af7549ce3d3e19122f9371a39cf51a37d505b75f74780e"
        "4b295363026d"
    ),
    512: (
        "e6976a11387e07a3b308581b3eb0cc4a1430124f02d52bceb7da"
        "26f14d3a4251df9a3485fe71fab8b81025e317c89e541276b9119be920b215025bcfffad7"
        "ae1"
    ),
    1024: (
        "f5ed8ba10097026e4bdf6ed8dff81d35e8cb50cdea1d312ed2f"
        "074335406b0d702b8f82d01c703315cfaf500000000000000000000000000000000000000"
        "000000000000000000000000000014e0e64e8b1537e8b39bdf3c9cf101ec642a361bad215"
        "10f30a045752ac61445ef90e49316e567dadc65bbc57885811e95448fc3"
    ),
    19: "069C0F",
    1019: (
        "05ED8BA10097026E4BDF6ED8DFF81D35E8CB50CDEA1D312ED2F"
        "074335406B0D702B8F82D01C703315CFAF500000000000000000000000000000000000000"
        "000000000000000000000000000014E0E64E8B1537E8B39BDF3C9CF101EC642A361BAD215"
        "10F30A045752AC61445EF90E49316E567DADC65BBC57885811E95448FDD"
    ),
}

FNV1A_VECTORS = {
    32: "f4a8096d",
    64: "78fdb7e8e153064d",
    128: "36d541ea22f38b65b818f0e16f3c23d5",
    256: (
        "2854f27942424ecd4c8f822f9371ba3b198a71f5808038f7bd6"
        "3acb0256f34dd"
    ),
    512: (
        "e6976a10939ce1d7dfeeb6db18e011f886fae4e612d52bceb7d"
        "a26f14d3a4251df9a3485fe71fab8b81025e317c8908720c0b81cb38a73c0a6f6ea28820d"
        "e331"
    ),
    1024: (
        "f5ed8ba10097026e4bdf6ed8dff81d35e8cb50cdea1d312ed2"
        "f5e51dd1fd24bea2b76593d4bbe914b44e750000000000000000000000000000000000000"
        "0000000000000000000000000000014e0e64e8b1537e8b39bdf3c9cf101ec642a361bad21"
        "510f30a045752ac61445ef916b8c8b145ca2de98f5134e622fbdad505023"
    ),
    19: "17F8",
    1019: (
        "05ED8BA10097026E4BDF6ED8DFF81D35E8CB50CDEA1D312ED2F"
        "5E51DD1FD24BEA2B76593D4BBE914B44E7500000000000000000000000000000000000000"
        "000000000000000000000000000014E0E64E8B1537E8B39BDF3C9CF101EC642A361BAD215"
        "10F30A045752AC61445EF916B8C8B145CA2DE98F5134E622FBDAD50503D"
    ),
}


@pytest.mark.parametrize("length", list(FNV1_VECTORS))
def test_fnv1_vectors(hashme, length):
    assert fnv1(hashme, length) == _signed(FNV1_VECTORS[length])


@pytest.mark.parametrize("length", list(FNV1A_VECTORS))
def test_fnv1a_vectors(hashme, length):
    assert fnv1a(hashme, length) == _signed(FNV1A_VECTORS[length])


def test_leading_zero_byte_when_top_bit_set(hashme):
    """0x8d... has its top bit set, so a zero byte is prepended."""
    assert fnv1(hashme, 32) == b"\x00\x8d\x96\x8d\xbd"
    assert fnv1(hashme, 64) == b"\x00\x96\x99\xec\xfe\xd4\x30\x3f\x9d"


def test_no_leading_zero_byte_when_top_bit_clear(hashme):
    assert fnv1a(hashme, 64) == bytes.fromhex("78fdb7e8e153064d")


def test_folded_byte_lengths(hashme):
    assert fnv1(hashme, 19) == b"\x06\x9c\x0f"
    assert fnv1a(hashme, 19) == b"\x17\xf8"
