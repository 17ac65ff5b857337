"""DES block encryption: key schedule, Feistel rounds and bit permutations."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

BLOCK_BITS = 64
HALF_MASK = (1 << 32) - 1
KEY_HALF_BITS = 28
KEY_HALF_MASK = (1 << KEY_HALF_BITS) - 1


def _numbers(spec: str) -> tuple[int, ...]:
    return tuple(int(token) for token in spec.split())


def _inverse(table: Sequence[int]) -> tuple[int, ...]:
    result = [0] * len(table)
    for index, position in enumerate(table, start=1):
        result[position - 1] = index
    return tuple(result)


def _key_column(bit: int) -> list[int]:
    """Key bit positions of one grid column, read from the bottom row up."""
    return [8 * row + bit + 1 for row in reversed(range(8))]


# Initial permutation: each row walks a column of the block downwards by eight.
IP = tuple(start - 8 * step for start in (58, 60, 62, 64, 57, 59, 61, 63) for step in range(8))
IP_INV = _inverse(IP)

# Permuted choice 1 drops the parity bits and splits the key into C and D halves.
PC1 = tuple(
    _key_column(0) + _key_column(1) + _key_column(2) + _key_column(3)[:4]
    + _key_column(6) + _key_column(5) + _key_column(4) + _key_column(3)[4:]
)

PC2 = _numbers(
    "14 17 11 24 1 5 3 28 15 6 21 10 23 19 12 4 26 8 16 7 27 20 13 2 "
    "41 52 31 37 47 55 30 40 51 45 33 48 44 49 39 56 34 53 46 42 50 36 29 32"
)

# Rounds 1, 2, 9 and 16 rotate by one bit, all others by two.
SHIFT_SCHEDULE = tuple(1 if round_no in (1, 2, 9, 16) else 2 for round_no in range(1, 17))

# Expansion: eight groups of six, each overlapping its neighbours by one bit.
EXPANSION = tuple((4 * group + offset - 1) % 32 + 1 for group in range(8) for offset in range(6))

P = _numbers(
    "16 7 20 21 29 12 28 17 1 15 23 26 5 18 31 10 "
    "2 8 24 14 32 27 3 9 19 13 30 6 22 11 4 25"
)

_S_BOX_ROWS = (
    ("E4D12FB83A6C5907", "0F74E2D1A6CB9538", "41E8D62BFC973A50", "FC8249175B3EA06D"),
    ("F18E6B34972DC05A", "3D47F28EC01A69B5", "0E7BA4D158C6932F", "D8A13F42B67C05E9"),
    ("A09E63F51DC7B428", "D70934A6285ECBF1", "D6498F30B12C5AE7", "1AD069874FE3B52C"),
    ("7DE3069A1285BC4F", "D8B56F03472C1AE9", "A690CB7DF13E5284", "3F06A1D8945BC72E"),
    ("2C417AB6853FD0E9", "EB2C47D150FA3986", "421BAD78F9C5630E", "B8C71E2D6F09A453"),
    ("C1AF92680D34E75B", "AF427C9561DE0B38", "9EF528C3704A1DB6", "432C95FABE17608D"),
    ("4B2EF08D3C975A61", "D0B7491AE35C2F86", "14BDC37EAF680592", "6BD814A7950FE23C"),
    ("D2846FB1A93E50C7", "1FD8A374C56B0E92", "7B419CE206ADF358", "21E74A8DFC90356B"),
)

S_BOXES = tuple(
    tuple(tuple(int(digit, 16) for digit in row) for row in box) for box in _S_BOX_ROWS
)


def _check_width(value: int, bits: int, name: str) -> None:
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} must fit in {bits} unsigned bits: {value!r}")


def permute(value: int, table: Sequence[int]) -> int:
    """Rearrange bits of a 64-bit ``value`` according to ``table``.

    Table entries are 1-based positions counted from the most significant bit;
    the result has ``len(table)`` bits, the first entry giving its top bit.
    """
    _check_width(value, BLOCK_BITS, "value")
    result = 0
    for position in table:
        result = (result << 1) | ((value >> (BLOCK_BITS - position)) & 1)
    return result


def feistel(right: int, subkey: int) -> int:
    """Round function: expansion, key mixing, S-box substitution and P permutation."""
    _check_width(right, 32, "right")
    _check_width(subkey, 48, "subkey")
    mixed = permute(right << 32, EXPANSION) ^ subkey

    substituted = 0
    for index, box in enumerate(S_BOXES):
        shift = 42 - 6 * index
        row = 2 * ((mixed >> (shift + 5)) & 1)
        column = (mixed >> (shift + 2)) & 0xF
        substituted = (substituted << 4) | box[row][column]

    return permute(substituted << 32, P)


def _rotate_half(half: int, amount: int) -> int:
    return ((half << amount) | (half >> (KEY_HALF_BITS - amount))) & KEY_HALF_MASK


def generate_subkeys(key: int) -> list[int]:
    """Derive the sixteen 48-bit round keys from a 64-bit key."""
    _check_width(key, BLOCK_BITS, "key")
    reduced = permute(key, PC1)
    upper = (reduced >> KEY_HALF_BITS) & KEY_HALF_MASK
    lower = reduced & KEY_HALF_MASK

    subkeys: list[int] = []
    for amount in SHIFT_SCHEDULE:
        upper = _rotate_half(upper, amount)
        lower = _rotate_half(lower, amount)
        joined = (upper << KEY_HALF_BITS) | lower
        subkeys.append(permute(joined << 8, PC2))
    return subkeys


def des_encrypt(plaintext: int, key: int) -> int:
    """Encrypt one 64-bit block with a 64-bit key (parity bits ignored)."""
    _check_width(plaintext, BLOCK_BITS, "plaintext")
    block = permute(plaintext, IP)
    left, right = block >> 32, block & HALF_MASK

    for subkey in generate_subkeys(key):
        left, right = right, left ^ feistel(right, subkey)

    return permute((right << 32) | left, IP_INV)


def _hex_block(text: str) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hexadecimal number: {text!r}") from None
    if not 0 <= value < 1 << BLOCK_BITS:
        raise argparse.ArgumentTypeError(f"does not fit in 64 bits: {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Encrypt a block given in hexadecimal and print the ciphertext."""
    parser = argparse.ArgumentParser(description="DES single-block encryption.")
    parser.add_argument("plaintext", nargs="?", type=_hex_block, default=0x0123456789ABCDEF)
    parser.add_argument("--key", type=_hex_block, default=0x133457799BBCDFF1)
    args = parser.parse_args(argv)

    print(f"Ciphertext: {des_encrypt(args.plaintext, args.key):016X}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())