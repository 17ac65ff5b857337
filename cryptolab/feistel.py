"""A toy 8-bit Feistel cipher with 4-bit halves and XOR as round function."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

NUM_ROUNDS = 4
DEFAULT_ROUND_KEYS = (3, 6, 9, 12)
_BYTE = 0xFF


def _check_byte(value: int, name: str) -> None:
    if not 0 <= value <= _BYTE:
        raise ValueError(f"{name} must be between 0 and 255: {value!r}")


def _check_keys(round_keys: Sequence[int]) -> None:
    if not round_keys:
        raise ValueError("at least one round key is required")
    for key in round_keys:
        _check_byte(key, "round key")


def f_function(half_block: int, round_key: int) -> int:
    """Round function: the half block XORed with the round key."""
    return (half_block ^ round_key) & _BYTE


def feistel_encrypt(plaintext: int, round_keys: Sequence[int] = DEFAULT_ROUND_KEYS) -> int:
    """Encrypt one byte, one round per key."""
    _check_byte(plaintext, "plaintext")
    _check_keys(round_keys)
    left = (plaintext >> 4) & 0x0F
    right = plaintext & 0x0F
    for key in round_keys:
        left, right = right, (left ^ f_function(right, key)) & _BYTE
    return ((left << 4) | right) & _BYTE


def feistel_decrypt(ciphertext: int, round_keys: Sequence[int] = DEFAULT_ROUND_KEYS) -> int:
    """Undo :func:`feistel_encrypt`, applying the round keys in reverse."""
    _check_byte(ciphertext, "ciphertext")
    _check_keys(round_keys)
    left = (ciphertext >> 4) & 0x0F
    right = ciphertext & 0x0F
    for key in reversed(round_keys):
        left, right = (right ^ f_function(left, key)) & _BYTE, left
    return ((left << 4) | right) & _BYTE


def _int_literal(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def main(argv: list[str] | None = None) -> int:
    """Encrypt and decrypt one byte, printing each value in hexadecimal."""
    parser = argparse.ArgumentParser(description="Toy Feistel cipher on one byte.")
    parser.add_argument("plaintext", nargs="?", type=_int_literal, default=0b11010110)
    parser.add_argument(
        "--keys", nargs="+", type=_int_literal, default=list(DEFAULT_ROUND_KEYS)
    )
    args = parser.parse_args(argv)

    try:
        ciphertext = feistel_encrypt(args.plaintext, args.keys)
    except ValueError as exc:
        parser.error(str(exc))
    decrypted = feistel_decrypt(ciphertext, args.keys)

    print(f"Plain Text: 0x{args.plaintext:02X}")
    print(f"Ciphertext: 0x{ciphertext:02X}")
    print(f"Decrypted: 0x{decrypted:02X}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())