"""Vigenère cipher: shift each letter by the matching letter of a keyword."""

from __future__ import annotations

import argparse
import string
from collections.abc import Iterator
from itertools import cycle

ALPHABET_SIZE = 26


def _key_shifts(key: str) -> Iterator[int]:
    if not key:
        raise ValueError("key must not be empty")
    upper = key.upper()
    if any(char not in string.ascii_uppercase for char in upper):
        raise ValueError(f"key must contain only letters: {key!r}")
    return cycle(ord(char) - ord("A") for char in upper)


def _apply(text: str, key: str, direction: int) -> str:
    shifts = _key_shifts(key)
    out: list[str] = []
    for char in text:
        if char in string.ascii_uppercase:
            base = ord("A")
        elif char in string.ascii_lowercase:
            base = ord("a")
        else:
            out.append(char)
            continue
        shift = next(shifts) * direction
        out.append(chr((ord(char) - base + shift) % ALPHABET_SIZE + base))
    return "".join(out)


def encrypt(text: str, key: str) -> str:
    """Encrypt ``text``; the key advances only on letters, case is kept."""
    return _apply(text, key, 1)


def decrypt(text: str, key: str) -> str:
    """Reverse :func:`encrypt` with the same key."""
    return _apply(text, key, -1)


def main(argv: list[str] | None = None) -> int:
    """Encrypt and then decrypt a text, printing each stage."""
    parser = argparse.ArgumentParser(description="Vigenère cipher demonstration.")
    parser.add_argument("text", nargs="?", default="ATAQUEAOAMANHECER")
    parser.add_argument("--key", default="CHAVE")
    args = parser.parse_args(argv)

    try:
        ciphertext = encrypt(args.text, args.key)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Texto original: {args.text}")
    print(f"Texto criptografado: {ciphertext}")
    print(f"Texto descriptografado: {decrypt(ciphertext, args.key)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())