"""Caesar cipher: shift every ASCII letter by a fixed number of places."""

from __future__ import annotations

import argparse
import string

ALPHABET_SIZE = 26


def _shift_letter(letter: str, shift: int) -> str:
    if letter in string.ascii_uppercase:
        base = ord("A")
    elif letter in string.ascii_lowercase:
        base = ord("a")
    else:
        return letter
    return chr((ord(letter) - base + shift) % ALPHABET_SIZE + base)


def encrypt(text: str, key: int) -> str:
    """Return ``text`` with each ASCII letter shifted forward by ``key``.

    Case is preserved and characters that are not letters pass through unchanged.
    """
    shift = key % ALPHABET_SIZE
    return "".join(_shift_letter(char, shift) for char in text)


def main(argv: list[str] | None = None) -> int:
    """Encrypt a text with a Caesar key, prompting for whatever is missing."""
    parser = argparse.ArgumentParser(description="Caesar cipher encryption.")
    parser.add_argument("text", nargs="?", help="plain text to encrypt")
    parser.add_argument("key", nargs="?", help="shift value")
    args = parser.parse_args(argv)

    text = args.text if args.text is not None else input("Digite o texto claro: ")
    text = text.split("\n", 1)[0]
    raw_key = args.key if args.key is not None else input("Digite o valor da chave: ")

    try:
        key = int(raw_key.strip())
    except ValueError:
        parser.error(f"invalid key: {raw_key!r}")

    print(f"Texto cifrado: {encrypt(text, key)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())