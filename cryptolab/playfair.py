"""Playfair digraph cipher over a 5x5 key square (I and J share a cell)."""

from __future__ import annotations

import argparse
import string

SIZE = 5
_LETTERS = string.ascii_uppercase.replace("J", "")


def _normalise(char: str) -> str | None:
    letter = char.upper()
    if letter not in string.ascii_uppercase:
        return None
    return "I" if letter == "J" else letter


def prepare_text(text: str) -> str:
    """Turn text into an even-length run of upper-case letters for digraphs.

    Non-letters are dropped, J becomes I, and whenever a letter repeats the
    one just written an X is placed between them. An odd length gets a
    trailing X.
    """
    prepared: list[str] = []
    for char in text:
        letter = _normalise(char)
        if letter is None:
            continue
        if prepared and prepared[-1] == letter:
            prepared.append("X")
        prepared.append(letter)
    if len(prepared) % 2:
        prepared.append("X")
    return "".join(prepared)


class PlayfairCipher:
    """A Playfair key square built from a keyword."""

    def __init__(self, key: str) -> None:
        order: dict[str, None] = {}
        for char in key:
            letter = _normalise(char)
            if letter is not None:
                order.setdefault(letter)
        for letter in _LETTERS:
            order.setdefault(letter)
        letters = list(order)
        self.matrix: tuple[tuple[str, ...], ...] = tuple(
            tuple(letters[row * SIZE:(row + 1) * SIZE]) for row in range(SIZE)
        )
        self._positions = {
            letter: (row, col)
            for row, line in enumerate(self.matrix)
            for col, letter in enumerate(line)
        }

    def find_position(self, letter: str) -> tuple[int, int]:
        """Return the (row, column) of ``letter`` in the key square."""
        normalised = _normalise(letter) if len(letter) == 1 else None
        if normalised is None:
            raise ValueError(f"not a letter: {letter!r}")
        return self._positions[normalised]

    def encrypt(self, plaintext: str) -> str:
        """Encrypt ``plaintext`` after preparing it into digraphs."""
        prepared = prepare_text(plaintext)
        out: list[str] = []
        for first, second in zip(prepared[::2], prepared[1::2]):
            r1, c1 = self.find_position(first)
            r2, c2 = self.find_position(second)
            if r1 == r2:
                out += [self.matrix[r1][(c1 + 1) % SIZE], self.matrix[r2][(c2 + 1) % SIZE]]
            elif c1 == c2:
                out += [self.matrix[(r1 + 1) % SIZE][c1], self.matrix[(r2 + 1) % SIZE][c2]]
            else:
                out += [self.matrix[r1][c2], self.matrix[r2][c1]]
        return "".join(out)

    def format_matrix(self) -> str:
        """Return the key square as five lines of space-separated letters."""
        return "\n".join(" ".join(row) for row in self.matrix)


def main(argv: list[str] | None = None) -> int:
    """Show the key square and encrypt a plain text with it."""
    parser = argparse.ArgumentParser(description="Playfair cipher encryption.")
    parser.add_argument("plaintext", nargs="?", default="BALLOON")
    parser.add_argument("--key", default="MONARCHY")
    args = parser.parse_args(argv)

    cipher = PlayfairCipher(args.key)
    print("Matriz Playfair:")
    print(cipher.format_matrix())
    print(f"Texto original: {args.plaintext}")
    print(f"Texto criptografado: {cipher.encrypt(args.plaintext)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())