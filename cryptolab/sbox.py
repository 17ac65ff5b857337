"""A 4-bit substitution box."""

from __future__ import annotations

import argparse

S_BOX = (14, 4, 13, 1, 2, 15, 11, 8, 3, 10, 6, 12, 9, 0, 7, 5)


def substitute(value: int) -> int:
    """Map a 4-bit value (0 to 15) through the S-box."""
    if not 0 <= value < len(S_BOX):
        raise ValueError(f"input must be between 0 and 15 (4 bits): {value!r}")
    return S_BOX[value]


def main(argv: list[str] | None = None) -> int:
    """Read a number from 0 to 15 and print its substitution."""
    parser = argparse.ArgumentParser(description="4-bit S-box substitution.")
    parser.add_argument("value", nargs="?", help="number from 0 to 15")
    args = parser.parse_args(argv)

    raw = args.value if args.value is not None else input("Digite um número de 0 a 15: ")
    try:
        value = int(raw.strip())
    except ValueError:
        parser.error(f"not an integer: {raw!r}")

    try:
        result = substitute(value)
    except ValueError:
        print("Entrada inválida - deve ser entre 1 e 15 (4 bits)")
        return 1

    print(f"Saída cifrada: {result:04b} (decimal: {result})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())