"""Classical ciphers (Caesar, Vigenère, Playfair) and block-cipher building blocks (Feistel, S-box, DES)."""

__version__ = "0.1.0"

__all__ = ["caesar", "playfair", "vigenere", "des", "feistel", "sbox"]