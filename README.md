# cryptolab

Small, readable implementations of classical ciphers and of the building
blocks of block ciphers, meant for studying how they work.

| Module               | What it does                                                  |
|----------------------|---------------------------------------------------------------|
| `cryptolab.caesar`   | Caesar shift cipher                                           |
| `cryptolab.vigenere` | Vigenère cipher, encryption and decryption                    |
| `cryptolab.playfair` | Playfair cipher with a 5×5 key square (I and J share a cell)  |
| `cryptolab.feistel`  | A toy 8-bit Feistel network with 4-bit halves                 |
| `cryptolab.sbox`     | A 4-bit substitution box                                      |
| `cryptolab.des`      | Single-block encryption with the DES tables, rounds and key schedule |

None of these is suitable for protecting real data.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Using the library

```python
from cryptolab import caesar, vigenere, playfair, feistel, sbox, des

caesar.encrypt("Zebra", 3)                  # 'Cheud'; non-letters are left alone

ciphertext = vigenere.encrypt("Attack at dawn", "secret")
vigenere.decrypt(ciphertext, "secret")      # 'Attack at dawn'

cipher = playfair.PlayfairCipher("secret")
print(cipher.format_matrix())               # the 5×5 key square
cipher.find_position("J")                   # same cell as "I"
cipher.encrypt("balloon")                   # upper-case letters only
playfair.prepare_text("balloon")            # 'BALXLOXONX'

round_keys = [3, 6, 9, 12]
block = feistel.feistel_encrypt(0xD6, round_keys)
feistel.feistel_decrypt(block, round_keys)  # 0xD6

sbox.substitute(0)                          # 14

subkeys = des.generate_subkeys(0x133457799BBCDFF1)  # sixteen 48-bit round keys
des.des_encrypt(0x0123456789ABCDEF, 0x133457799BBCDFF1)
```

Details worth knowing:

- `caesar.encrypt` and the Vigenère functions change only the ASCII letters
  `A`–`Z` and `a`–`z` and keep their case. The Caesar key is taken modulo 26,
  so a negative key shifts backwards.
- The Vigenère key advances only on letters. An empty key, or one with
  anything but letters, raises `ValueError`.
- `playfair.prepare_text` drops non-letters, turns J into I, puts an X
  between a letter and a repeat of it, and pads an odd length with X.
  `PlayfairCipher.find_position` raises `ValueError` for anything that is not
  a single letter.
- `feistel_encrypt` and `feistel_decrypt` run one round per key (by default
  `3, 6, 9, 12`); the block and the keys must be bytes (0–255), otherwise
  `ValueError` is raised.
- `sbox.substitute` raises `ValueError` for values outside 0–15.
- In `cryptolab.des`, `permute`, `feistel`, `generate_subkeys` and
  `des_encrypt` check that their inputs fit in the expected number of bits
  and raise `ValueError` if not. The round function picks the S-box row and
  column with its own bit selection, so its ciphertexts do not match the
  published DES test vectors.

## Command-line tools

```
cryptolab-caesar [TEXT] [KEY]
```
Encrypts `TEXT` with shift `KEY`; asks for either one when it is missing.

```
cryptolab-vigenere [TEXT] [--key KEY]
```
Encrypts and then decrypts `TEXT` (default `ATAQUEAOAMANHECER`, key `CHAVE`),
printing each stage.

```
cryptolab-playfair [PLAINTEXT] [--key KEY]
```
Prints the key square (default key `MONARCHY`) and the encryption of
`PLAINTEXT` (default `BALLOON`).

```
cryptolab-feistel [PLAINTEXT] [--keys K [K ...]]
```
Encrypts and decrypts one byte (default `0b11010110`); numbers may be
written in decimal, `0x`, `0o` or `0b` form.

```
cryptolab-sbox [VALUE]
```
Prints the substitution of a number from 0 to 15 in binary and decimal;
asks for it when it is missing and exits with status 1 if it is out of range.

```
cryptolab-des [PLAINTEXT] [--key KEY]
```
Encrypts a 64-bit block given in hexadecimal (default `0123456789ABCDEF`,
key `133457799BBCDFF1`) and prints the ciphertext in hexadecimal.

## What the package does not do

- There is no DES decryption, and no modes of operation or padding: only a
  single 64-bit block is encrypted.
- Playfair has encryption only; there is no decryption function.
- Caesar has no separate decryption function; encrypt with the negated key
  instead.

## Running the tests

```
pip install ".[test]"
pytest
```